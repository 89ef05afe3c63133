"""Turn estimation results into user-facing messages."""

from typing import Optional

from .calculations import round_half_up
from .result import EstimationResult, Outcome


def format_km(km: Optional[float]) -> str:
    """Format kilometers for display."""
    return f"{km:,.0f}" if km is not None else "-"


def format_overrun_km(km: float) -> str:
    """
    Format an overrun to the nearest 0.1 km, halves away from zero.

    Whole values drop the decimal, so 1250 -> "1,250" but 0.4 -> "0.4".
    """
    tenths = round_half_up(km * 10)
    if tenths % 10 == 0:
        return f"{tenths // 10:,}"
    return f"{tenths / 10:,.1f}"


def format_months(months: Optional[float]) -> str:
    """Format a month count for display."""
    if months is None:
        return "-"
    return f"{months:g} mo"


def format_result(result: EstimationResult) -> str:
    """Human-readable status message for a result."""
    if result.outcome == Outcome.INVALID_CONFIGURATION:
        return "Invalid vehicle type or oil type."
    if result.outcome == Outcome.INVALID_INPUT:
        return "Please enter a valid distance."
    if result.outcome == Outcome.DUE_BY_TIME:
        return "Oil change due based on time."
    if result.outcome == Outcome.OVERDUE:
        return (
            f"Oil change overdue! You've driven {format_overrun_km(result.km)} km "
            "beyond the limit."
        )
    return f"Remaining distance before oil change: {format_km(result.km)} km."


def outcome_label(outcome: Outcome) -> str:
    """Short label for tables, e.g. 'DUE BY TIME'."""
    return outcome.name.replace("_", " ")
