"""Helper functions for oil change interval calculations."""

import math
from datetime import date
from dateutil.relativedelta import relativedelta
from typing import Optional

from .severity import SEVERE_FACTOR, DrivingSeverity


def is_valid_distance(distance_km) -> bool:
    """True for finite, non-negative numbers (bools are rejected)."""
    if isinstance(distance_km, bool) or not isinstance(distance_km, (int, float)):
        return False
    return math.isfinite(distance_km) and distance_km >= 0


def scaled_limit_km(limit_km: float, severity: DrivingSeverity) -> float:
    """Distance limit adjusted for driving severity."""
    if severity == DrivingSeverity.SEVERE:
        return limit_km * SEVERE_FACTOR
    return limit_km


def elapsed_months(now: date, last_change: date) -> int:
    """
    Whole months between two dates using year/month arithmetic only.

    Day of month is ignored: Jan 31 -> Feb 1 counts as one month, and a
    last change later in the calendar than ``now`` gives a negative count.
    """
    return (now.year - last_change.year) * 12 + (now.month - last_change.month)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def calc_due_date(
    last_change: Optional[date], time_limit_months: Optional[int]
) -> Optional[date]:
    """Calculate when the time limit falls: last change + limit months."""
    if time_limit_months is None or last_change is None:
        return None
    return last_change + relativedelta(months=time_limit_months)
