"""The maintenance interval estimator."""

import logging
from datetime import date

from .calculations import (
    elapsed_months,
    is_valid_distance,
    round_half_up,
    scaled_limit_km,
)
from .interval_table import DEFAULT_TABLE, IntervalTable
from .request import EstimationRequest
from .result import EstimationResult

logger = logging.getLogger(__name__)


def estimate(
    request: EstimationRequest,
    now: date,
    table: IntervalTable = DEFAULT_TABLE,
) -> EstimationResult:
    """
    Estimate how close a vehicle is to its next oil change.

    Logic:
    - Distance must be a finite, non-negative number, else INVALID_INPUT
    - Unknown (vehicle, oil) pair: INVALID_CONFIGURATION
    - Severe driving scales the distance limit by 0.8
    - If a last change date is known and more whole months than the time
      limit have passed: DUE_BY_TIME (checked before distance)
    - Remaining distance <= 0: OVERDUE by the absolute overrun
    - Otherwise: REMAINING_DISTANCE, rounded to the nearest km

    Args:
        now: Evaluation date; only year and month are used.
        table: Interval table to look the pair up in.
    """
    if not is_valid_distance(request.distance_driven_km):
        logger.debug("Rejecting distance %r", request.distance_driven_km)
        return EstimationResult.invalid_input()

    recommendation = table.get(request.vehicle_class, request.oil_class)
    if recommendation is None:
        logger.debug(
            "No interval for %r/%r", request.vehicle_class, request.oil_class
        )
        return EstimationResult.invalid_configuration()

    limit_km = scaled_limit_km(
        recommendation.distance_limit_km, request.driving_severity
    )
    # May be negative; not clamped before the overdue check
    remaining_km = limit_km - request.distance_driven_km

    if request.last_change_date is not None:
        months = elapsed_months(now, request.last_change_date)
        if months > recommendation.time_limit_months:
            logger.debug(
                "Due by time: %d months elapsed, limit %d",
                months,
                recommendation.time_limit_months,
            )
            return EstimationResult.due_by_time()

    if remaining_km <= 0:
        return EstimationResult.overdue(abs(remaining_km))

    return EstimationResult.remaining_distance(round_half_up(remaining_km))
