"""
Oil change interval estimation.

This package estimates how close a vehicle is to its next oil change:
- VehicleClass, OilClass, DrivingSeverity: Closed input enumerations
- Recommendation: Distance/time limits for one vehicle/oil pair
- IntervalTable: Exhaustive mapping of pairs to recommendations
- EstimationRequest: Calculator input
- EstimationResult / Outcome: Tagged calculator output
- estimate: The estimator itself
- format_result: Presentation of results as messages
"""

from .vehicle_class import VehicleClass
from .oil_class import OilClass
from .severity import DrivingSeverity, SEVERE_FACTOR
from .recommendation import Recommendation
from .interval_table import (
    IntervalTable,
    IncompleteTableError,
    InvalidTableError,
    DEFAULT_TABLE,
    all_pairs,
    missing_pairs,
)
from .request import EstimationRequest
from .result import EstimationResult, Outcome
from .calculations import (
    is_valid_distance,
    scaled_limit_km,
    elapsed_months,
    round_half_up,
    calc_due_date,
)
from .estimate import estimate
from .formatting import (
    format_km,
    format_overrun_km,
    format_months,
    format_result,
    outcome_label,
)
from .loader import (
    load_schema,
    check_table_data,
    load_table,
    save_table,
    load_requests,
    parse_date,
    table_from_dict,
    table_to_dict,
)

__all__ = [
    "VehicleClass",
    "OilClass",
    "DrivingSeverity",
    "SEVERE_FACTOR",
    "Recommendation",
    "IntervalTable",
    "IncompleteTableError",
    "InvalidTableError",
    "DEFAULT_TABLE",
    "all_pairs",
    "missing_pairs",
    "EstimationRequest",
    "EstimationResult",
    "Outcome",
    "is_valid_distance",
    "scaled_limit_km",
    "elapsed_months",
    "round_half_up",
    "calc_due_date",
    "estimate",
    "format_km",
    "format_overrun_km",
    "format_months",
    "format_result",
    "outcome_label",
    "load_schema",
    "check_table_data",
    "load_table",
    "save_table",
    "load_requests",
    "parse_date",
    "table_from_dict",
    "table_to_dict",
]
