"""YAML loading and saving utilities for interval tables and batch requests."""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dateutil import parser as date_parser
from jsonschema import ValidationError, validate

from .interval_table import InvalidTableError, IntervalTable, TableKey
from .oil_class import OilClass
from .recommendation import Recommendation
from .request import EstimationRequest
from .severity import DrivingSeverity
from .vehicle_class import VehicleClass

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse an ISO date (YYYY-MM-DD).

    Accepts date/datetime objects as-is (PyYAML already converts unquoted
    dates). Empty values return None; malformed strings raise ValueError.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.isoparse(str(value).strip()).date()


def _parse_recommendation(dct: Dict[str, Any]) -> Recommendation:
    return Recommendation(dct["distanceLimitKm"], dct["timeLimitMonths"])


def table_from_dict(data: Dict[str, Any]) -> IntervalTable:
    """
    Build an IntervalTable from the parsed YAML structure.

    Raises ValueError for unknown vehicle/oil names and IncompleteTableError
    when any combination is missing.
    """
    entries: Dict[TableKey, Recommendation] = {}
    for vehicle_name, oils in (data.get("intervals") or {}).items():
        vehicle_class = VehicleClass(vehicle_name)
        for oil_name, dct in (oils or {}).items():
            entries[(vehicle_class, OilClass(oil_name))] = _parse_recommendation(dct)
    return IntervalTable(entries)


def table_to_dict(table: IntervalTable) -> Dict[str, Any]:
    """Serialize an IntervalTable to the YAML dict format (camelCase keys)."""
    intervals: Dict[str, Dict[str, Any]] = {}
    for (vehicle_class, oil_class), rec in table:
        intervals.setdefault(vehicle_class.value, {})[oil_class.value] = {
            "distanceLimitKm": rec.distance_limit_km,
            "timeLimitMonths": rec.time_limit_months,
        }
    return {"intervals": intervals}


def load_schema() -> dict:
    """Load the JSON schema for interval table files."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def check_table_data(data: Any, schema: Optional[dict] = None) -> None:
    """Raise InvalidTableError if parsed YAML does not match the schema."""
    try:
        validate(instance=data, schema=schema or load_schema())
    except ValidationError as e:
        path = ".".join(str(p) for p in e.path)
        raise InvalidTableError(e.message, path) from e


def load_table(
    filename: Union[str, Path], schema: Optional[dict] = None
) -> IntervalTable:
    """
    Load an interval table from a YAML file.

    The data is checked against schema.yaml before any entry is built, so
    quoted numbers, fractional months or missing keys raise
    InvalidTableError. YAML syntax errors and missing files propagate.
    """
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    check_table_data(data, schema)
    return table_from_dict(data)


def save_table(filename: Union[str, Path], table: IntervalTable) -> None:
    """Write an interval table to a YAML file."""
    with open(filename, "w") as fp:
        yaml.dump(
            table_to_dict(table),
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def _parse_request(dct: Dict[str, Any]) -> EstimationRequest:
    """Parse one batch entry into an EstimationRequest."""
    distance = dct.get("distanceKm")
    # Non-numeric distances are left for the estimator to report
    if isinstance(distance, str):
        try:
            distance = float(distance)
        except ValueError:
            distance = float("nan")
    return EstimationRequest(
        vehicle_class=VehicleClass(dct["vehicle"]),
        oil_class=OilClass(dct["oil"]),
        distance_driven_km=distance,
        last_change_date=parse_date(dct.get("lastChange")),
        driving_severity=DrivingSeverity(dct.get("severity") or "normal"),
    )


def load_requests(filename: Union[str, Path]) -> List[EstimationRequest]:
    """
    Load a batch of estimation requests from a YAML file.

    Expected format:

        requests:
          - vehicle: car
            oil: synthetic
            distanceKm: 10000
            lastChange: 2025-01-15   # optional
            severity: severe         # optional, default normal
    """
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
    return [_parse_request(dct) for dct in data.get("requests") or []]
