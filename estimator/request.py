"""EstimationRequest dataclass for calculator input."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .oil_class import OilClass
from .severity import DrivingSeverity
from .vehicle_class import VehicleClass


@dataclass(frozen=True)
class EstimationRequest:
    """Everything the estimator needs to know about one vehicle."""

    vehicle_class: VehicleClass
    oil_class: OilClass
    distance_driven_km: float
    last_change_date: Optional[date] = None
    driving_severity: DrivingSeverity = DrivingSeverity.NORMAL
