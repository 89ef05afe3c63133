"""Vehicle classes the interval table is keyed on."""

from enum import Enum


class VehicleClass(Enum):
    """Kind of vehicle being serviced."""

    CAR = "car"
    MOTORCYCLE_HEAVY_DUTY = "motorcycle_heavy_duty"
