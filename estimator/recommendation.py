"""Recommendation dataclass for oil change limits."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Recommendation:
    """Manufacturer-style oil change interval: whichever limit comes first."""

    distance_limit_km: float
    time_limit_months: int
