"""Outcome enum and EstimationResult dataclass."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Outcome(Enum):
    """Result categories. Lower value = more urgent for valid requests."""

    DUE_BY_TIME = 1
    OVERDUE = 2
    REMAINING_DISTANCE = 3
    INVALID_INPUT = 4  # Distance not a finite, non-negative number
    INVALID_CONFIGURATION = 5  # (vehicle, oil) pair missing from the table


@dataclass(frozen=True)
class EstimationResult:
    """
    Outcome of one estimation.

    ``km`` is only set for OVERDUE (distance beyond the limit) and
    REMAINING_DISTANCE (whole km left before the change is due).
    """

    outcome: Outcome
    km: Optional[float] = None

    @classmethod
    def invalid_configuration(cls) -> "EstimationResult":
        return cls(Outcome.INVALID_CONFIGURATION)

    @classmethod
    def invalid_input(cls) -> "EstimationResult":
        return cls(Outcome.INVALID_INPUT)

    @classmethod
    def due_by_time(cls) -> "EstimationResult":
        return cls(Outcome.DUE_BY_TIME)

    @classmethod
    def overdue(cls, excess_km: float) -> "EstimationResult":
        return cls(Outcome.OVERDUE, excess_km)

    @classmethod
    def remaining_distance(cls, km: int) -> "EstimationResult":
        return cls(Outcome.REMAINING_DISTANCE, km)

    @property
    def is_due(self) -> bool:
        return self.outcome in (Outcome.DUE_BY_TIME, Outcome.OVERDUE)

    @property
    def is_valid(self) -> bool:
        return self.outcome not in (
            Outcome.INVALID_INPUT,
            Outcome.INVALID_CONFIGURATION,
        )
