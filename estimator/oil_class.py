"""Engine oil classes the interval table is keyed on."""

from enum import Enum


class OilClass(Enum):
    """Base stock of the oil currently in the engine."""

    SYNTHETIC = "synthetic"
    SEMI_SYNTHETIC = "semi_synthetic"
    CONVENTIONAL = "conventional"
