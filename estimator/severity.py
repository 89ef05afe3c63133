"""Driving severity enum."""

from enum import Enum

# Severe driving shortens the distance interval to 80% of normal
SEVERE_FACTOR = 0.8


class DrivingSeverity(Enum):
    NORMAL = "normal"
    SEVERE = "severe"  # Short trips, towing, dust, extreme heat or cold
