"""IntervalTable class mapping (vehicle, oil) pairs to recommendations."""

from itertools import product
from typing import Dict, Iterator, List, Optional, Tuple

from .oil_class import OilClass
from .recommendation import Recommendation
from .vehicle_class import VehicleClass

TableKey = Tuple[VehicleClass, OilClass]


class IncompleteTableError(ValueError):
    """Raised when a table does not cover every (vehicle, oil) pair."""

    def __init__(self, missing: List[TableKey]):
        self.missing = missing
        names = ", ".join(f"{v.value}/{o.value}" for v, o in missing)
        super().__init__(f"Interval table is missing entries for: {names}")


class InvalidTableError(ValueError):
    """Raised when table data does not match the interval table schema."""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        text = f"{message} (at {path})" if path else message
        super().__init__(text)


def all_pairs() -> List[TableKey]:
    """Every (vehicle, oil) combination, in enum declaration order."""
    return list(product(VehicleClass, OilClass))


def missing_pairs(entries: Dict[TableKey, Recommendation]) -> List[TableKey]:
    """Pairs from the full cross product that have no entry."""
    return [pair for pair in all_pairs() if pair not in entries]


class IntervalTable:
    """
    Oil change recommendations for every vehicle/oil combination.

    The table must be exhaustive: constructing one with any pair missing
    raises IncompleteTableError, so a lookup with real enum members never
    comes back empty.
    """

    def __init__(self, entries: Dict[TableKey, Recommendation]):
        missing = missing_pairs(entries)
        if missing:
            raise IncompleteTableError(missing)
        self._entries = dict(entries)

    def get(self, vehicle_class, oil_class) -> Optional[Recommendation]:
        """Look up a recommendation, None if the pair is unknown."""
        try:
            return self._entries.get((vehicle_class, oil_class))
        except TypeError:
            # Unhashable keys can only come from bypassing the enum types
            return None

    def __getitem__(self, key: TableKey) -> Recommendation:
        return self._entries[key]

    def __iter__(self) -> Iterator[Tuple[TableKey, Recommendation]]:
        for pair in all_pairs():
            yield pair, self._entries[pair]

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntervalTable):
            return NotImplemented
        return self._entries == other._entries


DEFAULT_TABLE = IntervalTable(
    {
        (VehicleClass.CAR, OilClass.SYNTHETIC): Recommendation(15000, 12),
        (VehicleClass.CAR, OilClass.SEMI_SYNTHETIC): Recommendation(10000, 6),
        (VehicleClass.CAR, OilClass.CONVENTIONAL): Recommendation(7500, 6),
        (VehicleClass.MOTORCYCLE_HEAVY_DUTY, OilClass.SYNTHETIC): Recommendation(
            10000, 12
        ),
        (VehicleClass.MOTORCYCLE_HEAVY_DUTY, OilClass.SEMI_SYNTHETIC): Recommendation(
            8000, 9
        ),
        (VehicleClass.MOTORCYCLE_HEAVY_DUTY, OilClass.CONVENTIONAL): Recommendation(
            6000, 6
        ),
    }
)
