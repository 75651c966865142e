"""Common type aliases and enumerations.

``Direction`` carries its own geometry (unit offset and opposite) so grid
lookups never need a side table. Coordinates follow screen convention: ``x``
grows to the east, ``y`` grows to the south.
"""

from enum import StrEnum, auto
from typing import Callable, Dict, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from dungen.events import MapChange

Offset = Tuple[int, int]

ChangeListener = Callable[["MapChange"], None]


class Direction(StrEnum):
    """Cardinal directions used for walls and adjacency."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def offset(self) -> Offset:
        """Unit ``(dx, dy)`` step toward the neighbour in this direction."""
        return _OFFSETS[self]


_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_OFFSETS: Dict[Direction, Offset] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


class TerrainType(StrEnum):
    """Excavation state of a cell."""

    UNEXCAVATED = auto()
    FLOOR = auto()


class SideType(StrEnum):
    """State of one wall of a cell."""

    CLOSED = auto()
    OPEN = auto()
