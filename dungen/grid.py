"""Grid and cell model.

A :class:`Grid` owns a dense ``cells[y][x]`` array of :class:`Cell` objects,
created once at construction and never replaced. Cells keep their wall
state in a persistent map (``pyrsistent.PMap``); a wall change swaps the map
for a new one rather than editing it, so a map handed to a listener is a
stable snapshot of that cell's sides.

Walls are shared between neighbours: ``A.sides[d]`` and
``B.sides[d.opposite()]`` describe the same wall. :meth:`Grid.open_side` is
the only operation that changes sides and always updates both cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from dungen.types import Direction, SideType, TerrainType


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int


def closed_sides() -> PMap[Direction, SideType]:
    return pmap({direction: SideType.CLOSED for direction in Direction})


@dataclass(eq=False)
class Cell:
    """One grid square.

    Cells compare by identity: two grids never share cells, and a cell is
    unique per coordinate within its grid.
    """

    position: Position
    terrain: TerrainType = TerrainType.UNEXCAVATED
    sides: PMap[Direction, SideType] = field(default_factory=closed_sides)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def open_sides(self) -> int:
        """Number of sides currently open."""
        return sum(1 for side in self.sides.values() if side == SideType.OPEN)

    @property
    def is_dead_end(self) -> bool:
        return self.open_sides == 1

    def is_open(self, direction: Direction) -> bool:
        return self.sides[direction] == SideType.OPEN

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y}, {self.terrain.value})"


class Grid:
    """Rectangular ``width x height`` array of cells.

    Zero-area grids are valid and simply hold no cells.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self.cells: List[List[Cell]] = [
            [Cell(Position(x, y)) for x in range(width)] for y in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def area(self) -> int:
        return self._width * self._height

    def __len__(self) -> int:
        return self.area

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self._width}x{self._height}"
            )
        return self.cells[y][x]

    def all_cells(self) -> List[Cell]:
        """Row-major list of every cell."""
        return list(self)

    def get_adjacent_cell(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Return the neighbour of ``cell`` toward ``direction``, or None off-grid."""
        dx, dy = direction.offset
        x, y = cell.x + dx, cell.y + dy
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def neighbours(self, cell: Cell) -> List[Tuple[Direction, Cell]]:
        """In-bounds ``(direction, neighbour)`` pairs in ``Direction`` order."""
        result: List[Tuple[Direction, Cell]] = []
        for direction in Direction:
            adjacent = self.get_adjacent_cell(cell, direction)
            if adjacent is not None:
                result.append((direction, adjacent))
        return result

    def open_side(self, cell: Cell, direction: Direction) -> Cell:
        """Open the wall between ``cell`` and its neighbour toward ``direction``.

        Both sides of the shared wall change together and both cells become
        floor. Returns the neighbour.

        Raises:
            IndexError: If there is no neighbour in that direction.
        """
        adjacent = self.get_adjacent_cell(cell, direction)
        if adjacent is None:
            raise IndexError(
                f"No cell {direction.value} of {(cell.x, cell.y)} in grid {self._width}x{self._height}"
            )
        cell.sides = cell.sides.set(direction, SideType.OPEN)
        adjacent.sides = adjacent.sides.set(direction.opposite(), SideType.OPEN)
        cell.terrain = TerrainType.FLOOR
        adjacent.terrain = TerrainType.FLOOR
        return adjacent
