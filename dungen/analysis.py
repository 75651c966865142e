"""Read-only structural queries over a grid.

Used for run summaries and by the test-suite to check the generation
invariants (connectivity, wall symmetry, dead-end count). Nothing here
mutates the grid.
"""

from collections import deque
from typing import Any, List, Set, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from dungen.grid import Cell, Grid
from dungen.types import Direction, TerrainType


def dead_ends(grid: Grid) -> List[Cell]:
    """Cells with exactly one open side."""
    return [cell for cell in grid if cell.is_dead_end]


def unexcavated_cells(grid: Grid) -> List[Cell]:
    return [cell for cell in grid if cell.terrain == TerrainType.UNEXCAVATED]


def open_connections(grid: Grid) -> int:
    """Number of open wall pairs (each shared wall counted once)."""
    return sum(cell.open_sides for cell in grid) // 2


def reachable_cells(grid: Grid, start: Cell) -> Set[Cell]:
    """Cells reachable from ``start`` by walking through open sides (BFS)."""
    queue: deque[Cell] = deque([start])
    visited: Set[Cell] = {start}
    while queue:
        cell = queue.popleft()
        for direction, adjacent in grid.neighbours(cell):
            if cell.is_open(direction) and adjacent not in visited:
                visited.add(adjacent)
                queue.append(adjacent)
    return visited


def is_connected(grid: Grid) -> bool:
    """True if every cell is reachable from every other (vacuously for empty grids)."""
    if grid.area == 0:
        return True
    return len(reachable_cells(grid, grid.get_cell(0, 0))) == grid.area


def symmetry_violations(grid: Grid) -> List[Tuple[Cell, Direction]]:
    """``(cell, direction)`` pairs whose side disagrees with the neighbour's side."""
    violations: List[Tuple[Cell, Direction]] = []
    for cell in grid:
        for direction, adjacent in grid.neighbours(cell):
            if cell.sides[direction] != adjacent.sides[direction.opposite()]:
                violations.append((cell, direction))
    return violations


def border_openings(grid: Grid) -> List[Tuple[Cell, Direction]]:
    """Open sides that face off the grid (never produced by the processors)."""
    return [
        (cell, direction)
        for cell in grid
        for direction in Direction
        if cell.is_open(direction) and grid.get_adjacent_cell(cell, direction) is None
    ]


def summarize(grid: Grid) -> PMap[str, Any]:
    """Snapshot of headline metrics for logging."""
    return pmap(
        {
            "width": grid.width,
            "height": grid.height,
            "floor_cells": grid.area - len(unexcavated_cells(grid)),
            "open_connections": open_connections(grid),
            "dead_ends": len(dead_ends(grid)),
            "connected": is_connected(grid),
        }
    )
