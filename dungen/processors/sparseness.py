"""Density reduction pass.

Turns a perfect maze into a roomier layout by opening extra walls between
floor cells. The number of openings is ``round(sparseness * candidates)``
where ``candidates`` counts the closed interior walls whose two cells are
both floor when the pass starts. ``sparseness=0`` leaves the maze as is;
``sparseness=1`` opens every such wall.

The pass only opens walls, so a connected grid stays connected.
"""

import logging
from typing import List, Tuple

from dungen.config import DungeonConfiguration
from dungen.grid import Cell, Grid
from dungen.processors.base import MapProcessor
from dungen.random_source import RandomSource
from dungen.types import Direction, TerrainType


logger = logging.getLogger(__name__)

Wall = Tuple[Cell, Direction]

# Each interior wall is listed once, from its west or north cell.
_FORWARD_DIRECTIONS = (Direction.EAST, Direction.SOUTH)


def closed_floor_walls(grid: Grid) -> List[Wall]:
    """Closed interior walls between two floor cells, in row-major order."""
    walls: List[Wall] = []
    for cell in grid:
        if cell.terrain != TerrainType.FLOOR:
            continue
        for direction in _FORWARD_DIRECTIONS:
            adjacent = grid.get_adjacent_cell(cell, direction)
            if (
                adjacent is not None
                and adjacent.terrain == TerrainType.FLOOR
                and not cell.is_open(direction)
            ):
                walls.append((cell, direction))
    return walls


class SparsenessReducer(MapProcessor):
    label = "Reducing density"

    def process(
        self,
        grid: Grid,
        configuration: DungeonConfiguration,
        randomizer: RandomSource,
    ) -> None:
        candidates = closed_floor_walls(grid)
        target = round(configuration.sparseness * len(candidates))

        for _ in range(target):
            wall = randomizer.random_item(candidates)
            assert wall is not None
            candidates.remove(wall)
            cell, direction = wall
            adjacent = grid.open_side(cell, direction)
            self._notify(grid, cell, adjacent)

        logger.debug(
            "Opened %d extra walls in %s (sparseness=%s)",
            target,
            grid,
            configuration.sparseness,
        )
