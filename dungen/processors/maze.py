"""Randomized growth maze generator.

Carves a perfect maze (a spanning tree over every cell) with a biased
random walk:

1. Pick a random start cell; it becomes floor.
2. From the current cell pick a random direction. A direction is invalid if
   it leads off the grid or into an already visited cell.
3. With a valid direction, open the wall, move there and remember the
   direction. Each new step keeps going straight with probability
   ``1 - randomness`` while straight ahead is still valid.
4. With no valid direction the cell is a dead end; resume from a random
   visited cell that is not a dead end.
5. Stop once every cell has been visited.

Every carve opens exactly one wall into an unvisited cell, so the result has
``width * height - 1`` open wall pairs and no cycles.
"""

import logging
from typing import List, Optional, Set

from dungen.config import DungeonConfiguration
from dungen.grid import Cell, Grid
from dungen.processors.base import MapProcessor
from dungen.random_source import RandomSource
from dungen.types import Direction, TerrainType


logger = logging.getLogger(__name__)


class MazeGenerator(MapProcessor):
    label = "Generating maze"

    def process(
        self,
        grid: Grid,
        configuration: DungeonConfiguration,
        randomizer: RandomSource,
    ) -> None:
        current = randomizer.random_cell(grid)
        if current is None:
            logger.debug("Empty %s, nothing to carve", grid)
            return

        visited: Set[Cell] = set()
        dead_ends: Set[Cell] = set()
        # Visited cells that are not dead ends, in visiting order.
        backtrack: List[Cell] = []
        previous: Optional[Direction] = None
        backtracks = 0

        current.terrain = TerrainType.FLOOR
        self._notify(grid, current)

        while True:
            if current not in visited:
                visited.add(current)
                backtrack.append(current)
            if len(visited) == grid.area:
                break

            direction = self._random_valid_direction(
                grid, current, visited, configuration.randomness, previous, randomizer
            )
            if direction is not None:
                adjacent = grid.open_side(current, direction)
                self._notify(grid, current, adjacent)
                previous = direction
                current = adjacent
            else:
                dead_ends.add(current)
                backtrack.remove(current)
                resumed = randomizer.random_item(backtrack)
                assert resumed is not None, "no cell left to backtrack to"
                current = resumed
                backtracks += 1

        logger.debug(
            "Carved %d cells in %s (%d dead ends, %d backtracks)",
            len(visited),
            grid,
            len(dead_ends),
            backtracks,
        )

    def _random_valid_direction(
        self,
        grid: Grid,
        cell: Cell,
        visited: Set[Cell],
        randomness: float,
        previous: Optional[Direction],
        randomizer: RandomSource,
    ) -> Optional[Direction]:
        """Pick a direction toward an unvisited in-bounds cell, or None.

        Keeps ``previous`` when a draw of at least ``randomness`` allows it.
        ``randomness == 1`` skips the draw entirely.
        """
        # ">=" rather than ">": a draw equal to randomness keeps going straight,
        # so randomness 0 never turns while straight ahead is valid (a 0.0
        # draw included).
        if (
            previous is not None
            and randomness < 1
            and randomizer.random_double() >= randomness
            and self._is_direction_valid(grid, cell, previous, visited)
        ):
            return previous

        invalid: Set[Direction] = set()
        while len(invalid) < len(Direction):
            direction = randomizer.random_direction(invalid)
            if self._is_direction_valid(grid, cell, direction, visited):
                return direction
            invalid.add(direction)
        return None

    @staticmethod
    def _is_direction_valid(
        grid: Grid, cell: Cell, direction: Direction, visited: Set[Cell]
    ) -> bool:
        adjacent = grid.get_adjacent_cell(cell, direction)
        return adjacent is not None and adjacent not in visited
