"""Dead-end removal pass.

A dead end is a cell with exactly one open side. Each pass visits the
current dead ends in row-major order and, with probability
``chance_to_remove_deadends``, opens one more wall so the cell becomes a
corridor or junction. A dead end that loses the roll is kept for the rest
of the run.

The new opening goes to a neighbour chosen uniformly among those behind a
closed wall, restricted to floor neighbours when there are any. Opening
toward unexcavated ground excavates it, which can create a new dead end for
the next pass. Passes repeat until no dead end is left to decide or a pass
changes nothing.
"""

import logging
from typing import List, Optional, Set

from dungen.config import DungeonConfiguration
from dungen.grid import Cell, Grid
from dungen.processors.base import MapProcessor
from dungen.random_source import RandomSource
from dungen.types import Direction, TerrainType


logger = logging.getLogger(__name__)


def find_dead_ends(grid: Grid) -> List[Cell]:
    return [cell for cell in grid if cell.is_dead_end]


class DeadendsRemover(MapProcessor):
    label = "Removing dead ends"

    def process(
        self,
        grid: Grid,
        configuration: DungeonConfiguration,
        randomizer: RandomSource,
    ) -> None:
        retained: Set[Cell] = set()
        removed = 0
        passes = 0

        while True:
            pending = [cell for cell in find_dead_ends(grid) if cell not in retained]
            if not pending:
                break
            passes += 1
            changed = False
            for cell in pending:
                # An earlier opening in this pass may already have fixed it.
                if not cell.is_dead_end:
                    continue
                if randomizer.random_double() >= configuration.chance_to_remove_deadends:
                    retained.add(cell)
                    continue
                direction = self._pick_direction(grid, cell, randomizer)
                if direction is None:
                    retained.add(cell)
                    continue
                adjacent = grid.open_side(cell, direction)
                self._notify(grid, cell, adjacent)
                removed += 1
                changed = True
            if not changed:
                break

        logger.debug(
            "Removed %d dead ends in %d passes, kept %d in %s",
            removed,
            passes,
            len(retained),
            grid,
        )

    @staticmethod
    def _pick_direction(
        grid: Grid, cell: Cell, randomizer: RandomSource
    ) -> Optional[Direction]:
        """Uniform closed direction, preferring floor neighbours; None if walled in by the border."""
        closed = [
            (direction, adjacent)
            for direction, adjacent in grid.neighbours(cell)
            if not cell.is_open(direction)
        ]
        floor = [
            direction
            for direction, adjacent in closed
            if adjacent.terrain == TerrainType.FLOOR
        ]
        if floor:
            return randomizer.random_item(floor)
        return randomizer.random_item([direction for direction, _ in closed])
