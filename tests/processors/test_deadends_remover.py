from typing import List

import pytest

from dungen.analysis import dead_ends, is_connected, symmetry_violations
from dungen.config import DungeonConfiguration
from dungen.events import MapChange
from dungen.grid import Grid
from dungen.processors import (
    DeadendsRemover,
    MazeGenerator,
    SparsenessReducer,
    find_dead_ends,
)
from dungen.random_source import Randomizer
from dungen.types import Direction, TerrainType
from tests.test_utils import carve_corridor, make_config, snapshot

SOME_WIDTH = 30
SOME_HEIGHT = 30


def remove(grid: Grid, chance: float, seed: int = 0) -> List[MapChange]:
    changes: List[MapChange] = []
    remover = DeadendsRemover()
    remover.subscribe(changes.append)
    remover.process(
        grid,
        make_config(grid.width, grid.height, chance_to_remove_deadends=chance),
        Randomizer(seed),
    )
    return changes


@pytest.mark.parametrize("seed", [0, 1, 17, 2024, 99991])
def test_remove_all_dead_ends(seed: int) -> None:
    configuration = DungeonConfiguration(
        width=SOME_WIDTH,
        height=SOME_HEIGHT,
        chance_to_remove_deadends=1,
        sparseness=0.2,
        randomness=1,
    )
    randomizer = Randomizer(seed)
    grid = Grid(SOME_WIDTH, SOME_HEIGHT)
    MazeGenerator().process(grid, configuration, randomizer)
    SparsenessReducer().process(grid, configuration, randomizer)

    DeadendsRemover().process(grid, configuration, randomizer)

    assert sum(1 for cell in grid if cell.open_sides == 1) == 0
    assert is_connected(grid)
    assert symmetry_violations(grid) == []


@pytest.mark.parametrize("width, height", [(2, 2), (2, 7), (5, 5)])
def test_remove_all_dead_ends_small_grids(width: int, height: int) -> None:
    grid = Grid(width, height)
    MazeGenerator().process(grid, make_config(width, height), Randomizer(3))
    remove(grid, 1.0, seed=3)
    assert find_dead_ends(grid) == []


def test_zero_chance_keeps_every_dead_end() -> None:
    grid = Grid(12, 12)
    MazeGenerator().process(grid, make_config(12, 12), Randomizer(8))
    before = snapshot(grid)
    dead_before = len(dead_ends(grid))
    assert remove(grid, 0.0) == []
    assert snapshot(grid) == before
    assert len(dead_ends(grid)) == dead_before > 0


def test_partial_chance_removes_some() -> None:
    grid = Grid(25, 25)
    MazeGenerator().process(grid, make_config(25, 25), Randomizer(6))
    dead_before = len(dead_ends(grid))
    changes = remove(grid, 0.5, seed=6)
    dead_after = len(dead_ends(grid))
    assert 0 < dead_after < dead_before
    assert changes


def test_corridor_ends_cannot_be_removed() -> None:
    grid = Grid(1, 5)
    carve_corridor(grid, [(0, y) for y in range(5)])
    assert remove(grid, 1.0) == []
    assert [(c.x, c.y) for c in dead_ends(grid)] == [(0, 0), (0, 4)]


def test_prefers_floor_neighbour() -> None:
    # Floor: (1,0)-(0,0)-(0,1)-(1,1); column x=2 unexcavated.
    grid = Grid(3, 2)
    carve_corridor(grid, [(1, 0), (0, 0), (0, 1), (1, 1)])
    changes = remove(grid, 1.0)
    assert grid.get_cell(1, 0).is_open(Direction.SOUTH)
    assert grid.get_cell(2, 0).terrain == TerrainType.UNEXCAVATED
    assert grid.get_cell(2, 1).terrain == TerrainType.UNEXCAVATED
    assert len(changes) == 1
    assert find_dead_ends(grid) == []


def test_excavates_when_no_floor_neighbour() -> None:
    grid = Grid(3, 1)
    carve_corridor(grid, [(0, 0), (1, 0)])
    changes = remove(grid, 1.0)
    assert grid.get_cell(2, 0).terrain == TerrainType.FLOOR
    assert grid.get_cell(1, 0).is_open(Direction.EAST)
    assert [[(c.x, c.y) for c in change.cells] for change in changes] == [[(1, 0), (2, 0)]]
    # Both ends of the corridor remain, walled in by the border.
    assert [(c.x, c.y) for c in dead_ends(grid)] == [(0, 0), (2, 0)]


def test_change_events_label() -> None:
    grid = Grid(6, 6)
    MazeGenerator().process(grid, make_config(6, 6), Randomizer(1))
    changes = remove(grid, 1.0)
    assert changes
    assert {change.label for change in changes} == {DeadendsRemover.label}
