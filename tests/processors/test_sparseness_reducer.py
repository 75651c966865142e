from typing import List

import pytest

from dungen.analysis import (
    is_connected,
    open_connections,
    reachable_cells,
    symmetry_violations,
)
from dungen.events import MapChange
from dungen.grid import Grid
from dungen.processors import MazeGenerator, SparsenessReducer, closed_floor_walls
from dungen.random_source import Randomizer
from dungen.types import Direction, TerrainType
from tests.test_utils import carve_corridor, direction_between, make_config


def make_maze(width: int, height: int, seed: int) -> Grid:
    grid = Grid(width, height)
    MazeGenerator().process(grid, make_config(width, height), Randomizer(seed))
    return grid


def reduce(grid: Grid, sparseness: float, seed: int = 0) -> List[MapChange]:
    changes: List[MapChange] = []
    reducer = SparsenessReducer()
    reducer.subscribe(changes.append)
    reducer.process(
        grid, make_config(grid.width, grid.height, sparseness=sparseness), Randomizer(seed)
    )
    return changes


def test_closed_floor_walls_lists_each_wall_once() -> None:
    grid = Grid(2, 2)
    carve_corridor(grid, [(0, 0), (1, 0), (1, 1), (0, 1)])
    walls = closed_floor_walls(grid)
    assert [((c.x, c.y), d) for c, d in walls] == [((0, 0), Direction.SOUTH)]


def test_closed_floor_walls_skips_unexcavated() -> None:
    grid = Grid(3, 1)
    carve_corridor(grid, [(0, 0), (1, 0)])
    assert closed_floor_walls(grid) == []


@pytest.mark.parametrize("sparseness", [0.0, 0.1, 0.2, 0.5, 1.0])
def test_connectivity_preserved(sparseness: float) -> None:
    grid = make_maze(15, 12, seed=4)
    reduce(grid, sparseness, seed=4)
    assert is_connected(grid)
    assert len(reachable_cells(grid, grid.get_cell(14, 11))) == grid.area
    assert symmetry_violations(grid) == []


@pytest.mark.parametrize("sparseness", [0.0, 0.25, 0.5, 1.0])
def test_opens_rounded_fraction_of_candidates(sparseness: float) -> None:
    grid = make_maze(10, 10, seed=1)
    candidates = len(closed_floor_walls(grid))
    before = open_connections(grid)
    changes = reduce(grid, sparseness)
    opened = round(sparseness * candidates)
    assert len(changes) == opened
    assert open_connections(grid) == before + opened


def test_zero_sparseness_changes_nothing() -> None:
    grid = make_maze(6, 6, seed=2)
    assert reduce(grid, 0.0) == []
    assert open_connections(grid) == 35


def test_full_sparseness_opens_every_interior_wall() -> None:
    width, height = 7, 5
    grid = make_maze(width, height, seed=3)
    reduce(grid, 1.0)
    assert open_connections(grid) == 2 * width * height - width - height
    assert closed_floor_walls(grid) == []


def test_higher_sparseness_opens_more() -> None:
    counts = []
    for sparseness in (0.1, 0.3, 0.5, 0.9):
        grid = make_maze(30, 30, seed=7)
        reduce(grid, sparseness, seed=7)
        counts.append(open_connections(grid))
    assert counts == sorted(counts)
    assert len(set(counts)) == len(counts)


def test_change_events_name_opened_wall() -> None:
    grid = make_maze(8, 8, seed=5)
    changes = reduce(grid, 0.5)
    assert changes
    for change in changes:
        cell, adjacent = change.cells
        assert cell.is_open(direction_between(cell, adjacent))
        assert change.label == SparsenessReducer.label


def test_only_floor_cells_are_connected() -> None:
    grid = Grid(3, 3)
    carve_corridor(grid, [(0, 0), (1, 0), (1, 1), (0, 1)])
    reduce(grid, 1.0)
    unexcavated = [cell for cell in grid if cell.terrain == TerrainType.UNEXCAVATED]
    assert len(unexcavated) == 5
    assert all(cell.open_sides == 0 for cell in unexcavated)
    # The 2x2 floor block is now fully open.
    assert open_connections(grid) == 4
