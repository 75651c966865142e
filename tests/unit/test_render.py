import numpy as np
import pytest

from dungen.grid import Grid
from dungen.render import (
    FLOOR_COLOR,
    HIGHLIGHT_COLOR,
    WALL_COLOR,
    grid_to_array,
    render_ascii,
    render_image,
)
from tests.test_utils import carve_corridor


def test_grid_to_array_blocks() -> None:
    grid = Grid(2, 2)
    carve_corridor(grid, [(0, 0), (1, 0), (1, 1)])
    blocks = grid_to_array(grid)
    assert blocks.shape == (5, 5)
    assert blocks.dtype == np.bool_
    expected = np.array(
        [
            [0, 0, 0, 0, 0],
            [0, 1, 1, 1, 0],
            [0, 0, 0, 1, 0],
            [0, 0, 0, 1, 0],
            [0, 0, 0, 0, 0],
        ],
        dtype=np.bool_,
    )
    assert np.array_equal(blocks, expected)


def test_empty_grid_array() -> None:
    assert grid_to_array(Grid(0, 0)).shape == (1, 1)


def test_render_ascii() -> None:
    grid = Grid(2, 1)
    carve_corridor(grid, [(0, 0), (1, 0)])
    assert render_ascii(grid) == "#####\n#   #\n#####"
    assert render_ascii(Grid(1, 1), wall="X", floor=".") == "XXX\nXXX\nXXX"


def test_render_image_size_and_colors() -> None:
    grid = Grid(3, 2)
    carve_corridor(grid, [(0, 0), (1, 0), (2, 0)])
    image = render_image(grid, cell_size=4, highlight=[grid.get_cell(2, 0)])
    assert image.mode == "RGBA"
    assert image.size == ((2 * 3 + 1) * 4, (2 * 2 + 1) * 4)
    pixels = np.array(image)
    assert tuple(pixels[0, 0]) == WALL_COLOR
    # Block (row 1, col 1) is cell (0, 0).
    assert tuple(pixels[4, 4]) == FLOOR_COLOR
    # Block (row 1, col 5) is cell (2, 0), highlighted.
    assert tuple(pixels[4, 20]) == HIGHLIGHT_COLOR


def test_render_image_rejects_bad_cell_size() -> None:
    with pytest.raises(ValueError):
        render_image(Grid(2, 2), cell_size=0)
