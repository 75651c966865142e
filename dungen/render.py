"""Grid rendering helpers.

All renderers start from :func:`grid_to_array`, the block representation of
a maze: a ``(2 * height + 1, 2 * width + 1)`` boolean array where cell
``(x, y)`` sits at ``[2y + 1, 2x + 1]`` and the wall between two cells is
the element between them. ``True`` means walkable (floor cell or open wall).
"""

from typing import Iterable, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from dungen.grid import Cell, Grid
from dungen.types import Direction, TerrainType

BoolArray = npt.NDArray[np.bool_]
UInt8Array = npt.NDArray[np.uint8]
RGBA = Tuple[int, int, int, int]

WALL_COLOR: RGBA = (40, 36, 48, 255)
FLOOR_COLOR: RGBA = (214, 204, 182, 255)
HIGHLIGHT_COLOR: RGBA = (222, 96, 72, 255)


def grid_to_array(grid: Grid) -> BoolArray:
    """Block representation of ``grid`` (True = walkable)."""
    blocks: BoolArray = np.zeros((2 * grid.height + 1, 2 * grid.width + 1), dtype=np.bool_)
    for cell in grid:
        row, col = 2 * cell.y + 1, 2 * cell.x + 1
        blocks[row, col] = cell.terrain == TerrainType.FLOOR
        # East and south walls are enough: sides are symmetric.
        if cell.is_open(Direction.EAST):
            blocks[row, col + 1] = True
        if cell.is_open(Direction.SOUTH):
            blocks[row + 1, col] = True
    return blocks


def render_ascii(grid: Grid, wall: str = "#", floor: str = " ") -> str:
    """Text rendering, one character per block."""
    blocks = grid_to_array(grid)
    return "\n".join("".join(floor if b else wall for b in row) for row in blocks)


def render_image(
    grid: Grid,
    cell_size: int = 8,
    highlight: Optional[Iterable[Cell]] = None,
    wall_color: RGBA = WALL_COLOR,
    floor_color: RGBA = FLOOR_COLOR,
    highlight_color: RGBA = HIGHLIGHT_COLOR,
) -> Image.Image:
    """RGBA image of ``grid`` with each block drawn as ``cell_size`` pixels.

    Cells in ``highlight`` (e.g. the cells of the latest change) are tinted.
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    blocks = grid_to_array(grid)
    pixels: UInt8Array = np.empty((*blocks.shape, 4), dtype=np.uint8)
    pixels[...] = wall_color
    pixels[blocks] = floor_color
    for cell in highlight or ():
        pixels[2 * cell.y + 1, 2 * cell.x + 1] = highlight_color
    scaled: UInt8Array = np.kron(pixels, np.ones((cell_size, cell_size, 1), dtype=np.uint8))
    return Image.fromarray(scaled)
