"""DunGen: procedural dungeon maze generation.

A run carves a perfect maze over a rectangular grid, opens extra
connections to reduce density and removes dead ends, notifying subscribers
after every change::

    from dungen import DungeonConfiguration, DungeonGenerator, render_ascii

    config = DungeonConfiguration(width=20, height=10, seed=1)
    grid = DungeonGenerator().generate(config)
    print(render_ascii(grid))
"""

from dungen.config import DEFAULT_CONFIGURATION, DungeonConfiguration, load_configuration
from dungen.events import GenerationCancelled, MapChange
from dungen.generator import DungeonGenerator, default_processors, generate_dungeon
from dungen.grid import Cell, Grid, Position
from dungen.processors import (
    DeadendsRemover,
    MapProcessor,
    MazeGenerator,
    SparsenessReducer,
)
from dungen.random_source import Randomizer, RandomSource
from dungen.render import grid_to_array, render_ascii, render_image
from dungen.types import Direction, SideType, TerrainType

__all__ = [
    "DEFAULT_CONFIGURATION",
    "Cell",
    "DeadendsRemover",
    "Direction",
    "DungeonConfiguration",
    "DungeonGenerator",
    "GenerationCancelled",
    "Grid",
    "MapChange",
    "MapProcessor",
    "MazeGenerator",
    "Position",
    "RandomSource",
    "Randomizer",
    "SideType",
    "SparsenessReducer",
    "TerrainType",
    "default_processors",
    "generate_dungeon",
    "grid_to_array",
    "load_configuration",
    "render_ascii",
    "render_image",
]
