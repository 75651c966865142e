"""Grid processing passes.

The pipeline is a closed, ordered set: :class:`MazeGenerator` carves the
perfect maze, :class:`SparsenessReducer` opens extra connections and
:class:`DeadendsRemover` turns dead ends into loops.
"""

from .base import MapProcessor
from .deadends import DeadendsRemover, find_dead_ends
from .maze import MazeGenerator
from .sparseness import SparsenessReducer, closed_floor_walls

__all__ = [
    "DeadendsRemover",
    "MapProcessor",
    "MazeGenerator",
    "SparsenessReducer",
    "closed_floor_walls",
    "find_dead_ends",
]
