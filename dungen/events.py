"""Change notifications emitted by processors.

A :class:`MapChange` is produced after every atomic grid mutation and names
the cells it touched, so a consumer can redraw incrementally. Events are
delivered in emission order.
"""

from dataclasses import dataclass, field

from pyrsistent.typing import PVector

from dungen.grid import Cell, Grid


@dataclass(frozen=True)
class MapChange:
    """One mutation of a grid.

    Attributes:
        grid: Grid being generated (shared, not a copy).
        cells: Affected cells in the order the processor reported them.
        label: Action label of the emitting processor.
    """

    grid: Grid = field(compare=False, repr=False)
    cells: PVector[Cell]
    label: str


class GenerationCancelled(Exception):
    """Raised inside a generation run that its consumer abandoned."""
