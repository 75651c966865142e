"""Processor contract shared by the generation passes.

Each processor mutates a grid in place through :meth:`MapProcessor.process`
and notifies subscribers after every atomic change. The orchestrator runs
them one at a time; a processor never holds on to the grid afterwards.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List

from pyrsistent import pvector

from dungen.config import DungeonConfiguration
from dungen.events import MapChange
from dungen.grid import Cell, Grid
from dungen.random_source import RandomSource
from dungen.types import ChangeListener


logger = logging.getLogger(__name__)


class MapProcessor(ABC):
    """Base class for grid passes.

    Attributes:
        label: Human readable action shown while the pass runs.
    """

    label: str = ""

    def __init__(self) -> None:
        self._listeners: List[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register ``listener`` for change events; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, grid: Grid, *cells: Cell) -> None:
        if not self._listeners:
            return
        change = MapChange(grid=grid, cells=pvector(cells), label=self.label)
        for listener in list(self._listeners):
            listener(change)

    @abstractmethod
    def process(
        self,
        grid: Grid,
        configuration: DungeonConfiguration,
        randomizer: RandomSource,
    ) -> None:
        """Mutate ``grid`` in place."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
