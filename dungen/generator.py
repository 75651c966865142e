"""Generation pipeline orchestration.

:class:`DungeonGenerator` owns the grid for a run and lends it to one
processor at a time, in a fixed order:

1. :class:`~dungen.processors.MazeGenerator` carves a perfect maze.
2. :class:`~dungen.processors.SparsenessReducer` opens extra connections.
3. :class:`~dungen.processors.DeadendsRemover` turns dead ends into loops.

Every processor's change events are forwarded to the generator's own
subscribers, so a consumer can render the grid while it is being built.
:meth:`DungeonGenerator.stream` does the same from a background worker and
hands the events over through a queue.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Iterator, List, Optional, Sequence, Union

from dungen.analysis import summarize
from dungen.config import DungeonConfiguration
from dungen.events import GenerationCancelled, MapChange
from dungen.grid import Grid
from dungen.processors import (
    DeadendsRemover,
    MapProcessor,
    MazeGenerator,
    SparsenessReducer,
)
from dungen.random_source import Randomizer, RandomSource
from dungen.types import ChangeListener


logger = logging.getLogger(__name__)

_DONE = object()


def default_processors() -> List[MapProcessor]:
    return [MazeGenerator(), SparsenessReducer(), DeadendsRemover()]


class DungeonGenerator:
    """Runs the processors in order over a fresh grid.

    Arguments:
        processors: Ordered passes to run. Defaults to maze generation,
            density reduction and dead-end removal.
    """

    def __init__(self, processors: Optional[Sequence[MapProcessor]] = None) -> None:
        self.processors: List[MapProcessor] = (
            list(processors) if processors is not None else default_processors()
        )
        self._listeners: List[ChangeListener] = []
        for processor in self.processors:
            processor.subscribe(self._forward)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register ``listener`` for every processor's changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _forward(self, change: MapChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def generate(
        self,
        configuration: DungeonConfiguration,
        randomizer: Optional[RandomSource] = None,
    ) -> Grid:
        """Build a grid for ``configuration``.

        Args:
            configuration: Validated generation parameters.
            randomizer: Random source; defaults to ``Randomizer(configuration.seed)``.

        Returns:
            Grid: The finished grid.
        """
        if randomizer is None:
            randomizer = Randomizer(configuration.seed)
        grid = Grid(configuration.width, configuration.height)
        if grid.area == 0:
            logger.info("Empty %s requested, skipping generation", grid)
            return grid

        for processor in self.processors:
            logger.debug("%s: %s", processor.label, grid)
            processor.process(grid, configuration, randomizer)

        logger.info(
            "Generated %s",
            " ".join(f"{key}={value}" for key, value in sorted(summarize(grid).items())),
        )
        return grid

    def stream(
        self,
        configuration: DungeonConfiguration,
        randomizer: Optional[RandomSource] = None,
    ) -> Iterator[MapChange]:
        """Generate on a worker thread, yielding change events in order.

        The finished grid is the ``grid`` of every event. Closing the iterator
        early abandons the run: the worker stops at its next change and the
        partially carved grid must be discarded. Exceptions raised by the
        run are re-raised here.

        Several streams may run on one generator at once; each only sees the
        events of its own worker.
        """
        events: "queue.Queue[Union[MapChange, BaseException, object]]" = queue.Queue()
        cancelled = threading.Event()

        def enqueue(change: MapChange) -> None:
            # Changes made by other runs on this generator.
            if threading.current_thread() is not worker:
                return
            if cancelled.is_set():
                raise GenerationCancelled()
            events.put(change)

        def run() -> None:
            unsubscribe = self.subscribe(enqueue)
            try:
                self.generate(configuration, randomizer)
            except GenerationCancelled:
                logger.debug("Generation cancelled by consumer")
            except Exception as e:
                events.put(e)
            finally:
                unsubscribe()
                events.put(_DONE)

        worker = threading.Thread(target=run, name="dungen-worker", daemon=True)
        worker.start()
        try:
            while True:
                item = events.get()
                if item is _DONE:
                    break
                if isinstance(item, BaseException):
                    raise item
                assert isinstance(item, MapChange)
                yield item
        finally:
            cancelled.set()


def generate_dungeon(
    configuration: DungeonConfiguration,
    randomizer: Optional[RandomSource] = None,
) -> Grid:
    """Run the default pipeline once."""
    return DungeonGenerator().generate(configuration, randomizer)
