"""Randomness capability consumed by the processors.

Processors never touch :mod:`random` directly; every draw goes through a
:class:`RandomSource` so callers can inject a seeded or scripted source.
:class:`Randomizer` is the default implementation backed by
``random.Random``.
"""

import random
from typing import Collection, Iterable, Optional, Protocol, Sequence, TypeVar

from dungen.grid import Cell, Grid
from dungen.types import Direction

T = TypeVar("T")


class RandomSource(Protocol):
    def random_cell(self, grid: Grid) -> Optional[Cell]: ...

    def random_direction(self, excluded: Collection[Direction] = ()) -> Direction: ...

    def random_item(
        self, collection: Iterable[T], excluded: Collection[T] = ()
    ) -> Optional[T]: ...

    def random_double(self) -> float: ...


class Randomizer:
    """Default :class:`RandomSource` over a private ``random.Random``.

    Arguments:
        seed: Optional seed; ``None`` seeds from system entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def set_seed(self, seed: Optional[int]) -> None:
        """Reseed in place (reproduces the exact same draw sequence)."""
        self.seed = seed
        self._rng.seed(seed)

    def random_cell(self, grid: Grid) -> Optional[Cell]:
        """Uniform cell of ``grid``; None (without drawing) when it has no cells."""
        if grid.width == 0 or grid.height == 0:
            return None
        return grid.get_cell(
            self._rng.randrange(grid.width), self._rng.randrange(grid.height)
        )

    def random_direction(self, excluded: Collection[Direction] = ()) -> Direction:
        values = [direction for direction in Direction if direction not in excluded]
        if not values:
            raise ValueError("All directions are excluded")
        return values[self._rng.randrange(len(values))]

    def random_item(
        self, collection: Iterable[T], excluded: Collection[T] = ()
    ) -> Optional[T]:
        """Uniform item of ``collection`` not in ``excluded``, in collection order.

        Returns None when nothing remains.
        """
        candidates: Sequence[T] = [item for item in collection if item not in excluded]
        if not candidates:
            return None
        return candidates[self._rng.randrange(len(candidates))]

    def random_double(self) -> float:
        return self._rng.random()
