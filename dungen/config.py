"""Generation configuration.

:class:`DungeonConfiguration` is an immutable value object built once by the
caller (CLI, app, tests) and only read by the processors. Values are
validated on construction; out-of-range values raise ``ValueError`` and are
never clamped.
"""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional


# Alternative key spellings accepted by ``from_dict``: the camelCase name and
# the CLI flag name ``deadends``.
_KEY_ALIASES: Dict[str, str] = {
    "chanceToRemoveDeadends": "chance_to_remove_deadends",
    "chance_to_remove_dead_ends": "chance_to_remove_deadends",
    "deadends": "chance_to_remove_deadends",
}


@dataclass(frozen=True)
class DungeonConfiguration:
    """Parameters for one generation run.

    Attributes:
        width: Grid width in cells (0 gives an empty grid).
        height: Grid height in cells (0 gives an empty grid).
        randomness: Probability of *not* continuing a corridor straight.
            0 keeps corridors straight whenever possible; 1 disables the bias.
        sparseness: Fraction of the remaining closed interior walls that the
            density reducer opens after the maze is carved.
        chance_to_remove_deadends: Probability that each dead end is opened
            into a loop rather than kept.
        seed: Seed for the default randomizer (None for system entropy).
    """

    width: int
    height: int
    randomness: float = 0.2
    sparseness: float = 0.3
    chance_to_remove_deadends: float = 1.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        for name in ("randomness", "sparseness", "chance_to_remove_deadends"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DungeonConfiguration":
        """Build a configuration from a plain mapping.

        Accepts snake_case field names and the camelCase spelling
        ``chanceToRemoveDeadends``, plus ``chance_to_remove_dead_ends`` and
        ``deadends``. Unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown configuration key: {key!r}")
            kwargs[name] = value
        missing = {"width", "height"} - kwargs.keys()
        if missing:
            raise ValueError(f"Missing configuration keys: {sorted(missing)}")
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_configuration(path: str) -> DungeonConfiguration:
    """Read a JSON object from ``path`` into a :class:`DungeonConfiguration`."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a JSON object")
    return DungeonConfiguration.from_dict(data)


DEFAULT_CONFIGURATION = DungeonConfiguration(
    width=40,
    height=40,
    randomness=0.2,
    sparseness=0.3,
    chance_to_remove_deadends=1.0,
)
