"""In-memory greeter adapters for testing.

Contents:
    * :class:`ScriptedRandom` - Random source replaying a fixed index sequence.
    * :func:`create_random_source_in_memory` - Deterministic random source factory.
    * :func:`load_greeter_settings_from_dict_in_memory` - Settings loader.
"""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..greeter.settings import GreeterSettings, load_greeter_settings_from_dict

#: Seed used when a test does not ask for one, so output is reproducible.
FIXED_TEST_SEED = 0


def create_random_source_in_memory(seed: int | None = None) -> random.Random:
    """Return a random source that is always seeded."""
    return random.Random(FIXED_TEST_SEED if seed is None else seed)  # noqa: S311


def load_greeter_settings_from_dict_in_memory(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Parse settings exactly like production; the loader performs no I/O."""
    return load_greeter_settings_from_dict(config_dict)


def _no_draws() -> list[int]:
    return []


@dataclass
class ScriptedRandom:
    """Random source that returns indices from *script* in a cycle.

    Records every ``stop`` it was asked for so tests can assert how many
    draws were consumed.

    Example:
        >>> source = ScriptedRandom([2, 0])
        >>> [source.randrange(3) for _ in range(3)]
        [2, 0, 2]
        >>> source.draws
        [3, 3, 3]
    """

    script: Sequence[int]
    draws: list[int] = field(default_factory=_no_draws)

    def randrange(self, stop: int, /) -> int:
        index = self.script[len(self.draws) % len(self.script)]
        self.draws.append(stop)
        return index % stop


__all__ = [
    "FIXED_TEST_SEED",
    "ScriptedRandom",
    "create_random_source_in_memory",
    "load_greeter_settings_from_dict_in_memory",
]
