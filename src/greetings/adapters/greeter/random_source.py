"""Random source adapter for greeting template selection."""

from __future__ import annotations

import random


def create_random_source(seed: int | None = None) -> random.Random:
    """Return a private :class:`random.Random` instance.

    With ``seed=None`` the generator is seeded from the operating system
    (falling back to the current time), so repeated runs vary. A fixed
    seed makes the template sequence reproducible.

    Example:
        >>> a = create_random_source(42)
        >>> b = create_random_source(42)
        >>> [a.randrange(3) for _ in range(5)] == [b.randrange(3) for _ in range(5)]
        True
    """
    return random.Random(seed)  # noqa: S311 - not used for security


__all__ = ["create_random_source"]
