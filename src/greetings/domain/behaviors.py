"""Pure domain functions with no I/O or framework dependencies.

Contents:
    * :data:`DEFAULT_TEMPLATES` - The three stock message templates.
    * :class:`GreetingTemplates` - Immutable, validated template set.
    * :class:`Greeter` - Turns names into greetings using an injected random source.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, Protocol

from .errors import ConfigurationError, EmptyNameError

#: Substitution slot every template must carry exactly once.
NAME_SLOT: Final[str] = "{name}"

DEFAULT_TEMPLATES: Final[tuple[str, ...]] = (
    "Hi, {name}. Welcome!",
    "Great to see you, {name}!",
    "Hail, {name}! Well met!",
)


class RandomSource(Protocol):
    """Anything that can draw a uniform index, e.g. :class:`random.Random`."""

    def randrange(self, stop: int, /) -> int: ...


@dataclass(frozen=True, slots=True)
class GreetingTemplates:
    """Immutable set of message templates with a single ``{name}`` slot each.

    Example:
        >>> templates = GreetingTemplates()
        >>> len(templates)
        3
        >>> templates.render(0, "Gladys")
        'Hi, Gladys. Welcome!'

        >>> GreetingTemplates(("no slot here",))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: template 'no slot here' must contain '{name}' exactly once
    """

    patterns: tuple[str, ...] = DEFAULT_TEMPLATES

    def __post_init__(self) -> None:
        if not self.patterns:
            raise ConfigurationError("at least one greeting template is required")
        for pattern in self.patterns:
            if pattern.count(NAME_SLOT) != 1:
                raise ConfigurationError(f"template {pattern!r} must contain {NAME_SLOT!r} exactly once")

    def __len__(self) -> int:
        return len(self.patterns)

    def render(self, index: int, name: str) -> str:
        """Substitute *name* literally into the template at *index*."""
        return self.patterns[index].replace(NAME_SLOT, name)


class Greeter:
    """Produce greetings for one or many names.

    The random source and template set are supplied by the caller so that
    selection is reproducible when the source is seeded.

    Example:
        >>> import random
        >>> greeter = Greeter(random.Random(7))
        >>> "Gladys" in greeter.greet("Gladys")
        True
        >>> greeter.greet_many([])
        {}
    """

    __slots__ = ("_random", "_templates")

    def __init__(self, random_source: RandomSource, templates: GreetingTemplates | None = None) -> None:
        self._random = random_source
        self._templates = templates if templates is not None else GreetingTemplates()

    @property
    def templates(self) -> GreetingTemplates:
        return self._templates

    def greet(self, name: str) -> str:
        """Return a greeting for *name* using a randomly chosen template.

        Args:
            name: Person to greet. Must not be empty.

        Returns:
            The greeting text, which always contains *name*.

        Raises:
            EmptyNameError: If *name* is the empty string.
        """
        if not name:
            raise EmptyNameError()
        return self._templates.render(self._pick_template(), name)

    def greet_many(self, names: Iterable[str]) -> dict[str, str]:
        """Return a mapping of each name to its greeting.

        Names are greeted in order. Duplicate names keep the last greeting.
        The first empty name aborts the whole call and no mapping is returned.

        Raises:
            EmptyNameError: If any name is empty.
        """
        messages: dict[str, str] = {}
        for name in names:
            messages[name] = self.greet(name)
        return messages

    def _pick_template(self) -> int:
        return self._random.randrange(len(self._templates))


__all__ = [
    "DEFAULT_TEMPLATES",
    "NAME_SLOT",
    "Greeter",
    "GreetingTemplates",
    "RandomSource",
]
