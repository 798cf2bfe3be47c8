"""Type-safe domain enums for output formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output formats for ``greetings hellos``.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: One ``name: greeting`` line per name.
        JSON: A single object mapping each name to its greeting.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
