"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeter and the greeting template set
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_TEMPLATES,
    NAME_SLOT,
    Greeter,
    GreetingTemplates,
    RandomSource,
)
from .enums import OutputFormat
from .errors import ConfigurationError, EmptyNameError

__all__ = [
    # Behaviors
    "DEFAULT_TEMPLATES",
    "NAME_SLOT",
    "Greeter",
    "GreetingTemplates",
    "RandomSource",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "EmptyNameError",
]
