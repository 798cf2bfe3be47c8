"""Public package surface exposing the greeter, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: Greeter, template set, errors
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import create_random_source, get_config

# Domain exports
from .domain.behaviors import (
    DEFAULT_TEMPLATES,
    Greeter,
    GreetingTemplates,
)
from .domain.errors import ConfigurationError, EmptyNameError

__all__ = [
    "DEFAULT_TEMPLATES",
    "ConfigurationError",
    "EmptyNameError",
    "Greeter",
    "GreetingTemplates",
    "create_random_source",
    "get_config",
    "print_info",
]
