"""Greeter adapter - settings and random source.

Contents:
    * :class:`.settings.GreeterSettings` - Validated ``[greetings]`` settings
    * :func:`.settings.load_greeter_settings_from_dict` - Config dict loader
    * :func:`.random_source.create_random_source` - Seeded random source factory
"""

from __future__ import annotations

from .random_source import create_random_source
from .settings import GreeterSettings, load_greeter_settings_from_dict

__all__ = [
    "GreeterSettings",
    "create_random_source",
    "load_greeter_settings_from_dict",
]
