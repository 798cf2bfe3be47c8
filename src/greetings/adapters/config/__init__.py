"""Configuration adapter: layered loading and ``--set`` overrides.

Contents:
    * :mod:`.loader` - Cached lib_layered_config loader with profile checks
    * :mod:`.overrides` - ``SECTION.KEY=VALUE`` parsing and merging
"""

from __future__ import annotations

from .loader import DEFAULT_CONFIG_FILE, LayeredConfigLoader, get_config, validate_profile
from .overrides import apply_overrides

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "LayeredConfigLoader",
    "apply_overrides",
    "get_config",
    "validate_profile",
]
