"""Test doubles for every application port.

They keep CLI tests off the filesystem and away from OS entropy: the
configuration is a fixed mapping, random sources are always seeded or
scripted, and the logging runtime prints nothing.

Contents:
    * :mod:`.config` - Empty or fixed configuration loaders
    * :mod:`.greeter` - Seeded and scripted random sources, settings loader
    * :mod:`.logging` - Silent lib_log_rich runtime
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import fixed_config_loader, get_config_in_memory
from .greeter import (
    FIXED_TEST_SEED,
    ScriptedRandom,
    create_random_source_in_memory,
    load_greeter_settings_from_dict_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greetings.application.ports import (
        CreateRandomSource,
        GetConfig,
        InitLogging,
        LoadGreeterSettingsFromDict,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_load_greeter_settings: LoadGreeterSettingsFromDict = load_greeter_settings_from_dict_in_memory
    _assert_create_random_source: CreateRandomSource = create_random_source_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "FIXED_TEST_SEED",
    "ScriptedRandom",
    "create_random_source_in_memory",
    "fixed_config_loader",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_greeter_settings_from_dict_in_memory",
]
