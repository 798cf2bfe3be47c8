"""Composition root: pick the adapters behind each application port.

``build_production`` is what the console script and ``python -m greetings``
use; ``build_testing`` swaps in the in-memory doubles so CLI tests are
reproducible and never touch user configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.greeter import create_random_source, load_greeter_settings_from_dict
from ..adapters.logging import init_logging

# pyright checks each production adapter against its Protocol here.
if TYPE_CHECKING:
    from ..application.ports import (
        CreateRandomSource,
        GetConfig,
        InitLogging,
        LoadGreeterSettingsFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_load_greeter_settings: LoadGreeterSettingsFromDict = load_greeter_settings_from_dict
    _assert_create_random_source: CreateRandomSource = create_random_source
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The four services a greeting command is wired with."""

    get_config: GetConfig
    load_greeter_settings_from_dict: LoadGreeterSettingsFromDict
    create_random_source: CreateRandomSource
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered configuration, OS-seeded randomness and console logging."""
    return AppServices(
        get_config=get_config,
        load_greeter_settings_from_dict=load_greeter_settings_from_dict,
        create_random_source=create_random_source,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """In-memory services for tests.

    Configuration is empty so every setting uses its default. Logging runs
    silently and the random source is always seeded, which makes CLI output
    reproducible.
    """
    from ..adapters.memory import (
        create_random_source_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_greeter_settings_from_dict_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        load_greeter_settings_from_dict=load_greeter_settings_from_dict_in_memory,
        create_random_source=create_random_source_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "create_random_source",
    "get_config",
]
