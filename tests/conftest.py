"""Fixtures shared by the greetings test suite."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv

from greetings.adapters.cli.context import TracebackState
from greetings.adapters.memory import ScriptedRandom, fixed_config_loader
from greetings.domain.behaviors import Greeter

if TYPE_CHECKING:
    from greetings.composition import AppServices

# A developer's .env may carry GREETINGS___* overrides for manual runs.
_DOTENV = Path(__file__).resolve().parent.parent / ".env"
if _DOTENV.is_file():
    load_dotenv(_DOTENV)

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture(autouse=True)
def stop_logging_runtime() -> Iterator[None]:
    """Shut down any lib_log_rich runtime a test started, so the next one starts clean."""
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """A CliRunner with stdout and stderr captured separately."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    from greetings.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """In-memory services: empty config, seeded random source, silent logging."""
    from greetings.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: ANSI_ESCAPE_PATTERN.sub("", text)


@pytest.fixture
def isolated_traceback_flags() -> Iterator[None]:
    """Start with tracebacks off and put the original flags back afterwards."""
    saved = TracebackState.capture()
    lib_cli_exit_tools.reset_config()
    TracebackState.from_flag(False).apply()
    try:
        yield
    finally:
        saved.apply()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    from greetings.adapters.config.loader import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def services_with_config() -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Turn a configuration mapping into a services factory.

    Only ``get_config`` is replaced; settings parsing, random sources and
    logging are the production adapters.

    Example:
        factory = services_with_config({"greetings": {"seed": 1}})
        result = cli_runner.invoke(cli, ["hello"], obj=factory)
    """
    from greetings.composition import build_production

    def _factory(data: dict[str, Any]) -> Callable[[], AppServices]:
        services = replace(build_production(), get_config=fixed_config_loader(data))
        return lambda: services

    return _factory


@pytest.fixture
def inject_random_source() -> Callable[..., Callable[[], AppServices]]:
    """Wire a ScriptedRandom into the in-memory services.

    When *requested_seeds* is given, the seed each command asks for is
    appended to it.
    """
    from greetings.composition import build_testing

    def _inject(
        source: ScriptedRandom, requested_seeds: list[int | None] | None = None
    ) -> Callable[[], AppServices]:
        def _create_random_source(seed: int | None = None) -> ScriptedRandom:
            if requested_seeds is not None:
                requested_seeds.append(seed)
            return source

        services = replace(build_testing(), create_random_source=_create_random_source)
        return lambda: services

    return _inject


@pytest.fixture
def scripted_greeter() -> Callable[..., Greeter]:
    """Build a Greeter whose template choices follow a fixed index script."""

    def _build(*script: int) -> Greeter:
        return Greeter(ScriptedRandom(list(script) or [0]))

    return _build
