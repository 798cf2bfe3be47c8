"""Root options that shape configuration: --set and --profile on the greeting path."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result

from greetings.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_set_default_name_is_greeted_when_no_name_is_given(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--set", "greetings.default_name=Endora", "hello"], obj=testing_factory
    )

    assert result.exit_code == 0
    assert "Endora" in result.stdout


@pytest.mark.os_agnostic
def test_set_default_names_accepts_a_json_array(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", 'greetings.default_names=["Tabitha", "Adam"]', "hellos", "--format", "json"],
        obj=testing_factory,
    )

    assert result.exit_code == 0
    assert list(orjson.loads(result.stdout)) == ["Tabitha", "Adam"]


@pytest.mark.os_agnostic
def test_set_templates_replaces_the_stock_messages(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--set", 'greetings.templates=["Ahoy, {name}!"]', "hello", "Larry"], obj=testing_factory
    )

    assert result.exit_code == 0
    assert result.stdout == "Ahoy, Larry!\n"


@pytest.mark.os_agnostic
def test_later_set_for_the_same_key_wins(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greetings.default_name=Ann", "--set", "greetings.default_name=Bo", "hello"],
        obj=testing_factory,
    )

    assert result.exit_code == 0
    assert "Bo" in result.stdout
    assert "Ann" not in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["invalid_no_equals", "nodot=value", ""])
def test_malformed_set_is_a_usage_error_before_any_greeting(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
    raw: str,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", raw, "hello", "Ann"], obj=testing_factory)

    assert result.exit_code == 2
    assert result.stdout == ""
    assert "Invalid override" in result.stderr


@pytest.mark.os_agnostic
def test_set_that_nests_under_a_scalar_is_a_usage_error(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greetings.seed=1", "--set", "greetings.seed.inner=2", "hello"],
        obj=testing_factory,
    )

    assert result.exit_code == 2
    assert result.stdout == ""
    assert "Expected dict" in result.stderr


@pytest.mark.os_agnostic
def test_path_like_profile_is_rejected_as_a_bad_option(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../escape", "hello"], obj=production_factory)

    assert result.exit_code == 2
    assert result.stdout == ""
    assert "--profile" in result.stderr
