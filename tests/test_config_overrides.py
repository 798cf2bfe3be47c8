"""Unit tests for ``--set SECTION.KEY=VALUE`` configuration overrides."""

from __future__ import annotations

from typing import Any

import pytest
from lib_layered_config import Config

from greetings.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_seed_becomes_an_integer() -> None:
    """greetings.seed=42 targets the greetings section with an int value."""
    assert parse_override("greetings.seed=42") == ConfigOverride(section="greetings", key_path=("seed",), value=42)


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    """Dots beyond the section build a multi-element key path."""
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.section == "lib_log_rich"
    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_keeps_equals_inside_the_value() -> None:
    """Only the first '=' separates path from value."""
    assert parse_override("greetings.default_name=A=B").value == "A=B"


@pytest.mark.os_agnostic
def test_parse_override_empty_value_is_an_empty_string() -> None:
    """An empty value stays a string so it can blank a setting."""
    assert parse_override("greetings.seed=").value == ""


@pytest.mark.os_agnostic
def test_parse_override_json_array_value() -> None:
    """Lists such as default_names can be given as JSON."""
    result = parse_override('greetings.default_names=["Endora","Tabitha"]')

    assert result.value == ["Endora", "Tabitha"]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("greetings.seed", "must contain '='"),
        ("seed=3", "must contain at least one dot"),
        ("=3", "must contain at least one dot"),
        (".seed=3", "section name is empty"),
        ("greetings..seed=3", "empty component"),
        ("greetings.seed.=3", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Malformed assignments raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


@pytest.mark.os_agnostic
def test_parse_override_unicode_value() -> None:
    """Unicode names survive unchanged."""
    assert parse_override("greetings.default_name=Zoë").value == "Zoë"


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("null", None),
        ("-5", -5),
        ("3.5", 3.5),
        ('{"k":"v"}', {"k": "v"}),
        ("Gladys", "Gladys"),
        ("Hi, {name}!", "Hi, {name}!"),
        ("", ""),
    ],
)
def test_coerce_value_interprets_json_and_falls_back_to_text(raw: str, expected: object) -> None:
    """JSON literals are decoded; anything else is kept verbatim."""
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
def test_coerce_value_integer_keeps_int_type() -> None:
    """Seeds must arrive as int, not float."""
    assert isinstance(coerce_value("42"), int)


@pytest.mark.os_agnostic
def test_coerce_value_json_string_unescapes() -> None:
    """A quoted JSON string has its escapes decoded."""
    assert coerce_value('"line1\\nline2"') == "line1\nline2"


# ======================== apply_overrides ========================


def _make_config(data: dict[str, Any]) -> Config:
    return Config(data, {})


@pytest.mark.os_agnostic
def test_apply_overrides_empty_tuple_returns_same_instance() -> None:
    """No overrides returns the original Config instance."""
    config = _make_config({"greetings": {"seed": 1}})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_replaces_only_the_named_key() -> None:
    """Sibling keys in the section are kept."""
    config = _make_config({"greetings": {"seed": 1, "default_name": "Gladys"}})

    result = apply_overrides(config, ("greetings.seed=2",))

    assert result["greetings"]["seed"] == 2
    assert result["greetings"]["default_name"] == "Gladys"


@pytest.mark.os_agnostic
def test_apply_overrides_multiple_sections() -> None:
    """Several overrides land in their own sections."""
    config = _make_config({"greetings": {"seed": 1}, "lib_log_rich": {"console_level": "INFO"}})

    result = apply_overrides(config, ("greetings.seed=5", "lib_log_rich.console_level=DEBUG"))

    assert result["greetings"]["seed"] == 5
    assert result["lib_log_rich"]["console_level"] == "DEBUG"


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_section_and_tables() -> None:
    """Unknown sections and nested tables are created on demand."""
    config = _make_config({"greetings": {"seed": 1}})

    result = apply_overrides(config, ("extra.nested.deep=42",))

    assert result["extra"]["nested"]["deep"] == 42
    assert result["greetings"]["seed"] == 1


@pytest.mark.os_agnostic
def test_apply_overrides_does_not_mutate_original() -> None:
    """The input Config is left untouched."""
    config = _make_config({"greetings": {"default_name": "Gladys"}})

    result = apply_overrides(config, ("greetings.default_name=Darrin",))

    assert config["greetings"]["default_name"] == "Gladys"
    assert result["greetings"]["default_name"] == "Darrin"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_malformed_input() -> None:
    """A malformed override raises ValueError."""
    with pytest.raises(ValueError, match="must contain '='"):
        apply_overrides(_make_config({}), ("invalid",))
