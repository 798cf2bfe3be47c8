"""Greeter settings model and loader.

Provides the GreeterSettings Pydantic model for validated, immutable
``[greetings]`` settings and the loader function to create it from
configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from greetings.domain.behaviors import DEFAULT_TEMPLATES, GreetingTemplates

DEFAULT_NAME = "Gladys"
DEFAULT_NAMES: tuple[str, ...] = ("Gladys", "Samantha", "Darrin")


class GreeterSettings(BaseModel):
    """Validated, immutable greeter configuration.

    Example:
        >>> settings = GreeterSettings(seed=42)
        >>> settings.default_name
        'Gladys'
        >>> settings.templates == DEFAULT_TEMPLATES
        True
    """

    model_config = ConfigDict(frozen=True)

    default_name: str = DEFAULT_NAME
    default_names: tuple[str, ...] = Field(default=DEFAULT_NAMES)
    templates: tuple[str, ...] = Field(default=DEFAULT_TEMPLATES)
    seed: int | None = None

    @field_validator("default_names", "templates", mode="before")
    @classmethod
    def _coerce_string_to_tuple(cls, v: Any) -> Any:
        """Coerce single strings to single-element tuples.

        Handles environment variables and .env files that provide single strings
        instead of TOML arrays. Empty strings become empty tuples.

        Examples:
            >>> GreeterSettings._coerce_string_to_tuple("Gladys")
            ('Gladys',)
            >>> GreeterSettings._coerce_string_to_tuple(["a", "b"])
            ('a', 'b')
            >>> GreeterSettings._coerce_string_to_tuple("")
            ()
        """
        if isinstance(v, str):
            return (v,) if v.strip() else ()
        if isinstance(v, list):
            return tuple(cast(list[Any], v))
        return v

    @field_validator("seed", mode="before")
    @classmethod
    def _coerce_empty_seed_to_none(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only seed as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_templates(self) -> GreetingTemplates:
        """Build the domain template set.

        Raises:
            ConfigurationError: If the configured templates are empty or a
                template lacks exactly one ``{name}`` slot.
        """
        return GreetingTemplates(self.templates)


def load_greeter_settings_from_dict(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Load GreeterSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    GreeterSettings Pydantic model. Single-parse validation at the boundary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'greetings' section.

    Returns:
        Configured greeter settings with defaults for missing values.

    Raises:
        pydantic.ValidationError: If the section holds values of the wrong type.

    Example:
        >>> settings = load_greeter_settings_from_dict({"greetings": {"seed": 7}})
        >>> settings.seed
        7
        >>> load_greeter_settings_from_dict({}).default_names
        ('Gladys', 'Samantha', 'Darrin')
    """
    section: Any = config_dict.get("greetings", {})

    if not isinstance(section, Mapping):
        return GreeterSettings.model_validate(section)

    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    return GreeterSettings.model_validate(raw)


__all__ = [
    "DEFAULT_NAME",
    "DEFAULT_NAMES",
    "GreeterSettings",
    "load_greeter_settings_from_dict",
]
