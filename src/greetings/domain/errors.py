"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class EmptyNameError(ValueError):
    """A greeting was requested for an empty name.

    The only failure a greeting request can produce. Inherits from
    ValueError so generic input-validation handlers also catch it.

    Example:
        >>> from greetings.domain.errors import EmptyNameError
        >>> str(EmptyNameError())
        'empty name'
        >>> isinstance(EmptyNameError(), ValueError)
        True
    """

    def __init__(self, message: str = "empty name") -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the greeting template set or related settings are
    malformed. Typically caught at CLI boundaries to provide user-friendly
    error messages.

    Example:
        >>> from greetings.domain.errors import ConfigurationError
        >>> err = ConfigurationError("at least one greeting template is required")
        >>> str(err)
        'at least one greeting template is required'
    """


__all__ = [
    "ConfigurationError",
    "EmptyNameError",
]
