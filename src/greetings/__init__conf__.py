"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; the ``info`` command and
the layered configuration loader read them from here so that no runtime
metadata lookup is needed.
"""

from __future__ import annotations

name = "greetings"
title = "Greet people by name with a randomly chosen message"
version = "1.0.0"
homepage = "https://github.com/russomi-labs/golang-getting-started"
author = "russomi-labs"
author_email = "russomi-labs@users.noreply.github.com"
shell_command = "greetings"

#: Vendor, application and slug identifiers used by lib_layered_config to
#: locate platform-specific configuration directories.
LAYEREDCONF_VENDOR: str = "russomi-labs"
LAYEREDCONF_APP: str = "Greetings"
LAYEREDCONF_SLUG: str = "greetings"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetings:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
