# SPDX-License-Identifier: MIT
"""Assemble complete ``.cfg`` files around rendered directives.

These helpers are plain string templating: they never touch the file
system. Writing the text somewhere is left to the caller.
"""

from __future__ import annotations

import re

from constants import DEFAULT_ALIAS
from models import ConfigRecord

from .serializer import render_directives

_ALIAS_DISALLOWED = re.compile(r"[^A-Za-z0-9]")

CONFIRMATION_LINE = 'echo "Crosshair config loaded successfully!"'


def sanitise_alias(name: str | None) -> str:
    """Return ``name`` with everything but ASCII letters and digits removed."""
    return _ALIAS_DISALLOWED.sub("", name or "")


def _resolve(name: str | None, default: str) -> str:
    return sanitise_alias(name) or sanitise_alias(default) or DEFAULT_ALIAS


def config_filename(name: str | None = None, default: str = DEFAULT_ALIAS) -> str:
    """Return the file name the config for ``name`` should be saved under."""
    return f"{_resolve(name, default)}.cfg"


def alias_command(name: str | None = None, default: str = DEFAULT_ALIAS) -> str:
    """Return the console alias that executes the config for ``name``.

    Example:
        >>> alias_command("bluedot")
        'alias "bluedot" "exec bluedot.cfg"'
    """
    alias = _resolve(name, default)
    return f'alias "{alias}" "exec {config_filename(alias)}"'


def build_config_file(
    token: str,
    record: ConfigRecord,
    alias: str | None = None,
    header: bool = True,
    default_alias: str = DEFAULT_ALIAS,
) -> str:
    """Return the full text of a crosshair config file.

    Args:
        token: Share code the record was decoded from, quoted in the header.
        record: Crosshair configuration to render.
        alias: Optional alias name; sanitised before use.
        header: Include the explanatory comments and confirmation echo.
        default_alias: Name used when ``alias`` is empty after sanitising.

    Returns:
        Newline-terminated config text.
    """

    directives = render_directives(record)
    if not header:
        return directives + "\n"
    lines = [
        f"// Crosshair config generated from {token.strip().upper()}",
        "// Place this file in your game config folder",
        f"// Add this to your autoexec.cfg: {alias_command(alias, default_alias)}",
        "",
        "// Crosshair settings",
        directives,
        "",
        CONFIRMATION_LINE,
    ]
    return "\n".join(lines) + "\n"


__all__ = [
    "CONFIRMATION_LINE",
    "alias_command",
    "build_config_file",
    "config_filename",
    "sanitise_alias",
]
