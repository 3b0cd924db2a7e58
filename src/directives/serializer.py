# SPDX-License-Identifier: MIT
"""Render crosshair records as ordered configuration directives.

Output order and formatting are fixed so identical records always produce
byte-identical text. Tenth-unit distances render with one decimal digit,
other numbers as plain integers and flags as ``1`` or ``0``. The custom
colour channels are appended only when the record selects custom RGB.
"""

from __future__ import annotations

from typing import Any, Callable

from models import ConfigRecord, Directive


def _decimal(value: float) -> str:
    return f"{value:.1f}"


def _integer(value: int) -> str:
    return str(int(value))


def _flag(value: bool) -> str:
    return "1" if value else "0"


DirectiveSpec = tuple[str, str, Callable[[Any], str]]

DIRECTIVE_TABLE: tuple[DirectiveSpec, ...] = (
    ("size", "length", _decimal),
    ("thickness", "thickness", _decimal),
    ("gap", "gap", _decimal),
    ("outline-enabled", "outline_enabled", _flag),
    ("outline-thickness", "outline", _integer),
    ("center-dot", "center_dot_enabled", _flag),
    ("color-index", "color_index", _integer),
    ("use-alpha", "alpha_enabled", _flag),
    ("alpha", "alpha", _integer),
    ("style", "style", _integer),
)

COLOR_DIRECTIVES: tuple[DirectiveSpec, ...] = (
    ("color-red", "red", _integer),
    ("color-green", "green", _integer),
    ("color-blue", "blue", _integer),
)


def to_directives(record: ConfigRecord) -> list[Directive]:
    """Return the directives describing ``record`` in canonical order."""

    table = DIRECTIVE_TABLE
    if record.uses_custom_color:
        table = table + COLOR_DIRECTIVES
    return [
        Directive(name=name, value=render(getattr(record, attr)))
        for name, attr, render in table
    ]


def render_directives(record: ConfigRecord) -> str:
    """Return the directive lines for ``record`` joined by newlines."""
    return "\n".join(directive.render() for directive in to_directives(record))


__all__ = [
    "COLOR_DIRECTIVES",
    "DIRECTIVE_TABLE",
    "render_directives",
    "to_directives",
]
