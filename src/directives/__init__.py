# SPDX-License-Identifier: MIT
"""Directive rendering and config file assembly."""

from .config_file import alias_command, build_config_file, config_filename
from .serializer import render_directives, to_directives

__all__ = [
    "alias_command",
    "build_config_file",
    "config_filename",
    "render_directives",
    "to_directives",
]
