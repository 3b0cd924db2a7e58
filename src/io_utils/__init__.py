# SPDX-License-Identifier: MIT
"""Input helpers for configuration files and crosshair records.

Exports:
    load_app_config: Read and validate ``config/app.yaml``.
    load_record: Read a crosshair record from a JSON file.
    parse_record: Validate a crosshair record from JSON text.
    clear_config_cache: Drop cached application configuration.
"""

from .loader import clear_config_cache, load_app_config, load_record, parse_record

__all__ = [
    "clear_config_cache",
    "load_app_config",
    "load_record",
    "parse_record",
]
