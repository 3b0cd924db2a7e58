# SPDX-License-Identifier: MIT
"""Runtime package exposing application settings."""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
