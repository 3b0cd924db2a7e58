# SPDX-License-Identifier: MIT
"""Test configuration for crosshair-sharecode.

Keeps Logfire output local and resets cached configuration between tests.
"""

from __future__ import annotations

import logfire
import pytest

from io_utils.loader import clear_config_cache
from models import ConfigRecord


@pytest.fixture(scope="session", autouse=True)
def _local_logfire():
    """Prevent telemetry export and console noise during tests."""

    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Ensure configuration cache is empty before and after each test."""

    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture()
def zero_record() -> ConfigRecord:
    """Record matching :data:`ZERO_TOKEN`."""

    return ConfigRecord(
        gap=0.0,
        outline=0,
        thickness=0.0,
        length=0.0,
        red=0,
        green=0,
        blue=0,
        alpha=0,
        color_index=0,
        style=0,
        center_dot_enabled=False,
        outline_enabled=False,
        alpha_enabled=False,
        fixed_gap_enabled=False,
    )
