# SPDX-License-Identifier: MIT
"""Tests for the pydantic models."""

import pytest
from pydantic import ValidationError

from errors import BadCharacter, FieldOutOfRange, TypeMismatch
from models import AppConfig, ConfigRecord, DecodeResult


@pytest.mark.parametrize(
    ("value", "expected"), [(1.04, 1.0), (1.06, 1.1), (-0.04, 0.0), (2, 2.0)]
)
def test_scaled_fields_snap_to_tenths(value: float, expected: float) -> None:
    assert ConfigRecord(gap=value).gap == expected


def test_negative_zero_is_normalised() -> None:
    assert str(ConfigRecord(gap=-0.04).gap) == "0.0"


def test_record_is_frozen() -> None:
    record = ConfigRecord()
    with pytest.raises(ValidationError):
        record.alpha = 10  # type: ignore[misc]


def test_record_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        ConfigRecord(size=5)  # type: ignore[call-arg]


def test_record_does_not_enforce_ranges() -> None:
    assert ConfigRecord(alpha=300).alpha == 300


def test_uses_custom_color() -> None:
    assert ConfigRecord(color_index=5).uses_custom_color
    assert not ConfigRecord(color_index=0).uses_custom_color


def test_decode_result_failure_tags() -> None:
    result = DecodeResult.failure(BadCharacter("0", 4))
    assert result.error_code == "format_error"
    assert result.error_kind == "bad_character"
    assert result.field is None
    assert not result.ok

    result = DecodeResult.failure(FieldOutOfRange("style", 7))
    assert (result.error_code, result.field) == ("field_out_of_range", "style")

    result = DecodeResult.failure(TypeMismatch(0, 3))
    assert (result.error_code, result.error_kind) == ("type_mismatch", None)


def test_app_config_defaults() -> None:
    config = AppConfig()
    assert config.log_level == "warn"
    assert config.default_alias == "crosshair"
    assert config.config_header is True
