# SPDX-License-Identifier: MIT
"""Pydantic models describing crosshair records, directives and configuration.

These definitions act as the contract between the share-code codec, the
directive renderer, the command-line interface and any collaborator that
consumes decoded crosshairs. Value ranges are intentionally not enforced
here: the field layout in :mod:`codec.layout` is the single source of truth
for legal values and reports violations as :class:`errors.FieldOutOfRange`.
"""

from __future__ import annotations

import math
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants import CUSTOM_COLOR_INDEX, DEFAULT_ALIAS
from errors import FormatError, ShareCodeError


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


class ConfigRecord(StrictModel):
    """Decoded crosshair configuration in human units.

    Distances (``gap``, ``thickness`` and ``length``) are stored with one
    decimal place, matching the tenth-of-a-unit resolution of the wire
    format. ``red``, ``green`` and ``blue`` only apply when ``color_index``
    selects the custom colour.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    gap: float = Field(0.0, description="Distance between the lines and centre.")
    outline: int = Field(1, description="Outline thickness in whole units.")
    thickness: float = Field(1.0, description="Line thickness.")
    length: float = Field(5.0, description="Line length, written as ``size``.")
    red: int = Field(50, description="Custom colour red channel.")
    green: int = Field(250, description="Custom colour green channel.")
    blue: int = Field(50, description="Custom colour blue channel.")
    alpha: int = Field(200, description="Opacity used when alpha is enabled.")
    color_index: int = Field(
        1, description=f"Preset colour, or {CUSTOM_COLOR_INDEX} for custom RGB."
    )
    style: int = Field(4, description="Crosshair style identifier.")
    center_dot_enabled: bool = Field(False, description="Draw a centre dot.")
    outline_enabled: bool = Field(True, description="Draw an outline.")
    alpha_enabled: bool = Field(True, description="Apply ``alpha`` to the lines.")
    fixed_gap_enabled: bool = Field(
        False, description="Keep the gap fixed while moving or shooting."
    )

    @field_validator("gap", "thickness", "length")
    @classmethod
    def _quantise(cls, value: float) -> float:
        """Snap scaled distances to the tenth-unit grid used by the codec."""

        scaled = value * 10
        if not math.isfinite(scaled):
            # Left for the layout range check to reject.
            return value
        return round(scaled) / 10

    @property
    def uses_custom_color(self) -> bool:
        """Return ``True`` when the RGB channels are in effect."""
        return self.color_index == CUSTOM_COLOR_INDEX


class Directive(StrictModel):
    """Single ``name "value"`` configuration line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Option name.")]
    value: str = Field(..., description="Option value as rendered text.")

    def render(self) -> str:
        """Return the directive as a configuration line."""
        return f'{self.name} "{self.value}"'


class DecodeResult(StrictModel):
    """Tagged outcome of decoding a token without raising.

    Exactly one of ``record`` or ``error_code`` is populated.
    """

    record: ConfigRecord | None = None
    error_code: str | None = Field(
        None, description="Stable error tag such as ``format_error``."
    )
    error_kind: str | None = Field(
        None, description="Format error reason when ``error_code`` is a format error."
    )
    field: str | None = Field(
        None, description="Offending field for ``field_out_of_range`` errors."
    )
    message: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when decoding succeeded."""
        return self.record is not None

    @classmethod
    def success(cls, record: ConfigRecord) -> "DecodeResult":
        return cls(record=record)

    @classmethod
    def failure(cls, exc: ShareCodeError) -> "DecodeResult":
        """Build a result describing ``exc``."""

        kind = exc.kind.value if isinstance(exc, FormatError) else None
        return cls(
            error_code=exc.code,
            error_kind=kind,
            field=getattr(exc, "field", None),
            message=exc.message,
        )


class AppConfig(StrictModel):
    """Top-level application configuration read from ``config/app.yaml``."""

    log_level: Annotated[
        str, Field(min_length=1, description="Logging verbosity level.")
    ] = "warn"
    default_alias: Annotated[
        str,
        Field(
            min_length=1,
            description="Name used for the alias and file when none is given.",
        ),
    ] = DEFAULT_ALIAS
    config_header: bool = Field(
        True,
        description="Emit the comment header and confirmation echo in config files.",
    )


__all__ = [
    "AppConfig",
    "ConfigRecord",
    "DecodeResult",
    "Directive",
    "StrictModel",
]
