# SPDX-License-Identifier: MIT
"""Ordered field layout of the crosshair share-code bit buffer.

The layout is the single contract shared by the decoder and the encoder:
fields are read and written strictly in table order, each with a fixed bit
width, a value transform and a legal range. Legal ranges are expressed on
the raw integers stored in the buffer so that decode and encode apply
exactly the same bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from constants import CROSSHAIR_TYPE_TAG, CUSTOM_COLOR_INDEX, TOKEN_BITS
from errors import FieldOutOfRange

from .bitstream import BitReader, BitWriter

# Fields stored in tenths of a unit.
SCALE = 10

FieldKind = Literal["int", "scaled", "bool"]


@dataclass(frozen=True)
class FieldSpec:
    """Width, transform and raw range of a single layout field."""

    name: str
    bits: int
    kind: FieldKind = "int"
    signed: bool = False
    minimum: int | None = None
    maximum: int | None = None

    @property
    def raw_min(self) -> int:
        if self.minimum is not None:
            return self.minimum
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def raw_max(self) -> int:
        if self.maximum is not None:
            return self.maximum
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def read(self, reader: BitReader) -> int:
        if self.signed:
            return reader.read_signed_bits(self.bits)
        return reader.read_bits(self.bits)

    def write(self, writer: BitWriter, raw: int) -> None:
        if self.signed:
            writer.write_signed_bits(raw, self.bits)
        else:
            writer.write_bits(raw, self.bits)

    def from_raw(self, raw: int) -> int | float | bool:
        """Return the human value for ``raw``.

        Raises:
            FieldOutOfRange: If ``raw`` is outside the legal range.
        """
        if not self.raw_min <= raw <= self.raw_max:
            raise FieldOutOfRange(self.name, raw)
        if self.kind == "scaled":
            return raw / SCALE
        if self.kind == "bool":
            return bool(raw)
        return raw

    def to_raw(self, value: int | float | bool) -> int:
        """Return the raw integer stored for ``value``.

        Raises:
            FieldOutOfRange: If ``value`` has the wrong type or is outside the
                legal range.
        """
        if self.kind == "bool":
            if not isinstance(value, bool):
                raise FieldOutOfRange(self.name, value)
            return int(value)
        if isinstance(value, bool):
            raise FieldOutOfRange(self.name, value)
        if self.kind == "scaled":
            if not isinstance(value, (int, float)) or not math.isfinite(value * SCALE):
                raise FieldOutOfRange(self.name, value)
            raw = round(value * SCALE)
        else:
            if not isinstance(value, int):
                raise FieldOutOfRange(self.name, value)
            raw = value
        if not self.raw_min <= raw <= self.raw_max:
            raise FieldOutOfRange(self.name, value)
        return raw


TYPE_TAG = FieldSpec(
    "type_tag", 8, minimum=CROSSHAIR_TYPE_TAG, maximum=CROSSHAIR_TYPE_TAG
)

RECORD_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("gap", 8, kind="scaled", signed=True),
    FieldSpec("outline", 4),
    FieldSpec("thickness", 8, kind="scaled"),
    FieldSpec("length", 8, kind="scaled"),
    FieldSpec("red", 8),
    FieldSpec("green", 8),
    FieldSpec("blue", 8),
    FieldSpec("alpha", 8),
    FieldSpec("color_index", 3, maximum=CUSTOM_COLOR_INDEX),
    FieldSpec("style", 3, maximum=5),
    FieldSpec("center_dot_enabled", 1, kind="bool"),
    FieldSpec("outline_enabled", 1, kind="bool"),
    FieldSpec("alpha_enabled", 1, kind="bool"),
    FieldSpec("fixed_gap_enabled", 1, kind="bool"),
)

LAYOUT: tuple[FieldSpec, ...] = (TYPE_TAG, *RECORD_FIELDS)

# Zero on encode, ignored on decode.
RESERVED_BITS = 39
CHECKSUM_BITS = 8

# Bits covered by the checksum: everything before the checksum field.
CHECKSUMMED_BITS = sum(spec.bits for spec in LAYOUT) + RESERVED_BITS

if CHECKSUMMED_BITS + CHECKSUM_BITS != TOKEN_BITS:  # pragma: no cover
    raise RuntimeError(
        f"layout covers {CHECKSUMMED_BITS + CHECKSUM_BITS} bits, "
        f"tokens carry {TOKEN_BITS}"
    )

__all__ = [
    "CHECKSUMMED_BITS",
    "CHECKSUM_BITS",
    "FieldSpec",
    "LAYOUT",
    "RECORD_FIELDS",
    "RESERVED_BITS",
    "SCALE",
    "TYPE_TAG",
]
