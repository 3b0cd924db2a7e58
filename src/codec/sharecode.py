# SPDX-License-Identifier: MIT
"""Crosshair share-code parser and builder.

:func:`decode` turns a token into a :class:`models.ConfigRecord` and
:func:`encode` performs the inverse. Both walk :data:`codec.layout.LAYOUT`
in the same order, so ``decode(encode(record)) == record`` for every record
whose fields are in range. Decoding checks, in order, the token shape, the
type tag, each field's range and finally the checksum.
"""

from __future__ import annotations

import logfire

from constants import CROSSHAIR_TYPE_TAG, TOKEN_BITS
from errors import ChecksumError, ShareCodeError, TypeMismatch
from models import ConfigRecord, DecodeResult

from .alphabet import decode_groups, encode_groups
from .bitstream import BitReader, BitWriter
from .checksum import xor_fold
from .layout import (
    CHECKSUM_BITS,
    CHECKSUMMED_BITS,
    RECORD_FIELDS,
    RESERVED_BITS,
    TYPE_TAG,
)


def decode(token: str) -> ConfigRecord:
    """Return the crosshair record encoded in ``token``.

    Args:
        token: Share code in ``CSGO-XXXXX-XXXXX-XXXXX-XXXXX-XXXXX`` form.

    Returns:
        The decoded :class:`ConfigRecord`.

    Raises:
        FormatError: If the token is malformed or its checksum is wrong.
        TypeMismatch: If the token encodes something other than a crosshair.
        FieldOutOfRange: If a field decodes to an illegal value.
    """

    with logfire.span("sharecode.decode"):
        buffer = decode_groups(token)
        reader = BitReader(buffer, TOKEN_BITS)
        type_tag = TYPE_TAG.read(reader)
        if type_tag != CROSSHAIR_TYPE_TAG:
            raise TypeMismatch(type_tag, CROSSHAIR_TYPE_TAG)
        values = {
            spec.name: spec.from_raw(spec.read(reader)) for spec in RECORD_FIELDS
        }
        reader.skip(RESERVED_BITS)
        stored = reader.read_bits(CHECKSUM_BITS)
        computed = xor_fold(buffer, CHECKSUMMED_BITS)
        if stored != computed:
            raise ChecksumError(computed, stored)
        return ConfigRecord(**values)


def encode(record: ConfigRecord) -> str:
    """Return the share code for ``record``.

    Every field is range-checked before anything is written, so a failure
    never yields a partial token. Failures are reported only by
    raising; unlike :func:`decode` there is no tagged-result variant.

    Raises:
        FieldOutOfRange: If any field lies outside its legal range.
    """

    with logfire.span("sharecode.encode"):
        values = {
            spec.name: spec.to_raw(getattr(record, spec.name))
            for spec in RECORD_FIELDS
        }
        writer = BitWriter(TOKEN_BITS)
        TYPE_TAG.write(writer, CROSSHAIR_TYPE_TAG)
        for spec in RECORD_FIELDS:
            spec.write(writer, values[spec.name])
        writer.skip(RESERVED_BITS)
        writer.write_bits(xor_fold(writer.getvalue(), CHECKSUMMED_BITS), CHECKSUM_BITS)
        return encode_groups(writer.getvalue())


def try_decode(token: str) -> DecodeResult:
    """Decode ``token`` and report failures as a tagged result."""

    try:
        return DecodeResult.success(decode(token))
    except ShareCodeError as exc:
        logfire.debug("Share code rejected", code=exc.code, reason=exc.message)
        return DecodeResult.failure(exc)


__all__ = ["decode", "encode", "try_decode"]
