# SPDX-License-Identifier: MIT
"""Conversion between share-code tokens and their 125-bit buffers.

A token is ``PREFIX-GGGGG-GGGGG-GGGGG-GGGGG-GGGGG``; each data character
contributes five bits, most significant first. Decoding folds ASCII case
only and validates the whole token shape before any bits are produced.
Encoding always emits uppercase.
"""

from __future__ import annotations

from constants import (
    ALPHABET,
    BITS_PER_CHAR,
    DATA_CHARS,
    GROUP_COUNT,
    GROUP_LENGTH,
    GROUP_SEPARATOR,
    TOKEN_BITS,
    TOKEN_PREFIX,
)
from errors import BadCharacter, FormatError

from .bitstream import BitReader, BitWriter

# Lowercase keys give ASCII-only case folding.
ALPHABET_LOOKUP = {
    **{char.lower(): index for index, char in enumerate(ALPHABET)},
    **{char: index for index, char in enumerate(ALPHABET)},
}


def _split_groups(token: str) -> list[str]:
    """Return the data groups of ``token`` after checking its shape."""

    prefix, _, body = token.strip().partition(GROUP_SEPARATOR)
    if not prefix.isascii() or prefix.upper() != TOKEN_PREFIX:
        raise FormatError.bad_prefix(TOKEN_PREFIX)
    groups = body.split(GROUP_SEPARATOR)
    if len(groups) != GROUP_COUNT:
        raise FormatError.bad_group_count(len(groups), GROUP_COUNT)
    for number, group in enumerate(groups, start=1):
        if len(group) != GROUP_LENGTH:
            raise FormatError.bad_group_length(number, len(group), GROUP_LENGTH)
    return groups


def decode_groups(token: str) -> bytes:
    """Return the bit buffer encoded by ``token``.

    Args:
        token: Share code such as ``CSGO-ANAAA-AAAAA-AAAAA-AAAAA-AAAAD``.

    Returns:
        ``TOKEN_BITS`` bits packed MSB-first into bytes.

    Raises:
        FormatError: If the prefix, group count or group length is wrong.
        BadCharacter: If a data character is outside the alphabet.
    """

    writer = BitWriter(TOKEN_BITS)
    data = "".join(_split_groups(token))
    for position, char in enumerate(data):
        value = ALPHABET_LOOKUP.get(char)
        if value is None:
            raise BadCharacter(char, position)
        writer.write_bits(value, BITS_PER_CHAR)
    return writer.getvalue()


def encode_groups(buffer: bytes) -> str:
    """Return the token for a ``TOKEN_BITS`` bit buffer."""

    reader = BitReader(buffer, TOKEN_BITS)
    data = "".join(
        ALPHABET[reader.read_bits(BITS_PER_CHAR)] for _ in range(DATA_CHARS)
    )
    groups = [
        data[start : start + GROUP_LENGTH]
        for start in range(0, DATA_CHARS, GROUP_LENGTH)
    ]
    return GROUP_SEPARATOR.join([TOKEN_PREFIX, *groups])


__all__ = ["ALPHABET_LOOKUP", "decode_groups", "encode_groups"]
