# SPDX-License-Identifier: MIT
"""XOR-fold integrity byte guarding against copy and typing mistakes."""

from __future__ import annotations

from .bitstream import BitReader


def xor_fold(buffer: bytes, bit_length: int) -> int:
    """Return the XOR of the first ``bit_length`` bits taken a byte at a time.

    A trailing group shorter than eight bits is treated as an integer of its
    own width, which zero-pads it on the high side.
    """

    reader = BitReader(buffer, bit_length)
    checksum = 0
    while reader.remaining:
        checksum ^= reader.read_bits(min(8, reader.remaining))
    return checksum


__all__ = ["xor_fold"]
