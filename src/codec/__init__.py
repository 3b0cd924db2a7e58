# SPDX-License-Identifier: MIT
"""Share-code codec: alphabet, bit stream, field layout and parser."""

from .alphabet import decode_groups, encode_groups
from .bitstream import BitReader, BitWriter
from .checksum import xor_fold
from .sharecode import decode, encode, try_decode

__all__ = [
    "BitReader",
    "BitWriter",
    "decode",
    "decode_groups",
    "encode",
    "encode_groups",
    "try_decode",
    "xor_fold",
]
