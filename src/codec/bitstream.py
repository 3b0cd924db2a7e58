# SPDX-License-Identifier: MIT
"""Sequential MSB-first bit reader and writer over a byte buffer.

Both classes are unaware of field semantics; the share-code layout drives
them one field at a time. Buffers hold ``bit_length`` significant bits
starting at the most significant bit of the first byte, with any trailing
padding bits set to zero.
"""

from __future__ import annotations

from errors import BitstreamOverrun


def byte_length(bit_length: int) -> int:
    """Return the number of bytes needed to hold ``bit_length`` bits."""
    return (bit_length + 7) // 8


class BitReader:
    """Read unsigned and two's-complement integers from ``data``."""

    def __init__(self, data: bytes, bit_length: int | None = None) -> None:
        total = len(data) * 8
        if bit_length is None:
            bit_length = total
        if bit_length > total:
            raise BitstreamOverrun(
                f"buffer holds {total} bits, {bit_length} requested"
            )
        self._value = int.from_bytes(data, "big")
        self._total = total
        self._bit_length = bit_length
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._bit_length - self._pos

    def read_bits(self, n: int) -> int:
        """Return the next ``n`` bits as an unsigned integer.

        Raises:
            BitstreamOverrun: If fewer than ``n`` bits remain.
        """
        if n < 0 or n > self.remaining:
            raise BitstreamOverrun(
                f"cannot read {n} bits at offset {self._pos} of {self._bit_length}"
            )
        shift = self._total - self._pos - n
        self._pos += n
        return (self._value >> shift) & ((1 << n) - 1)

    def read_signed_bits(self, n: int) -> int:
        """Return the next ``n`` bits interpreted as two's-complement."""
        value = self.read_bits(n)
        if n and value & (1 << (n - 1)):
            value -= 1 << n
        return value

    def skip(self, n: int) -> None:
        """Advance past ``n`` bits without interpreting them."""
        self.read_bits(n)


class BitWriter:
    """Write integers MSB-first into a zero-initialised buffer."""

    def __init__(self, bit_length: int) -> None:
        self._bit_length = bit_length
        self._value = 0
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._bit_length - self._pos

    def write_bits(self, value: int, n: int) -> None:
        """Append ``value`` as an ``n``-bit unsigned integer.

        Raises:
            BitstreamOverrun: If fewer than ``n`` bits remain.
            ValueError: If ``value`` does not fit in ``n`` bits.
        """
        if n < 0 or n > self.remaining:
            raise BitstreamOverrun(
                f"cannot write {n} bits at offset {self._pos} of {self._bit_length}"
            )
        if value < 0 or value >> n:
            raise ValueError(f"{value} does not fit in {n} unsigned bits")
        self._value |= value << (self._bit_length - self._pos - n)
        self._pos += n

    def write_signed_bits(self, value: int, n: int) -> None:
        """Append ``value`` as an ``n``-bit two's-complement integer."""
        low = -(1 << (n - 1)) if n else 0
        high = (1 << (n - 1)) - 1 if n else 0
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in {n} signed bits")
        self.write_bits(value & ((1 << n) - 1), n)

    def skip(self, n: int) -> None:
        """Leave ``n`` zero bits."""
        self.write_bits(0, n)

    def getvalue(self) -> bytes:
        """Return the buffer, zero-padded to a whole number of bytes."""
        size = byte_length(self._bit_length)
        padding = size * 8 - self._bit_length
        return (self._value << padding).to_bytes(size, "big")


__all__ = ["BitReader", "BitWriter", "byte_length"]
