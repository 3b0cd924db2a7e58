# SPDX-License-Identifier: MIT
"""Exception taxonomy for share-code decoding and encoding.

Every failure a caller can trigger with bad input is a subclass of
:class:`ShareCodeError` and carries a stable ``code`` tag so callers can
branch on the kind of failure without parsing messages. Malformed tokens
(:class:`FormatError`) and well-formed tokens of the wrong kind
(:class:`TypeMismatch`) are deliberately separate types because they call
for different corrective actions.
"""

from __future__ import annotations

from enum import Enum


class FormatErrorKind(str, Enum):
    """Reason a token failed syntactic or integrity validation."""

    BAD_PREFIX = "bad_prefix"
    BAD_GROUP_COUNT = "bad_group_count"
    BAD_GROUP_LENGTH = "bad_group_length"
    BAD_CHARACTER = "bad_character"
    CHECKSUM = "checksum"


class ShareCodeError(ValueError):
    """Base class for recoverable share-code failures."""

    code = "share_code_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatError(ShareCodeError):
    """Token is not a syntactically valid share code.

    Attributes:
        kind: Which format rule was violated.
    """

    code = "format_error"

    def __init__(self, kind: FormatErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def bad_prefix(cls, prefix: str) -> "FormatError":
        return cls(
            FormatErrorKind.BAD_PREFIX, f"share code must start with '{prefix}-'"
        )

    @classmethod
    def bad_group_count(cls, found: int, expected: int) -> "FormatError":
        return cls(
            FormatErrorKind.BAD_GROUP_COUNT,
            f"expected {expected} character groups, found {found}",
        )

    @classmethod
    def bad_group_length(cls, group: int, found: int, expected: int) -> "FormatError":
        return cls(
            FormatErrorKind.BAD_GROUP_LENGTH,
            f"group {group} has {found} characters, expected {expected}",
        )


class BadCharacter(FormatError):
    """Token contains a character outside the share-code alphabet.

    Attributes:
        char: The offending character.
        position: Zero-based index among the data characters.
    """

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            FormatErrorKind.BAD_CHARACTER,
            f"invalid character {char!r} at position {position}",
        )
        self.char = char
        self.position = position


class ChecksumError(FormatError):
    """Token decoded cleanly but its integrity byte does not match."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            FormatErrorKind.CHECKSUM,
            f"checksum mismatch: computed 0x{expected:02X}, token has 0x{actual:02X}",
        )
        self.expected = expected
        self.actual = actual


class TypeMismatch(ShareCodeError):
    """Token is well-formed but does not describe a crosshair."""

    code = "type_mismatch"

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(f"share code has type {actual}, expected {expected}")
        self.actual = actual
        self.expected = expected


class FieldOutOfRange(ShareCodeError):
    """A field value lies outside its legal range.

    Raised while decoding when bits transform to an illegal value and while
    encoding when the caller supplies an invalid record.
    """

    code = "field_out_of_range"

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"field '{field}' is out of range: {value!r}")
        self.field = field
        self.value = value


class BitstreamOverrun(RuntimeError):
    """A bit reader or writer was driven past the end of its buffer.

    This signals a broken field layout rather than bad user input, so it is
    not a :class:`ShareCodeError`.
    """


__all__ = [
    "BadCharacter",
    "BitstreamOverrun",
    "ChecksumError",
    "FieldOutOfRange",
    "FormatError",
    "FormatErrorKind",
    "ShareCodeError",
    "TypeMismatch",
]
