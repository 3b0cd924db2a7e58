# SPDX-License-Identifier: MIT
"""Tests for token to bit-buffer conversion."""

import pytest

from codec.alphabet import ALPHABET_LOOKUP, decode_groups, encode_groups
from constants import ALPHABET
from errors import BadCharacter, FormatError, FormatErrorKind

ALL_ZERO = "CSGO-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA"


def test_alphabet_has_32_distinct_unambiguous_symbols() -> None:
    assert len(set(ALPHABET)) == 32
    assert not set("IO01") & set(ALPHABET)
    assert ALPHABET_LOOKUP["9"] == 31


def test_decode_all_zero_token() -> None:
    assert decode_groups(ALL_ZERO) == bytes(16)


def test_decode_all_ones_token_pads_trailing_bits() -> None:
    token = "CSGO-99999-99999-99999-99999-99999"
    assert decode_groups(token) == bytes([0xFF] * 15 + [0xF8])


def test_decode_is_case_insensitive() -> None:
    upper = "CSGO-ANAAA-AAAAA-AAAAA-AAAAA-AAAAD"
    assert decode_groups(upper.lower()) == decode_groups(upper)


def test_decode_ignores_surrounding_whitespace() -> None:
    assert decode_groups(f"  {ALL_ZERO}\n") == bytes(16)


def test_encode_emits_uppercase_groups() -> None:
    assert encode_groups(bytes(16)) == ALL_ZERO
    assert encode_groups(bytes([0xFF] * 15 + [0xF8])) == (
        "CSGO-99999-99999-99999-99999-99999"
    )


def test_encode_inverts_decode() -> None:
    token = "CSGO-AR5AA-AAAAA-AAAAA-AAAAA-AAAHX"
    assert encode_groups(decode_groups(token)) == token


@pytest.mark.parametrize(
    "token",
    [
        "FOO-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA",
        "CSGOAAAAA-AAAAA-AAAAA-AAAAA-AAAAA",
        "",
        "AAAAA-AAAAA-AAAAA-AAAAA-AAAAA",
    ],
)
def test_bad_prefix(token: str) -> None:
    with pytest.raises(FormatError) as info:
        decode_groups(token)
    assert info.value.kind is FormatErrorKind.BAD_PREFIX


@pytest.mark.parametrize(
    "token",
    [
        "CSGO",
        "CSGO-AAAAA-AAAAA-AAAAA-AAAAA",
        "CSGO-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA",
    ],
)
def test_bad_group_count(token: str) -> None:
    with pytest.raises(FormatError) as info:
        decode_groups(token)
    assert info.value.kind is FormatErrorKind.BAD_GROUP_COUNT


def test_bad_group_length() -> None:
    with pytest.raises(FormatError) as info:
        decode_groups("CSGO-AAAA-AAAAA-AAAAA-AAAAA-AAAAA")
    assert info.value.kind is FormatErrorKind.BAD_GROUP_LENGTH


def test_bad_character_reports_char_and_position() -> None:
    with pytest.raises(BadCharacter) as info:
        decode_groups("CSGO-AAAA0-AAAAA-AAAAA-AAAAA-AAAAA")
    assert info.value.kind is FormatErrorKind.BAD_CHARACTER
    assert info.value.char == "0"
    assert info.value.position == 4


def test_bad_character_position_counts_across_groups() -> None:
    with pytest.raises(BadCharacter) as info:
        decode_groups("CSGO-AAAAA-AAIAA-AAAAA-AAAAA-AAAAA")
    assert info.value.char == "I"
    assert info.value.position == 7


def test_non_ascii_letter_is_a_bad_character() -> None:
    # U+017F uppercases to "S" under Unicode case mapping.
    with pytest.raises(BadCharacter) as info:
        decode_groups("CSGO-ſAAAA-AAAAA-AAAAA-AAAAA-AAAAA")
    assert info.value.char == "ſ"
    assert info.value.position == 0


def test_non_ascii_prefix_is_rejected() -> None:
    with pytest.raises(FormatError) as info:
        decode_groups("CſGO-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA")
    assert info.value.kind is FormatErrorKind.BAD_PREFIX


def test_mixed_case_prefix_is_accepted() -> None:
    assert decode_groups("CsGo-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA") == bytes(16)
