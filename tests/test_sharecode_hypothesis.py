# SPDX-License-Identifier: MIT
"""Property-based tests for the share-code codec."""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codec import decode, encode
from constants import ALPHABET
from directives import to_directives
from errors import ShareCodeError
from models import ConfigRecord

TOKEN_RE = re.compile(r"^CSGO(-[A-HJ-NP-Z2-9]{5}){5}$")

records = st.builds(
    ConfigRecord,
    gap=st.integers(-128, 127).map(lambda raw: raw / 10),
    outline=st.integers(0, 15),
    thickness=st.integers(0, 255).map(lambda raw: raw / 10),
    length=st.integers(0, 255).map(lambda raw: raw / 10),
    red=st.integers(0, 255),
    green=st.integers(0, 255),
    blue=st.integers(0, 255),
    alpha=st.integers(0, 255),
    color_index=st.integers(0, 5),
    style=st.integers(0, 5),
    center_dot_enabled=st.booleans(),
    outline_enabled=st.booleans(),
    alpha_enabled=st.booleans(),
    fixed_gap_enabled=st.booleans(),
)


@given(records)
def test_round_trip(record: ConfigRecord) -> None:
    """Encoding then decoding returns an equal record."""
    token = encode(record)
    assert TOKEN_RE.match(token)
    assert decode(token) == record


@given(records)
def test_directives_are_deterministic(record: ConfigRecord) -> None:
    first = to_directives(record)
    assert first == to_directives(record)
    assert len(first) == (13 if record.color_index == 5 else 10)


@given(records, st.integers(0, 24), st.sampled_from(ALPHABET))
def test_single_character_change_is_rejected(
    record: ConfigRecord, position: int, replacement: str
) -> None:
    """Changing any one data character never yields a valid token."""
    token = encode(record)
    data = list(token.replace("-", "")[4:])
    if data[position] == replacement:
        replacement = ALPHABET[(ALPHABET.index(replacement) + 1) % len(ALPHABET)]
    data[position] = replacement
    groups = ["".join(data[i : i + 5]) for i in range(0, 25, 5)]
    with pytest.raises(ShareCodeError):
        decode("-".join(["CSGO", *groups]))
