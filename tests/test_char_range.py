from __future__ import annotations

import pytest

from semstring.char_range import CharRange, next_char, prev_char
from semstring.errors import InvalidCharRangeError


def test_prev_char():
    assert prev_char("B") == "A"


def test_next_char():
    assert next_char("A") == "B"


def test_surrogates_are_skipped():
    assert next_char(chr(0xD7FF)) == chr(0xE000)
    assert prev_char(chr(0xE000)) == chr(0xD7FF)
    span = CharRange(chr(0xD7FE), chr(0xE001), inclusive=True)
    assert [ord(c) for c in span] == [0xD7FE, 0xD7FF, 0xE000, 0xE001]
    assert len(span) == 4


def test_no_char_outside_unicode():
    with pytest.raises(InvalidCharRangeError):
        prev_char("\x00")
    with pytest.raises(InvalidCharRangeError):
        next_char("\U0010ffff")


def test_a_to_e_exclusive():
    assert list(CharRange("A", "E")) == ["A", "B", "C", "D"]


def test_a_to_e_inclusive():
    assert list(CharRange("A", "E", inclusive=True)) == ["A", "B", "C", "D", "E"]


def test_e_to_a():
    assert list(reversed(CharRange("A", "E", inclusive=True))) == ["E", "D", "C", "B", "A"]


def test_empty_ranges():
    assert list(CharRange("A", "A")) == []
    assert len(CharRange("A", "A")) == 0
    assert list(CharRange("\x00", "\x00")) == []
    assert list(CharRange("E", "A", inclusive=True)) == []


def test_iterating_twice_restarts():
    r = CharRange("a", "c", inclusive=True)
    assert list(r) == list(r) == ["a", "b", "c"]
    assert len(r) == 3


def test_endpoints_must_be_single_characters():
    with pytest.raises(InvalidCharRangeError, match="single character"):
        CharRange("ab", "c")
    with pytest.raises(InvalidCharRangeError):
        CharRange("a", "")
