from __future__ import annotations

import pytest

from semstring.errors import NumericOverflowError
from semstring.schemas import SortOptions
from semstring.sorting import sort_key_for, sort_lines


def test_sort_lines_whole_line() -> None:
    assert sort_lines(["file10", "file2", "file1"]) == ["file1", "file2", "file10"]


def test_sort_lines_reverse() -> None:
    assert sort_lines(["2", "10", "1"], SortOptions(reverse=True)) == ["10", "2", "1"]


def test_sort_lines_by_field() -> None:
    lines = ["b 10", "a 2", "c 1"]
    assert sort_lines(lines, SortOptions(field=2)) == ["c 1", "a 2", "b 10"]


def test_sort_lines_by_field_with_separator() -> None:
    lines = ["a,10", "b,9"]
    assert sort_lines(lines, SortOptions(field=2, separator=",")) == ["b,9", "a,10"]


def test_missing_field_sorts_as_empty_key() -> None:
    assert sort_key_for("only", SortOptions(field=3)) == ""
    assert sort_lines(["x 10", "short"], SortOptions(field=2)) == ["short", "x 10"]


def test_sort_lines_unique_keeps_first() -> None:
    assert sort_lines(["y", "x", "y", "x"], SortOptions(unique=True)) == ["x", "y"]


def test_sort_lines_ignore_blank() -> None:
    assert sort_lines(["b", "", "  ", "a"], SortOptions(ignore_blank=True)) == ["a", "b"]


def test_sort_lines_is_stable_for_equal_keys() -> None:
    lines = ["k 1 first", "k 1 second"]
    assert sort_lines(lines, SortOptions(field=2)) == lines


def test_sort_lines_overflow_propagates() -> None:
    with pytest.raises(NumericOverflowError):
        sort_lines(["a", "99999999999999999999999"])
