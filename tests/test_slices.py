from __future__ import annotations

from semstring.slices import set_range


def test_range():
    vals = [0] * 5
    set_range(vals, 2, 1, 3)
    assert vals == [0, 2, 2, 0, 0]


def test_whole_sequence_by_default():
    vals = [0] * 3
    set_range(vals, 7)
    assert vals == [7, 7, 7]


def test_negative_and_out_of_range_bounds():
    vals = [0] * 5
    set_range(vals, 1, -2)
    assert vals == [0, 0, 0, 1, 1]
    set_range(vals, 9, 4, 100)
    assert vals == [0, 0, 0, 1, 9]


def test_empty_range_is_a_no_op():
    vals = [1, 2, 3]
    set_range(vals, 0, 2, 2)
    assert vals == [1, 2, 3]
