from __future__ import annotations

import pytest

from semstring.schemas import LogLevel, SortOptions


def test_sort_options_defaults() -> None:
    opts = SortOptions()
    assert opts.reverse is False
    assert opts.unique is False
    assert opts.field is None
    assert opts.separator is None


def test_sort_options_field_is_one_based() -> None:
    assert SortOptions(field=1).field == 1
    with pytest.raises(ValueError):
        SortOptions(field=0)


def test_sort_options_rejects_empty_separator() -> None:
    with pytest.raises(ValueError, match="separator must be a non-empty string"):
        SortOptions(separator="")


def test_log_level_coerce() -> None:
    assert LogLevel.coerce("debug") == LogLevel.DEBUG
    assert LogLevel.coerce(" warn ") == LogLevel.WARNING
    assert LogLevel.coerce(LogLevel.ERROR) == LogLevel.ERROR
    with pytest.raises(ValueError, match="unknown log level"):
        LogLevel.coerce("loud")
