from __future__ import annotations

from collections.abc import MutableSequence
from typing import TypeVar

T = TypeVar("T")


def set_range(seq: MutableSequence[T], value: T, start: int | None = None, stop: int | None = None) -> None:
    """Assign *value* to every position of ``seq[start:stop]``, in place."""
    for i in range(*slice(start, stop).indices(len(seq))):
        seq[i] = value
