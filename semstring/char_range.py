from __future__ import annotations

from collections.abc import Iterator

from semstring.errors import InvalidCharRangeError

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _code_point(ch: str) -> int:
    if not isinstance(ch, str) or len(ch) != 1:
        raise InvalidCharRangeError(f"expected a single character, got {ch!r}")
    return ord(ch)


def _step(cp: int, delta: int) -> int:
    cp += delta
    if cp in _SURROGATES:
        cp = _SURROGATES.stop if delta > 0 else _SURROGATES.start - 1
    return cp


def next_char(ch: str) -> str:
    cp = _step(_code_point(ch), 1)
    if cp > _MAX_CODE_POINT:
        raise InvalidCharRangeError(f"no character after {ch!r}")
    return chr(cp)


def prev_char(ch: str) -> str:
    cp = _step(_code_point(ch), -1)
    if cp < 0:
        raise InvalidCharRangeError(f"no character before {ch!r}")
    return chr(cp)


class CharRange:
    """Characters from *start* to *end*, skipping surrogate code points.

    The end is exclusive unless ``inclusive=True``. Iterating twice restarts
    from the beginning; ``reversed()`` walks from the end.
    """

    __slots__ = ("start", "end", "inclusive", "_first", "_last")

    def __init__(self, start: str, end: str, *, inclusive: bool = False) -> None:
        self.start = start
        self.end = end
        self.inclusive = inclusive
        self._first = _code_point(start)
        last = _code_point(end)
        self._last = last if inclusive else _step(last, -1)

    def _code_points(self) -> range:
        return range(self._first, self._last + 1)

    def __iter__(self) -> Iterator[str]:
        for cp in self._code_points():
            if cp not in _SURROGATES:
                yield chr(cp)

    def __reversed__(self) -> Iterator[str]:
        for cp in reversed(self._code_points()):
            if cp not in _SURROGATES:
                yield chr(cp)

    def __len__(self) -> int:
        points = self._code_points()
        if not points:
            return 0
        lo = max(points.start, _SURROGATES.start)
        hi = min(points.stop, _SURROGATES.stop)
        return len(points) - max(0, hi - lo)

    def __repr__(self) -> str:
        return f"CharRange({self.start!r}, {self.end!r}, inclusive={self.inclusive})"
