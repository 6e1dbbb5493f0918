from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class RunKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True, slots=True)
class Run:
    kind: RunKind
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice_of(self, raw: str) -> str:
        return raw[self.start : self.end]


def is_ascii_digit(ch: str) -> bool:
    # Non-ASCII numerals ("٣", "３", "²") are text.
    return ch.isascii() and ch.isdigit()


def iter_runs(raw: str) -> Iterator[Run]:
    """Yield the maximal digit / non-digit runs of *raw*, left to right.

    Runs are half-open character offsets. They alternate strictly and cover
    the whole string, so joining ``raw[r.start:r.end]`` gives back ``raw``.
    """
    start = 0
    current: bool | None = None
    for i, ch in enumerate(raw):
        is_num = is_ascii_digit(ch)
        if current is None:
            current = is_num
            continue
        if is_num != current:
            yield Run(kind=RunKind.NUMBER if current else RunKind.TEXT, start=start, end=i)
            start = i
            current = is_num
    if current is not None:
        yield Run(kind=RunKind.NUMBER if current else RunKind.TEXT, start=start, end=len(raw))


def tokenize(raw: str) -> list[Run]:
    return list(iter_runs(raw))
