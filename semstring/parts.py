from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from semstring.errors import NumericOverflowError
from semstring.tokenizer import Run, RunKind

U64_MAX = 2**64 - 1
_U64_DIGITS = len(str(U64_MAX))


@dataclass(frozen=True, slots=True)
class Text:
    """A run of non-digit characters.

    ``start``/``end`` locate the run in its source string. Parts built by
    hand keep the 0/0 default, meaning they were not cut from a source.
    """

    text: str
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class Number:
    """A run of ASCII digits and its value. Offsets as for ``Text``."""

    value: int
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)


Part = Union[Text, Number]


def parse_number(digits: str, start: int = 0, end: int | None = None) -> Number:
    if end is None:
        end = start + len(digits)
    if not digits or not all(ch.isascii() and ch.isdigit() for ch in digits):
        # The tokenizer only hands over ASCII digit runs.
        raise ValueError(f"not an ASCII digit run: {digits!r}")
    # Width check first: very long runs never reach int().
    significant = digits.lstrip("0")
    if len(significant) > _U64_DIGITS or (significant and int(significant) > U64_MAX):
        raise NumericOverflowError(digits, start=start, end=end)
    return Number(value=int(significant or "0"), start=start, end=end)


def part_from_run(raw: str, run: Run) -> Part:
    chunk = run.slice_of(raw)
    if run.kind == RunKind.NUMBER:
        return parse_number(chunk, run.start, run.end)
    return Text(text=chunk, start=run.start, end=run.end)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_parts(a: Part, b: Part) -> int:
    """Order two parts found at the same position.

    Same variants compare by text (codepoint order) or by value. A ``Text``
    always sorts before a ``Number``.
    """
    if isinstance(a, Text):
        if isinstance(b, Text):
            return _cmp(a.text, b.text)
        return -1
    if isinstance(b, Number):
        return _cmp(a.value, b.value)
    return 1
