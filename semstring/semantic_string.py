from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from semstring.parts import Part, compare_parts, part_from_run
from semstring.tokenizer import iter_runs

logger = logging.getLogger(__name__)


def utf8_length(raw: str) -> int:
    """Byte length of *raw* in UTF-8.

    Surrogates from os.fsdecode() count as the single raw byte they stand
    for; any other lone surrogate counts as its three-byte encoding.
    """
    try:
        return len(raw.encode("utf-8", "surrogateescape"))
    except UnicodeEncodeError:
        return len(raw.encode("utf-8", "surrogatepass"))


@dataclass(frozen=True, slots=True, eq=False)
class SemanticString:
    """A string parsed into text and number parts for natural ordering.

    Parts are computed once, at construction. Instances never change after
    that, so they are safe to share between threads and to use as sort keys.

    Ordering is length first: the string with fewer UTF-8 bytes is smaller,
    whatever its content ("item2" < "item11"). Only strings of equal byte
    length are compared part by part ("foo2bar" < "foo11bar"). Equality and
    hashing use the raw string only.
    """

    raw: str
    parts: tuple[Part, ...] = field(init=False, repr=False)
    byte_length: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            raise TypeError(f"expected str, got {type(self.raw).__name__}")
        parts = tuple(part_from_run(self.raw, run) for run in iter_runs(self.raw))
        object.__setattr__(self, "parts", parts)
        object.__setattr__(self, "byte_length", utf8_length(self.raw))

    @classmethod
    def parse(cls, raw: str) -> "SemanticString":
        return cls(raw)

    def compare(self, other: "SemanticString") -> int:
        if self.byte_length != other.byte_length:
            return -1 if self.byte_length < other.byte_length else 1
        # zip() stops at the shorter sequence; a common prefix counts as equal.
        for a, b in zip(self.parts, other.parts):
            c = compare_parts(a, b)
            if c:
                return c
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticString):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticString):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticString):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticString):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticString):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __str__(self) -> str:
        return self.raw

    def __len__(self) -> int:
        return len(self.raw)


def semantic_key(raw: str) -> SemanticString:
    return SemanticString(raw)


def compare_strings(a: str, b: str) -> int:
    return SemanticString(a).compare(SemanticString(b))


def sort_semantic(items: Iterable[str], *, reverse: bool = False) -> list[str]:
    keyed = [SemanticString(s) for s in items]
    logger.debug("sorting %d strings", len(keyed))
    keyed.sort(reverse=reverse)
    return [k.raw for k in keyed]
