from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def auto_map(iterable: Iterable[A], into: Callable[[A], B]) -> Iterator[B]:
    """Lazily convert every element with *into* (usually a type)."""
    for item in iterable:
        yield into(item)


def auto_map_collect(
    iterable: Iterable[A],
    into: Callable[[A], B],
    collect: Callable[[Iterator[B]], Any] = list,
) -> Any:
    return collect(auto_map(iterable, into))


def interleave(a: Iterable[V], b: Iterable[V]) -> Iterator[V]:
    """Yield a0, b0, a1, b1, ... until the side whose turn it is runs dry.

    The leftover tail of the other side is dropped.
    """
    turns = (iter(a), iter(b))
    side = 0
    while True:
        try:
            item = next(turns[side])
        except StopIteration:
            return
        yield item
        side ^= 1


def collect_map_vec(pairs: Iterable[tuple[K, V]]) -> dict[K, list[V]]:
    out: dict[K, list[V]] = {}
    for key, value in pairs:
        out.setdefault(key, []).append(value)
    return out


def group_by_key(iterable: Iterable[V], key: Callable[[V], K]) -> dict[K, list[V]]:
    return collect_map_vec((key(v), v) for v in iterable)


def collect_map_vec_by(iterable: Iterable[V], key: Callable[[V], K]) -> dict[K, list[V]]:
    return group_by_key(iterable, key)
