from __future__ import annotations

import logging
from collections.abc import Iterable

from semstring.schemas import SortOptions
from semstring.semantic_string import SemanticString

logger = logging.getLogger(__name__)


def sort_key_for(line: str, options: SortOptions) -> str:
    if options.field is None:
        return line
    fields = line.split(options.separator) if options.separator is not None else line.split()
    if options.field > len(fields):
        return ""
    return fields[options.field - 1]


def sort_lines(lines: Iterable[str], options: SortOptions | None = None) -> list[str]:
    """Sort *lines* by their semantic keys.

    The sort is stable. With ``unique`` only the first of identical lines is
    kept. Raises ``NumericOverflowError`` when a key holds a number wider
    than 64 bits.
    """
    options = options or SortOptions()
    rows: list[tuple[SemanticString, str]] = []
    seen: set[str] = set()
    for line in lines:
        if options.ignore_blank and not line.strip():
            continue
        if options.unique:
            if line in seen:
                continue
            seen.add(line)
        rows.append((SemanticString(sort_key_for(line, options)), line))

    logger.debug("sorting %d lines (reverse=%s, field=%s)", len(rows), options.reverse, options.field)
    rows.sort(key=lambda row: row[0], reverse=options.reverse)
    return [line for _key, line in rows]
