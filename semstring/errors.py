from __future__ import annotations


class SemanticStringError(ValueError):
    pass


class NumericOverflowError(SemanticStringError):
    def __init__(self, digits: str, *, start: int | None = None, end: int | None = None) -> None:
        self.digits = digits
        self.start = start
        self.end = end
        prefix = ""
        if start is not None:
            prefix = f"col {start}: "
        super().__init__(prefix + f"number {digits!r} does not fit in an unsigned 64-bit integer")


class InvalidTimeSpanError(SemanticStringError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid timespan: {value!r}")


class InvalidCharRangeError(SemanticStringError):
    pass
