from __future__ import annotations

from semstring.errors import (
    InvalidCharRangeError,
    InvalidTimeSpanError,
    NumericOverflowError,
    SemanticStringError,
)
from semstring.parts import U64_MAX, Number, Part, Text, compare_parts
from semstring.semantic_string import (
    SemanticString,
    compare_strings,
    semantic_key,
    sort_semantic,
)
from semstring.tokenizer import Run, RunKind, is_ascii_digit, tokenize

__all__ = [
    "__version__",
    # Core
    "SemanticString",
    "semantic_key",
    "sort_semantic",
    "compare_strings",
    # Parts
    "Part",
    "Text",
    "Number",
    "U64_MAX",
    "compare_parts",
    # Tokenizer
    "Run",
    "RunKind",
    "tokenize",
    "is_ascii_digit",
    # Errors
    "SemanticStringError",
    "NumericOverflowError",
    "InvalidTimeSpanError",
    "InvalidCharRangeError",
]

__version__ = "0.1.0"
