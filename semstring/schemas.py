from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def coerce(cls, v: Any) -> "LogLevel":
        if isinstance(v, cls):
            return v
        if isinstance(v, str):
            key = v.strip().upper()
            if key == "WARN":
                key = "WARNING"
            try:
                return cls(key)
            except ValueError:
                pass
        raise ValueError(f"unknown log level: {v!r}")


class SortOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    reverse: bool = False
    unique: bool = False
    ignore_blank: bool = False
    # 1-based column used as the sort key; whole line when unset.
    field: int | None = Field(default=None, ge=1)
    separator: str | None = None

    @field_validator("separator")
    @classmethod
    def _non_empty_separator(cls, v: str | None) -> str | None:
        if v is not None and v == "":
            raise ValueError("separator must be a non-empty string")
        return v
