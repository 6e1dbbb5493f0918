from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def repo_root() -> Path:
    # Project root is the directory that contains the `semstring/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


@dataclass(frozen=True)
class SemstringSettings:
    log_level: str = "WARNING"
    reverse: bool = False
    unique: bool = False
    field_separator: str | None = None


def load_settings() -> SemstringSettings:
    load_env()
    return SemstringSettings(
        log_level=(os.getenv("SEMSTRING_LOG_LEVEL") or "WARNING").strip().upper(),
        reverse=_env_bool("SEMSTRING_REVERSE"),
        unique=_env_bool("SEMSTRING_UNIQUE"),
        field_separator=os.getenv("SEMSTRING_FIELD_SEPARATOR") or None,
    )
