from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (
        "SEMSTRING_LOG_LEVEL",
        "SEMSTRING_REVERSE",
        "SEMSTRING_UNIQUE",
        "SEMSTRING_FIELD_SEPARATOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
