from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch) -> None:
    for name in ("CPUTEMP_THERMAL_PATHS", "CPUTEMP_LOG_FILE", "CPUTEMP_DEFAULT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def thermal_file(tmp_path: Path) -> Callable[[str], Path]:
    def factory(contents: str, name: str = "temp") -> Path:
        path = tmp_path / name
        path.write_text(contents)
        return path

    return factory
