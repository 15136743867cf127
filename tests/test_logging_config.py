import logging

import pytest

from logging_config import TerminalFormatter, resolve_level
from settings import get_settings


def _record(level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("services.sampler", level, __file__, 1, "Sampling started", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_labelled_context() -> None:
    formatter = TerminalFormatter()

    message = formatter.format(_record(source_path="/sys/temp", tick=3, seconds=None, other="x"))

    assert message == "cputemp: info: Sampling started [tick 3, source /sys/temp]"


def test_formatter_without_context() -> None:
    formatter = TerminalFormatter(prog="cpumon", labels={"unit": "unit"})

    assert formatter.format(_record(logging.WARNING, tick=2)) == "cpumon: warning: Sampling started"


@pytest.mark.parametrize("verbosity, expected", [(0, "WARNING"), (1, "INFO"), (2, "DEBUG"), (5, "DEBUG")])
def test_verbosity_selects_level(verbosity: int, expected: str) -> None:
    assert resolve_level(verbosity) == expected


def test_quiet_level_follows_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    get_settings.cache_clear()

    assert resolve_level(0) == "ERROR"
    assert resolve_level(1) == "INFO"
