from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Mapping

from settings import get_settings

# LogRecord extra -> label shown in the trailing bracket
_CONTEXT_LABELS: Mapping[str, str] = {
    "tick": "tick",
    "seconds": "of",
    "unit": "unit",
    "source_path": "source",
    "log_path": "log",
}

_configured = False


class TerminalFormatter(logging.Formatter):
    """Single-line ``cputemp: level: message [tick 3, source /sys/...]`` output."""

    def __init__(self, prog: str = "cputemp", labels: Mapping[str, str] | None = None) -> None:
        super().__init__(fmt="%(message)s")
        self._prog = prog
        self._labels = dict(labels or _CONTEXT_LABELS)

    def format(self, record: logging.LogRecord) -> str:
        message = f"{self._prog}: {record.levelname.lower()}: {super().format(record)}"
        context = [
            f"{label} {getattr(record, key)}"
            for key, label in self._labels.items()
            if getattr(record, key, None) is not None
        ]
        if context:
            message = f"{message} [{', '.join(context)}]"
        return message


def resolve_level(verbosity: int = 0) -> str:
    """``--verbose`` raises the level to INFO, twice to DEBUG; otherwise LOG_LEVEL applies."""
    if verbosity >= 2:
        return "DEBUG"
    if verbosity == 1:
        return "INFO"
    return get_settings().log_level


def configure_logging(verbosity: int = 0) -> None:
    global _configured
    log_level = resolve_level(verbosity)
    if _configured:
        logging.getLogger().setLevel(log_level)
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"terminal": {"()": "logging_config.TerminalFormatter"}},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "terminal",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )

    _configured = True
