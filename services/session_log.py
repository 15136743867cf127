from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from models.schemas import SessionSummary
from settings import get_settings

logger = logging.getLogger(__name__)

SEPARATOR = "---------------"


class SessionLogUnavailable(OSError):
    """The session log is missing or cannot be appended to."""


def format_entry(summary: SessionSummary) -> str:
    unit = summary.unit.value
    return (
        f"Session started at {summary.started_at:%Y-%m-%d %H:%M:%S}: "
        f"ran for {summary.seconds} seconds. "
        f"Highest={summary.highest:.2f} {unit}, "
        f"Lowest={summary.lowest:.2f} {unit}, "
        f"Average={summary.average:.2f} {unit}.\n"
        f"{SEPARATOR}\n"
    )


class SessionLog:
    """Append-only text log of finished sessions. The file must already exist."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path if path is not None else Path(get_settings().log_file)

    def append(self, summary: SessionSummary) -> None:
        if not self.path.is_file():
            raise SessionLogUnavailable(f"Could not locate log file '{self.path}'.")
        entry = format_entry(summary)
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(entry)
        except OSError as exc:
            raise SessionLogUnavailable(f"Can not open log file '{self.path}': {exc}") from exc
        logger.debug("Session appended", extra={"log_path": str(self.path)})
