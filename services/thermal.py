"""Discovery and reading of the kernel thermal-zone file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from models.records import TemperatureUnit, convert
from settings import get_settings

logger = logging.getLogger(__name__)

MAX_LINE_BYTES = 32
_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


class ThermalReadError(RuntimeError):
    """Raised when the thermal source cannot be opened, read or parsed."""


def candidate_paths(candidates: Optional[Iterable[str | Path]] = None) -> list[Path]:
    if candidates is None:
        candidates = get_settings().thermal_paths
    return [Path(candidate) for candidate in candidates]


def locate_thermal_source(candidates: Optional[Iterable[str | Path]] = None) -> Optional[Path]:
    """Return the first candidate that exists, in priority order."""
    for path in candidate_paths(candidates):
        if path.exists():
            logger.debug("Using thermal source", extra={"source_path": str(path)})
            return path
    return None


def read_celsius(path: Path) -> float:
    """Read millidegrees Celsius from the first line of ``path``."""
    try:
        with path.open("rb") as handle:
            line = handle.readline(MAX_LINE_BYTES)
    except OSError as exc:
        raise ThermalReadError(f"Error reading temperature data from '{path}': {exc}") from exc

    if not line:
        raise ThermalReadError(f"Error reading temperature data from '{path}': file is empty")

    match = _LEADING_INT.match(line)
    if match is None:
        raise ThermalReadError(
            f"Error reading temperature data from '{path}': unexpected content {line!r}"
        )
    return int(match.group(1)) / 1000


def read_temperature(path: Path, unit: TemperatureUnit) -> float:
    return convert(read_celsius(path), unit)
