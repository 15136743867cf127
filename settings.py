from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


DEFAULT_THERMAL_PATHS: Tuple[str, ...] = (
    "/sys/devices/LNXSYSTM:00/LNXTHERM:00/LNXTHERM:01/thermal_zone/temp",
    "/sys/bus/acpi/devices/LNXTHERM:00/thermal_zone/temp",
    "/proc/acpi/thermal_zone/THM0/temperature",
    "/proc/acpi/thermal_zone/THRM/temperature",
    "/proc/acpi/thermal_zone/THR1/temperature",
)
DEFAULT_LOG_FILE = "/var/log/cputemp.log"
DEFAULT_SECONDS = 5

_THERMAL_PATHS_ENV = "CPUTEMP_THERMAL_PATHS"
_LOG_FILE_ENV = "CPUTEMP_LOG_FILE"
_DEFAULT_SECONDS_ENV = "CPUTEMP_DEFAULT_SECONDS"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    thermal_paths: Tuple[str, ...]
    log_file: str
    default_seconds: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_paths_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    paths = tuple(part.strip() for part in value.split(os.pathsep) if part.strip())
    return paths or default


def _read_seconds(default: int) -> int:
    value = os.getenv(_DEFAULT_SECONDS_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        thermal_paths=_read_paths_env(_THERMAL_PATHS_ENV, DEFAULT_THERMAL_PATHS),
        log_file=_read_str_env(_LOG_FILE_ENV, DEFAULT_LOG_FILE),
        default_seconds=_read_seconds(DEFAULT_SECONDS),
        log_level=_read_log_level("WARNING"),
    )
