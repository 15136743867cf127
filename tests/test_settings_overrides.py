from __future__ import annotations

import os

from settings import DEFAULT_LOG_FILE, DEFAULT_THERMAL_PATHS, get_settings


def test_defaults_without_environment() -> None:
    settings = get_settings()

    assert settings.thermal_paths == DEFAULT_THERMAL_PATHS
    assert settings.log_file == DEFAULT_LOG_FILE
    assert settings.default_seconds == 5
    assert settings.log_level == "WARNING"


def test_environment_overrides_apply(monkeypatch, tmp_path) -> None:
    first = tmp_path / "zone0"
    second = tmp_path / "zone1"
    monkeypatch.setenv("CPUTEMP_THERMAL_PATHS", f"{first}{os.pathsep} {second} {os.pathsep}")
    monkeypatch.setenv("CPUTEMP_LOG_FILE", str(tmp_path / "session.log"))
    monkeypatch.setenv("CPUTEMP_DEFAULT_SECONDS", "12")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.thermal_paths == (str(first), str(second))
    assert settings.log_file == str(tmp_path / "session.log")
    assert settings.default_seconds == 12
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("CPUTEMP_THERMAL_PATHS", f" {os.pathsep} ")
    monkeypatch.setenv("CPUTEMP_LOG_FILE", "   ")
    monkeypatch.setenv("CPUTEMP_DEFAULT_SECONDS", "-4")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.thermal_paths == DEFAULT_THERMAL_PATHS
    assert settings.log_file == DEFAULT_LOG_FILE
    assert settings.default_seconds == 5

    monkeypatch.setenv("CPUTEMP_DEFAULT_SECONDS", "soon")
    get_settings.cache_clear()
    assert get_settings().default_seconds == 5
