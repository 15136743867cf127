"""Domain models shared across services."""

from __future__ import annotations

from enum import Enum


class TemperatureUnit(str, Enum):
    """Display units supported by the monitor."""

    celsius = "Celsius"
    fahrenheit = "Fahrenheit"
    kelvin = "Kelvin"

    @classmethod
    def from_choice(cls, choice: str) -> "TemperatureUnit":
        """Resolve a single-letter prompt answer (c, f or k)."""
        key = choice.strip()[:1].lower()
        for unit in cls:
            if unit.value[0].lower() == key:
                return unit
        raise ValueError(f"Unknown temperature unit {choice!r}")


def convert(celsius: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.fahrenheit:
        return 1.8 * celsius + 32.0
    if unit is TemperatureUnit.kelvin:
        return celsius + 273.15
    return celsius
