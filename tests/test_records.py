from __future__ import annotations

import pytest

from models.records import TemperatureUnit, convert


@pytest.mark.parametrize("celsius", [-40.0, 0.0, 21.5, 100.0])
def test_celsius_is_unchanged(celsius: float) -> None:
    assert convert(celsius, TemperatureUnit.celsius) == celsius


def test_freezing_point_in_other_units() -> None:
    assert convert(0, TemperatureUnit.fahrenheit) == 32
    assert convert(0, TemperatureUnit.kelvin) == 273.15


def test_fahrenheit_and_kelvin_scale() -> None:
    assert convert(100, TemperatureUnit.fahrenheit) == pytest.approx(212.0)
    assert convert(-40, TemperatureUnit.fahrenheit) == pytest.approx(-40.0)
    assert convert(45, TemperatureUnit.kelvin) == pytest.approx(318.15)


@pytest.mark.parametrize(
    "answer, expected",
    [
        ("c", TemperatureUnit.celsius),
        ("F", TemperatureUnit.fahrenheit),
        (" k\n", TemperatureUnit.kelvin),
        ("kelvin", TemperatureUnit.kelvin),
    ],
)
def test_unit_from_prompt_choice(answer: str, expected: TemperatureUnit) -> None:
    assert TemperatureUnit.from_choice(answer) is expected


@pytest.mark.parametrize("answer", ["", "x", "r"])
def test_unknown_prompt_choice_is_rejected(answer: str) -> None:
    with pytest.raises(ValueError):
        TemperatureUnit.from_choice(answer)
