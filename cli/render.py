from __future__ import annotations

from typing import Iterable

import typer

from models.records import TemperatureUnit
from models.schemas import SessionSummary
from services.aggregator import RunningStatistics

VERSION = "0.1.0"


def render_version() -> None:
    typer.echo(f"cputemp v{VERSION}")


def render_missing_source(candidates: Iterable[object]) -> None:
    typer.secho(
        "Can not find a valid data source in /sys or /proc. Possible sources:",
        fg=typer.colors.RED,
        err=True,
    )
    for candidate in candidates:
        typer.echo(f"\t{candidate}", err=True)


def render_sample(unit: TemperatureUnit, tick: int, value: float, stats: RunningStatistics) -> None:
    typer.echo(
        f"CPU Temperature: {value:.2f} {unit.value} "
        f"(average {stats.average:.2f} {unit.value}, time running: {tick} secs)"
    )


def render_summary(summary: SessionSummary) -> None:
    unit = summary.unit.value
    typer.echo()
    typer.echo(f"Highest recorded temperature was {summary.highest:.2f} degrees {unit}.")
    typer.echo(f"Lowest recorded temperature was {summary.lowest:.2f} degrees {unit}.")
    typer.echo(f"Average recorded temperature was {summary.average:.2f} degrees {unit}.")
    typer.echo()


def render_average(average: float, unit: TemperatureUnit) -> None:
    typer.echo(f"Average temperature was {average:.2f} degrees {unit.value}.")
