from __future__ import annotations

from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Optional

import typer

from cli.render import (
    render_average,
    render_missing_source,
    render_sample,
    render_summary,
    render_version,
)
from logging_config import configure_logging
from models.records import TemperatureUnit
from services.sampler import CancellationToken, Sampler, cancel_on_interrupt, normalize_seconds
from services.session_log import SessionLog, SessionLogUnavailable
from services.thermal import ThermalReadError, candidate_paths, locate_thermal_source

UNIT_PROMPT = "Set temperature unit: (c)elsius, (f)ahrenheit or (k)elvin"

app = typer.Typer(
    help="Sample the CPU temperature once per second and report highest, lowest and average.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _selected_unit(celsius: int, fahrenheit: int, kelvin: int) -> Optional[TemperatureUnit]:
    # Any second unit flag is a usage error, even a repeat of the same one.
    flags = [
        (celsius, TemperatureUnit.celsius),
        (fahrenheit, TemperatureUnit.fahrenheit),
        (kelvin, TemperatureUnit.kelvin),
    ]
    chosen = [unit for count, unit in flags for _ in range(count)]
    if len(chosen) > 1:
        typer.secho(
            "Multiple temperature units specified. Use only one unit (-C, -F or -K).",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=2)
    return chosen[0] if chosen else None


def _prompt_unit() -> TemperatureUnit:
    while True:
        answer = typer.prompt(UNIT_PROMPT)
        try:
            return TemperatureUnit.from_choice(answer)
        except ValueError:
            continue


def _require_source() -> Path:
    source = locate_thermal_source()
    if source is None:
        render_missing_source(candidate_paths())
        raise typer.Exit(code=1)
    return source


def _run(sampler: Sampler, seconds: Optional[int], **kwargs):
    try:
        return sampler.run(seconds, **kwargs)
    except ThermalReadError as exc:
        typer.secho(f"{exc}. Exiting...", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def run_average(unit: Optional[TemperatureUnit], seconds: Optional[int]) -> None:
    """Sample silently for a bounded time and print only the average."""
    source = _require_source()
    unit = unit or TemperatureUnit.celsius
    sampler = Sampler(source, unit)
    stats = _run(sampler, normalize_seconds(seconds))
    render_average(stats.average, unit)


def run_monitor(unit: Optional[TemperatureUnit], seconds: Optional[int]) -> None:
    """Print every sample, then the session summary, then append it to the log."""
    source = _require_source()
    if unit is None:
        unit = _prompt_unit()
    duration = normalize_seconds(seconds) if seconds is not None else None

    sampler = Sampler(source, unit)
    token = CancellationToken()
    started_at = datetime.now()
    with cancel_on_interrupt(token):
        stats = _run(sampler, duration, token=token, on_sample=partial(render_sample, unit))

    if not stats.count:
        typer.secho("Not enough measurements collected...", fg=typer.colors.RED, err=True)
        return

    summary = stats.summarize(started_at, unit)
    render_summary(summary)
    try:
        SessionLog().append(summary)
    except SessionLogUnavailable as exc:
        typer.secho(str(exc), fg=typer.colors.YELLOW, err=True)
        return
    typer.echo("Log has been updated.")


@app.command()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Output version information and exit.",
    ),
    average: bool = typer.Option(
        False,
        "--average",
        "-a",
        help="Display only the average (use with -s and one of -C, -F or -K).",
    ),
    seconds: Optional[int] = typer.Option(
        None,
        "--seconds",
        "-s",
        help="Run for the given number of seconds (values below 1 fall back to the default of 5).",
    ),
    celsius: int = typer.Option(0, "--celsius", "-C", count=True, help="Display degrees Celsius (default)."),
    fahrenheit: int = typer.Option(0, "--fahrenheit", "-F", count=True, help="Display degrees Fahrenheit."),
    kelvin: int = typer.Option(0, "--kelvin", "-K", count=True, help="Display Kelvin."),
    verbose: int = typer.Option(
        0,
        "--verbose",
        count=True,
        help="Show diagnostic messages on stderr (repeat for debug output).",
    ),
) -> None:
    """Monitor the CPU thermal zone."""
    unit = _selected_unit(celsius, fahrenheit, kelvin)
    render_version()
    if version:
        return
    configure_logging(verbosity=verbose)
    if average:
        run_average(unit, seconds)
    else:
        run_monitor(unit, seconds)
