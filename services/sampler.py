"""Fixed-interval sampling loop for the thermal source."""

from __future__ import annotations

import logging
import signal
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from models.records import TemperatureUnit
from services.aggregator import RunningStatistics
from services.thermal import read_temperature
from settings import get_settings

logger = logging.getLogger(__name__)

Reader = Callable[[Path, TemperatureUnit], float]
SampleCallback = Callable[[int, float, RunningStatistics], None]


class CancellationToken:
    """Flag set from a signal handler and polled between ticks."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Turn SIGINT into a cancellation request for the duration of the block."""

    def _handle(signum, _frame) -> None:
        logger.debug("Interrupt received, stopping after current tick")
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handle)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


def normalize_seconds(seconds: Optional[int], default: Optional[int] = None) -> int:
    if default is None:
        default = get_settings().default_seconds
    if seconds is None or seconds < 1:
        return default
    return seconds


class Sampler:
    """Reads one sample per interval and keeps running statistics."""

    def __init__(
        self,
        source: Path,
        unit: TemperatureUnit,
        reader: Reader = read_temperature,
        interval: float = 1.0,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.source = source
        self.unit = unit
        self.reader = reader
        self.interval = interval
        self._sleep = sleep or time.sleep

    def run(
        self,
        seconds: Optional[int],
        token: Optional[CancellationToken] = None,
        on_sample: Optional[SampleCallback] = None,
    ) -> RunningStatistics:
        """Sample until ``seconds`` ticks have run or ``token`` is cancelled.

        ``seconds=None`` samples until cancelled. A failed read propagates and
        the statistics gathered so far are dropped with it.
        """
        token = token or CancellationToken()
        stats = RunningStatistics()
        tick = 0
        logger.info(
            "Sampling started",
            extra={"source_path": str(self.source), "unit": self.unit.value, "seconds": seconds},
        )
        while not token.cancelled:
            if seconds is not None and tick >= seconds:
                break
            value = self.reader(self.source, self.unit)
            stats.add(value)
            tick += 1
            if on_sample is not None:
                on_sample(tick, value, stats)
            self._sleep(self.interval)
        logger.info("Sampling stopped", extra={"tick": tick})
        return stats
