"""Running statistics for temperature samples."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from models.records import TemperatureUnit
from models.schemas import SessionSummary


@dataclass
class RunningStatistics:
    """Sum, count and extremes updated once per sample."""

    total: float = 0.0
    count: int = 0
    minimum: float = math.inf
    maximum: float = -math.inf

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        if value < self.minimum:
            self.minimum = value
        if value > self.maximum:
            self.maximum = value

    @property
    def average(self) -> float | None:
        if not self.count:
            return None
        return self.total / self.count

    def summarize(self, started_at: datetime, unit: TemperatureUnit) -> SessionSummary:
        """Freeze the statistics into a summary; requires at least one sample."""
        average = self.average
        if average is None:
            raise ValueError("Cannot summarize a session without samples.")
        return SessionSummary(
            started_at=started_at,
            seconds=self.count,
            highest=self.maximum,
            lowest=self.minimum,
            average=average,
            unit=unit,
        )
