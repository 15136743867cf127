"""Pydantic schemas for finished monitoring sessions."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from models.records import TemperatureUnit


class SessionSummary(BaseModel):
    """Statistics for one completed sampling run."""

    started_at: datetime
    seconds: int = Field(..., ge=1, description="Number of samples taken, one per second.")
    highest: float
    lowest: float
    average: float
    unit: TemperatureUnit
