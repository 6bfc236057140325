"""Scan outcome models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ScanOutcome(BaseModel):
    """A recognized food with portion calories, ready to be logged."""

    model_config = ConfigDict(frozen=True)

    success: bool
    food_key: str | None = None
    food: str | None = None
    weight_grams: float | None = Field(default=None, ge=0)
    calories: int | None = Field(default=None, ge=0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    source: str | None = None
    scanned_at: datetime
    date_key: str
    error: str | None = None
