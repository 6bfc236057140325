"""Models for recognition results."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class ColorSignature:
    """Mean red, green and blue intensities of an image."""

    r: int
    g: int
    b: int


class RecognitionResult(BaseModel):
    """Outcome of a single food recognition."""

    model_config = ConfigDict(frozen=True)

    success: bool
    food_key: str | None = None
    display_name: str | None = None
    calories: float | None = Field(default=None, ge=0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    source: str | None = None
    error: str | None = None
