"""Scan flow combining recognition and portion calories."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from calorie_scanner.domain.errors import InvalidImageError
from calorie_scanner.domain.images import PixelBuffer
from calorie_scanner.domain.recognition import RecognitionResult
from calorie_scanner.domain.scans import ScanOutcome
from calorie_scanner.services.calories import CalorieEstimator
from calorie_scanner.services.recognition import RecognitionPipeline

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ScanService:
    """Turns a captured photo into a loggable food entry."""

    pipeline: RecognitionPipeline
    estimator: CalorieEstimator
    default_portion_grams: float = 100.0
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def scan(
        self, image: bytes | PixelBuffer, weight_grams: float | None = None
    ) -> ScanOutcome:
        """Recognize the food and estimate calories for the portion.

        Invalid images produce an unsuccessful outcome instead of raising.
        """
        scanned_at = self.clock()
        date_key = scanned_at.date().isoformat()
        weight = self.default_portion_grams if weight_grams is None else weight_grams
        try:
            result = await self.pipeline.recognize_food_from_image(image)
        except InvalidImageError as exc:
            _logger.info("Rejected scan image: %s", exc)
            return ScanOutcome(
                success=False,
                scanned_at=scanned_at,
                date_key=date_key,
                error=str(exc),
            )
        if not result.success:
            return ScanOutcome(
                success=False,
                scanned_at=scanned_at,
                date_key=date_key,
                error=result.error or "Failed to recognize food",
            )
        return ScanOutcome(
            success=True,
            food_key=result.food_key,
            food=result.display_name,
            weight_grams=weight,
            calories=self._portion_calories(result, weight),
            confidence=result.confidence,
            source=result.source,
            scanned_at=scanned_at,
            date_key=date_key,
        )

    def _portion_calories(self, result: RecognitionResult, weight: float) -> int:
        """Prefer catalog baselines, then the recognizer's own figure."""
        name = result.food_key or result.display_name or ""
        if self.estimator.catalog.find_in_text(name) is None and result.calories:
            return self.estimator.scale(result.calories, weight)
        return self.estimator.estimate(name, weight)
