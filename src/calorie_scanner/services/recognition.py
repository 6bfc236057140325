"""Cascading food recognition."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from calorie_scanner.adapters.recognition_client import RecognitionApi
from calorie_scanner.domain.errors import RecognitionUnavailableError
from calorie_scanner.domain.images import PixelBuffer, ScanImage
from calorie_scanner.domain.recognition import RecognitionResult
from calorie_scanner.services.catalog import FoodCatalog
from calorie_scanner.services.classifier import HeuristicClassifier
from calorie_scanner.services.color_profile import ColorProfiler
from calorie_scanner.services.imaging import prepare_scan_image

LOCAL_CONFIDENCE = 0.6
REMOTE_DEFAULT_CONFIDENCE = 0.8
UNKNOWN_FOOD = "Unknown Food"

_logger = logging.getLogger(__name__)


class RecognitionStrategy(Protocol):
    """A single recognizer in the cascade."""

    name: str

    async def recognize(self, scan: ScanImage) -> RecognitionResult:
        """Return a result or raise RecognitionUnavailableError."""


@dataclass
class RemoteRecognitionClient(RecognitionStrategy):
    """Recognizer backed by an optional remote HTTP service.

    With no ``api`` the client is unconfigured and reports itself unavailable
    without touching the network. Any failure of the call, timeouts included,
    is reported as unavailable with the original exception attached. Nothing
    is retried.
    """

    api: RecognitionApi | None
    catalog: FoodCatalog
    timeout_seconds: float | None = None
    name: str = "remote"

    @property
    def configured(self) -> bool:
        """Whether a remote endpoint is wired in."""
        return self.api is not None

    async def recognize(self, scan: ScanImage) -> RecognitionResult:
        """Send the scan to the remote service and normalize its answer."""
        if self.api is None:
            raise RecognitionUnavailableError(
                "Remote recognition is not configured", provider=self.name
            )
        try:
            async with asyncio.timeout(self.timeout_seconds):
                payload = await self.api.recognize(scan.content, scan.content_type)
            return self._to_result(payload)
        except TimeoutError as exc:
            raise RecognitionUnavailableError(
                f"Remote recognition timed out after {self.timeout_seconds}s",
                provider=self.name,
                cause=exc,
            ) from exc
        except Exception as exc:
            raise RecognitionUnavailableError(
                "Remote recognition failed "
                f"(status={_status_code_from_exception(exc)}): {exc}",
                provider=self.name,
                cause=exc,
            ) from exc

    def _to_result(self, payload: dict[str, object]) -> RecognitionResult:
        """Map a loosely shaped remote envelope onto a recognition result."""
        food = str(payload.get("food") or payload.get("name") or UNKNOWN_FOOD)
        calories = payload.get("calories") or payload.get("estimatedCalories") or 0
        confidence = (
            payload.get("confidence")
            or payload.get("score")
            or REMOTE_DEFAULT_CONFIDENCE
        )
        record = self.catalog.find_in_text(food)
        return RecognitionResult(
            success=True,
            food_key=record.key if record else None,
            display_name=food,
            calories=calories,
            confidence=confidence,
            source=self.name,
        )


@dataclass
class LocalColorStrategy(RecognitionStrategy):
    """Always-available recognizer using the average image color."""

    classifier: HeuristicClassifier
    profiler: ColorProfiler = field(default_factory=ColorProfiler)
    confidence: float = LOCAL_CONFIDENCE
    name: str = "local"

    async def recognize(self, scan: ScanImage) -> RecognitionResult:
        """Classify the scan by its color signature."""
        signature = self.profiler.profile(scan.pixels)
        record = self.classifier.classify(signature)
        return RecognitionResult(
            success=True,
            food_key=record.key,
            display_name=record.display_name,
            calories=record.calories_per_100g,
            confidence=self.confidence,
            source=self.name,
        )


@dataclass
class RecognitionPipeline:
    """Tries each strategy in order until one produces a result."""

    strategies: Sequence[RecognitionStrategy]

    async def recognize_food_from_image(
        self, image: bytes | PixelBuffer
    ) -> RecognitionResult:
        """Recognize the food in an encoded image or a raw RGBA buffer.

        Raises InvalidImageError when the input cannot be decoded. Every other
        problem is absorbed by moving on to the next strategy.
        """
        scan = await prepare_scan_image(image)
        for strategy in self.strategies:
            try:
                return await strategy.recognize(scan)
            except RecognitionUnavailableError as exc:
                _logger.warning(
                    "Recognition strategy %s unavailable: %s",
                    strategy.name,
                    exc.message,
                )
        return RecognitionResult(
            success=False,
            confidence=0.0,
            error="No recognition strategy produced a result",
        )


def build_pipeline(
    catalog: FoodCatalog,
    api: RecognitionApi | None = None,
    timeout_seconds: float | None = None,
) -> RecognitionPipeline:
    """Build the remote-then-local cascade, skipping remote when unconfigured."""
    strategies: list[RecognitionStrategy] = []
    if api is not None:
        strategies.append(
            RemoteRecognitionClient(
                api=api, catalog=catalog, timeout_seconds=timeout_seconds
            )
        )
    strategies.append(LocalColorStrategy(classifier=HeuristicClassifier(catalog)))
    return RecognitionPipeline(strategies)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
