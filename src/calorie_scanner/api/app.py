"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import (
    FastAPI,
    File,
    Form,
    HTTPException,
    Query,
    Request,
    UploadFile,
    status,
)

from calorie_scanner.app_logging import configure_logging
from calorie_scanner.containers import AppContainer
from calorie_scanner.domain.catalog import FoodRecord
from calorie_scanner.domain.errors import InvalidImageError
from calorie_scanner.domain.recognition import RecognitionResult
from calorie_scanner.domain.scans import ScanOutcome


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, object]:
        """Return every catalog food in catalog order."""
        state_container: AppContainer = request.app.state.container
        foods = [_food_payload(food) for food in state_container.catalog.all()]
        return {"foods": foods}

    @app.get("/foods/{key}")
    async def get_food(key: str, request: Request) -> dict[str, object]:
        """Return a single catalog food."""
        state_container: AppContainer = request.app.state.container
        record = state_container.catalog.lookup(key.lower())
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _food_payload(record)

    @app.get("/calories")
    async def estimate_calories(
        request: Request,
        food: str,
        grams: Annotated[float, Query(ge=0, allow_inf_nan=False)] = 100,
    ) -> dict[str, object]:
        """Estimate calories for a named food portion."""
        state_container: AppContainer = request.app.state.container
        calories = state_container.calorie_estimator.estimate(food, grams)
        return {"food": food, "grams": grams, "calories": calories}

    @app.post("/recognitions")
    async def recognize(
        request: Request, image: Annotated[UploadFile, File()]
    ) -> RecognitionResult:
        """Recognize the food in an uploaded photo."""
        state_container: AppContainer = request.app.state.container
        content = await image.read()
        try:
            return await state_container.recognition_pipeline.recognize_food_from_image(
                content
            )
        except InvalidImageError as exc:
            logger.info("Rejected upload %s: %s", image.filename, exc)
            raise HTTPException(
                status_code=422, detail=str(exc)
            ) from exc

    @app.post("/scans")
    async def scan(
        request: Request,
        image: Annotated[UploadFile, File()],
        grams: Annotated[float | None, Form(ge=0, allow_inf_nan=False)] = None,
    ) -> ScanOutcome:
        """Recognize an uploaded photo and estimate the portion calories."""
        state_container: AppContainer = request.app.state.container
        content = await image.read()
        return await state_container.scan_service.scan(content, weight_grams=grams)

    return app


def _food_payload(record: FoodRecord) -> dict[str, object]:
    return {
        "key": record.key,
        "display_name": record.display_name,
        "calories_per_100g": record.calories_per_100g,
    }
