"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_scanner.adapters.recognition_client import HttpxRecognitionApi
from calorie_scanner.config import Settings, is_endpoint_configured
from calorie_scanner.services.calories import CalorieEstimator
from calorie_scanner.services.catalog import FoodCatalog
from calorie_scanner.services.recognition import RecognitionPipeline, build_pipeline
from calorie_scanner.services.scans import ScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    recognition_pipeline: RecognitionPipeline
    calorie_estimator: CalorieEstimator
    scan_service: ScanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = FoodCatalog.default()
    recognition_api: HttpxRecognitionApi | None = None
    if is_endpoint_configured(resolved_settings.recognition_endpoint):
        recognition_api = HttpxRecognitionApi.create(
            endpoint=resolved_settings.recognition_endpoint,
            api_key=resolved_settings.recognition_api_key,
            timeout_seconds=resolved_settings.recognition_timeout_seconds,
        )
    pipeline = build_pipeline(
        catalog,
        api=recognition_api,
        timeout_seconds=resolved_settings.recognition_timeout_seconds,
    )
    estimator = CalorieEstimator(catalog)
    scan_service = ScanService(
        pipeline=pipeline,
        estimator=estimator,
        default_portion_grams=resolved_settings.default_portion_grams,
    )

    async def close_resources() -> None:
        if recognition_api is not None:
            await recognition_api.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        recognition_pipeline=pipeline,
        calorie_estimator=estimator,
        scan_service=scan_service,
        close_resources=close_resources,
    )
