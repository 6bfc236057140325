"""Tests for container wiring."""

import asyncio

from calorie_scanner.config import Settings
from calorie_scanner.containers import build_container
from calorie_scanner.services.recognition import RemoteRecognitionClient


def test_build_container_without_remote(settings: Settings) -> None:
    container = build_container(settings)

    assert len(container.recognition_pipeline.strategies) == 1
    assert container.scan_service.default_portion_grams == 100
    asyncio.run(container.close_resources())


def test_build_container_with_remote() -> None:
    settings = Settings(
        recognition_endpoint="https://recognizer.test/v1/recognize",
        recognition_api_key="key",
        recognition_timeout_seconds=2.5,
    )

    container = build_container(settings)

    strategies = container.recognition_pipeline.strategies
    assert len(strategies) == 2
    remote = strategies[0]
    assert isinstance(remote, RemoteRecognitionClient)
    assert remote.configured is True
    assert remote.timeout_seconds == 2.5
    assert remote.api.timeout_seconds == 2.5
    asyncio.run(container.close_resources())
