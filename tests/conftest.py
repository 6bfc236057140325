"""Shared test fixtures."""

import asyncio
import io
import struct
import zlib
from dataclasses import dataclass, field

import pytest
from PIL import Image

from calorie_scanner.adapters.recognition_client import RecognitionApi
from calorie_scanner.config import Settings
from calorie_scanner.containers import AppContainer, build_container
from calorie_scanner.domain.images import PixelBuffer
from calorie_scanner.services.catalog import FoodCatalog


def solid_pixels(
    r: int, g: int, b: int, width: int = 4, height: int = 3, alpha: int = 255
) -> PixelBuffer:
    """Build an RGBA buffer filled with a single color."""
    return PixelBuffer(
        width=width,
        height=height,
        data=bytes([r, g, b, alpha]) * (width * height),
    )


def solid_png(r: int, g: int, b: int, size: tuple[int, int] = (8, 8)) -> bytes:
    """Encode a single-color PNG."""
    output = io.BytesIO()
    Image.new("RGB", size, (r, g, b)).save(output, format="PNG")
    return output.getvalue()


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def oversized_png(width: int = 20000, height: int = 20000) -> bytes:
    """Build a tiny PNG whose header claims huge dimensions and has no pixel data."""
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IEND", b"")
    )


@dataclass
class FakeRecognitionApi(RecognitionApi):
    """Fake remote recognizer returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "food": "Grilled chicken",
            "calories": 240,
            "confidence": 0.93,
        }
    )
    calls: list[tuple[int, str]] = field(default_factory=list)

    async def recognize(self, content: bytes, content_type: str) -> dict[str, object]:
        self.calls.append((len(content), content_type))
        return self.payload


@dataclass
class FailingRecognitionApi(RecognitionApi):
    """Fake remote recognizer that always raises."""

    error: Exception = field(default_factory=lambda: RuntimeError("boom"))
    calls: int = 0

    async def recognize(self, content: bytes, content_type: str) -> dict[str, object]:
        self.calls += 1
        raise self.error


@dataclass
class SlowRecognitionApi(RecognitionApi):
    """Fake remote recognizer that never answers in time."""

    delay_seconds: float = 5.0

    async def recognize(self, content: bytes, content_type: str) -> dict[str, object]:
        await asyncio.sleep(self.delay_seconds)
        return {"food": "Too late"}


@pytest.fixture
def catalog() -> FoodCatalog:
    return FoodCatalog.default()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        recognition_endpoint="unconfigured",
        recognition_api_key="",
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
