"""Image decoding helpers for scans."""

import asyncio
import io

from PIL import Image, UnidentifiedImageError

from calorie_scanner.domain.errors import InvalidImageError
from calorie_scanner.domain.images import CHANNELS, PixelBuffer, ScanImage


def validate_pixels(pixels: PixelBuffer) -> None:
    """Raise InvalidImageError if the buffer does not match its dimensions."""
    if pixels.width <= 0 or pixels.height <= 0:
        raise InvalidImageError(
            f"Image dimensions must be positive, got {pixels.width}x{pixels.height}"
        )
    if not pixels.data:
        raise InvalidImageError("Pixel buffer is empty")
    expected = pixels.pixel_count * CHANNELS
    if len(pixels.data) != expected:
        raise InvalidImageError(
            f"Pixel buffer has {len(pixels.data)} bytes, expected {expected}"
        )


def decode_image(content: bytes) -> PixelBuffer:
    """Decode an encoded image file into an RGBA pixel buffer."""
    if not content:
        raise InvalidImageError("Image payload is empty")
    try:
        with Image.open(io.BytesIO(content)) as image:
            rgba = image.convert("RGBA")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        raise InvalidImageError(f"Could not decode image: {exc}") from exc
    pixels = PixelBuffer(width=rgba.width, height=rgba.height, data=rgba.tobytes())
    validate_pixels(pixels)
    return pixels


def encode_png(pixels: PixelBuffer) -> bytes:
    """Encode a pixel buffer as PNG bytes."""
    validate_pixels(pixels)
    image = Image.frombytes("RGBA", (pixels.width, pixels.height), pixels.data)
    output = io.BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()


def detect_content_type(content: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if content.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if content.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if content[:4] == b"RIFF" and content[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def _prepare(image: bytes | PixelBuffer) -> ScanImage:
    if isinstance(image, PixelBuffer):
        return ScanImage(
            content=encode_png(image), content_type="image/png", pixels=image
        )
    pixels = decode_image(image)
    return ScanImage(
        content=image,
        content_type=detect_content_type(image),
        pixels=pixels,
    )


async def prepare_scan_image(image: bytes | PixelBuffer) -> ScanImage:
    """Decode or encode the input off the event loop so both forms are available."""
    return await asyncio.to_thread(_prepare, image)
