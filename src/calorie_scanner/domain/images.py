"""Image value objects passed into recognition."""

from dataclasses import dataclass

CHANNELS = 4


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded RGBA pixels, row-major, four bytes per pixel."""

    width: int
    height: int
    data: bytes

    @property
    def pixel_count(self) -> int:
        """Number of pixels described by the dimensions."""
        return self.width * self.height


@dataclass(frozen=True)
class ScanImage:
    """An image ready for recognition: encoded payload plus decoded pixels."""

    content: bytes
    content_type: str
    pixels: PixelBuffer
