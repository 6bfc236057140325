"""Average-color profiling of pixel buffers."""

from calorie_scanner.domain.images import CHANNELS, PixelBuffer
from calorie_scanner.domain.recognition import ColorSignature
from calorie_scanner.services.imaging import validate_pixels
from calorie_scanner.services.rounding import round_half_up


class ColorProfiler:
    """Reduces an RGBA buffer to its mean RGB color, ignoring alpha."""

    def profile(self, pixels: PixelBuffer) -> ColorSignature:
        """Return the per-channel mean rounded to the nearest integer."""
        validate_pixels(pixels)
        count = pixels.pixel_count
        data = pixels.data
        return ColorSignature(
            r=round_half_up(sum(data[0::CHANNELS]) / count),
            g=round_half_up(sum(data[1::CHANNELS]) / count),
            b=round_half_up(sum(data[2::CHANNELS]) / count),
        )
