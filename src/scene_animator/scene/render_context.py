"""Rendering configuration and theming for drawing surfaces."""

from dataclasses import dataclass
from functools import lru_cache

from PIL import ImageFont

from ..constants import BACKGROUND_COLOR, CANVAS_HEIGHT, CANVAS_WIDTH

FONT_CANDIDATES = ("DejaVuSans.ttf", "Arial.ttf")


@dataclass(frozen=True)
class RenderContext:
    """Canvas dimensions, colors and font lookup shared by all draw instructions."""

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    background_color: str = BACKGROUND_COLOR
    bullet_radius: int = 6

    @staticmethod
    def darkmode() -> "RenderContext":
        """Default dark theme matching the editor canvas."""
        return RenderContext()

    def font(self, size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        """Return a font for the given pixel size."""
        return _load_font(max(1, int(round(size))))


@lru_cache(maxsize=64)
def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)
