"""Drawing surfaces that receive a full redraw every frame."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from io import BytesIO

from PIL import Image, ImageDraw

from .instructions import DrawInstruction
from .render_context import RenderContext


class Surface(ABC):
    """Abstract base class for drawing surfaces."""

    @abstractmethod
    def clear(self) -> None:
        """Erase everything drawn so far."""
        raise NotImplementedError

    @abstractmethod
    def draw(self, instructions: Iterable[DrawInstruction]) -> None:
        """Draw instructions on top of the current contents, in order."""
        raise NotImplementedError


class PillowSurface(Surface):
    """Renders frames onto a Pillow image."""

    def __init__(self, render_context: RenderContext | None = None):
        """
        Initialize surface.

        Args:
            render_context: Canvas size and theming; defaults to dark mode
        """
        self.context = render_context or RenderContext.darkmode()
        self._image = self._blank()

    @property
    def width(self) -> int:
        return self.context.width

    @property
    def height(self) -> int:
        return self.context.height

    @property
    def image(self) -> Image.Image:
        """A copy of the current frame."""
        return self._image.copy()

    def clear(self) -> None:
        self._image = self._blank()

    def draw(self, instructions: Iterable[DrawInstruction]) -> None:
        draw = ImageDraw.Draw(self._image)
        for instruction in instructions:
            instruction.draw(draw, self.context)

    def to_png(self) -> bytes:
        """Encode the current frame as PNG bytes."""
        buffer = BytesIO()
        self._image.save(buffer, format="PNG")
        return buffer.getvalue()

    def _blank(self) -> Image.Image:
        return Image.new(
            "RGB", (self.context.width, self.context.height), self.context.background_color
        )
