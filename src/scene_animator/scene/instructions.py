"""Draw instructions describing how much of each element is visible."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Union

from PIL import ImageDraw

if TYPE_CHECKING:
    from .render_context import RenderContext

Alignment = Literal["left", "center", "right"]

_TEXT_ANCHORS: dict[str, str] = {"left": "lm", "center": "mm", "right": "rm"}


@dataclass(frozen=True, slots=True)
class TextInstruction:
    """A text prefix to draw at an anchor point."""

    text: str
    x: float
    y: float
    size: float
    color: str
    align: Alignment
    progress: float
    bullet: bool = False

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        if self.bullet:
            r = context.bullet_radius
            dot_x = self.x - self.size * 0.6
            draw.ellipse([dot_x - r, self.y - r, dot_x + r, self.y + r], fill=self.color)
        if not self.text:
            return
        draw.text(
            (self.x, self.y),
            self.text,
            font=context.font(self.size),
            fill=self.color,
            anchor=_TEXT_ANCHORS[self.align],
        )


@dataclass(frozen=True, slots=True)
class ArcInstruction:
    """A circle outline swept clockwise from ``start_angle`` to ``end_angle`` degrees."""

    x: float
    y: float
    radius: float
    start_angle: float
    end_angle: float
    color: str
    stroke: float
    progress: float
    label: str | None = None
    label_size: float = 0

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        if self.sweep > 0:
            r = self.radius
            draw.arc(
                [self.x - r, self.y - r, self.x + r, self.y + r],
                start=self.start_angle,
                end=self.end_angle,
                fill=self.color,
                width=max(1, int(round(self.stroke))),
            )
        if self.label:
            draw.text(
                (self.x, self.y),
                self.label,
                font=context.font(self.label_size),
                fill=self.color,
                anchor="mm",
            )


@dataclass(frozen=True, slots=True)
class LineInstruction:
    """A straight segment from the fixed start point to the current end point."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float
    progress: float

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        if self.progress <= 0:
            return
        draw.line(
            [(self.x1, self.y1), (self.x2, self.y2)],
            fill=self.color,
            width=max(1, int(round(self.width))),
        )


DrawInstruction = Union[TextInstruction, ArcInstruction, LineInstruction]
