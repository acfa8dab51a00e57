"""Line element drawn from its start point toward its end point."""

from dataclasses import dataclass
from typing import ClassVar

from ..instructions import LineInstruction
from .element import SceneElement


@dataclass(frozen=True, slots=True, kw_only=True)
class LineElement(SceneElement):
    """A straight segment; ``size`` is the stroke width."""

    kind: ClassVar[str] = "line"
    required_geometry: ClassVar[tuple[str, ...]] = ("x1", "y1", "x2", "y2")

    size: float = 4
    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None

    @property
    def label(self) -> str:
        return "line"

    def instruction(self, progress: float) -> LineInstruction:
        return LineInstruction(
            x1=self.x1,
            y1=self.y1,
            x2=self.x1 + (self.x2 - self.x1) * progress,
            y2=self.y1 + (self.y2 - self.y1) * progress,
            color=self.color,
            width=self.size,
            progress=progress,
        )
