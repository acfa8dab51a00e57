"""Circle element drawn as a growing arc."""

from dataclasses import dataclass
from typing import ClassVar

from ...constants import CIRCLE_LABEL_THRESHOLD, CIRCLE_START_ANGLE
from ..instructions import ArcInstruction
from .element import SceneElement, SceneValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class CircleElement(SceneElement):
    """A circle outline swept clockwise from 12 o'clock, with an optional center label."""

    kind: ClassVar[str] = "circle"
    required_geometry: ClassVar[tuple[str, ...]] = ("x", "y", "radius")

    x: float | None = None
    y: float | None = None
    radius: float | None = None
    label_text: str | None = None
    stroke: float = 4

    def _validate(self) -> None:
        if self.radius <= 0:
            raise SceneValidationError(f"circle radius must be positive (got {self.radius})")
        if self.label_text is not None and not isinstance(self.label_text, str):
            raise SceneValidationError(f"circle label must be text (got {self.label_text!r})")

    @property
    def label(self) -> str:
        return self.label_text or "circle"

    def instruction(self, progress: float) -> ArcInstruction:
        # The label pops in once the arc is past half way; it is not eased itself.
        show_label = bool(self.label_text) and progress > CIRCLE_LABEL_THRESHOLD
        return ArcInstruction(
            x=self.x,
            y=self.y,
            radius=self.radius,
            start_angle=CIRCLE_START_ANGLE,
            end_angle=CIRCLE_START_ANGLE + progress * 360,
            color=self.color,
            stroke=self.stroke,
            progress=progress,
            label=self.label_text if show_label else None,
            label_size=self.size,
        )
