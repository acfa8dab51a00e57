"""Text element revealed typewriter-style."""

import math
from dataclasses import dataclass
from typing import ClassVar

from ...constants import DEFAULT_ALIGNMENT
from ..instructions import Alignment, TextInstruction
from .element import SceneElement, SceneValidationError

ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True, slots=True, kw_only=True)
class TextElement(SceneElement):
    """A line of text whose characters appear left to right."""

    kind: ClassVar[str] = "text"
    required_geometry: ClassVar[tuple[str, ...]] = ("x", "y")

    text: str | None = None
    x: float | None = None
    y: float | None = None
    align: Alignment = DEFAULT_ALIGNMENT

    def _validate(self) -> None:
        if not isinstance(self.text, str):
            raise SceneValidationError(f"{self.kind} element requires text content")
        if self.align not in ALIGNMENTS:
            raise SceneValidationError(
                f"Unknown alignment '{self.align}'. Available: {', '.join(ALIGNMENTS)}"
            )

    @property
    def label(self) -> str:
        return self.text or ""

    def visible_text(self, progress: float) -> str:
        """Return the prefix of the text shown at the given eased progress."""
        count = math.floor(progress * len(self.text))
        return self.text[: max(0, count)]

    def instruction(self, progress: float) -> TextInstruction:
        return TextInstruction(
            text=self.visible_text(progress),
            x=self.x,
            y=self.y,
            size=self.size,
            color=self.color,
            align=self.align,
            progress=progress,
            bullet=False,
        )
