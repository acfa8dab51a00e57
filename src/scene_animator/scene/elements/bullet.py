"""Bullet point element."""

from dataclasses import dataclass
from typing import ClassVar

from ..instructions import Alignment, TextInstruction
from .text import TextElement


@dataclass(frozen=True, slots=True, kw_only=True)
class BulletElement(TextElement):
    """A text element drawn with a leading dot, revealed like plain text."""

    kind: ClassVar[str] = "bullet"

    align: Alignment = "left"

    def instruction(self, progress: float) -> TextInstruction:
        return TextInstruction(
            text=self.visible_text(progress),
            x=self.x,
            y=self.y,
            size=self.size,
            color=self.color,
            align=self.align,
            progress=progress,
            bullet=progress > 0,
        )
