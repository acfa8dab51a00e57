"""Base template interface: layout plus a pure per-index timing rule."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar, NamedTuple

from ...constants import (
    CANVAS_MARGIN,
    CANVAS_WIDTH,
    DEFAULT_ALIGNMENT,
    DEFAULT_COLOR,
    DEFAULT_FONT_SIZE,
    SCENE_HOLD_MS,
)
from ..elements import SceneElement, SceneValidationError, check_color
from ..elements.text import ALIGNMENTS
from ..instructions import Alignment
from ..scene import Scene


class Timing(NamedTuple):
    """Reveal window assigned to one element."""

    start_offset_ms: float
    reveal_duration_ms: float


@dataclass(frozen=True)
class StyleOptions:
    """Editor style choices applied when laying out a scene."""

    font_size: float = DEFAULT_FONT_SIZE
    color: str = DEFAULT_COLOR
    alignment: Alignment = DEFAULT_ALIGNMENT

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise SceneValidationError(f"Font size must be positive (got {self.font_size})")
        if self.alignment not in ALIGNMENTS:
            raise SceneValidationError(
                f"Unknown alignment '{self.alignment}'. Available: {', '.join(ALIGNMENTS)}"
            )
        check_color(self.color, "Style")

    def anchor_x(self) -> float:
        """Horizontal anchor for headline text under this alignment."""
        if self.alignment == "left":
            return CANVAS_MARGIN
        if self.alignment == "right":
            return CANVAS_WIDTH - CANVAS_MARGIN
        return CANVAS_WIDTH / 2


@dataclass(frozen=True)
class SceneOutline:
    """Template-independent content of a scene."""

    title: str
    items: tuple[str, ...] = ()
    subtitle: str | None = None
    connections: tuple[tuple[str, str], ...] = ()


class BaseTemplate(ABC):
    """Abstract base class for scene templates."""

    name: ClassVar[str]

    @abstractmethod
    def layout(self, outline: SceneOutline, style: StyleOptions) -> list[SceneElement]:
        """
        Place elements on the canvas in reveal order.

        Args:
            outline: Scene content
            style: Editor style options

        Returns:
            Elements with geometry set; timing is assigned afterwards
        """
        raise NotImplementedError

    @abstractmethod
    def timing(self, index: int) -> Timing:
        """Reveal window for the element at ``index`` within the scene."""
        raise NotImplementedError

    def assign_timing(self, elements: list[SceneElement]) -> tuple[SceneElement, ...]:
        """Store each element's reveal window on the element itself."""
        return tuple(
            replace(element, **self.timing(index)._asdict())
            for index, element in enumerate(elements)
        )

    def build(self, outline: SceneOutline, style: StyleOptions | None = None) -> Scene:
        """
        Build a fully timed scene.

        Raises:
            SceneValidationError: If the layout yields no elements
        """
        if not outline.title.strip():
            raise SceneValidationError("Scene title must not be empty")
        placed = self.layout(outline, style or StyleOptions())
        if not placed:
            raise SceneValidationError(f"Template '{self.name}' produced no elements")

        elements = self.assign_timing(placed)
        total = max(element.reveal_end_ms for element in elements) + SCENE_HOLD_MS
        return Scene(
            name=outline.title,
            elements=elements,
            total_duration_ms=total,
            template=self.name,
        )
