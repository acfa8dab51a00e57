"""Base class for timed scene elements."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from PIL import ImageColor

from ...constants import DEFAULT_COLOR, DEFAULT_FONT_SIZE, DEFAULT_REVEAL_MS

if TYPE_CHECKING:
    from ..instructions import DrawInstruction


class SceneValidationError(ValueError):
    """Raised when a scene or element is structurally invalid."""


def check_color(color: object, owner: str) -> None:
    """Reject colors Pillow cannot draw with."""
    try:
        ImageColor.getrgb(color)
    except (TypeError, ValueError, AttributeError):
        raise SceneValidationError(f"{owner} has an unknown color {color!r}")


@dataclass(frozen=True, slots=True, kw_only=True)
class SceneElement(ABC):
    """A single visual primitive with its own reveal window."""

    kind: ClassVar[str] = "element"
    required_geometry: ClassVar[tuple[str, ...]] = ()

    color: str = DEFAULT_COLOR
    size: float = DEFAULT_FONT_SIZE
    start_offset_ms: float = 0
    reveal_duration_ms: float = DEFAULT_REVEAL_MS

    def __post_init__(self) -> None:
        missing = [name for name in self.required_geometry if getattr(self, name) is None]
        if missing:
            raise SceneValidationError(
                f"{self.kind} element is missing required geometry: {', '.join(missing)}"
            )
        if self.reveal_duration_ms <= 0:
            raise SceneValidationError(
                f"{self.kind} element reveal duration must be positive "
                f"(got {self.reveal_duration_ms})"
            )
        if self.start_offset_ms < 0:
            raise SceneValidationError(
                f"{self.kind} element start offset must not be negative "
                f"(got {self.start_offset_ms})"
            )
        check_color(self.color, f"{self.kind} element")
        self._validate()

    def _validate(self) -> None:
        """Hook for kind-specific checks beyond required geometry."""

    @property
    def reveal_end_ms(self) -> float:
        """Time at which the element is fully revealed."""
        return self.start_offset_ms + self.reveal_duration_ms

    @property
    @abstractmethod
    def label(self) -> str:
        """Short human-readable label used for timeline markers."""
        raise NotImplementedError

    @abstractmethod
    def instruction(self, progress: float) -> "DrawInstruction":
        """
        Build the draw instruction for this element.

        Args:
            progress: Eased reveal progress in [0, 1]

        Returns:
            The drawable state of the element at that progress
        """
        raise NotImplementedError
