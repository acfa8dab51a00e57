"""Scene composition: ordered, timed elements rendered at a point in time."""

from collections.abc import Iterator
from dataclasses import dataclass

from .element_renderer import render_element
from .elements import SceneElement, SceneValidationError
from .instructions import DrawInstruction


@dataclass(frozen=True)
class TimelineMarker:
    """UI annotation for the moment an element starts revealing."""

    time_ms: float
    color: str
    label: str


@dataclass(frozen=True)
class Scene:
    """A named, ordered sequence of elements with a total play duration."""

    name: str
    elements: tuple[SceneElement, ...]
    total_duration_ms: float
    template: str = "custom"

    def __post_init__(self) -> None:
        if not self.elements:
            raise SceneValidationError(f"Scene '{self.name}' has no elements")
        if self.total_duration_ms <= 0:
            raise SceneValidationError(
                f"Scene '{self.name}' duration must be positive (got {self.total_duration_ms})"
            )

    @property
    def reveal_end_ms(self) -> float:
        """Latest reveal end across all elements."""
        return max(element.reveal_end_ms for element in self.elements)

    def iter_instructions(self, elapsed_ms: float) -> Iterator[DrawInstruction]:
        """Yield draw instructions in painter order, skipping elements not yet drawn."""
        for element in self.elements:
            instruction = render_element(element, elapsed_ms)
            if instruction is not None:
                yield instruction

    def render(self, elapsed_ms: float) -> list[DrawInstruction]:
        """Compute every visible element's drawable state at ``elapsed_ms``."""
        return list(self.iter_instructions(elapsed_ms))

    def markers(self) -> list[TimelineMarker]:
        """One marker per element, sorted by start offset."""
        ordered = sorted(self.elements, key=lambda element: element.start_offset_ms)
        return [
            TimelineMarker(
                time_ms=element.start_offset_ms,
                color=element.color,
                label=element.label,
            )
            for element in ordered
        ]
