"""Map an element and a scene-relative time to its draw instruction."""

from .easing import ease
from .elements import SceneElement
from .instructions import DrawInstruction


def window_progress(element: SceneElement, elapsed_ms: float) -> float | None:
    """
    Linear progress of an element through its reveal window.

    Returns:
        None before the window opens, otherwise progress clamped to [0, 1]
    """
    if elapsed_ms < element.start_offset_ms:
        return None
    raw = (elapsed_ms - element.start_offset_ms) / element.reveal_duration_ms
    return min(max(raw, 0.0), 1.0)


def render_element(element: SceneElement, elapsed_ms: float) -> DrawInstruction | None:
    """Return the element's eased draw instruction, or None if it is not drawn yet."""
    progress = window_progress(element, elapsed_ms)
    if progress is None:
        return None
    return element.instruction(ease(progress))
