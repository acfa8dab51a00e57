"""Tests for mapping elapsed time to element draw instructions."""

import pytest

from scene_animator.scene.element_renderer import render_element, window_progress
from scene_animator.scene.elements import CircleElement, LineElement, TextElement

ELEMENTS = [
    TextElement(text="Hello", x=0, y=0, start_offset_ms=300, reveal_duration_ms=500),
    CircleElement(x=0, y=0, radius=10, start_offset_ms=1000, reveal_duration_ms=300),
    LineElement(x1=0, y1=0, x2=10, y2=0, start_offset_ms=50, reveal_duration_ms=200),
]


@pytest.mark.parametrize("element", ELEMENTS)
def test_not_drawn_before_window(element):
    """Elements are absent, not empty, before their start offset."""
    for elapsed in (0, element.start_offset_ms / 2, element.start_offset_ms - 0.001):
        assert render_element(element, elapsed) is None


@pytest.mark.parametrize("element", ELEMENTS)
def test_fully_revealed_at_window_end(element):
    """Progress reaches 1 exactly when the reveal window closes."""
    assert render_element(element, element.reveal_end_ms).progress == 1


@pytest.mark.parametrize("element", ELEMENTS)
def test_idempotent_past_completion(element):
    """Progress stays clamped at 1 after the window."""
    at_end = render_element(element, element.reveal_end_ms)
    for extra in (1, 500, 10_000):
        assert render_element(element, element.reveal_end_ms + extra) == at_end


def test_drawn_empty_at_window_start():
    """At the start offset the element is drawn at zero progress."""
    instruction = render_element(ELEMENTS[0], 300)

    assert instruction is not None
    assert instruction.text == ""
    assert instruction.progress == 0


def test_window_progress_is_linear_and_clamped():
    """Linear progress is (elapsed - offset) / duration within [0, 1]."""
    element = ELEMENTS[0]

    assert window_progress(element, 299) is None
    assert window_progress(element, 550) == pytest.approx(0.5)
    assert window_progress(element, 2000) == 1


def test_eased_progress_applied():
    """Draw instructions carry eased, not linear, progress."""
    element = ELEMENTS[0]

    instruction = render_element(element, 300 + 125)  # linear 0.25

    assert instruction.progress == pytest.approx(4 * 0.25**3)
