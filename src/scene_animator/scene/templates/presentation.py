"""Presentation template: title, subtitle, then bullets one after another."""

from ...constants import (
    CANVAS_MARGIN,
    PALETTE,
    PRESENTATION_BULLET_BASE_DELAY_MS,
    PRESENTATION_BULLET_DELAY_STEP_MS,
    PRESENTATION_BULLET_MS,
    PRESENTATION_SUBTITLE_MS,
    PRESENTATION_SUBTITLE_OFFSET_MS,
    PRESENTATION_TITLE_MS,
    SUBTITLE_COLOR,
)
from ..elements import BulletElement, SceneElement, TextElement
from .base_template import BaseTemplate, SceneOutline, StyleOptions, Timing

TITLE_Y = 120
SUBTITLE_Y = 200
FIRST_BULLET_Y = 300
BULLET_SPACING = 70
BULLET_INDENT = 40


class PresentationTemplate(BaseTemplate):
    """Slide-style layout. The subtitle slot is always present to keep bullet timing stable."""

    name = "presentation"

    def layout(self, outline: SceneOutline, style: StyleOptions) -> list[SceneElement]:
        anchor_x = style.anchor_x()
        elements: list[SceneElement] = [
            TextElement(
                text=outline.title,
                x=anchor_x,
                y=TITLE_Y,
                size=style.font_size,
                color=style.color,
                align=style.alignment,
            ),
            TextElement(
                text=outline.subtitle or "",
                x=anchor_x,
                y=SUBTITLE_Y,
                size=style.font_size * 0.6,
                color=SUBTITLE_COLOR,
                align=style.alignment,
            ),
        ]
        for index, item in enumerate(outline.items):
            elements.append(
                BulletElement(
                    text=item,
                    x=CANVAS_MARGIN + BULLET_INDENT,
                    y=FIRST_BULLET_Y + index * BULLET_SPACING,
                    size=style.font_size * 0.5,
                    color=PALETTE[index % len(PALETTE)],
                )
            )
        return elements

    def timing(self, index: int) -> Timing:
        if index == 0:
            return Timing(0, PRESENTATION_TITLE_MS)
        if index == 1:
            return Timing(PRESENTATION_SUBTITLE_OFFSET_MS, PRESENTATION_SUBTITLE_MS)
        delay = PRESENTATION_BULLET_BASE_DELAY_MS + PRESENTATION_BULLET_DELAY_STEP_MS * (index - 2)
        return Timing(delay, PRESENTATION_BULLET_MS)
