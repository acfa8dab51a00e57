"""Timeline template: title, an axis, then markers and labels left to right."""

from ...constants import (
    CANVAS_HEIGHT,
    CANVAS_MARGIN,
    CANVAS_WIDTH,
    PALETTE,
    TIMELINE_AXIS_MS,
    TIMELINE_AXIS_OFFSET_MS,
    TIMELINE_MARKER_BASE_OFFSET_MS,
    TIMELINE_MARKER_MS,
    TIMELINE_TITLE_MS,
)
from ..elements import CircleElement, LineElement, SceneElement, TextElement
from .base_template import BaseTemplate, SceneOutline, StyleOptions, Timing

TITLE_Y = 100
MARKER_RADIUS = 12
LABEL_OFFSET_Y = 60


class TimelineTemplate(BaseTemplate):
    """Each item contributes a marker then a label, alternating above and below the axis."""

    name = "timeline"

    def layout(self, outline: SceneOutline, style: StyleOptions) -> list[SceneElement]:
        axis_y = CANVAS_HEIGHT / 2
        elements: list[SceneElement] = [
            TextElement(
                text=outline.title,
                x=style.anchor_x(),
                y=TITLE_Y,
                size=style.font_size,
                color=style.color,
                align=style.alignment,
            ),
            LineElement(
                x1=CANVAS_MARGIN,
                y1=axis_y,
                x2=CANVAS_WIDTH - CANVAS_MARGIN,
                y2=axis_y,
                color=style.color,
            ),
        ]

        span = CANVAS_WIDTH - 2 * CANVAS_MARGIN
        count = len(outline.items)
        for index, item in enumerate(outline.items):
            x = CANVAS_MARGIN + span * (index + 1) / (count + 1)
            color = PALETTE[index % len(PALETTE)]
            label_y = axis_y + LABEL_OFFSET_Y if index % 2 == 0 else axis_y - LABEL_OFFSET_Y
            elements.append(
                CircleElement(x=x, y=axis_y, radius=MARKER_RADIUS, stroke=3, color=color)
            )
            elements.append(
                TextElement(text=item, x=x, y=label_y, size=style.font_size * 0.35, color=color)
            )
        return elements

    def timing(self, index: int) -> Timing:
        if index == 0:
            return Timing(0, TIMELINE_TITLE_MS)
        if index == 1:
            return Timing(TIMELINE_AXIS_OFFSET_MS, TIMELINE_AXIS_MS)
        return Timing(
            TIMELINE_MARKER_BASE_OFFSET_MS + TIMELINE_MARKER_MS * (index - 2),
            TIMELINE_MARKER_MS,
        )
