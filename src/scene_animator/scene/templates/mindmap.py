"""Mind-map template: a center node with satellites revealed around it."""

import math

from ...constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    MINDMAP_CENTER_MS,
    MINDMAP_NODE_BASE_OFFSET_MS,
    MINDMAP_NODE_MS,
    PALETTE,
)
from ..elements import CircleElement, LineElement, SceneElement
from .base_template import BaseTemplate, SceneOutline, StyleOptions, Timing

CENTER_RADIUS = 110
NODE_RADIUS = 70
NODE_DISTANCE = 290
CONNECTION_COLOR = "#FFFFFF"


class MindmapTemplate(BaseTemplate):
    """Radial layout; analysis connections become lines between satellites."""

    name = "mindmap"

    def layout(self, outline: SceneOutline, style: StyleOptions) -> list[SceneElement]:
        center_x = CANVAS_WIDTH / 2
        center_y = CANVAS_HEIGHT / 2
        elements: list[SceneElement] = [
            CircleElement(
                x=center_x,
                y=center_y,
                radius=CENTER_RADIUS,
                label_text=outline.title,
                size=style.font_size * 0.5,
                color=style.color,
            )
        ]

        positions: dict[str, tuple[float, float]] = {}
        count = len(outline.items)
        for index, item in enumerate(outline.items):
            angle = math.radians(-90 + 360 * index / count)
            x = center_x + math.cos(angle) * NODE_DISTANCE
            y = center_y + math.sin(angle) * NODE_DISTANCE
            positions.setdefault(item, (x, y))
            elements.append(
                CircleElement(
                    x=x,
                    y=y,
                    radius=NODE_RADIUS,
                    label_text=item,
                    size=style.font_size * 0.35,
                    color=PALETTE[index % len(PALETTE)],
                )
            )

        for source, target in outline.connections:
            if source not in positions or target not in positions or source == target:
                continue
            (x1, y1), (x2, y2) = positions[source], positions[target]
            elements.append(
                LineElement(x1=x1, y1=y1, x2=x2, y2=y2, size=2, color=CONNECTION_COLOR)
            )
        return elements

    def timing(self, index: int) -> Timing:
        if index == 0:
            return Timing(0, MINDMAP_CENTER_MS)
        return Timing(MINDMAP_NODE_BASE_OFFSET_MS + MINDMAP_NODE_MS * (index - 1), MINDMAP_NODE_MS)
