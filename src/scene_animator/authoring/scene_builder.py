"""Turn analyses, editor text and design payloads into timed scenes."""

from collections.abc import Mapping
from typing import Any

from ..constants import DEFAULT_REVEAL_MS, SCENE_HOLD_MS
from ..scene import (
    DEFAULT_TEMPLATE_NAME,
    Scene,
    SceneOutline,
    SceneValidationError,
    StyleOptions,
    create_template,
    element_from_dict,
)
from .analysis import ContentAnalysis

BULLET_PREFIXES = "-*•"


def outline_from_analysis(analysis: ContentAnalysis) -> SceneOutline:
    """Arrange analysis content for the template it suggests."""
    structure = analysis.suggested_structure
    if structure == "mindmap":
        return SceneOutline(
            title=analysis.title,
            items=analysis.key_concepts or analysis.main_ideas,
            connections=tuple((c.source, c.target) for c in analysis.connections),
        )
    if structure == "timeline":
        return SceneOutline(
            title=analysis.title,
            items=analysis.main_ideas or analysis.key_concepts,
        )
    return SceneOutline(
        title=analysis.title,
        subtitle=" · ".join(analysis.key_concepts[:3]) or None,
        items=analysis.main_ideas,
    )


def build_scene_from_analysis(
    analysis: ContentAnalysis, style: StyleOptions | None = None
) -> Scene:
    """Build exactly one scene using the analysis' suggested structure."""
    template = create_template(analysis.suggested_structure, default=DEFAULT_TEMPLATE_NAME)
    return template.build(outline_from_analysis(analysis), style)


def outline_from_text(text: str, template_name: str = DEFAULT_TEMPLATE_NAME) -> SceneOutline:
    """
    Parse editor text: the first non-blank line is the title.

    For presentations the second line is the subtitle. Remaining lines are
    items, with leading list markers removed.

    Raises:
        SceneValidationError: If the text has no non-blank lines
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise SceneValidationError("Scene text has no content")

    title, rest = lines[0], lines[1:]
    subtitle = None
    if template_name == "presentation" and rest:
        subtitle, rest = rest[0], rest[1:]
    items = tuple(item for item in (line.lstrip(BULLET_PREFIXES).strip() for line in rest) if item)
    return SceneOutline(title=title, subtitle=subtitle, items=items)


def build_scene_from_text(
    text: str,
    template_name: str = DEFAULT_TEMPLATE_NAME,
    style: StyleOptions | None = None,
) -> Scene:
    """Build a scene from manual editor text and a template choice."""
    template = create_template(template_name)
    return template.build(outline_from_text(text, template_name), style)


def build_scene_from_design(design: Mapping[str, Any], name: str = "Design") -> Scene:
    """
    Build a scene from a visual-design payload with explicit element timings.

    ``elements`` entries are converted with ``element_from_dict``;
    ``connections`` become lines revealed at their ``timing`` offset.

    Raises:
        SceneValidationError: If the payload has no elements or malformed ones
    """
    if not isinstance(design, Mapping):
        raise SceneValidationError("Design must be an object")
    raw_elements = design.get("elements")
    if not isinstance(raw_elements, list):
        raise SceneValidationError("Design must contain an 'elements' list")

    elements = [element_from_dict(item) for item in raw_elements]
    raw_connections = design.get("connections") or []
    if not isinstance(raw_connections, list):
        raise SceneValidationError("Design connections must be a list")
    for connection in raw_connections:
        if not isinstance(connection, Mapping):
            raise SceneValidationError("Design connections must be objects")
        elements.append(
            element_from_dict(
                {
                    "type": "line",
                    "from": connection.get("from"),
                    "to": connection.get("to"),
                    "color": connection.get("color"),
                    "animationStart": connection.get("timing"),
                    "animationDuration": DEFAULT_REVEAL_MS,
                }
            )
        )
    if not elements:
        raise SceneValidationError(f"Scene '{name}' has no elements")

    total = max(element.reveal_end_ms for element in elements) + SCENE_HOLD_MS
    return Scene(name=name, elements=tuple(elements), total_duration_ms=total, template="design")
