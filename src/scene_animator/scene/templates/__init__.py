"""Scene templates and their timing rules."""

from .base_template import BaseTemplate, SceneOutline, StyleOptions, Timing
from .mindmap import MindmapTemplate
from .presentation import PresentationTemplate
from .timeline import TimelineTemplate

DEFAULT_TEMPLATE_NAME = "presentation"
TEMPLATE_TYPES: dict[str, type[BaseTemplate]] = {
    "presentation": PresentationTemplate,
    "mindmap": MindmapTemplate,
    "timeline": TimelineTemplate,
}


def supported_template_names() -> tuple[str, ...]:
    """Return supported template names in deterministic order."""
    return tuple(TEMPLATE_TYPES.keys())


def create_template(name: str, default: str | None = None) -> BaseTemplate:
    """Create a template instance by name."""
    template_name = name if name in TEMPLATE_TYPES else default
    if template_name is None:
        available = ", ".join(supported_template_names())
        raise ValueError(f"Unknown template '{name}'. Available: {available}")

    template_class = TEMPLATE_TYPES[template_name]
    return template_class()


__all__ = [
    "BaseTemplate",
    "SceneOutline",
    "StyleOptions",
    "Timing",
    "PresentationTemplate",
    "MindmapTemplate",
    "TimelineTemplate",
    "DEFAULT_TEMPLATE_NAME",
    "TEMPLATE_TYPES",
    "supported_template_names",
    "create_template",
]
