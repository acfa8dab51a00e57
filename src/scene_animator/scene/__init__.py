"""Animation timeline engine: elements, scenes, clock and playback driver."""

from .clock import PlaybackState, SceneClock
from .driver import AsyncioFrameScheduler, FrameScheduler, ManualFrameScheduler, PlaybackDriver
from .easing import ease, ease_in_out_cubic
from .element_renderer import render_element, window_progress
from .elements import (
    BulletElement,
    CircleElement,
    LineElement,
    SceneElement,
    SceneValidationError,
    TextElement,
    element_from_dict,
)
from .instructions import ArcInstruction, DrawInstruction, LineInstruction, TextInstruction
from .render_context import RenderContext
from .scene import Scene, TimelineMarker
from .scene_model import SceneModel
from .surface import PillowSurface, Surface
from .templates import (
    DEFAULT_TEMPLATE_NAME,
    BaseTemplate,
    SceneOutline,
    StyleOptions,
    create_template,
    supported_template_names,
)

__all__ = [
    "ArcInstruction",
    "AsyncioFrameScheduler",
    "BaseTemplate",
    "BulletElement",
    "CircleElement",
    "DEFAULT_TEMPLATE_NAME",
    "DrawInstruction",
    "FrameScheduler",
    "LineElement",
    "LineInstruction",
    "ManualFrameScheduler",
    "PillowSurface",
    "PlaybackDriver",
    "PlaybackState",
    "RenderContext",
    "Scene",
    "SceneClock",
    "SceneElement",
    "SceneModel",
    "SceneOutline",
    "SceneValidationError",
    "StyleOptions",
    "Surface",
    "TextElement",
    "TextInstruction",
    "TimelineMarker",
    "create_template",
    "ease",
    "ease_in_out_cubic",
    "element_from_dict",
    "render_element",
    "supported_template_names",
    "window_progress",
]
