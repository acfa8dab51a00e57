"""Scene authoring: analyses, editor text and design payloads to scenes."""

from .ai_client import AnalysisClient
from .analysis import (
    AnalysisAPIError,
    AnalysisError,
    AnalysisFormatError,
    Connection,
    ContentAnalysis,
    extract_json,
    parse_analysis,
)
from .scene_builder import (
    build_scene_from_analysis,
    build_scene_from_design,
    build_scene_from_text,
    outline_from_analysis,
    outline_from_text,
)

__all__ = [
    "AnalysisAPIError",
    "AnalysisClient",
    "AnalysisError",
    "AnalysisFormatError",
    "Connection",
    "ContentAnalysis",
    "build_scene_from_analysis",
    "build_scene_from_design",
    "build_scene_from_text",
    "extract_json",
    "outline_from_analysis",
    "outline_from_text",
    "parse_analysis",
]
