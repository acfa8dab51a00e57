"""Playback control surface exposed to UI layers (CLI, web app)."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from .authoring import (
    AnalysisError,
    ContentAnalysis,
    build_scene_from_analysis,
    build_scene_from_design,
    build_scene_from_text,
)
from .constants import DEFAULT_STEP_MS
from .scene import (
    DEFAULT_TEMPLATE_NAME,
    FrameScheduler,
    PillowSurface,
    PlaybackDriver,
    Scene,
    SceneModel,
    SceneValidationError,
    StyleOptions,
    Surface,
    TimelineMarker,
)

logger = logging.getLogger(__name__)


class AnalysisProvider(Protocol):
    def analyze(self, text: str) -> ContentAnalysis: ...

    def design(self, analysis: ContentAnalysis) -> dict[str, Any]: ...


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of an AI-backed scene generation."""

    success: bool
    scene: Scene | None = None
    error: str | None = None


class ScenePlayer:
    """Play, scrub and author scenes on a single drawing surface."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        model: SceneModel | None = None,
        surface: Surface | None = None,
        analysis_provider: AnalysisProvider | None = None,
    ):
        """
        Initialize player.

        Args:
            scheduler: Host refresh primitive driving playback
            model: Scene catalog; defaults to the demo catalog
            surface: Drawing surface; defaults to a Pillow canvas
            analysis_provider: Collaborator used by ``generate``
        """
        self.model = model or SceneModel.default()
        self.surface = surface or PillowSurface()
        self.analysis_provider = analysis_provider
        self.driver = PlaybackDriver(self.model, self.surface, scheduler)
        self.driver.render_current()

    @property
    def elapsed_ms(self) -> float:
        return self.driver.elapsed_ms

    @property
    def is_playing(self) -> bool:
        return self.driver.is_playing

    @property
    def active_scene_index(self) -> int:
        return self.driver.active_index

    @property
    def active_scene(self) -> Scene:
        return self.driver.active_scene

    @property
    def speed(self) -> float:
        return self.driver.clock.speed

    @property
    def markers(self) -> list[TimelineMarker]:
        return self.active_scene.markers()

    def play(self) -> None:
        self.driver.play()

    def pause(self) -> None:
        self.driver.pause()

    def toggle(self) -> None:
        self.driver.toggle()

    def stop(self) -> None:
        self.driver.stop()

    def seek(self, elapsed_ms: float) -> float:
        return self.driver.seek(elapsed_ms)

    def seek_percent(self, percent: float) -> float:
        """Seek to a percentage (0-100) of the active scene's duration."""
        return self.driver.seek(self.active_scene.total_duration_ms * percent / 100)

    def step(self, direction: int, step_ms: float = DEFAULT_STEP_MS) -> float:
        return self.driver.step(direction, step_ms)

    def set_speed(self, speed: float) -> None:
        self.driver.set_speed(speed)

    def select_scene(self, index: int) -> None:
        self.driver.select_scene(index)
        self.driver.render_current()

    def load_text(
        self,
        text: str,
        template_name: str = DEFAULT_TEMPLATE_NAME,
        style: StyleOptions | None = None,
    ) -> Scene:
        """
        Replace the active scene with one built from editor text.

        Raises:
            SceneValidationError: If the text yields no elements
            ValueError: If the template is unknown
        """
        scene = build_scene_from_text(text, template_name, style)
        self._install(scene)
        return scene

    def generate(self, text: str, style: StyleOptions | None = None) -> GenerationResult:
        """
        Ask the collaborator to analyze ``text`` and replace the active scene.

        Collaborator failures leave the current scene and clock untouched.
        """
        if self.analysis_provider is None:
            return GenerationResult(success=False, error="No analysis provider configured")
        try:
            analysis = self.analysis_provider.analyze(text)
        except AnalysisError as e:
            logger.warning("scene generation failed: %s", e)
            return GenerationResult(success=False, error=str(e))

        return self.apply_analysis(analysis, style)

    def apply_analysis(
        self, analysis: ContentAnalysis, style: StyleOptions | None = None
    ) -> GenerationResult:
        """Replace the active scene with one built from an existing analysis."""
        scene = build_scene_from_analysis(analysis, style)
        self._install(scene)
        return GenerationResult(success=True, scene=scene)

    def generate_design(self, text: str) -> GenerationResult:
        """
        Analyze ``text``, ask for a visual design with explicit timings, and
        replace the active scene with it.

        Collaborator failures and unusable designs leave the current scene
        and clock untouched.
        """
        if self.analysis_provider is None:
            return GenerationResult(success=False, error="No analysis provider configured")
        try:
            analysis = self.analysis_provider.analyze(text)
            design = self.analysis_provider.design(analysis)
            scene = build_scene_from_design(design, name=analysis.title)
        except (AnalysisError, SceneValidationError) as e:
            logger.warning("design generation failed: %s", e)
            return GenerationResult(success=False, error=str(e))

        self._install(scene)
        return GenerationResult(success=True, scene=scene)

    def apply_design(self, design: Mapping[str, Any], name: str = "Design") -> Scene:
        """
        Replace the active scene with one built from a design payload.

        Raises:
            SceneValidationError: If the design is malformed
        """
        scene = build_scene_from_design(design, name)
        self._install(scene)
        return scene

    def snapshot(self) -> bytes:
        """PNG of the current frame; requires a Pillow surface."""
        if not isinstance(self.surface, PillowSurface):
            raise TypeError(f"Snapshots require a PillowSurface (got {type(self.surface).__name__})")
        return self.surface.to_png()

    def close(self) -> None:
        self.driver.close()

    def _install(self, scene: Scene) -> None:
        self.driver.replace_scene(self.driver.active_index, scene)
        self.driver.render_current()
