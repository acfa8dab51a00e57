"""Catalog of scenes shared by the playback driver and the authoring path."""

from collections.abc import Iterable, Iterator

from .instructions import DrawInstruction
from .scene import Scene
from .templates import SceneOutline, StyleOptions, create_template, supported_template_names

DEMO_OUTLINE = SceneOutline(
    title="How Ideas Spread",
    subtitle="From spark to movement",
    items=("A spark of insight", "Early adopters", "Network effects", "Mainstream"),
    connections=(("A spark of insight", "Early adopters"), ("Network effects", "Mainstream")),
)


class SceneModel:
    """Ordered, mutable collection of scenes.

    Mutation goes through the playback driver, which cancels any pending
    frame before touching the catalog.
    """

    def __init__(self, scenes: Iterable[Scene] = ()):
        self._scenes: list[Scene] = list(scenes)

    @classmethod
    def default(cls, style: StyleOptions | None = None) -> "SceneModel":
        """Demo catalog holding one scene per template."""
        return cls(
            create_template(name).build(DEMO_OUTLINE, style)
            for name in supported_template_names()
        )

    @property
    def scenes(self) -> tuple[Scene, ...]:
        return tuple(self._scenes)

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[Scene]:
        return iter(self._scenes)

    def get(self, index: int) -> Scene:
        """Return the scene at ``index``; negative indices are rejected."""
        self._check_index(index)
        return self._scenes[index]

    def add(self, scene: Scene) -> int:
        """Append a scene and return its index."""
        self._scenes.append(scene)
        return len(self._scenes) - 1

    def replace(self, index: int, scene: Scene) -> None:
        self._check_index(index)
        self._scenes[index] = scene

    def render_scene(self, index: int, elapsed_ms: float) -> list[DrawInstruction]:
        """Draw instructions for every visible element of a scene at ``elapsed_ms``."""
        return self.get(index).render(elapsed_ms)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._scenes):
            raise IndexError(
                f"Scene index {index} out of range (catalog holds {len(self._scenes)} scenes)"
            )
