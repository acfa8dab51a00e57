"""Playback driver: samples the scene clock once per display refresh and redraws."""

import asyncio
import itertools
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable

from ..constants import DEFAULT_REFRESH_RATE, DEFAULT_SPEED, DEFAULT_STEP_MS
from .clock import SceneClock
from .scene import Scene
from .scene_model import SceneModel
from .surface import Surface

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameScheduler(ABC):
    """Host refresh primitive: one-shot callbacks on the next paint cycle."""

    @abstractmethod
    def now(self) -> float:
        """Current monotonic timestamp in milliseconds."""
        raise NotImplementedError

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> Hashable:
        """
        Schedule ``callback`` for the next frame.

        Args:
            callback: Receives the frame timestamp in milliseconds

        Returns:
            A handle accepted by ``cancel_frame``
        """
        raise NotImplementedError

    @abstractmethod
    def cancel_frame(self, handle: Hashable) -> None:
        """Cancel a pending frame request. Unknown or spent handles are ignored."""
        raise NotImplementedError


class ManualFrameScheduler(FrameScheduler):
    """Deterministic scheduler whose frames are fired explicitly by the host."""

    def __init__(self, start_ms: float = 0.0):
        self.time_ms = start_ms
        self._pending: dict[int, FrameCallback] = {}
        self._ids = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def now(self) -> float:
        return self.time_ms

    def advance(self, delta_ms: float) -> None:
        self.time_ms += delta_ms

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: Hashable) -> None:
        self._pending.pop(handle, None)

    def run_frame(self, timestamp_ms: float | None = None) -> int:
        """
        Fire every callback pending at the start of this frame.

        Callbacks requested while the frame runs wait for the next one.

        Returns:
            Number of callbacks fired
        """
        if timestamp_ms is not None:
            self.time_ms = timestamp_ms
        callbacks = list(self._pending.values())
        self._pending.clear()
        for callback in callbacks:
            callback(self.time_ms)
        return len(callbacks)


class AsyncioFrameScheduler(FrameScheduler):
    """Fires frames on an asyncio event loop at a fixed refresh rate."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        refresh_rate: int = DEFAULT_REFRESH_RATE,
    ):
        self._loop = loop
        self.interval = 1.0 / refresh_rate

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now(self) -> float:
        return time.monotonic() * 1000

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        return self.loop.call_later(self.interval, lambda: callback(self.now()))

    def cancel_frame(self, handle: Hashable) -> None:
        if isinstance(handle, asyncio.TimerHandle):
            handle.cancel()


class PlaybackDriver:
    """
    Owns the single outstanding frame request for one player.

    Any transition that stops or redirects playback cancels the pending
    frame before touching the clock or the scene catalog. Each request also
    carries a generation token, so a callback that fires after being
    superseded does nothing.
    """

    def __init__(
        self,
        model: SceneModel,
        surface: Surface,
        scheduler: FrameScheduler,
        active_index: int = 0,
        speed: float = DEFAULT_SPEED,
        on_frame: Callable[[float], None] | None = None,
    ):
        """
        Initialize driver.

        Args:
            model: Scene catalog to play from
            surface: Surface redrawn on every frame
            scheduler: Host refresh primitive
            active_index: Scene to start on
            speed: Initial play speed multiplier
            on_frame: Optional listener called with the elapsed time after each redraw
        """
        self.model = model
        self.surface = surface
        self.scheduler = scheduler
        self.on_frame = on_frame
        self._active_index = active_index
        self.clock = SceneClock(model.get(active_index).total_duration_ms, speed)
        self._frame_handle: Hashable | None = None
        self._generation = 0

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_scene(self) -> Scene:
        return self.model.get(self._active_index)

    @property
    def elapsed_ms(self) -> float:
        return self.clock.elapsed_ms

    @property
    def is_playing(self) -> bool:
        return self.clock.is_playing

    @property
    def has_pending_frame(self) -> bool:
        return self._frame_handle is not None

    def play(self) -> None:
        self.clock.play(self.scheduler.now())
        self._request_tick()

    def pause(self) -> None:
        self._cancel_pending()
        self.clock.pause(self.scheduler.now())
        self.render_current()

    def toggle(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def stop(self) -> None:
        self._cancel_pending()
        self.clock.stop()
        self.render_current()

    def seek(self, elapsed_ms: float) -> float:
        position = self.clock.seek(elapsed_ms, self.scheduler.now())
        if not self.is_playing:
            self.render_current()
        return position

    def step(self, direction: int, step_ms: float = DEFAULT_STEP_MS) -> float:
        position = self.clock.step(direction, self.scheduler.now(), step_ms)
        if not self.is_playing:
            self.render_current()
        return position

    def set_speed(self, speed: float) -> None:
        self.clock.set_speed(speed, self.scheduler.now())

    def select_scene(self, index: int) -> None:
        """Switch to another scene, stopped at its start."""
        self.model.get(index)
        self._cancel_pending()
        self._active_index = index
        self._reset_for_active_scene()
        logger.debug("selected scene %d", index)

    def replace_scene(self, index: int, scene: Scene) -> None:
        """Replace a scene's content and make it the active scene."""
        self.model.get(index)
        self._cancel_pending()
        self.model.replace(index, scene)
        self._active_index = index
        self._reset_for_active_scene()
        logger.debug("replaced scene %d with '%s'", index, scene.name)

    def add_scene(self, scene: Scene, activate: bool = True) -> int:
        """Append a scene to the catalog, optionally switching to it."""
        if not activate:
            return self.model.add(scene)
        self._cancel_pending()
        index = self.model.add(scene)
        self._active_index = index
        self._reset_for_active_scene()
        logger.debug("added scene %d '%s'", index, scene.name)
        return index

    def render_current(self) -> None:
        """Clear the surface and draw the active scene at the clock's position."""
        elapsed_ms = self.clock.elapsed_ms
        instructions = self.model.render_scene(self._active_index, elapsed_ms)
        self.surface.clear()
        self.surface.draw(instructions)
        if self.on_frame is not None:
            self.on_frame(elapsed_ms)

    def close(self) -> None:
        """Tear down: no frame callback may fire after this."""
        self._cancel_pending()

    def _reset_for_active_scene(self) -> None:
        self.clock.reset(self.active_scene.total_duration_ms)
        self.surface.clear()

    def _request_tick(self) -> None:
        if self._frame_handle is not None:
            return
        generation = self._generation
        self._frame_handle = self.scheduler.request_frame(
            lambda timestamp_ms: self._tick(timestamp_ms, generation)
        )

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    def _tick(self, timestamp_ms: float, generation: int) -> None:
        if generation != self._generation:
            return
        self._frame_handle = None
        self.clock.advance(timestamp_ms)
        self.render_current()
        if self.clock.is_playing:
            self._request_tick()
