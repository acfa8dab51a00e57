"""Scene clock: translates wall-clock time into scene-relative elapsed time."""

import logging
from enum import Enum

from ..constants import DEFAULT_SPEED, DEFAULT_STEP_MS, SPEED_OPTIONS

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class SceneClock:
    """
    Play/pause/seek/speed state machine for one scene.

    Elapsed time while playing is always derived from a fixed reference
    timestamp, ``(now - reference) * speed``, never accumulated from
    per-frame deltas. Every change of position or speed re-anchors the
    reference so playback continues without a jump.

    All timestamps are milliseconds from the same monotonic source.
    """

    def __init__(self, duration_ms: float, speed: float = DEFAULT_SPEED):
        self._check_speed(speed)
        self._duration_ms = max(0.0, float(duration_ms))
        self._speed = speed
        self._state = PlaybackState.STOPPED
        self._elapsed_ms = 0.0
        self._reference_ms: float | None = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.PLAYING

    @property
    def elapsed_ms(self) -> float:
        """Last computed position within the scene."""
        return self._elapsed_ms

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    @property
    def progress(self) -> float:
        """Position as a fraction of the scene duration."""
        if self._duration_ms <= 0:
            return 0.0
        return self._elapsed_ms / self._duration_ms

    @property
    def is_finished(self) -> bool:
        return self._elapsed_ms >= self._duration_ms

    def play(self, now_ms: float) -> None:
        """Start or resume playback. From Stopped, or paused at the end, restart at 0."""
        if self.is_playing:
            return
        if self._state is PlaybackState.STOPPED or self.is_finished:
            self._elapsed_ms = 0.0
        self._state = PlaybackState.PLAYING
        self._anchor(now_ms)
        logger.debug("play from %.1fms at %.2fx", self._elapsed_ms, self._speed)

    def pause(self, now_ms: float) -> None:
        """Freeze the position at its current value."""
        if not self.is_playing:
            return
        self.advance(now_ms)
        self._state = PlaybackState.PAUSED
        self._reference_ms = None
        logger.debug("pause at %.1fms", self._elapsed_ms)

    def stop(self) -> None:
        self._state = PlaybackState.STOPPED
        self._elapsed_ms = 0.0
        self._reference_ms = None
        logger.debug("stop")

    def reset(self, duration_ms: float) -> None:
        """Stop and retarget the clock at a scene of a different length."""
        self.stop()
        self._duration_ms = max(0.0, float(duration_ms))

    def seek(self, elapsed_ms: float, now_ms: float) -> float:
        """
        Jump to ``elapsed_ms``, clamped to the scene.

        Play state is kept. A stopped clock becomes paused so that the
        next ``play()`` continues from the new position.

        Returns:
            The clamped position
        """
        self._elapsed_ms = min(max(float(elapsed_ms), 0.0), self._duration_ms)
        if self.is_playing:
            self._anchor(now_ms)
        elif self._state is PlaybackState.STOPPED:
            self._state = PlaybackState.PAUSED
        logger.debug("seek to %.1fms", self._elapsed_ms)
        return self._elapsed_ms

    def step(self, direction: int, now_ms: float, step_ms: float = DEFAULT_STEP_MS) -> float:
        """Seek forward (``direction > 0``) or backward (``direction < 0``) by ``step_ms``."""
        if self.is_playing:
            self.advance(now_ms)
        sign = 1 if direction > 0 else -1 if direction < 0 else 0
        return self.seek(self._elapsed_ms + sign * step_ms, now_ms)

    def set_speed(self, speed: float, now_ms: float) -> None:
        """Change the play speed without moving the current position."""
        self._check_speed(speed)
        if self.is_playing:
            self.advance(now_ms)
            self._speed = speed
            self._anchor(now_ms)
        else:
            self._speed = speed
        logger.debug("speed set to %.2fx", speed)

    def advance(self, now_ms: float) -> float:
        """
        Recompute the position from the reference timestamp.

        Reaching the end while playing pauses the clock with the position
        held at the end.

        Returns:
            The current elapsed time
        """
        if not self.is_playing or self._reference_ms is None:
            return self._elapsed_ms
        elapsed = (now_ms - self._reference_ms) * self._speed
        self._elapsed_ms = min(max(elapsed, 0.0), self._duration_ms)
        if self.is_finished:
            self._state = PlaybackState.PAUSED
            self._reference_ms = None
            logger.debug("reached end of scene at %.1fms", self._elapsed_ms)
        return self._elapsed_ms

    def _anchor(self, now_ms: float) -> None:
        self._reference_ms = now_ms - self._elapsed_ms / self._speed

    @staticmethod
    def _check_speed(speed: float) -> None:
        if speed not in SPEED_OPTIONS:
            available = ", ".join(f"{option:g}" for option in SPEED_OPTIONS)
            raise ValueError(f"Unsupported speed {speed}. Available: {available}")
