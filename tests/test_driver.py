"""Tests for the playback driver and its frame scheduling."""

import pytest

from scene_animator.authoring import build_scene_from_text
from scene_animator.scene import (
    ManualFrameScheduler,
    PlaybackDriver,
    PlaybackState,
    SceneModel,
    Surface,
)


class RecordingSurface(Surface):
    """Surface that keeps every frame's instructions."""

    def __init__(self):
        self.frames = []
        self.clears = 0

    def clear(self):
        self.clears += 1

    def draw(self, instructions):
        self.frames.append(list(instructions))


class LeakyScheduler(ManualFrameScheduler):
    """Scheduler whose cancellation never reaches already-queued callbacks."""

    def cancel_frame(self, handle):
        pass


def _model() -> SceneModel:
    return SceneModel(
        [
            build_scene_from_text("First\nSub\nA\nB", "presentation"),
            build_scene_from_text("Second\nX\nY", "timeline"),
        ]
    )


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def driver(scheduler, surface):
    return PlaybackDriver(_model(), surface, scheduler)


class TestPlayback:
    """Frame-driven playback."""

    def test_play_requests_one_frame(self, driver, scheduler) -> None:
        driver.play()
        driver.play()

        assert scheduler.pending == 1

    def test_frames_advance_clock_and_redraw(self, driver, scheduler, surface) -> None:
        driver.play()
        scheduler.run_frame(100)
        scheduler.run_frame(250)

        assert driver.elapsed_ms == 250
        assert len(surface.frames) == 2
        assert scheduler.pending == 1

    def test_pause_cancels_pending_frame(self, driver, scheduler) -> None:
        driver.play()
        scheduler.run_frame(100)
        scheduler.time_ms = 150
        driver.pause()

        assert not driver.has_pending_frame
        assert scheduler.pending == 0
        assert driver.elapsed_ms == 150

    def test_auto_pause_at_end(self, driver, scheduler) -> None:
        """Reaching the end pauses with elapsed held at the duration."""
        duration = driver.active_scene.total_duration_ms
        driver.play()
        scheduler.run_frame(duration + 100)

        assert driver.clock.state is PlaybackState.PAUSED
        assert driver.elapsed_ms == duration
        assert scheduler.pending == 0

    def test_speed_change_between_frames(self, driver, scheduler) -> None:
        driver.play()
        scheduler.run_frame(100)
        driver.set_speed(2.0)
        scheduler.run_frame(150)

        assert driver.elapsed_ms == 200

    def test_seek_while_paused_redraws(self, driver, surface) -> None:
        driver.seek(1200)

        assert driver.elapsed_ms == 1200
        assert len(surface.frames) == 1
        assert len(surface.frames[0]) == 3

    def test_on_frame_listener(self, driver, scheduler) -> None:
        seen = []
        driver.on_frame = seen.append
        driver.play()
        scheduler.run_frame(40)

        assert seen == [40]


class TestSceneSwitching:
    """Scene changes cancel pending frames before mutating anything."""

    def test_select_scene_resets_clock(self, driver, scheduler, surface) -> None:
        driver.play()
        scheduler.run_frame(400)
        clears_before = surface.clears

        driver.select_scene(1)

        assert scheduler.pending == 0
        assert driver.active_index == 1
        assert driver.elapsed_ms == 0
        assert not driver.is_playing
        assert driver.clock.duration_ms == driver.active_scene.total_duration_ms
        assert surface.clears == clears_before + 1

    def test_stale_callback_is_ignored(self, surface) -> None:
        """A frame that fires after a scene switch draws nothing."""
        scheduler = LeakyScheduler()
        driver = PlaybackDriver(_model(), surface, scheduler)
        driver.play()
        driver.select_scene(1)
        frames_before = len(surface.frames)

        scheduler.run_frame(500)

        assert driver.elapsed_ms == 0
        assert len(surface.frames) == frames_before
        assert not driver.has_pending_frame

    def test_invalid_index_leaves_playback_running(self, driver, scheduler) -> None:
        driver.play()

        with pytest.raises(IndexError):
            driver.select_scene(7)

        assert driver.is_playing
        assert scheduler.pending == 1

    def test_replace_scene_activates_it(self, driver, scheduler) -> None:
        driver.play()
        new_scene = build_scene_from_text("Fresh\nOne", "mindmap")

        driver.replace_scene(1, new_scene)

        assert scheduler.pending == 0
        assert driver.active_index == 1
        assert driver.active_scene is new_scene

    def test_add_scene(self, driver) -> None:
        scene = build_scene_from_text("Extra", "presentation")

        assert driver.add_scene(scene, activate=False) == 2
        assert driver.active_index == 0

        index = driver.add_scene(scene)
        assert driver.active_index == index == 3

    def test_close_cancels_pending(self, driver, scheduler) -> None:
        driver.play()
        driver.close()

        assert scheduler.pending == 0


def test_manual_scheduler_defers_nested_requests():
    """Callbacks requested while a frame runs wait for the next frame."""
    scheduler = ManualFrameScheduler()
    calls = []

    def callback(timestamp):
        calls.append(timestamp)
        scheduler.request_frame(callback)

    scheduler.request_frame(callback)

    assert scheduler.run_frame(10) == 1
    assert calls == [10]
    assert scheduler.pending == 1
