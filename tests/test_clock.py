"""Tests for the scene clock state machine."""

import pytest

from scene_animator.scene import PlaybackState, SceneClock


@pytest.fixture
def clock() -> SceneClock:
    return SceneClock(duration_ms=3000)


def test_starts_stopped(clock):
    """New clocks are stopped at zero."""
    assert clock.state is PlaybackState.STOPPED
    assert clock.elapsed_ms == 0


def test_elapsed_derived_from_reference(clock):
    """Elapsed time follows wall-clock time from the play timestamp."""
    clock.play(now_ms=1000)

    assert clock.advance(1250) == 250
    assert clock.advance(1900) == 900


def test_advance_is_not_accumulative(clock):
    """Sampling at irregular intervals gives the same result as one sample."""
    clock.play(now_ms=0)
    for now in (16, 33, 51, 67, 84, 100, 117):
        clock.advance(now)

    assert clock.elapsed_ms == 117


def test_pause_resume_matches_uninterrupted_play():
    """Paused time is excluded; elapsed equals total time spent playing."""
    interrupted = SceneClock(duration_ms=3000)
    interrupted.play(0)
    interrupted.pause(400)
    interrupted.play(10_000)
    interrupted.advance(10_600)

    uninterrupted = SceneClock(duration_ms=3000)
    uninterrupted.play(0)
    uninterrupted.advance(1000)

    assert interrupted.elapsed_ms == uninterrupted.elapsed_ms == 1000


def test_pause_freezes_position(clock):
    clock.play(0)
    clock.pause(700)

    assert clock.state is PlaybackState.PAUSED
    assert clock.advance(5000) == 700


def test_seek_is_idempotent(clock):
    """Seeking to the same position twice yields the same state."""
    clock.play(0)
    clock.seek(1200, now_ms=500)
    first = (clock.state, clock.elapsed_ms)
    clock.seek(1200, now_ms=500)

    assert (clock.state, clock.elapsed_ms) == first


def test_seek_while_playing_continues_from_target(clock):
    clock.play(0)
    clock.seek(2000, now_ms=300)

    assert clock.is_playing
    assert clock.advance(400) == 2100


@pytest.mark.parametrize("target,expected", [(-50, 0), (99_999, 3000)])
def test_seek_clamps(clock, target, expected):
    assert clock.seek(target, now_ms=0) == expected


def test_seek_from_stopped_keeps_position_for_play(clock):
    """A stopped clock becomes paused at the sought position."""
    clock.seek(1500, now_ms=0)
    assert clock.state is PlaybackState.PAUSED

    clock.play(now_ms=100)

    assert clock.advance(200) == 1600


def test_speed_change_preserves_position(clock):
    """Changing speed mid-play neither jumps nor rewinds."""
    clock.play(0)
    clock.advance(1000)
    clock.set_speed(2.0, now_ms=1000)

    assert clock.elapsed_ms == 1000
    assert clock.advance(1250) == 1500


def test_speed_change_while_paused(clock):
    clock.play(0)
    clock.pause(500)
    clock.set_speed(0.5, now_ms=600)
    clock.play(1000)

    assert clock.advance(1200) == 600


def test_unsupported_speed_rejected(clock):
    with pytest.raises(ValueError, match="Unsupported speed 3"):
        clock.set_speed(3.0, now_ms=0)


def test_reaching_end_pauses(clock):
    """Playback holds at the end and does not loop."""
    clock.play(0)

    assert clock.advance(5000) == 3000
    assert clock.state is PlaybackState.PAUSED
    assert clock.is_finished


def test_play_after_end_restarts(clock):
    clock.play(0)
    clock.advance(5000)
    clock.play(6000)

    assert clock.advance(6100) == 100


def test_step(clock):
    """Steps move by a fixed amount and stay inside the scene."""
    assert clock.step(1, now_ms=0) == 100
    assert clock.step(1, now_ms=0, step_ms=500) == 600
    assert clock.step(-1, now_ms=0, step_ms=1000) == 0


def test_stop_and_reset(clock):
    clock.play(0)
    clock.advance(800)
    clock.stop()
    assert (clock.state, clock.elapsed_ms) == (PlaybackState.STOPPED, 0)

    clock.reset(1000)
    assert clock.duration_ms == 1000
    assert clock.progress == 0
