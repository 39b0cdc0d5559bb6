import pytest

from flappy.data_models import FadeState, ScreenState, Session
from flappy.transitions import FadeController, decay_flash


def run_until_idle(fade, limit=100):
    targets = []
    for _ in range(limit):
        target = fade.step()
        if target is not None:
            targets.append(target)
        if not fade.busy:
            break
    return targets


def test_starts_idle():
    fade = FadeController()
    assert fade.state is FadeState.IDLE
    assert fade.opacity == 0.0
    assert fade.target is None
    assert fade.step() is None


def test_request_starts_fade_out():
    fade = FadeController()
    assert fade.request(ScreenState.MENU) is True
    assert fade.state is FadeState.FADING_OUT
    assert fade.target is ScreenState.MENU
    assert fade.opacity == 0.0
    assert fade.busy


def test_request_while_busy_changes_nothing():
    fade = FadeController()
    fade.request(ScreenState.MENU)
    fade.step()
    fade.step()
    before = (fade.state, fade.target, fade.opacity)

    assert fade.request(ScreenState.READY) is False
    assert (fade.state, fade.target, fade.opacity) == before


def test_target_is_handed_back_once_at_full_black():
    fade = FadeController()
    fade.request(ScreenState.READY)
    handed = None
    for _ in range(30):
        handed = fade.step()
        if handed is not None:
            break
    assert handed is ScreenState.READY
    assert fade.opacity == 1.0
    assert fade.state is FadeState.FADING_IN


def test_full_cycle_returns_to_idle_and_zero():
    fade = FadeController()
    fade.request(ScreenState.MENU)
    targets = run_until_idle(fade)

    assert targets == [ScreenState.MENU]
    assert fade.state is FadeState.IDLE
    assert fade.opacity == 0.0
    assert fade.target is None


def test_fade_takes_about_twenty_frames_each_way():
    fade = FadeController()
    fade.request(ScreenState.MENU)
    frames = 0
    while fade.busy:
        fade.step()
        frames += 1
        assert 0.0 <= fade.opacity <= 1.0
    assert 40 <= frames <= 42


def test_can_request_again_after_cycle():
    fade = FadeController()
    fade.request(ScreenState.MENU)
    run_until_idle(fade)
    assert fade.request(ScreenState.READY) is True


@pytest.mark.parametrize("start, expected", [(1.0, 0.9), (0.05, 0.0), (0.0, 0.0)])
def test_flash_decays_to_zero(start, expected):
    session = Session(flash_opacity=start)
    decay_flash(session)
    assert session.flash_opacity == pytest.approx(expected)
    assert session.flash_opacity >= 0.0
