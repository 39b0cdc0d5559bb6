import pygame
import pytest

from flappy.flappy_client import InputMapper, parse_args


def test_window_coordinates_scale_to_game_space():
    mapper = InputMapper((576, 1024))
    assert mapper.to_game((156, 680)) == pytest.approx((78, 340))


def test_touch_coordinates_are_normalized():
    assert InputMapper.from_touch(0.5, 0.25) == pytest.approx((144, 128))


def test_taps_from_events():
    mapper = InputMapper((288, 512))
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20), touch=False),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 20), touch=False),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 50), touch=True),
        pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0, touch_id=0),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
    ]
    assert mapper.taps(events) == [(10, 20), (144, 256), (78, 340)]


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.db == "flappy_scores.db"
    assert args.scale == 1.5
    assert not args.mute
    assert not args.reset_best


def test_parse_args_overrides():
    args = parse_args(["--seed", "3", "--db", "x.db", "--mute", "--reset-best", "--scale", "2"])
    assert args.seed == 3
    assert args.db == "x.db"
    assert args.mute
    assert args.reset_best
    assert args.scale == 2.0
