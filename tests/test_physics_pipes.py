import random

import pytest

from flappy.constants import (
    PIPE_GAP, PIPE_GAP_MAX, PIPE_GAP_MIN, PIPE_SPAWN_INTERVAL, PIPE_WIDTH, SCREEN_WIDTH
)
from flappy.data_models import Bird, Pipe, ScreenState, Session
from flappy.physics_core import PhysicsCore
from flappy.physics_pipes import PipeField
from flappy.scheduler import Scheduler
from flappy.scoring import ScoreKeeper


@pytest.fixture
def field(audio, clock, store):
    scores = ScoreKeeper(store)
    core = PhysicsCore(audio, Scheduler(clock), scores, random.Random(5))
    return PipeField(core, audio, scores, random.Random(11))


def playing(frame=1, **bird):
    return Session(screen=ScreenState.PLAYING, frame=frame, bird=Bird(**bird))


def test_spawns_on_interval_at_right_edge(field):
    session = playing(frame=PIPE_SPAWN_INTERVAL * 2)
    field.step(session)
    assert len(session.pipes) == 1
    pipe = session.pipes[0]
    assert pipe.x == SCREEN_WIDTH - 2
    assert PIPE_GAP_MIN <= pipe.gap_y <= PIPE_GAP_MAX
    assert pipe.passed is False


def test_no_spawn_between_intervals(field):
    session = playing(frame=PIPE_SPAWN_INTERVAL + 1)
    field.step(session)
    assert session.pipes == []


@pytest.mark.parametrize("screen", [
    ScreenState.SPLASH, ScreenState.MENU, ScreenState.READY, ScreenState.OVER
])
def test_step_is_noop_outside_play(field, screen):
    session = Session(screen=screen, frame=0, pipes=[Pipe(x=200.0, gap_y=150.0)])
    field.step(session)
    assert session.pipes == [Pipe(x=200.0, gap_y=150.0)]


def test_pipe_advances_two_pixels_per_frame(field):
    # Bird sits inside the gap so nothing collides on the way
    session = playing(y=198.0)
    session.pipes.append(Pipe(x=400.0, gap_y=150.0))
    for frame in range(1, 201):
        session.frame = frame
        if frame % PIPE_SPAWN_INTERVAL == 0:
            session.frame += 1
        field.step(session)
    assert session.screen is ScreenState.PLAYING
    assert session.pipes[0].x == 0.0


def test_body_inside_gap_never_collides():
    pipe = Pipe(x=70.0, gap_y=150.0)
    for y in range(150 + 7, 150 + PIPE_GAP - 7 + 1):
        assert not PipeField.check_collision(Bird(y=float(y)), pipe)


def test_body_outside_gap_always_collides():
    pipe = Pipe(x=70.0, gap_y=150.0)
    for y in list(range(0, 150 + 7)) + list(range(150 + PIPE_GAP - 6, 400)):
        assert PipeField.check_collision(Bird(y=float(y)), pipe)


def test_no_collision_without_horizontal_overlap():
    assert not PipeField.check_collision(Bird(y=10.0), Pipe(x=87.0, gap_y=150.0))
    assert not PipeField.check_collision(Bird(y=10.0), Pipe(x=73.0 - PIPE_WIDTH, gap_y=150.0))


def test_collision_ends_game(field, audio):
    session = playing(y=20.0)
    session.pipes.append(Pipe(x=72.0, gap_y=150.0))
    field.step(session)
    assert session.screen is ScreenState.OVER
    assert "hit" in audio.played


def test_scores_once_per_pipe(field, audio, store):
    session = playing(y=200.0)
    session.pipes.append(Pipe(x=80.0 - PIPE_WIDTH + 1, gap_y=150.0))
    for frame in range(2, 12):
        session.frame = frame
        field.step(session)

    assert session.score == 1
    assert session.pipes[0].passed is True
    assert audio.played.count("point") == 1
    assert session.best_score == 1
    assert store.writes == [1]


def test_best_score_only_written_when_it_grows(field, store):
    session = playing(y=200.0)
    session.best_score = 2
    session.pipes.extend(Pipe(x=27.0 - i, gap_y=150.0) for i in range(3))
    session.pipes.reverse()
    field.step(session)

    assert session.score == 3
    assert session.best_score == 3
    assert store.writes == [3]


def test_only_front_pipe_is_removed(field):
    session = playing(y=200.0)
    session.pipes.extend([
        Pipe(x=-101.0, gap_y=150.0, passed=True),
        Pipe(x=-101.0, gap_y=150.0, passed=True),
        Pipe(x=100.0, gap_y=150.0),
    ])
    field.step(session)
    assert [p.x for p in session.pipes] == [-103.0, 98.0]
    field.step(session)
    assert [p.x for p in session.pipes] == [96.0]


def test_pipe_kept_until_fully_past_margin(field):
    session = playing(y=200.0)
    session.pipes.append(Pipe(x=-100.0, gap_y=150.0, passed=True))
    field.step(session)
    assert session.pipes == [Pipe(x=-102.0, gap_y=150.0, passed=True)]
    field.step(session)
    assert session.pipes == []


def test_reset_clears_pipes(field):
    session = playing()
    session.pipes.append(Pipe(x=10.0, gap_y=100.0))
    field.reset(session)
    assert session.pipes == []


@pytest.mark.parametrize("screen, moves", [
    (ScreenState.SPLASH, False),
    (ScreenState.MENU, True),
    (ScreenState.READY, True),
    (ScreenState.PLAYING, True),
    (ScreenState.OVER, False),
])
def test_ground_scrolls_only_while_alive(field, screen, moves):
    session = Session(screen=screen, ground_x=-10.0)
    field.scroll_ground(session)
    assert session.ground_x == (-12.0 if moves else -10.0)


def test_ground_wraps(field):
    session = Session(screen=ScreenState.PLAYING, ground_x=-46.0)
    field.scroll_ground(session)
    assert session.ground_x == 0.0
