"""
physics_pipes.py: Spawning, scrolling, collision and scoring of the pipe field.
"""

import random

from .audio import AudioSink
from .constants import (
    GROUND_TILE_WIDTH, PIPE_DESPAWN_MARGIN, PIPE_GAP_MAX, PIPE_GAP_MIN,
    PIPE_SPAWN_INTERVAL, PIPE_SPEED, PIPE_WIDTH, SCREEN_WIDTH, SOUND_POINT
)
from .data_models import Bird, Pipe, ScreenState, Session
from .physics_core import PhysicsCore
from .scoring import ScoreKeeper

SCROLL_STATES = (ScreenState.MENU, ScreenState.READY, ScreenState.PLAYING)


class PipeField:
    """
    The ordered pipe sequence. Pipes are appended on the right and only
    ever removed from the front, so the list stays sorted by x.
    """

    def __init__(self, core: PhysicsCore, audio: AudioSink,
                 scores: ScoreKeeper, rng: random.Random):
        self.core = core
        self.audio = audio
        self.scores = scores
        self.rng = rng

    def _spawn_pipe(self, session: Session) -> Pipe:
        """Generates a new pipe at the right edge."""
        pipe = Pipe(x=float(SCREEN_WIDTH),
                    gap_y=float(self.rng.randint(PIPE_GAP_MIN, PIPE_GAP_MAX)))
        session.pipes.append(pipe)
        return pipe

    @staticmethod
    def check_collision(bird: Bird, pipe: Pipe) -> bool:
        """True if the bird overlaps the pipe's columns outside the gap."""
        if not (bird.x + bird.radius > pipe.x and bird.x - bird.radius < pipe.right):
            return False
        return bird.y - bird.radius < pipe.gap_y or bird.y + bird.radius > pipe.gap_bottom

    def step(self, session: Session):
        """
        The main pipe step: spawn, move, collide, score, despawn.
        Does nothing outside of active play.
        """
        if session.screen is not ScreenState.PLAYING:
            return

        if session.frame % PIPE_SPAWN_INTERVAL == 0:
            self._spawn_pipe(session)

        bird = session.bird
        for pipe in session.pipes:
            pipe.x -= PIPE_SPEED

            if self.check_collision(bird, pipe):
                self.core.trigger_game_over(session)

            if not pipe.passed and pipe.right < bird.x:
                pipe.passed = True
                self.scores.add_point(session)
                self.audio.play(SOUND_POINT)

        pipes = session.pipes
        if pipes and pipes[0].right < -PIPE_DESPAWN_MARGIN:
            pipes.pop(0)

    def scroll_ground(self, session: Session):
        if session.screen not in SCROLL_STATES:
            return
        session.ground_x -= PIPE_SPEED
        if session.ground_x <= SCREEN_WIDTH - GROUND_TILE_WIDTH:
            session.ground_x = 0.0

    def reset(self, session: Session):
        session.pipes.clear()
