"""
physics_core.py: The deterministic per-frame bird physics and the game-over rule.
"""

import logging
import math
import random

from .audio import AudioSink
from .constants import (
    ACTIVE_FLAP_PERIOD, BACKGROUNDS, BIRD_ANIMATION, BIRD_BASELINE_Y, BIRD_COLORS,
    BIRD_X, DIE_SOUND_DELAY, DIVE_ROT_VELOCITY, FLAP_ROT_ACCEL, FLAP_ROT_VELOCITY,
    GRAVITY, GROUND_Y, HOVER_AMPLITUDE, HOVER_PERIOD, IDLE_FLAP_PERIOD,
    JUMP_VELOCITY, MAX_ROTATION, MIN_ROTATION, SOUND_DIE, SOUND_HIT, SOUND_WING,
    TERMINAL_VELOCITY
)
from .data_models import Bird, ScreenState, Session
from .scheduler import Scheduler
from .scoring import ScoreKeeper

logger = logging.getLogger(__name__)

HOVER_STATES = (ScreenState.MENU, ScreenState.READY)
FLIGHT_STATES = (ScreenState.PLAYING, ScreenState.OVER)


class PhysicsCore:
    """
    Bird physics. Every quantity is per frame, so one call to step_bird
    is exactly one frame at FPS.
    """

    def __init__(self, audio: AudioSink, scheduler: Scheduler,
                 scores: ScoreKeeper, rng: random.Random):
        self.audio = audio
        self.scheduler = scheduler
        self.scores = scores
        self.rng = rng

    @staticmethod
    def on_ground(bird: Bird) -> bool:
        return bird.y + bird.radius >= GROUND_Y

    def apply_impulse(self, session: Session):
        """Flap: kick upward, tilt nose up, then let the nose fall back."""
        bird = session.bird
        bird.velocity = JUMP_VELOCITY
        bird.rot_velocity = FLAP_ROT_VELOCITY
        bird.rot_accel = FLAP_ROT_ACCEL
        self.audio.play(SOUND_WING)

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Calculates new position and velocity after one frame."""
        velocity = min(velocity + GRAVITY, TERMINAL_VELOCITY)
        return y + velocity, velocity

    def step_bird(self, session: Session):
        """Advances the bird by one frame according to the current screen."""
        bird = session.bird
        screen = session.screen
        grounded = self.on_ground(bird)

        # Wings only beat while airborne
        if not grounded:
            period = IDLE_FLAP_PERIOD if screen in HOVER_STATES else ACTIVE_FLAP_PERIOD
            if session.frame % period == 0:
                bird.frame = (bird.frame + 1) % len(BIRD_ANIMATION)

        if screen in HOVER_STATES:
            bird.x = BIRD_X
            bird.y = BIRD_BASELINE_Y + math.cos(session.frame / HOVER_PERIOD) * HOVER_AMPLITUDE
            bird.rotation = 0.0
            return

        if screen not in FLIGHT_STATES:
            return

        if screen is ScreenState.PLAYING or not grounded:
            bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

        bird.rot_velocity += bird.rot_accel
        bird.rotation = min(max(bird.rotation + bird.rot_velocity, MIN_ROTATION), MAX_ROTATION)

        if self.on_ground(bird):
            bird.y = GROUND_Y - bird.radius
            if screen is ScreenState.PLAYING:
                self.trigger_game_over(session)

    def trigger_game_over(self, session: Session):
        """Ends the run. Only the first call of a run has any effect."""
        if session.screen is not ScreenState.PLAYING:
            return
        session.screen = ScreenState.OVER
        session.frame = 0
        session.flash_opacity = 1.0
        self.scores.commit(session)

        # Force beak down
        session.bird.rot_velocity = DIVE_ROT_VELOCITY
        session.bird.velocity = 0.0

        self.audio.play(SOUND_HIT)
        self.scheduler.call_later(DIE_SOUND_DELAY, lambda: self.audio.play(SOUND_DIE))
        logger.info("Game over: score %d, best %d", session.score, session.best_score)

    def reset_bird(self, session: Session):
        """Restores the bird and picks new cosmetic variants."""
        session.bird = Bird()
        session.bird_color = self.rng.randrange(BIRD_COLORS)
        session.background = self.rng.randrange(BACKGROUNDS)
