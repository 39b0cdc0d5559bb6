"""
engine.py: The per-frame simulation loop and tap handling.
"""

import logging
import random
from typing import Optional

from .audio import AudioSink, SilentAudio
from .constants import LEADERBOARD_NOTICE, NOTICE_FRAMES, SPLASH_AUTO_FRAMES
from .data_models import ScreenState, Session
from .physics_core import PhysicsCore
from .physics_pipes import PipeField
from .scheduler import Scheduler
from .score_db import ScoreDatabase
from .scoring import ScoreKeeper, ScoreStore
from .screen_flow import classify_tap, resolve
from .transitions import FadeController, decay_flash

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns the session and every collaborator the simulation talks to.
    Rendering reads `session` and `fade` and never writes back.
    """

    def __init__(self, store: Optional[ScoreStore] = None,
                 audio: Optional[AudioSink] = None,
                 scheduler: Optional[Scheduler] = None,
                 rng: Optional[random.Random] = None):
        self.store = store if store is not None else ScoreDatabase(":memory:")
        self.audio = audio if audio is not None else SilentAudio()
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.rng = rng if rng is not None else random.Random()

        self.session = Session()
        self.fade = FadeController()
        self.scores = ScoreKeeper(self.store)
        self.core = PhysicsCore(self.audio, self.scheduler, self.scores, self.rng)
        self.pipes = PipeField(self.core, self.audio, self.scores, self.rng)

    def start(self):
        """Loads the best score and shows the splash screen."""
        self.scheduler.clear()
        self.scores.load(self.session)
        self._reset_play_state()
        self.session.screen = ScreenState.SPLASH
        logger.info("Engine started, best score %d", self.session.best_score)

    def _reset_play_state(self):
        self.core.reset_bird(self.session)
        self.pipes.reset(self.session)
        self.scores.reset(self.session)
        self.session.frame = 0

    def reset_session(self):
        """Full restart: bird, pipes, score and frame counter, then READY."""
        self._reset_play_state()
        self.session.screen = ScreenState.READY
        logger.info("New session")

    def reset_best_score(self):
        self.scores.reset_best(self.session)

    def show_notice(self, text: str):
        self.session.notice = text
        self.session.notice_timer = NOTICE_FRAMES
        logger.info("Notice: %s", text)

    def tap(self, x: float, y: float):
        """Applies one tap in game coordinates. Taps are dropped while fading."""
        if self.fade.busy:
            return
        session = self.session
        target = classify_tap(session.screen, x, y)
        transition = resolve(session.screen, target, session.frame)
        if transition is None:
            return

        if transition.sound:
            self.audio.play(transition.sound)
        if transition.notice:
            self.show_notice(LEADERBOARD_NOTICE)
        if transition.target is not None:
            if transition.faded:
                self.fade.request(transition.target)
            else:
                session.screen = transition.target
        if transition.flap:
            self.core.apply_impulse(session)

    def _apply_screen(self, target: ScreenState):
        if target is ScreenState.READY:
            self.reset_session()
        else:
            self.session.screen = target

    def step(self):
        """Advances the simulation by exactly one frame."""
        session = self.session

        self.core.step_bird(session)
        self.pipes.scroll_ground(session)
        self.pipes.step(session)

        if (session.screen is ScreenState.SPLASH and session.frame > SPLASH_AUTO_FRAMES
                and not self.fade.busy):
            self.fade.request(ScreenState.MENU)

        decay_flash(session)
        target = self.fade.step()
        if target is not None:
            self._apply_screen(target)

        if session.notice_timer > 0:
            session.notice_timer -= 1
            if session.notice_timer == 0:
                session.notice = ""

        session.frame += 1
