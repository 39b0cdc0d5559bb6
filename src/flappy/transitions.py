"""
transitions.py: Fade-to-black screen changes and the game-over flash.
"""

from typing import Optional

from .constants import FADE_STEP, FLASH_DECAY
from .data_models import FadeState, ScreenState, Session


class FadeController:
    """
    Fades out to black, hands back the pending screen at full black,
    then fades back in. Input is ignored while it is busy.
    """

    def __init__(self, step: float = FADE_STEP):
        self.step_size = step
        self.state = FadeState.IDLE
        self.opacity = 0.0
        self.target: Optional[ScreenState] = None

    @property
    def busy(self) -> bool:
        return self.state is not FadeState.IDLE

    def request(self, target: ScreenState) -> bool:
        """Starts a fade towards target. Returns False if one is already running."""
        if self.busy:
            return False
        self.state = FadeState.FADING_OUT
        self.target = target
        self.opacity = 0.0
        return True

    def step(self) -> Optional[ScreenState]:
        """
        Advances the fade by one frame.
        Returns the target screen on the frame the overlay reaches full black.
        """
        if self.state is FadeState.FADING_OUT:
            self.opacity += self.step_size
            if self.opacity >= 1.0:
                self.opacity = 1.0
                self.state = FadeState.FADING_IN
                return self.target
        elif self.state is FadeState.FADING_IN:
            self.opacity -= self.step_size
            if self.opacity <= 0.0:
                self.opacity = 0.0
                self.state = FadeState.IDLE
                self.target = None
        return None


def decay_flash(session: Session, step: float = FLASH_DECAY):
    if session.flash_opacity > 0:
        session.flash_opacity = max(0.0, session.flash_opacity - step)
