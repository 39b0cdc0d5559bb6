"""
screen_flow.py: The screen state machine as an explicit transition table.

A tap is first classified against the on-screen buttons, then looked up as
(current screen, tap target). Unlisted pairs do nothing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .constants import (
    OVER_INPUT_DELAY_FRAMES, PLAY_BUTTON, SCORE_BUTTON, SOUND_SWOOSHING
)
from .data_models import HitRegion, ScreenState


class TapTarget(Enum):
    TAP = "tap"             # Anywhere that is not a button
    PLAY = "play"
    SCORE = "score"


PLAY_REGION = HitRegion(*PLAY_BUTTON)
SCORE_REGION = HitRegion(*SCORE_BUTTON)

# Screens on which the play / score buttons are shown
BUTTON_SCREENS = (ScreenState.MENU, ScreenState.OVER)


@dataclass(frozen=True)
class Transition:
    """What a tap does: an optional screen change plus its side effects."""
    target: Optional[ScreenState] = None
    faded: bool = True                  # False applies target immediately
    sound: Optional[str] = None
    flap: bool = False
    notice: bool = False
    min_frame: Optional[int] = None     # Tap ignored unless frame > min_frame


_S = ScreenState
_T = TapTarget

TRANSITIONS: Dict[Tuple[ScreenState, TapTarget], Transition] = {
    (_S.SPLASH, _T.TAP): Transition(target=_S.MENU),
    (_S.MENU, _T.PLAY): Transition(target=_S.READY, sound=SOUND_SWOOSHING),
    (_S.MENU, _T.SCORE): Transition(notice=True),
    (_S.READY, _T.TAP): Transition(target=_S.PLAYING, faded=False, flap=True),
    (_S.PLAYING, _T.TAP): Transition(flap=True),
    (_S.OVER, _T.PLAY): Transition(target=_S.READY, sound=SOUND_SWOOSHING,
                                   min_frame=OVER_INPUT_DELAY_FRAMES),
    (_S.OVER, _T.SCORE): Transition(notice=True, min_frame=OVER_INPUT_DELAY_FRAMES),
}


def classify_tap(screen: ScreenState, x: float, y: float) -> TapTarget:
    if screen in BUTTON_SCREENS:
        if PLAY_REGION.contains(x, y):
            return TapTarget.PLAY
        if SCORE_REGION.contains(x, y):
            return TapTarget.SCORE
    return TapTarget.TAP


def resolve(screen: ScreenState, target: TapTarget, frame: int) -> Optional[Transition]:
    """Looks up the transition for a tap, falling back to a plain tap."""
    transition = TRANSITIONS.get((screen, target))
    if transition is None and target is not TapTarget.TAP:
        transition = TRANSITIONS.get((screen, TapTarget.TAP))
    if transition is None:
        return None
    if transition.min_frame is not None and frame <= transition.min_frame:
        return None
    return transition
