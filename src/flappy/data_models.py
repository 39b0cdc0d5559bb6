"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    BIRD_ANIMATION, BIRD_BASELINE_Y, BIRD_RADIUS, BIRD_X, PIPE_GAP, PIPE_WIDTH
)


class ScreenState(Enum):
    SPLASH = "splash"
    MENU = "menu"
    READY = "ready"
    PLAYING = "playing"
    OVER = "over"


class FadeState(Enum):
    IDLE = "idle"
    FADING_OUT = "fading_out"
    FADING_IN = "fading_in"


@dataclass
class Bird:
    """The player's bird. Rotation is in degrees, velocities per frame."""
    x: float = BIRD_X
    y: float = BIRD_BASELINE_Y
    velocity: float = 0.0
    rotation: float = 0.0
    rot_velocity: float = 0.0
    rot_accel: float = 0.0
    radius: int = BIRD_RADIUS
    frame: int = 0                          # Index into BIRD_ANIMATION

    @property
    def animation_frame(self) -> int:
        """Sprite index for the current wing position."""
        return BIRD_ANIMATION[self.frame]


@dataclass
class Pipe:
    """A pipe pair sharing one gap. gap_y is the top edge of the gap."""
    x: float
    gap_y: float
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + PIPE_GAP

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH


@dataclass(frozen=True)
class HitRegion:
    """A tappable rectangle described by its center and size."""
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return (self.x - self.width / 2 <= px <= self.x + self.width / 2
                and self.y - self.height / 2 <= py <= self.y + self.height / 2)


@dataclass
class Session:
    """
    Everything the simulation mutates between frames.
    Step functions receive this explicitly instead of reading globals.
    """
    screen: ScreenState = ScreenState.SPLASH
    frame: int = 0
    score: int = 0
    best_score: int = 0
    session_best: int = 0                   # Best score when this run began
    bird_color: int = 0
    background: int = 0
    flash_opacity: float = 0.0
    ground_x: float = 0.0
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    notice: str = ""
    notice_timer: int = 0

    @property
    def is_new_best(self) -> bool:
        return self.score > self.session_best
