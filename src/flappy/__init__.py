"""Flappy Bird arcade game: deterministic frame simulation plus a pygame client."""

from .data_models import Bird, HitRegion, Pipe, ScreenState, Session
from .engine import GameEngine
from .scheduler import Scheduler
from .score_db import ScoreDatabase

__all__ = [
    "GameEngine",
    "Session",
    "Bird",
    "Pipe",
    "HitRegion",
    "ScreenState",
    "Scheduler",
    "ScoreDatabase",
]
