import random

import pytest

from flappy.engine import GameEngine
from flappy.scheduler import Scheduler
from flappy.score_db import ScoreDatabase


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class MemoryStore:
    def __init__(self, best=0):
        self.best = best
        self.writes = []

    def get_best_score(self):
        return self.best

    def set_best_score(self, value):
        self.writes.append(value)
        self.best = max(self.best, value)

    def reset_best_score(self):
        self.best = 0


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def db():
    database = ScoreDatabase(":memory:")
    yield database
    database.close()


@pytest.fixture
def engine(store, audio, clock):
    eng = GameEngine(store=store, audio=audio, scheduler=Scheduler(clock), rng=random.Random(7))
    eng.start()
    return eng
