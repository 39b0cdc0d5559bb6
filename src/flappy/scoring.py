"""
scoring.py: Current score and best score bookkeeping for a session.
"""

import logging
from typing import Protocol

from .data_models import Session

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def get_best_score(self) -> int: ...

    def set_best_score(self, value: int): ...

    def reset_best_score(self): ...


class ScoreKeeper:
    """
    Bridges the session's score fields and the persistent store.
    The best score only ever grows, and the store only sees new highs.
    """

    def __init__(self, store: ScoreStore):
        self.store = store

    def load(self, session: Session):
        session.best_score = max(0, self.store.get_best_score())
        session.session_best = session.best_score

    def reset(self, session: Session):
        session.score = 0
        session.session_best = session.best_score

    def add_point(self, session: Session):
        session.score += 1
        self.commit(session)

    def commit(self, session: Session):
        """Raises best_score to the current score and persists it if it grew."""
        if session.score <= session.best_score:
            return
        session.best_score = session.score
        self.store.set_best_score(session.best_score)
        logger.debug("New best score %d", session.best_score)

    def reset_best(self, session: Session):
        self.store.reset_best_score()
        session.best_score = 0
        session.session_best = 0
        logger.info("Best score reset to 0")
