"""
score_db.py: SQLite persistence for the best score.
Reads and writes are best-effort: failures are logged and never reach the frame loop.
"""

import logging
import sqlite3

from .constants import BEST_SCORE_KEY, DB_FILE

logger = logging.getLogger(__name__)


class ScoreDatabase:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE, key: str = BEST_SCORE_KEY):
        self.key = key
        try:
            self.conn = sqlite3.connect(db_file)
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error as e:
            logger.warning("Could not open %s, best score kept in memory: %s", db_file, e)
            self.conn = sqlite3.connect(":memory:")
            self.cur = self.conn.cursor()
            self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                key TEXT PRIMARY KEY,
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def get_best_score(self) -> int:
        """Returns the stored best score, or 0 if absent or unreadable."""
        try:
            self.cur.execute("SELECT best FROM Scores WHERE key=?", (self.key,))
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read best score: %s", e)
            return 0
        if row is None:
            return 0
        return int(row[0])

    def set_best_score(self, value: int):
        """Stores value as the best score unless a higher one is already stored."""
        try:
            self.cur.execute("""
                INSERT INTO Scores (key, best) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET best = MAX(best, excluded.best)
            """, (self.key, int(value)))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save best score %d: %s", value, e)

    def reset_best_score(self):
        """Zeroes the stored best score."""
        try:
            self.cur.execute("""
                INSERT INTO Scores (key, best) VALUES (?, 0)
                ON CONFLICT(key) DO UPDATE SET best = 0
            """, (self.key,))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not reset best score: %s", e)

    def close(self):
        self.conn.close()
