# highscore.py - Highscore Table and Persistence
"""
Per-level best times, counted in ticks (lower is better).
Saved to a small text file, one "level frame_count" pair per line.
"""

import logging
from typing import Iterator

from config import FREQ, HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighscoreTable:
    """Mapping of level index -> best (lowest) frame count."""

    def __init__(self, scores: dict[int, int] | None = None) -> None:
        self._scores: dict[int, int] = dict(scores or {})

    def best(self, level: int) -> int | None:
        return self._scores.get(level)

    def is_record(self, level: int, frame_count: int) -> bool:
        """A run is a record only when strictly faster than the stored best."""
        best = self._scores.get(level)
        return best is None or frame_count < best

    def record(self, level: int, frame_count: int) -> bool:
        """
        Store a run if it is a record.
        Returns:
            bool: True if the table changed.
        """
        if not self.is_record(level, frame_count):
            return False
        self._scores[level] = frame_count
        return True

    def total_frames(self) -> int:
        return sum(self._scores.values())

    def total_seconds(self) -> float:
        return self.total_frames() * FREQ

    def items(self) -> Iterator[tuple[int, int]]:
        return iter(sorted(self._scores.items()))

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, level: object) -> bool:
        return level in self._scores

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HighscoreTable):
            return NotImplemented
        return self._scores == other._scores

    def __repr__(self) -> str:
        return f"HighscoreTable({self._scores!r})"


def load_high_scores(path: str = HIGHSCORE_FILE) -> HighscoreTable:
    """
    Load the highscore table from file.
    Returns:
        HighscoreTable: the saved scores, empty if the file doesn't exist.
    """
    table = HighscoreTable()
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except FileNotFoundError:
        logger.info("New save data")
        return table
    except OSError as exc:
        logger.warning("Could not read highscores from %s: %s", path, exc)
        return table

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            level_str, frames_str = line.split()
            level, frames = int(level_str), int(frames_str)
        except ValueError:
            logger.warning("Ignoring malformed highscore line %d: %r", lineno, line)
            continue
        if level < 0 or frames < 0:
            logger.warning("Ignoring negative highscore line %d: %r", lineno, line)
            continue
        table.record(level, frames)

    logger.info("Loading saved data (%d levels)", len(table))
    return table


def save_high_scores(table: HighscoreTable, path: str = HIGHSCORE_FILE) -> bool:
    """
    Save the highscore table to file.
    Returns:
        bool: False if the file could not be written (the game keeps going).
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            for level, frames in table.items():
                f.write(f"{level} {frames}\n")
    except OSError as exc:
        logger.warning("Failed to store highscores to %s: %s", path, exc)
        return False
    return True
