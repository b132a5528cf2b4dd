"""Score keeping and the high-score file."""

from __future__ import annotations

from pathlib import Path

from dodgeball.timing import Timer, TimerMode

SCORE_INCREMENT_TIME = 1.5
SCORE_DELTA = 10
DEFAULT_PATH = Path("player_data.txt")


def read_high_score(path: str | Path) -> int:
    """Read the stored high score; raises if the file is missing or malformed."""
    text = Path(path).read_text()
    value = int(text)
    if value < 0:
        raise ValueError(f"invalid high score: {text!r}")
    return value


def write_high_score(path: str | Path, value: int) -> None:
    """Overwrite the high-score file with ``value``."""
    Path(path).write_text(str(value))


class Score:
    """The current score, its increment timer and the best score on record."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.value = 0
        self.score_delta = SCORE_DELTA
        self.highest_score = 0
        self.timer = Timer(SCORE_INCREMENT_TIME, TimerMode.REPEATING)

    def tick_timer(self, delta: float) -> None:
        """Advance the increment timer."""
        self.timer.tick(delta)

    def award(self) -> bool:
        """Add the score delta if the increment timer fired this frame."""
        if not self.timer.finished():
            return False
        self.value += self.score_delta
        return True

    def reset(self) -> None:
        """Zero the current score for a new round."""
        self.value = 0

    def load_highest(self) -> int:
        """Load the high score, creating the file with 0 if it does not exist."""
        if self.path.exists():
            self.highest_score = read_high_score(self.path)
        else:
            write_high_score(self.path, 0)
        return self.highest_score

    def save(self) -> int:
        """Store the current score if it beats the recorded one; return the high score."""
        if read_high_score(self.path) < self.value:
            write_high_score(self.path, self.value)
            self.highest_score = self.value
        return self.highest_score