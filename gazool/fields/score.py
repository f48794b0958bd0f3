"""Current and high score."""
from dataclasses import dataclass


@dataclass
class ScoreState:
    """Score pair; `high` is a high-water mark and never decreases."""

    current: int = 0
    high: int = 0

    def update(self, score: int) -> None:
        """Set the current score, raising the high score to match if exceeded."""
        self.current = score
        if self.current > self.high:
            self.high = self.current

    def reset(self) -> None:
        """Zero the current score for a new round. The high score survives."""
        self.current = 0
