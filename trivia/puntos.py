"""Per-player score keeping."""

from __future__ import annotations

from dataclasses import dataclass

POINTS_PER_ANSWER = 15


@dataclass
class Score:
    """Points earned in the last answer, in the current match and the best match ever."""

    last: int = 0
    current: int = 0
    best: int = 0

    def add(self) -> None:
        """Credit one correct answer."""
        self.last = POINTS_PER_ANSWER
        self.current += self.last

    def finalize(self) -> None:
        """Record the current match total as the best score."""
        self.best = self.current