"""
High-score storage contract.

Storage is an external collaborator. The game only needs these two calls and
keeps working, with a score of 0, when they fail.
"""

from abc import ABC, abstractmethod


class HighScoreStore(ABC):
    """Abstract high-score persistence."""

    @abstractmethod
    def load_high_score(self) -> int:
        """
        Load the stored high score.

        Returns:
            The best score recorded so far
        """
        pass

    @abstractmethod
    def save_high_score(self, score: int) -> None:
        """
        Store a new high score.

        Args:
            score: Score to persist
        """
        pass


class NullHighScoreStore(HighScoreStore):
    """Store that remembers nothing."""

    def load_high_score(self) -> int:
        return 0

    def save_high_score(self, score: int) -> None:
        pass


class InMemoryHighScoreStore(HighScoreStore):
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, initial: int = 0):
        self.high_score = initial

    def load_high_score(self) -> int:
        return self.high_score

    def save_high_score(self, score: int) -> None:
        self.high_score = max(self.high_score, score)
