"""Console trivia game for two to four players with a persistent high-score table."""

__version__ = "0.1.0"