"""Find the words in a word list that fit the Wordle letters you know."""

__version__ = "1.0.0"
__all__ = ["cli", "slots", "solver"]