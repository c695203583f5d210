"""Candidate word search for five-letter word puzzles."""

from __future__ import annotations

import itertools
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

WORD_LENGTH = 5
WILDCARD = "."
ALPHABET = string.ascii_lowercase


class InsufficientInformationError(ValueError):
    """Raised when a query constrains too little to be worth searching."""

    def __init__(self) -> None:
        super().__init__(
            "At least one letter or 5 known not occurring letters are needed."
        )


def _check_pattern(pattern: str) -> None:
    if len(pattern) != WORD_LENGTH:
        raise ValueError(
            f"pattern must have {WORD_LENGTH} characters, got {len(pattern)}"
        )


@dataclass(frozen=True)
class Query:
    """What is known about the hidden word.

    ``pattern`` holds a letter for every known position and ``.`` elsewhere.
    ``excluded`` letters may not fill an unknown position, every letter of
    ``includes`` must occur somewhere, and ``not_at[i]`` lists letters that
    may not stand at position ``i``.
    """

    pattern: str = WILDCARD * WORD_LENGTH
    excluded: str = ""
    includes: str = ""
    not_at: tuple[str, ...] = ("",) * WORD_LENGTH

    def __post_init__(self) -> None:
        _check_pattern(self.pattern)
        not_at = tuple(self.not_at)
        if len(not_at) != WORD_LENGTH:
            raise ValueError(
                f"not_at must have {WORD_LENGTH} entries, got {len(not_at)}"
            )
        object.__setattr__(self, "not_at", not_at)

    @property
    def known_letters(self) -> int:
        """Number of positions whose letter is known."""
        return sum(ch != WILDCARD for ch in self.pattern)

    def validate(self) -> None:
        """Raise InsufficientInformationError if the query is too open."""
        if (
            self.known_letters == 0
            and len(self.excluded) < WORD_LENGTH
            and not self.includes
        ):
            raise InsufficientInformationError()

    def accepts(self, word: str) -> bool:
        """Check the position bans and the required letters against ``word``."""
        if any(ch in banned for ch, banned in zip(word, self.not_at)):
            return False
        return all(ch in word for ch in self.includes)


def load_word_list(path: str | Path) -> frozenset[str]:
    """Read a word list with one word per line."""
    text = Path(path).read_text(encoding="utf-8")
    return frozenset(text.splitlines())


def expand_pattern(pattern: str, excluded: str = "") -> Iterator[str]:
    """Yield every word the pattern allows, in alphabetical order.

    Each ``.`` is replaced by every lower-case letter not in ``excluded``;
    known letters are kept as they are.
    """
    _check_pattern(pattern)
    free = [ch for ch in ALPHABET if ch not in excluded]
    choices = [free if ch == WILDCARD else [ch] for ch in pattern]
    for letters in itertools.product(*choices):
        yield "".join(letters)


def _fits_pattern(word: str, pattern: str, excluded: str) -> bool:
    if len(word) != len(pattern):
        return False
    return all(
        (ch in ALPHABET and ch not in excluded) if p == WILDCARD else ch == p
        for ch, p in zip(word, pattern)
    )


def search(words: Iterable[str], query: Query) -> list[str]:
    """Return the words of ``words`` that satisfy ``query``, sorted.

    The result is exactly the words produced by ``expand_pattern`` that are
    in ``words`` and accepted by the query, in the same order.
    """
    query.validate()
    return sorted(
        word
        for word in set(words)
        if _fits_pattern(word, query.pattern, query.excluded) and query.accepts(word)
    )