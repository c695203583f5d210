"""A row of letter slots filled from key presses."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

from wordlehelper.solver import WILDCARD, WORD_LENGTH

_CLEAR_KEYS = frozenset({"delete", "backspace"})
_SKIP_KEYS = frozenset({"tab", "space", " "})


@dataclass
class LetterSlot:
    """One position of the word: the letter shown and whether it counts."""

    text: str = " "
    pressed: bool = False

    def reset(self) -> None:
        """Empty the slot."""
        self.text = " "
        self.pressed = False

    def press(self, key: str) -> bool:
        """Handle a key; return True if focus should move to the next slot.

        A letter fills the slot, Delete or Backspace empties it, Tab or Space
        empties it and moves on. Any other key leaves the shown letter but
        stops it from counting.
        """
        self.pressed = False
        if len(key) == 1 and key in string.ascii_letters:
            self.text = key.upper()
            self.pressed = True
            return True
        name = key.lower()
        if name in _CLEAR_KEYS:
            self.reset()
        elif name in _SKIP_KEYS:
            self.reset()
            return True
        return False

    def lower(self) -> str | None:
        """The slot's letter in lower case, or None if it holds none."""
        return self.text.lower() if self.pressed else None


@dataclass
class SlotRow:
    """A fixed row of slots with a focus that advances as letters are typed."""

    slots: list[LetterSlot] = field(
        default_factory=lambda: [LetterSlot() for _ in range(WORD_LENGTH)]
    )
    focus: int = 0

    def press(self, key: str) -> None:
        """Send a key to the focused slot, advancing focus when it asks."""
        if self.slots[self.focus].press(key) and self.focus < len(self.slots) - 1:
            self.focus += 1

    def pattern(self) -> str:
        """The row as a search pattern, with ``.`` for empty slots."""
        return "".join(slot.lower() or WILDCARD for slot in self.slots)

    def clear(self) -> None:
        """Empty every slot."""
        for slot in self.slots:
            slot.reset()