"""
Game configuration.

Single source of truth for the default rules and the keyboard layout. The
layout is read-only data: the alphabet is derived from it and never changes
while the process runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 6

# qwerty layout, top row first
KEYBOARD_ROWS: Tuple[str, ...] = ("qwertyuiop", "asdfghjkl", "zxcvbnm")
ALPHABET: FrozenSet[str] = frozenset("".join(KEYBOARD_ROWS))


@dataclass(frozen=True)
class GameConfig:
    length: int = DEFAULT_WORD_LENGTH
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    keyboard_rows: Tuple[str, ...] = KEYBOARD_ROWS

    @property
    def alphabet(self) -> FrozenSet[str]:
        return frozenset("".join(self.keyboard_rows))

    def validate(self) -> None:
        """Guardrail: reject rule sets no game could be played with."""
        if self.length <= 0:
            raise ValueError(f"length must be positive; got {self.length}")
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive; got {self.max_attempts}")
        if not self.keyboard_rows or not all(row.isalpha() and row.islower()
                                             for row in self.keyboard_rows):
            raise ValueError("keyboard_rows must be non-empty rows of lowercase letters")
