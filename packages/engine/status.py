"""
Letter feedback vocabulary shared by the evaluator, the session and renderers.

Conventions (pattern symbols, same notation as the logs and terminal UI):
  - 'G' : correct   = right letter, right position
  - 'Y' : misplaced = letter is in the target, at another position
  - '-' : wrong     = letter is absent (or present fewer times than guessed)
  - '.' : empty     = no feedback yet (tile not submitted)
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class LetterStatus(str, Enum):
    CORRECT = "correct"
    MISPLACED = "misplaced"
    WRONG = "wrong"
    EMPTY = "empty"

    @property
    def rank(self) -> int:
        """Quality used for keyboard aggregation (higher is better)."""
        return _RANK[self]

    @property
    def symbol(self) -> str:
        return _SYMBOL[self]


_RANK = {
    LetterStatus.EMPTY: 0,
    LetterStatus.WRONG: 1,
    LetterStatus.MISPLACED: 2,
    LetterStatus.CORRECT: 3,
}

_SYMBOL = {
    LetterStatus.CORRECT: "G",
    LetterStatus.MISPLACED: "Y",
    LetterStatus.WRONG: "-",
    LetterStatus.EMPTY: ".",
}

# One tile of feedback and one full submitted guess.
Tile = Tuple[str, LetterStatus]
Guess = Tuple[Tile, ...]
