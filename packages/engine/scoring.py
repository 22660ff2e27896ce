"""
Wordle-style feedback for a single (guess, target) pair.

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (a target letter can satisfy at most one guess letter)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) Copy the target into a scratch list. First pass marks every position
     where guess and target agree as correct and consumes that target slot.
  2) Second pass walks the remaining positions left to right and looks for
     the first unconsumed target slot holding the same letter. Found means
     misplaced (and the slot is consumed), otherwise wrong.

Resolving all exact matches first guarantees a letter in the right spot is
never stolen by an earlier copy of the same letter in the wrong spot.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .status import Guess, LetterStatus, Tile


def evaluate(guess: str, target: str) -> Guess:
    """
    Compute per-letter feedback for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); raises ValueError otherwise

    Returns:
      - tuple of (letter, LetterStatus), one per guess position

    Examples:
      evaluate("eagle", "geese") -> statuses Y - Y - G
      evaluate("crane", "crane") -> statuses G G G G G
    """
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target must be the same length; got {len(guess)} and {len(target)}")
    # lower() can lengthen some characters ("İ" -> "i̇"); keep one letter per position
    guess = "".join(ch.lower()[0] for ch in guess)
    target = "".join(ch.lower()[0] for ch in target)

    n = len(guess)
    statuses: List[Optional[LetterStatus]] = [None] * n

    # Scratch copy of the target; a consumed slot becomes None.
    remaining: List[Optional[str]] = list(target)

    # Pass 1: exact matches.
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            statuses[i] = LetterStatus.CORRECT
            remaining[i] = None

    # Pass 2: misplaced letters take the leftmost unconsumed slot.
    for i, g in enumerate(guess):
        if statuses[i] is not None:
            continue
        try:
            j = remaining.index(g)
        except ValueError:
            statuses[i] = LetterStatus.WRONG
        else:
            statuses[i] = LetterStatus.MISPLACED
            remaining[j] = None

    return tuple(zip(guess, statuses))


def to_pattern(tiles: Iterable[Tile]) -> str:
    """
    Compact pattern string for a row of tiles.
    Example: evaluate("eagle", "geese") -> "Y-Y-G"
    """
    return "".join(status.symbol for _, status in tiles)


def guess_word(tiles: Iterable[Tile]) -> str:
    return "".join(letter for letter, _ in tiles)
