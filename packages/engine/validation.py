"""
Lightweight input shaping.

This module answers two questions for the session:
  - "Is this a single letter the player may type?"
  - "Is this a complete guess we can score right now?"

A guess is complete iff it has exact length N and every character belongs to
the game alphabet. There is no dictionary lookup: any N letters
are a legal guess.
"""

from __future__ import annotations

from typing import Container, Optional


def normalize_letter(ch: str, alphabet: Container[str]) -> Optional[str]:
    """
    Return the lowercase form of `ch` if it is one alphabet character,
    otherwise None.
    """
    if not isinstance(ch, str) or len(ch) != 1:
        return None
    letter = ch.lower()
    return letter if letter in alphabet else None


def is_complete_guess(word: str, alphabet: Container[str], N: int) -> bool:
    """
    Return True if `word` can be submitted as-is.

    Args:
      word     : proposed guess (case-insensitive)
      alphabet : letters the game recognises
      N        : required word length
    """
    if not isinstance(word, str) or len(word) != N:
        return False
    return all(ch in alphabet for ch in word.lower())
