"""
Word lists for choosing a target word.

Rules applied when loading a list:
  - one token per line, surrounding whitespace ignored
  - lowercased
  - must be a-z only and have exact length N
  - duplicates dropped (first occurrence wins, order preserved)

Lines that break the rules are skipped and counted; the count is logged so a
bad list is noticed without stopping the game.

Typical use:
    from packages.datasets import load_words, pick_target, default_words_path
    words = load_words(default_words_path(), 5)
    target = pick_target(words, seed=7)
"""

from __future__ import annotations

import logging
import random
import string
from pathlib import Path
from typing import List, Sequence

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"

_LETTERS = frozenset(string.ascii_lowercase)


def default_words_path(N: int = 5) -> Path:
    """Bundled answers list for word length N (only N=5 ships with the package)."""
    return DATA_DIR / f"answers_{N}.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(path: Path | str, N: int) -> List[str]:
    """
    Load the usable N-letter words from `path`.

    Raises:
      FileNotFoundError : the file does not exist
      ValueError        : no line survives the rules above
    """
    words: List[str] = []
    seen = set()
    skipped = 0

    for raw in read_lines(path):
        w = raw.strip().lower()
        if not w:
            continue  # blank lines are not worth reporting
        if len(w) != N or not set(w) <= _LETTERS:
            skipped += 1
            continue
        if w in seen:
            continue
        seen.add(w)
        words.append(w)

    if skipped:
        logger.warning("%s: skipped %d line(s) that are not %d-letter a-z words",
                       path, skipped, N)
    if not words:
        raise ValueError(f"{path}: no usable {N}-letter words")

    logger.debug("%s: loaded %d word(s)", path, len(words))
    return words


def pick_target(words: Sequence[str], seed: int | None = None) -> str:
    """
    Choose the hidden word. With a seed the choice is reproducible.
    """
    if not words:
        raise ValueError("cannot pick a target from an empty word list")
    rng = random.Random(seed)
    return rng.choice(list(words))
