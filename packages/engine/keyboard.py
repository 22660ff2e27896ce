"""
Keyboard aggregate: the best status known for each letter across a history.

"Best" follows the status quality ordering:
    correct > misplaced > wrong > empty

so a letter that has been seen in the right spot once stays correct no matter
what later guesses report for it. Letters never guessed are simply absent
from the mapping; renderers show them as empty.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .status import Guess, LetterStatus


def aggregate_letters(history: Iterable[Guess]) -> Dict[str, LetterStatus]:
    """
    Fold a guess history into {letter: best LetterStatus}.

    Single pass over every tile; recomputing on an unchanged history always
    yields an equal mapping.
    """
    best: Dict[str, LetterStatus] = {}

    for guess in history:
        for letter, status in guess:
            seen = best.get(letter)
            if seen is None or status.rank > seen.rank:
                best[letter] = status

    return best
