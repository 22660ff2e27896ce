from .status import LetterStatus, Guess, Tile
from .scoring import evaluate, to_pattern, guess_word
from .keyboard import aggregate_letters
from .validation import normalize_letter, is_complete_guess

__all__ = [
    "LetterStatus", "Guess", "Tile",
    "evaluate", "to_pattern", "guess_word",
    "aggregate_letters",
    "normalize_letter", "is_complete_guess",
]
