"""
Game session: the state machine for one game.

States:
  PLAYING -> WON   when a submitted guess spells the target
  PLAYING -> LOST  when the attempt budget is used up without a win
WON and LOST are terminal. A session is single-use; a new game needs a new
session.

Invalid player actions (typing past the word length, unknown characters,
pressing Enter early, anything after the game is over) are no-ops. They are
expected input, so they are logged at DEBUG level and reported through the
boolean return value, never raised.

The session does no I/O and holds no locks: it must be driven by one caller,
one event at a time.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import AbstractSet, Dict, List, Tuple

from packages.engine import (
    Guess, LetterStatus, Tile, aggregate_letters, evaluate, guess_word,
    is_complete_guess, normalize_letter, to_pattern,
)
from .config import ALPHABET, GameConfig

logger = logging.getLogger(__name__)

EMPTY_TILE: Tile = ("", LetterStatus.EMPTY)


class GameState(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    Holds the target, the guess history and the in-progress input.

    Everything else (win flag, game-over flag, keyboard aggregate, board) is
    derived from those on demand.
    """

    def __init__(self, target: str, *, length: int, max_attempts: int,
                 alphabet: AbstractSet[str] = ALPHABET):
        if len(target) != length:
            raise ValueError(
                f"target must have length {length}; got {target!r} ({len(target)})")
        if length <= 0:
            raise ValueError(f"length must be positive; got {length}")
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive; got {max_attempts}")

        target = target.lower()
        if any(ch not in alphabet for ch in target):
            raise ValueError(f"target {target!r} uses letters outside the alphabet")

        self._target = target
        self._length = int(length)
        self._max_attempts = int(max_attempts)
        self._alphabet = frozenset(alphabet)

        self._history: List[Guess] = []
        self._current = ""

    # ---- read-only properties ----

    @property
    def target(self) -> str:
        return self._target

    @property
    def length(self) -> int:
        return self._length

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def alphabet(self) -> AbstractSet[str]:
        return self._alphabet

    @property
    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def current_input(self) -> str:
        return self._current

    @property
    def is_win(self) -> bool:
        # Full-history scan: any guess spelling the target is a win.
        return any(guess_word(g) == self._target for g in self._history)

    @property
    def is_game_over(self) -> bool:
        return self.is_win or len(self._history) >= self._max_attempts

    @property
    def state(self) -> GameState:
        if self.is_win:
            return GameState.WON
        if len(self._history) >= self._max_attempts:
            return GameState.LOST
        return GameState.PLAYING

    # ---- transitions ----

    def append_letter(self, ch: str) -> bool:
        """Type one letter into the in-progress row."""
        if self.is_game_over:
            logger.debug("append_letter(%r) ignored: game is over", ch)
            return False
        if len(self._current) >= self._length:
            logger.debug("append_letter(%r) ignored: row is full", ch)
            return False

        letter = normalize_letter(ch, self._alphabet)
        if letter is None:
            logger.debug("append_letter(%r) ignored: not in alphabet", ch)
            return False

        self._current += letter
        return True

    def delete_last_letter(self) -> bool:
        if self.is_game_over or not self._current:
            logger.debug("delete_last_letter ignored (game_over=%s, input=%r)",
                         self.is_game_over, self._current)
            return False
        self._current = self._current[:-1]
        return True

    def submit_guess(self, raw: str) -> bool:
        """
        Score `raw` against the target and record it.

        Rejected (no state change) when the game is over or `raw` is not a
        complete guess of the session's length.
        """
        if self.is_game_over:
            logger.debug("submit_guess(%r) ignored: game is over", raw)
            return False
        if not is_complete_guess(raw, self._alphabet, self._length):
            logger.debug("submit_guess(%r) ignored: need %d letters", raw, self._length)
            return False

        guess = evaluate(raw, self._target)
        self._history.append(guess)
        self._current = ""

        logger.info("guess %d/%d: %s %s", len(self._history), self._max_attempts,
                    guess_word(guess), to_pattern(guess))
        if self.is_game_over:
            logger.info("game over: %s after %d guess(es)", self.state.value,
                        len(self._history))
        return True

    # ---- derived views ----

    def keyboard_aggregate(self) -> Dict[str, LetterStatus]:
        return aggregate_letters(self._history)

    def board_view(self) -> List[Guess]:
        """
        One row per attempt, each padded to `length` tiles:
          - rows [0, len(history))  : submitted guesses
          - row len(history)        : in-progress input, all tiles empty
          - later rows              : blank
        """
        rows: List[Guess] = []
        done = len(self._history)

        for i in range(self._max_attempts):
            if i < done:
                rows.append(self._history[i])
            elif i == done:
                tiles = [(ch, LetterStatus.EMPTY) for ch in self._current]
                tiles += [EMPTY_TILE] * (self._length - len(tiles))
                rows.append(tuple(tiles))
            else:
                rows.append((EMPTY_TILE,) * self._length)

        return rows


def create_session(target: str, length: int, max_attempts: int, *,
                   alphabet: AbstractSet[str] = ALPHABET) -> GameSession:
    """
    Factory: start a new game. Raises ValueError when `target` does not have
    exactly `length` letters from `alphabet` or the limits are not positive.
    """
    return GameSession(target, length=length, max_attempts=max_attempts, alphabet=alphabet)


def session_from_config(target: str, config: GameConfig) -> GameSession:
    config.validate()
    return create_session(target, config.length, config.max_attempts,
                          alphabet=config.alphabet)
