# apps/cli/play.py
"""
Terminal front end for one game.

This script:
  1) Picks the hidden word (explicit --target, or a seeded pick from a word list).
  2) Builds a session from the rule flags (--length, --attempts).
  3) Replays each typed line as key presses until the game ends or input runs out:
       - letters are typed into the current row
       - '<' is Backspace
       - the end of the line is Enter
       - a line that would overflow the row is rejected as a whole
  4) Prints the board (letters + G/Y/-/. pattern) and the keyboard after every line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Optional

from packages.datasets import default_words_path, load_words, pick_target
from packages.engine import Guess, LetterStatus, to_pattern
from packages.game import (
    BACKSPACE, ENTER, DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_LENGTH, GameConfig, GameSession,
    dispatch_key, session_from_config,
)

log = logging.getLogger(__name__)

BACKSPACE_CHAR = "<"


def render_row(row: Guess) -> str:
    """
    Example: (("c", correct), ("r", wrong), ...) -> "C R A N E   G-Y--"
    """
    letters = " ".join(letter.upper() if letter else "_" for letter, _ in row)
    return f"{letters}   {to_pattern(row)}"


def render_keyboard(aggregate: Dict[str, LetterStatus], rows: Iterable[str]) -> List[str]:
    out = []
    for row in rows:
        keys = [f"{k}{aggregate.get(k, LetterStatus.EMPTY).symbol}" for k in row]
        out.append(" ".join(keys))
    return out


def render(session: GameSession, keyboard_rows: Iterable[str]) -> str:
    lines = [render_row(row) for row in session.board_view()]
    lines.append("")
    lines += render_keyboard(session.keyboard_aggregate(), keyboard_rows)
    return "\n".join(lines)


def line_to_keys(line: str) -> List[str]:
    """Translate one typed line into key names, ending with Enter."""
    keys = [BACKSPACE if ch == BACKSPACE_CHAR else ch for ch in line.strip()]
    keys.append(ENTER)
    return keys


def typed_length(current: str, line: str) -> int:
    """Length of the row after replaying `line` on top of `current`."""
    n = len(current)
    for ch in line.strip():
        n = max(0, n - 1) if ch == BACKSPACE_CHAR else n + 1
    return n


def play(session: GameSession, keyboard_rows: Iterable[str], *,
         read_line: Optional[Callable[[str], str]] = None,
         write: Callable[[str], None] = print) -> None:
    """
    Drive `session` from `read_line` (stdin by default) until the game is over
    or input ends (EOF).
    """
    read_line = read_line or input
    keyboard_rows = list(keyboard_rows)
    write(render(session, keyboard_rows))

    while not session.is_game_over:
        try:
            line = read_line(f"guess {len(session.history) + 1}/{session.max_attempts}> ")
        except EOFError:
            write("")
            write("Bye.")
            return

        typed = typed_length(session.current_input, line)
        if typed > session.length:
            write(f"Too many letters ({typed}/{session.length}).")
            continue

        before = len(session.history)
        for key in line_to_keys(line):
            dispatch_key(session, key)

        if len(session.history) == before:
            write(f"Not enough letters ({len(session.current_input)}/{session.length}).")
        write(render(session, keyboard_rows))

    if session.is_win:
        write(f"Solved in {len(session.history)}/{session.max_attempts}!")
    else:
        write(f"Out of guesses. The word was {session.target.upper()}.")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordgame: guess the hidden word")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH,
                    help="word length (default: %(default)s)")
    ap.add_argument("--attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="number of guesses allowed (default: %(default)s)")
    ap.add_argument("--words", help="path to a newline-separated word list "
                                    "(default: bundled answers_<length>.txt)")
    ap.add_argument("--target", help="play this word instead of picking one from the list")
    ap.add_argument("--seed", type=int, help="RNG seed for the word pick (for reproducibility)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity on stderr (default: %(default)s)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, pick the word, and play one game on stdin/stdout.
    """
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    config = GameConfig(length=args.length, max_attempts=args.attempts)
    try:
        config.validate()
        if args.target:
            target = args.target
        else:
            words_path = args.words or default_words_path(config.length)
            target = pick_target(load_words(words_path, config.length), seed=args.seed)
        session = session_from_config(target, config)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    log.info("new game: length=%d attempts=%d", config.length, config.max_attempts)
    play(session, config.keyboard_rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
