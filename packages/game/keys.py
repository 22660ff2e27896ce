"""
Key routing: translate key names coming from an input layer (terminal,
browser, virtual keyboard) into session calls.

  "Enter"      -> submit the current input
  "Backspace"  -> delete the last letter
  anything else is treated as a letter key
"""

from __future__ import annotations

from .session import GameSession

ENTER = "Enter"
BACKSPACE = "Backspace"


def dispatch_key(session: GameSession, key: str) -> bool:
    """
    Apply one key press. Returns True if the session state changed.
    Keys are ignored once the game is over.
    """
    if session.is_game_over:
        return False
    if key == ENTER:
        return session.submit_guess(session.current_input)
    if key == BACKSPACE:
        return session.delete_last_letter()
    return session.append_letter(key)
