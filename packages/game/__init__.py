from .config import GameConfig, ALPHABET, KEYBOARD_ROWS, DEFAULT_WORD_LENGTH, DEFAULT_MAX_ATTEMPTS
from .session import GameSession, GameState, create_session, session_from_config
from .keys import dispatch_key, ENTER, BACKSPACE

__all__ = [
    "GameConfig", "ALPHABET", "KEYBOARD_ROWS", "DEFAULT_WORD_LENGTH", "DEFAULT_MAX_ATTEMPTS",
    "GameSession", "GameState", "create_session", "session_from_config",
    "dispatch_key", "ENTER", "BACKSPACE",
]
