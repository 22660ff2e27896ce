import pytest
from packages.engine import LetterStatus, to_pattern
from packages.game import GameConfig, GameState, create_session, session_from_config

E = LetterStatus.EMPTY


def type_word(session, word):
    for ch in word:
        session.append_letter(ch)


def snapshot(session):
    return (session.history, session.current_input, session.is_game_over, session.is_win)


# --- construction ---

def test_new_session_is_playing():
    s = create_session("crane", 5, 6)
    assert s.state is GameState.PLAYING
    assert s.history == ()
    assert s.current_input == ""
    assert s.is_game_over is False and s.is_win is False


@pytest.mark.parametrize("target,length,attempts", [
    ("crane", 6, 6),     # length mismatch
    ("", 0, 6),          # empty word
    ("crane", 5, 0),     # no attempts
    ("cr4ne", 5, 6),     # not in alphabet
])
def test_create_session_rejects_bad_preconditions(target, length, attempts):
    with pytest.raises(ValueError):
        create_session(target, length, attempts)


def test_target_is_lowercased():
    s = create_session("CRANE", 5, 6)
    assert s.target == "crane"
    assert s.submit_guess("crane") is True
    assert s.is_win


def test_session_from_config():
    s = session_from_config("letter", GameConfig(length=6, max_attempts=3))
    assert (s.length, s.max_attempts) == (6, 3)
    with pytest.raises(ValueError):
        session_from_config("letter", GameConfig(length=6, max_attempts=-1))


# --- input shaping ---

def test_append_letter_lowercases_and_caps_length():
    s = create_session("crane", 5, 6)
    type_word(s, "ABCDEFG")
    assert s.current_input == "abcde"
    assert s.append_letter("x") is False
    assert s.current_input == "abcde"


@pytest.mark.parametrize("ch", ["1", "!", " ", "é", "ab", ""])
def test_append_letter_ignores_non_alphabet(ch):
    s = create_session("crane", 5, 6)
    assert s.append_letter(ch) is False
    assert s.current_input == ""


def test_delete_last_letter():
    s = create_session("crane", 5, 6)
    assert s.delete_last_letter() is False  # already empty
    type_word(s, "cr")
    assert s.delete_last_letter() is True
    assert s.current_input == "c"


@pytest.mark.parametrize("raw", ["", "cra", "cranes", "cr4ne"])
def test_incomplete_guess_never_appends(raw):
    s = create_session("crane", 5, 6)
    type_word(s, "cra")
    assert s.submit_guess(raw) is False
    assert s.history == ()
    assert s.current_input == "cra"


def test_submit_clears_current_input():
    s = create_session("crane", 5, 6)
    type_word(s, "raise")
    assert s.submit_guess(s.current_input) is True
    assert s.current_input == ""
    assert len(s.history) == 1
    assert to_pattern(s.history[0]) == "YY--G"


# --- termination ---

def test_loss_after_max_attempts():
    s = create_session("crane", 5, 3)
    for word in ["raise", "stare", "slump"]:
        assert s.submit_guess(word) is True
    assert s.is_game_over is True
    assert s.is_win is False
    assert s.state is GameState.LOST


def test_win_short_circuits_before_budget():
    s = create_session("crane", 5, 6)
    s.submit_guess("raise")
    s.submit_guess("crane")
    assert len(s.history) == 2
    assert s.is_game_over is True
    assert s.is_win is True
    assert s.state is GameState.WON


def test_win_on_last_attempt_is_a_win():
    s = create_session("crane", 5, 2)
    s.submit_guess("raise")
    s.submit_guess("crane")
    assert s.state is GameState.WON


@pytest.mark.parametrize("finish", [
    ["crane"],                              # won
    ["raise", "stare", "slump"],            # lost
])
def test_terminal_state_rejects_everything(finish):
    s = create_session("crane", 5, 3)
    for word in finish:
        s.submit_guess(word)
    before = snapshot(s)

    assert s.append_letter("a") is False
    assert s.delete_last_letter() is False
    assert s.submit_guess("trace") is False
    assert snapshot(s) == before


# --- derived views ---

def test_keyboard_aggregate_matches_history():
    s = create_session("crane", 5, 6)
    s.submit_guess("cabin")
    s.submit_guess("occur")
    agg = s.keyboard_aggregate()
    assert agg["c"] is LetterStatus.CORRECT
    assert agg["o"] is LetterStatus.WRONG
    assert s.keyboard_aggregate() == agg


def test_board_view_rows():
    s = create_session("crane", 5, 4)
    s.submit_guess("raise")
    type_word(s, "cr")
    board = s.board_view()

    assert len(board) == 4
    assert all(len(row) == 5 for row in board)
    assert board[0] == s.history[0]
    assert board[1] == (("c", E), ("r", E), ("", E), ("", E), ("", E))
    assert board[2] == (("", E),) * 5
    assert board[3] == (("", E),) * 5


def test_board_view_when_lost_has_only_guesses():
    s = create_session("crane", 5, 2)
    s.submit_guess("raise")
    s.submit_guess("stare")
    board = s.board_view()
    assert board == list(s.history)


def test_board_view_after_early_win():
    s = create_session("crane", 5, 6)
    s.submit_guess("raise")
    s.submit_guess("crane")
    board = s.board_view()

    assert len(board) == 6
    assert board[:2] == list(s.history)
    # row at len(history) is a blank in-progress row, later rows are blank too
    assert all(row == (("", E),) * 5 for row in board[2:])
