import pytest

from wordguess.evaluator import LetterState
from wordguess.session import (
    GameSession,
    KeyAction,
    RejectReason,
    SessionState,
)

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT

WRONG_GUESSES = ["slate", "pious", "mound", "tight", "zebra", "cocoa"]


@pytest.fixture
def session(make_bank):
    return GameSession(make_bank(["crane"]))


def test_new_session_is_in_progress(session):
    assert session.state is SessionState.IN_PROGRESS
    assert session.attempts == 0
    assert session.guesses == ()
    assert session.target is None
    assert session.peek_target() == "crane"


def test_valid_guess_is_scored_and_recorded(session):
    outcome = session.submit_guess("slate")
    assert outcome.accepted is True
    assert outcome.reason is None
    assert list(outcome.result) == [A, A, C, A, C]
    assert outcome.state is SessionState.IN_PROGRESS
    assert session.attempts == 1
    assert session.guesses[0].guess == "slate"


def test_guess_input_is_normalized(session):
    outcome = session.submit_guess("  SLATE ")
    assert outcome.accepted is True
    assert session.guesses[0].guess == "slate"


@pytest.mark.parametrize("raw", ["zzzzz", "cran", "cranes", "cr4ne", ""])
def test_invalid_guess_does_not_consume_attempt(session, raw):
    outcome = session.submit_guess(raw)
    assert outcome.accepted is False
    assert outcome.reason is RejectReason.INVALID_GUESS
    assert outcome.result is None
    assert outcome.state is SessionState.IN_PROGRESS
    assert session.attempts == 0


def test_win_transitions_to_won(session):
    session.submit_guess("slate")
    outcome = session.submit_guess("crane")
    assert outcome.accepted is True
    assert outcome.result.is_win
    assert session.state is SessionState.WON
    assert session.is_winner is True
    assert session.target == "crane"


def test_loss_after_max_guesses(session):
    for guess in WRONG_GUESSES[:-1]:
        assert session.submit_guess(guess).state is SessionState.IN_PROGRESS
    outcome = session.submit_guess(WRONG_GUESSES[-1])
    assert outcome.accepted is True
    assert outcome.state is SessionState.LOST
    assert session.attempts == 6
    assert session.is_winner is False


def test_win_on_last_attempt_is_a_win(session):
    for guess in WRONG_GUESSES[:-1]:
        session.submit_guess(guess)
    assert session.submit_guess("crane").state is SessionState.WON


@pytest.mark.parametrize("final", ["crane", "cocoa"])
def test_terminal_state_ignores_further_guesses(session, final):
    for guess in WRONG_GUESSES[:-1]:
        session.submit_guess(guess)
    session.submit_guess(final)
    state = session.state
    history = session.guesses

    outcome = session.submit_guess("crane")
    assert outcome.accepted is False
    assert outcome.reason is RejectReason.GAME_OVER
    assert session.state is state
    assert session.guesses == history
    assert session.handle_key("a").action is KeyAction.IGNORED


def test_custom_max_guesses(make_bank):
    session = GameSession(make_bank(["crane"]), max_guesses=2)
    session.submit_guess("slate")
    assert session.submit_guess("mound").state is SessionState.LOST


def test_max_guesses_must_be_positive(make_bank):
    with pytest.raises(ValueError):
        GameSession(make_bank(["crane"]), max_guesses=0)


def test_reset_draws_new_target_and_clears_history(make_bank):
    session = GameSession(make_bank(["crane", "slate"]))
    first = session.peek_target()
    session.submit_guess(first)
    assert session.state is SessionState.WON

    session.reset()
    assert session.state is SessionState.IN_PROGRESS
    assert session.attempts == 0
    assert session.guesses == ()
    assert session.keyboard.snapshot() == {}
    assert session.peek_target() != first


def test_reset_falls_back_when_bank_is_exhausted(session):
    session.reset()
    assert session.peek_target() == "sorry"
    assert session.submit_guess("sorry").state is SessionState.WON


def test_keyboard_never_regresses(make_bank):
    session = GameSession(make_bank(["those"]))
    session.submit_guess("robot")
    # first o PRESENT, second o ABSENT in the same guess
    assert session.keyboard.state_of("o") is P
    session.submit_guess("those")
    assert session.keyboard.state_of("o") is C
    assert session.keyboard.state_of("r") is A


def test_keyboard_correct_key_stays_correct(make_bank):
    session = GameSession(make_bank(["crane"]))
    session.submit_guess("cocoa")
    assert session.keyboard.state_of("c") is C
    assert session.keyboard.state_of("a") is P
    session.submit_guess("abide")
    assert session.keyboard.state_of("a") is P
    assert session.keyboard.state_of("c") is C


def test_sessions_sharing_a_bank_get_different_targets(make_bank):
    bank = make_bank(["crane", "slate"])
    first = GameSession(bank)
    second = GameSession(bank)
    assert {first.peek_target(), second.peek_target()} == {"crane", "slate"}
    # each session validates its own target
    assert first.submit_guess(first.peek_target()).state is SessionState.WON
    assert second.submit_guess(second.peek_target()).state is SessionState.WON


def type_word(session, word):
    return [session.handle_key(letter) for letter in word]


def test_handle_key_builds_and_submits_guess(session):
    outcomes = type_word(session, "slate")
    assert all(o.action is KeyAction.ADDED for o in outcomes)
    assert session.current_guess == "slate"

    outcome = session.handle_key("Enter")
    assert outcome.action is KeyAction.SUBMITTED
    assert outcome.guess.accepted is True
    assert session.current_guess == ""
    assert session.attempts == 1


def test_handle_key_backspace(session):
    type_word(session, "sla")
    assert session.handle_key("Backspace").action is KeyAction.REMOVED
    assert session.current_guess == "sl"
    session.handle_key("Backspace")
    session.handle_key("\b")
    assert session.current_guess == ""
    assert session.handle_key("Backspace").action is KeyAction.REMOVED


@pytest.mark.parametrize("key", ["Enter", "\n", "1", "Shift", ""])
def test_handle_key_invalid_on_partial_row(session, key):
    type_word(session, "sla")
    assert session.handle_key(key).action is KeyAction.INVALID
    assert session.current_guess == "sla"
    assert session.attempts == 0


def test_handle_key_letter_on_full_row_is_invalid(session):
    type_word(session, "slate")
    assert session.handle_key("x").action is KeyAction.INVALID
    assert session.current_guess == "slate"


def test_handle_key_unknown_word_keeps_buffer(session):
    type_word(session, "zzzzz")
    outcome = session.handle_key("Enter")
    assert outcome.action is KeyAction.REJECTED
    assert outcome.guess.reason is RejectReason.INVALID_GUESS
    assert session.current_guess == "zzzzz"
    assert session.attempts == 0


def test_handle_key_uppercase_letters(session):
    type_word(session, "CRANE")
    assert session.handle_key("ENTER").guess.state is SessionState.WON


def test_board_layout(session):
    session.submit_guess("slate")
    type_word(session, "cr")
    rows = session.board()
    assert len(rows) == 6
    assert rows[0] == list(zip("slate", [A, A, C, A, C]))
    assert rows[1][:2] == [("c", LetterState.ENTERED), ("r", LetterState.ENTERED)]
    assert rows[1][2] == ("", LetterState.INITIAL)
    assert rows[5] == [("", LetterState.INITIAL)] * 5


def test_target_revealed_only_when_over(session):
    session.submit_guess("slate")
    assert session.target is None
    session.submit_guess("crane")
    assert session.target == "crane"
