from wordguess.evaluator import EvaluationResult, LetterState, evaluate, is_win
from wordguess.keyboard import KEYBOARD_LAYOUT, KeyboardState
from wordguess.session import GameSession, GuessOutcome, SessionState
from wordguess.word_bank import ExhaustionPolicy, WordBank, WordListError, load_word_list

__all__ = [
    "EvaluationResult",
    "ExhaustionPolicy",
    "GameSession",
    "GuessOutcome",
    "KEYBOARD_LAYOUT",
    "KeyboardState",
    "LetterState",
    "SessionState",
    "WordBank",
    "WordListError",
    "evaluate",
    "is_win",
    "load_word_list",
]
