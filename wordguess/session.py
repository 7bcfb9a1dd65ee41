from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from wordguess.evaluator import WORD_LENGTH, EvaluationResult, LetterState, evaluate
from wordguess.keyboard import BACKSPACE, ENTER, KeyboardState, normalize_key
from wordguess.word_bank import WordBank, normalize_word

logger = logging.getLogger(__name__)

MAX_GUESSES = 6


class SessionState(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class RejectReason(str, enum.Enum):
    INVALID_GUESS = "invalid_guess"
    GAME_OVER = "game_over"


class KeyAction(str, enum.Enum):
    ADDED = "added"
    REMOVED = "removed"
    SUBMITTED = "submitted"
    REJECTED = "rejected"
    INVALID = "invalid"
    IGNORED = "ignored"


@dataclass(frozen=True)
class GuessRecord:
    guess: str
    result: EvaluationResult


@dataclass(frozen=True)
class GuessOutcome:
    """What happened to one submitted guess."""

    accepted: bool
    state: SessionState
    result: Optional[EvaluationResult] = None
    reason: Optional[RejectReason] = None


@dataclass(frozen=True)
class KeyOutcome:
    action: KeyAction
    guess: Optional[GuessOutcome] = None


class GameSession:
    """One player's round against a target drawn from a shared WordBank."""

    def __init__(self, bank: WordBank, *, max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive, got {max_guesses}")
        self.bank = bank
        self.max_guesses = max_guesses
        self.keyboard = KeyboardState()
        self._guesses: List[GuessRecord] = []
        self._buffer: List[str] = []
        self._state = SessionState.IN_PROGRESS
        self._target = bank.draw_target()
        logger.debug("Session started with %s attempts", self.max_guesses)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def attempts(self) -> int:
        return len(self._guesses)

    @property
    def guesses(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._guesses)

    @property
    def current_guess(self) -> str:
        return "".join(self._buffer)

    @property
    def is_game_over(self) -> bool:
        return self._state is not SessionState.IN_PROGRESS

    @property
    def is_winner(self) -> bool:
        return self._state is SessionState.WON

    @property
    def target(self) -> Optional[str]:
        """The target word, hidden until the round is over."""
        return self._target if self.is_game_over else None

    def peek_target(self) -> str:
        return self._target

    def submit_guess(self, raw: str) -> GuessOutcome:
        if self.is_game_over:
            return GuessOutcome(False, self._state, reason=RejectReason.GAME_OVER)

        if not self.bank.is_valid_guess(raw, target=self._target):
            logger.debug("Rejected guess %r", raw)
            return GuessOutcome(False, self._state, reason=RejectReason.INVALID_GUESS)

        guess = normalize_word(raw)
        result = evaluate(self._target, guess)
        self._guesses.append(GuessRecord(guess, result))
        self.keyboard.update(guess, result)

        if result.is_win:
            self._state = SessionState.WON
        elif self.attempts >= self.max_guesses:
            self._state = SessionState.LOST
        if self.is_game_over:
            logger.debug("Round finished: %s after %s attempt(s)", self._state.value, self.attempts)
        return GuessOutcome(True, self._state, result=result)

    def handle_key(self, key: str) -> KeyOutcome:
        """Feed one key press (on-screen or physical) into the letter buffer."""
        if self.is_game_over:
            return KeyOutcome(KeyAction.IGNORED)

        normalized = normalize_key(key)
        if normalized == BACKSPACE:
            if self._buffer:
                self._buffer.pop()
            return KeyOutcome(KeyAction.REMOVED)
        if normalized is not None and normalized != ENTER and len(self._buffer) < WORD_LENGTH:
            self._buffer.append(normalized)
            return KeyOutcome(KeyAction.ADDED)
        if normalized == ENTER and len(self._buffer) == WORD_LENGTH:
            outcome = self.submit_guess(self.current_guess)
            if not outcome.accepted:
                return KeyOutcome(KeyAction.REJECTED, outcome)
            self._buffer.clear()
            return KeyOutcome(KeyAction.SUBMITTED, outcome)
        return KeyOutcome(KeyAction.INVALID)

    def board(self) -> List[List[Tuple[str, LetterState]]]:
        """All rows of the board: scored guesses, the buffered row, then blanks."""
        rows: List[List[Tuple[str, LetterState]]] = [
            list(zip(record.guess, record.result)) for record in self._guesses
        ]
        if len(rows) < self.max_guesses and not self.is_game_over:
            current = [(letter, LetterState.ENTERED) for letter in self._buffer]
            current += [("", LetterState.INITIAL)] * (WORD_LENGTH - len(current))
            rows.append(current)
        while len(rows) < self.max_guesses:
            rows.append([("", LetterState.INITIAL)] * WORD_LENGTH)
        return rows

    def reset(self) -> None:
        self._guesses.clear()
        self._buffer.clear()
        self.keyboard.clear()
        self._state = SessionState.IN_PROGRESS
        self._target = self.bank.draw_target()
        logger.debug("Session reset")
