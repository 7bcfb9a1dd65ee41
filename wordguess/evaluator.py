from __future__ import annotations

import enum
from collections import Counter
from typing import Iterable, List

WORD_LENGTH = 5


class LetterState(str, enum.Enum):
    """Per-tile / per-key state, ordered by keyboard precedence."""

    INITIAL = "initial"
    ENTERED = "enter"
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        return _PRECEDENCE[self]


_PRECEDENCE = {
    LetterState.INITIAL: 0,
    LetterState.ENTERED: 1,
    LetterState.ABSENT: 2,
    LetterState.PRESENT: 3,
    LetterState.CORRECT: 4,
}

SCORED_STATES = frozenset({LetterState.ABSENT, LetterState.PRESENT, LetterState.CORRECT})


class EvaluationResult(tuple):
    """Immutable sequence of the five scored states of one guess."""

    def __new__(cls, states: Iterable[LetterState]):
        states = tuple(LetterState(state) for state in states)
        if len(states) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH} states, got {len(states)}")
        for state in states:
            if state not in SCORED_STATES:
                raise ValueError(f"Not a scored letter state: {state!r}")
        return super().__new__(cls, states)

    @property
    def is_win(self) -> bool:
        return all(state is LetterState.CORRECT for state in self)

    def to_statuses(self) -> List[str]:
        return [state.value for state in self]


def _require_word(word: str, name: str) -> None:
    if not isinstance(word, str):
        raise ValueError(f"{name} must be a string, got {type(word).__name__}")
    if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha() and word.islower()):
        raise ValueError(f"{name} must be {WORD_LENGTH} lowercase letters: {word!r}")


def evaluate(target: str, guess: str) -> EvaluationResult:
    """Score ``guess`` against ``target`` position by position.

    Exact matches are marked first and consume their target letter. The
    remaining target letters form a pool that later positions draw from left
    to right, so a repeated guess letter is only PRESENT as many times as the
    target still has it; surplus copies are ABSENT.

    Raises:
        ValueError: if either word is not exactly five lowercase letters.
    """
    _require_word(target, "target")
    _require_word(guess, "guess")

    states: List[LetterState] = [LetterState.ABSENT] * WORD_LENGTH
    remaining: Counter = Counter()

    for i, (t, g) in enumerate(zip(target, guess)):
        if t == g:
            states[i] = LetterState.CORRECT
        else:
            remaining[t] += 1

    for i, letter in enumerate(guess):
        if states[i] is LetterState.CORRECT:
            continue
        if remaining[letter] > 0:
            states[i] = LetterState.PRESENT
            remaining[letter] -= 1

    return EvaluationResult(states)


def is_win(result: Iterable[LetterState]) -> bool:
    states = tuple(result)
    return len(states) == WORD_LENGTH and all(s == LetterState.CORRECT for s in states)
