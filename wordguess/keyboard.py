from __future__ import annotations

import string
from typing import Dict, Iterable, List, Optional, Tuple

from wordguess.evaluator import LetterState

ENTER = "Enter"
BACKSPACE = "Backspace"

KEYBOARD_LAYOUT: Tuple[Tuple[str, ...], ...] = (
    ("q", "w", "e", "r", "t", "y", "u", "i", "o", "p"),
    ("a", "s", "d", "f", "g", "h", "j", "k", "l"),
    (ENTER, "z", "x", "c", "v", "b", "n", "m", BACKSPACE),
)

_KEY_ALIASES = {
    "enter": ENTER,
    "return": ENTER,
    "\n": ENTER,
    "\r": ENTER,
    "backspace": BACKSPACE,
    "\b": BACKSPACE,
    "\x7f": BACKSPACE,
}


def normalize_key(key: str) -> Optional[str]:
    """Map a raw key name or character to a letter, ENTER or BACKSPACE.

    Returns None for keys the game does not use.
    """
    if not isinstance(key, str) or not key:
        return None
    alias = _KEY_ALIASES.get(key) or _KEY_ALIASES.get(key.lower())
    if alias:
        return alias
    lowered = key.lower()
    if len(lowered) == 1 and lowered in string.ascii_lowercase:
        return lowered
    return None


class KeyboardState:
    """Cumulative per-letter hint state shown on the on-screen keyboard.

    A key only moves up the precedence order; a later guess can never demote
    a key, so a letter that was PRESENT in one position and ABSENT in another
    position of the same guess stays PRESENT.
    """

    def __init__(self):
        self._states: Dict[str, LetterState] = {}

    def state_of(self, letter: str) -> LetterState:
        return self._states.get(letter.lower(), LetterState.INITIAL)

    def raise_to(self, letter: str, state: LetterState) -> LetterState:
        letter = letter.lower()
        state = LetterState(state)
        current = self._states.get(letter, LetterState.INITIAL)
        if state.rank > current.rank:
            self._states[letter] = state
            return state
        return current

    def update(self, guess: str, result: Iterable[LetterState]) -> None:
        for letter, state in zip(guess, result):
            self.raise_to(letter, state)

    def clear(self) -> None:
        self._states.clear()

    def snapshot(self) -> Dict[str, LetterState]:
        return dict(self._states)

    def rows(self) -> List[List[Tuple[str, LetterState]]]:
        """Layout rows paired with each key's state (special keys stay INITIAL)."""
        return [
            [(key, self.state_of(key) if len(key) == 1 else LetterState.INITIAL) for key in row]
            for row in KEYBOARD_LAYOUT
        ]
