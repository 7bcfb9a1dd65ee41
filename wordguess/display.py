from typing import Iterable, List, Tuple

from colorama import Fore, Style

from wordguess.evaluator import LetterState

_COLORS = {
    LetterState.CORRECT: Fore.LIGHTGREEN_EX,
    LetterState.PRESENT: Fore.LIGHTYELLOW_EX,
    LetterState.ABSENT: Fore.LIGHTBLACK_EX,
    LetterState.ENTERED: Fore.WHITE + Style.BRIGHT,
}


def format_letter(letter, state):
    color = _COLORS.get(LetterState(state))
    if color is None:
        return letter
    return f"{color}{letter}{Style.RESET_ALL}"


def render_row(cells: Iterable[Tuple[str, LetterState]]) -> str:
    return " ".join(format_letter((letter or "_").upper(), state) for letter, state in cells)


def render_board(rows: Iterable[Iterable[Tuple[str, LetterState]]]) -> str:
    return "\n".join(render_row(row) for row in rows)


def render_keyboard(rows: List[List[Tuple[str, LetterState]]]) -> str:
    lines = []
    for indent, row in enumerate(rows):
        keys = [
            format_letter(key.upper(), state) if len(key) == 1 else f"[{key}]"
            for key, state in row
        ]
        lines.append(" " * indent + " ".join(keys))
    return "\n".join(lines)
