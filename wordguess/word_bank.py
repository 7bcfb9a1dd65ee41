from __future__ import annotations

import enum
import logging
import random
import threading
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Set

from wordguess.evaluator import WORD_LENGTH

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS_FILE = DATA_DIR / "words.txt"
FALLBACK_WORD = "sorry"


class WordListError(ValueError):
    """Raised when a word list yields no usable words."""


class ExhaustionPolicy(str, enum.Enum):
    SENTINEL = "sentinel"
    RESHUFFLE = "reshuffle"


def normalize_word(raw) -> Optional[str]:
    """Return ``raw`` stripped and lowercased if it is a five-letter a-z word."""
    if not isinstance(raw, str):
        return None
    word = raw.strip().lower()
    if len(word) == WORD_LENGTH and word.isascii() and word.isalpha():
        return word
    return None


def parse_word_list(lines: Iterable[str], *, source: str = "<lines>") -> List[str]:
    """Keep the well-formed words of ``lines`` in first-seen order."""
    words: List[str] = []
    seen: Set[str] = set()
    dropped = 0
    for raw in lines:
        if not raw.strip():
            continue
        word = normalize_word(raw)
        if word is None:
            dropped += 1
            continue
        if word not in seen:
            seen.add(word)
            words.append(word)
    if dropped:
        logger.warning("Dropped %s malformed line(s) from %s", dropped, source)
    if not words:
        raise WordListError(f"No valid {WORD_LENGTH}-letter words found in {source}")
    return words


def load_word_list(path: str | Path) -> List[str]:
    """Load a newline-delimited word list from disk.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        WordListError: if no valid words remain after filtering.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        words = parse_word_list(handle, source=str(path))
    logger.info("Loaded %s words from %s", len(words), path)
    return words


@dataclass
class WordListReport:
    """Problems found in a raw word list."""

    total: int = 0
    duplicates: List[str] = field(default_factory=list)
    special_characters: List[str] = field(default_factory=list)
    wrong_length: List[str] = field(default_factory=list)
    missing_from_dictionary: List[str] = field(default_factory=list)
    valid: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (
            self.duplicates
            or self.special_characters
            or self.wrong_length
            or self.missing_from_dictionary
        )


def audit_word_list(
    lines: Iterable[str],
    dictionary: Optional[Iterable[str]] = None,
) -> WordListReport:
    """Inspect a raw word list without discarding anything silently."""
    cleaned = [line.strip().lower() for line in lines if line.strip()]
    report = WordListReport(total=len(cleaned))

    counts = Counter(cleaned)
    report.duplicates = sorted(word for word, qty in counts.items() if qty > 1)

    unique = list(dict.fromkeys(cleaned))
    report.special_characters = sorted(
        word for word in unique if not (word.isascii() and word.isalpha())
    )
    report.wrong_length = sorted(word for word in unique if len(word) != WORD_LENGTH)

    well_formed = [word for word in unique if normalize_word(word) is not None]
    if dictionary is not None:
        known = {w.strip().lower() for w in dictionary if w.strip()}
        report.missing_from_dictionary = [w for w in well_formed if w not in known]
        report.valid = [w for w in well_formed if w in known]
    else:
        report.valid = well_formed
    return report


class WordBank:
    """Pool of target words plus the dictionary used to validate guesses.

    Each draw removes its word from the pool, so targets do not repeat until
    the pool is empty. What happens then depends on ``policy``.
    """

    def __init__(
        self,
        dictionary: Iterable[str],
        answers: Optional[Iterable[str]] = None,
        *,
        policy: ExhaustionPolicy = ExhaustionPolicy.SENTINEL,
        fallback_word: str = FALLBACK_WORD,
        rng: Optional[random.Random] = None,
    ):
        self._dictionary = frozenset(w for w in map(normalize_word, dictionary) if w)
        if answers is None:
            candidates = sorted(self._dictionary)
        else:
            candidates = list(dict.fromkeys(w for w in map(normalize_word, answers) if w))
        fallback = normalize_word(fallback_word)
        if fallback is None:
            raise ValueError(f"Fallback word must be {WORD_LENGTH} letters: {fallback_word!r}")
        self._all_candidates = tuple(candidates)
        self._remaining: List[str] = list(candidates)
        self._policy = ExhaustionPolicy(policy)
        self._fallback_word = fallback
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._current_target: Optional[str] = None

    @classmethod
    def from_files(
        cls,
        words_file: str | Path = DEFAULT_WORDS_FILE,
        answers_file: str | Path | None = None,
        **kwargs,
    ) -> "WordBank":
        dictionary = load_word_list(words_file)
        answers = load_word_list(answers_file) if answers_file else None
        return cls(dictionary, answers, **kwargs)

    @property
    def remaining(self) -> int:
        return len(self._remaining)

    @property
    def current_target(self) -> Optional[str]:
        return self._current_target

    @property
    def policy(self) -> ExhaustionPolicy:
        return self._policy

    @property
    def fallback_word(self) -> str:
        return self._fallback_word

    def __contains__(self, word) -> bool:
        normalized = normalize_word(word)
        return normalized is not None and normalized in self._dictionary

    def __len__(self) -> int:
        return len(self._dictionary)

    def draw_target(self) -> str:
        """Remove and return a random candidate, or apply the exhaustion policy."""
        with self._lock:
            if not self._remaining:
                if self._policy is ExhaustionPolicy.RESHUFFLE and self._all_candidates:
                    logger.warning(
                        "Target pool exhausted; reshuffling %s candidates",
                        len(self._all_candidates),
                    )
                    self._remaining = list(self._all_candidates)
                else:
                    logger.warning(
                        "Target pool exhausted; using fallback word %r", self._fallback_word
                    )
                    self._current_target = self._fallback_word
                    return self._fallback_word
            index = self._rng.randrange(len(self._remaining))
            # swap-remove; pool order is irrelevant
            self._remaining[index], self._remaining[-1] = self._remaining[-1], self._remaining[index]
            word = self._remaining.pop()
            self._current_target = word
            logger.debug("Drew target; %s candidates left", len(self._remaining))
            return word

    def is_valid_guess(self, word, target: Optional[str] = None) -> bool:
        """True if ``word`` is the round's target or a dictionary word.

        ``target`` defaults to the last word this bank handed out.
        """
        normalized = normalize_word(word)
        if normalized is None:
            return False
        if target is None:
            target = self._current_target
        return normalized == target or normalized in self._dictionary
