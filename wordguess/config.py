from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from wordguess.word_bank import DEFAULT_WORDS_FILE, FALLBACK_WORD, ExhaustionPolicy

ENV_PREFIX = "WORDGUESS_"
DEFAULT_MAX_GUESSES = 6


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    words_file: Path = DEFAULT_WORDS_FILE
    answers_file: Optional[Path] = None
    max_guesses: int = DEFAULT_MAX_GUESSES
    exhaustion_policy: ExhaustionPolicy = ExhaustionPolicy.SENTINEL
    fallback_word: str = FALLBACK_WORD
    seed: Optional[int] = None
    log_level: str = "WARNING"


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(ENV_PREFIX + name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_int(env: Mapping[str, str], name: str, *, minimum: int | None = None) -> Optional[int]:
    raw = _get(env, name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ConfigError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def load_settings(
    env: Mapping[str, str] | None = None,
    *,
    dotenv_path: str | Path | None = None,
) -> Settings:
    """Build Settings from the environment.

    When ``env`` is omitted, a ``.env`` file (``dotenv_path`` or the one found
    from the working directory) is loaded into ``os.environ`` first; variables
    already set in the environment win.
    """
    if env is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        env = os.environ

    words_file = _get(env, "WORDS_FILE")
    answers_file = _get(env, "ANSWERS_FILE")

    policy_raw = _get(env, "EXHAUSTION_POLICY")
    try:
        policy = ExhaustionPolicy(policy_raw.lower()) if policy_raw else ExhaustionPolicy.SENTINEL
    except ValueError:
        choices = ", ".join(p.value for p in ExhaustionPolicy)
        raise ConfigError(
            f"{ENV_PREFIX}EXHAUSTION_POLICY must be one of {choices}, got {policy_raw!r}"
        ) from None

    log_level = (_get(env, "LOG_LEVEL") or "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {log_level!r}")

    max_guesses = _parse_int(env, "MAX_GUESSES", minimum=1)

    return Settings(
        words_file=Path(words_file) if words_file else DEFAULT_WORDS_FILE,
        answers_file=Path(answers_file) if answers_file else None,
        max_guesses=max_guesses if max_guesses is not None else DEFAULT_MAX_GUESSES,
        exhaustion_policy=policy,
        fallback_word=(_get(env, "FALLBACK_WORD") or FALLBACK_WORD).lower(),
        seed=_parse_int(env, "SEED"),
        log_level=log_level,
    )
