from __future__ import annotations
import os
from functools import lru_cache
from typing import Iterable


def _sep() -> str:
    return ','


# Strings treated as boolean false, in addition to Python's own falsy values.
# Covers 0, the unique abbreviations of "false", "no" and "off", and the empty string.
_DEFAULT_FALSY_WORDS = ('', '0', 'f', 'fa', 'fal', 'fals', 'false', 'n', 'no', 'of', 'off')

_DEFAULT_LOG_LEVEL = 'WARNING'


def words_from_env(var: str, defaults: Iterable[str]) -> frozenset[str]:
    raw = os.environ.get(var)
    if raw is None:
        return frozenset(w.lower() for w in defaults)
    sep = _sep()
    return frozenset(w.strip().lower() for w in raw.split(sep))


@lru_cache(maxsize=None)
def get_falsy_words() -> frozenset[str]:
    """False words, read from ENUMERABLE_FALSY_WORDS on first use."""
    return words_from_env('ENUMERABLE_FALSY_WORDS', _DEFAULT_FALSY_WORDS)


def reset_config_cache() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""
    get_falsy_words.cache_clear()


def get_log_level() -> str:
    level = os.environ.get('ENUMERABLE_LOG_LEVEL', '').strip()
    return level.upper() if level else _DEFAULT_LOG_LEVEL
