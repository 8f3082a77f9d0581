"""Truthiness used by predicate combinators.

Besides Python's own falsy values, strings spelling a boolean false count as
false ("false", "no", "off", "0" and their unique abbreviations), so data read
from text behaves the way it reads. The word list is read from
ENUMERABLE_FALSY_WORDS when set, once, and cached until reset_config_cache.
"""

from __future__ import annotations

from typing import Any

from enumerable.config import get_falsy_words


def truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in get_falsy_words()
    return bool(value)
