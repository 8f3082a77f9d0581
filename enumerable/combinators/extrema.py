"""Extremum combinators: min and max.

Example:
    cats = [{"name": "Buffy", "age": 16}, {"name": "Jessie", "age": 17}, {"name": "Fluffy", "age": 8}]
    max(cats, lambda cat: cat["age"])  # => {"name": "Jessie", "age": 17}
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable

from enumerable import Value
from enumerable.combinators.base import NO_VALUE, open_frame, propagate
from enumerable.errors import EmptyCollectionError
from enumerable.evaluation.invoke import invoke
from enumerable.types.callable_fn import FunctionRef, as_block
from enumerable.types.frame import Frame
from enumerable.types.signal import Normal

IDENTITY = FunctionRef("identity")


def _extremum(
    name: str,
    seq: Iterable[Value],
    fn: Any,
    better: Callable[[Any, Any], bool],
    frame: Frame | None,
) -> Any:
    items = list(seq)
    if not items:
        raise EmptyCollectionError(f"Cannot get the {name} of an empty sequence")

    block = as_block(fn)
    own = open_frame(frame, name)
    best_key: Any = NO_VALUE
    best: Value = None

    for item in items:
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        # Strict comparison: the first of several equal keys wins.
        if best_key is NO_VALUE or better(signal.value, best_key):
            best_key, best = signal.value, item

    return best


def min(seq: Iterable[Value], fn: Any = IDENTITY, *, frame: Frame | None = None) -> Any:
    """Return the element with the smallest key (the element itself by default)."""
    return _extremum("min", seq, fn, operator.lt, frame)


def max(seq: Iterable[Value], fn: Any = IDENTITY, *, frame: Frame | None = None) -> Any:
    """Return the element with the largest key (the element itself by default)."""
    return _extremum("max", seq, fn, operator.gt, frame)
