"""Folding combinators: reduce and reduce_right."""

from __future__ import annotations

from typing import Any, Iterable

from enumerable import Value
from enumerable.combinators.base import NO_VALUE, open_frame, propagate
from enumerable.errors import EmptyCollectionError
from enumerable.evaluation.invoke import invoke, relay
from enumerable.types.callable_fn import as_block
from enumerable.types.frame import Frame
from enumerable.types.signal import Normal, is_signal


def reduce(seq: Iterable[Value], fn: Any, init: Any = NO_VALUE, *, frame: Frame | None = None) -> Any:
    """Fold left to right: memo = fn(memo, item).

    Without `init` the first element seeds the memo; an empty sequence then
    raises EmptyCollectionError before the block ever runs.
    """
    items = list(seq)
    block = as_block(fn)

    if init is not NO_VALUE:
        memo = init
    elif not items:
        raise EmptyCollectionError("Reduce of empty sequence with no initial value")
    else:
        memo, items = items[0], items[1:]

    own = open_frame(frame, "reduce")
    for item in items:
        signal = invoke(block, [memo, item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        memo = signal.value

    return memo


def reduce_right(seq: Iterable[Value], fn: Any, init: Any = NO_VALUE, *, frame: Frame | None = None) -> Any:
    """Fold right to left: memo = fn(memo, item), starting from the last element.

    Delegates to `reduce` over the reversed sequence, relaying the caller's
    block so it still resolves against the caller of reduce_right.
    """
    items = list(seq)
    block = as_block(fn)

    if init is NO_VALUE and not items:
        raise EmptyCollectionError("Reduce of empty sequence with no initial value")

    own = open_frame(frame, "reduce_right")
    result = reduce(items[::-1], relay(block), init, frame=own)
    if is_signal(result):
        return propagate(result)
    return result
