"""Iteration combinators: each, each_with_index, each_slice, times.

These run a block for its side effects. A block's plain result is ignored;
every other signal stops the loop and is handed to the caller.
"""

from __future__ import annotations

from typing import Any, Iterable

from enumerable import Value
from enumerable.combinators.base import open_frame, propagate
from enumerable.errors import InvalidArgument
from enumerable.evaluation.invoke import invoke, relay
from enumerable.types.callable_fn import as_block
from enumerable.types.frame import Frame
from enumerable.types.signal import Normal, is_signal


def each(seq: Iterable[Value], fn: Any, *, frame: Frame | None = None) -> Any:
    """Yield each element to `fn` in turn. Returns the elements as a list."""
    items = list(seq)
    block = as_block(fn)
    own = open_frame(frame, "each")

    for item in items:
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)

    return items


def each_with_index(seq: Iterable[Value], fn: Any, *, frame: Frame | None = None) -> Any:
    """Yield each element and its index to `fn`. Returns the elements as a list."""
    items = list(seq)
    block = as_block(fn)
    own = open_frame(frame, "each_with_index")

    for index, item in enumerate(items):
        signal = invoke(block, [item, index], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)

    return items


def each_slice(seq: Iterable[Value], number: int, fn: Any, *, frame: Frame | None = None) -> Any:
    """Yield consecutive slices of `number` elements; the last one may be shorter.

    Returns None. Raises InvalidArgument when `number` is less than 1.
    """
    if isinstance(number, bool) or not isinstance(number, int) or number < 1:
        raise InvalidArgument(f"Invalid slice size: {number!r}")

    items = list(seq)
    block = as_block(fn)
    own = open_frame(frame, "each_slice")

    for start in range(0, len(items), number):
        signal = invoke(block, [items[start:start + number]], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)

    return None


def times(n: int, fn: Any, *, frame: Frame | None = None) -> Any:
    """Run `fn` with each index in 0..n-1. Returns None.

    Built on `each`: the caller's block is relayed so it still resolves
    aliases and returns against the caller of `times`.
    """
    block = as_block(fn)
    own = open_frame(frame, "times")

    result = each(range(max(n, 0)), relay(block), frame=own)
    if is_signal(result):
        return propagate(result)
    return None
