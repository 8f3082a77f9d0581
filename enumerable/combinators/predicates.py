"""Predicate combinators: find/detect, filter/select, reject, partition, all/every, any/some, take_while.

A predicate's result is judged with `enumerable.truth.truthy`, so strings
such as "false" or "no" count as false.
"""

from __future__ import annotations

from typing import Any, Iterable

from enumerable import Value
from enumerable.combinators.base import open_frame, propagate
from enumerable.evaluation.invoke import invoke
from enumerable.truth import truthy
from enumerable.types.callable_fn import FunctionRef, as_block
from enumerable.types.frame import Frame
from enumerable.types.nil import Nil
from enumerable.types.signal import Normal

IDENTITY = FunctionRef("identity")


def find(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    """Return the first element for which `pred` is truthy, or Nil."""
    block = as_block(pred)
    own = open_frame(frame, "find")

    for item in list(seq):
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        if truthy(signal.value):
            return item

    return Nil


def detect(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    """Looks through each value, returning the first one for which `pred` is truthy.

    Example:
        detect([1, 2, 3, 4, 5], lambda n: n % 2 == 0)  # => 2
    """
    return find(seq, pred, frame=frame)


def _select(name: str, seq: Iterable[Value], pred: Any, keep: bool, frame: Frame | None) -> Any:
    block = as_block(pred)
    own = open_frame(frame, name)
    result = []

    for item in list(seq):
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        if truthy(signal.value) is keep:
            result.append(item)

    return result


def filter(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    """Return the elements for which `pred` is truthy, in order."""
    return _select("filter", seq, pred, True, frame)


def select(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    return _select("select", seq, pred, True, frame)


def reject(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    """Return the elements for which `pred` is falsy, in order.

    Example:
        reject([1, 2, 3, 4, 5], lambda n: n < 3)  # => [3, 4, 5]
    """
    return _select("reject", seq, pred, False, frame)


def partition(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    """Split into (elements where `pred` is truthy, the rest), both order-preserving."""
    block = as_block(pred)
    own = open_frame(frame, "partition")
    matched, rest = [], []

    for item in list(seq):
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        (matched if truthy(signal.value) else rest).append(item)

    return matched, rest


def all(seq: Iterable[Value], pred: Any = IDENTITY, *, frame: Frame | None = None) -> Any:
    """True unless `pred` returns a falsy value for some element.

    Stops at the first falsy result. Without a predicate the elements
    themselves are tested. An empty sequence is always True.
    """
    block = as_block(pred)
    own = open_frame(frame, "all")

    for item in list(seq):
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        if not truthy(signal.value):
            return False

    return True


def any(seq: Iterable[Value], pred: Any = IDENTITY, *, frame: Frame | None = None) -> Any:
    """True if `pred` returns a truthy value for at least one element.

    Stops at the first truthy result. Without a predicate the elements
    themselves are tested. An empty sequence is always False.
    """
    block = as_block(pred)
    own = open_frame(frame, "any")

    for item in list(seq):
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        if truthy(signal.value):
            return True

    return False


def every(seq: Iterable[Value], pred: Any = IDENTITY, *, frame: Frame | None = None) -> Any:
    return all(seq, pred, frame=frame)


def some(seq: Iterable[Value], pred: Any = IDENTITY, *, frame: Frame | None = None) -> Any:
    return any(seq, pred, frame=frame)


def take_while(seq: Iterable[Value], pred: Any, *, frame: Frame | None = None) -> Any:
    """Return the leading elements for which `pred` holds, stopping at the first falsy result."""
    block = as_block(pred)
    own = open_frame(frame, "take_while")
    result = []

    for item in list(seq):
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        if not truthy(signal.value):
            break
        result.append(item)

    return result
