"""Transforming combinators: map, sort_by, group_by."""

from __future__ import annotations

from typing import Any, Iterable

from enumerable import Value
from enumerable.combinators.base import open_frame, propagate
from enumerable.evaluation.invoke import invoke
from enumerable.types.callable_fn import as_block
from enumerable.types.frame import Frame
from enumerable.types.signal import Break, Continue, Normal


def map(seq: Iterable[Value], fn: Any, *, frame: Frame | None = None) -> Any:
    """Return a new list with `fn` applied to each element.

    Break(v) abandons the partial result and makes `v` the result of map.
    Continue(v) records `v` for the current element and moves on.
    """
    items = list(seq)
    block = as_block(fn)
    own = open_frame(frame, "map")
    result = []

    for item in items:
        signal = invoke(block, [item], 1, own)
        match signal:
            case Normal(value=value) | Continue(value=value):
                result.append(value)
            case Break(value=value):
                return value
            case _:
                return propagate(signal)

    return result


def sort_by(seq: Iterable[Value], fn: Any, *, frame: Frame | None = None) -> Any:
    """Return a copy sorted ascending by the key `fn` computes for each element.

    The sort is stable: elements with equal keys keep their original order.
    """
    items = list(seq)
    block = as_block(fn)
    own = open_frame(frame, "sort_by")
    keys = []

    for item in items:
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        keys.append(signal.value)

    order = sorted(range(len(items)), key=keys.__getitem__)
    return [items[i] for i in order]


def _freeze(key: Any) -> Any:
    """Hashable stand-in for a key: lists become tuples, dicts tuples of items, sets frozensets."""
    match key:
        case list() | tuple():
            return tuple(_freeze(k) for k in key)
        case dict():
            return tuple((_freeze(k), _freeze(v)) for k, v in key.items())
        case set():
            return frozenset(key)
        case _:
            return key


def group_by(seq: Iterable[Value], fn: Any, *, frame: Frame | None = None) -> Any:
    """Bucket elements by the key `fn` computes.

    Returns a dict of key -> list of elements; keys appear in the order they
    were first produced and each bucket keeps the input order. Unhashable
    keys are frozen, so a list key [0] groups under (0,).
    """
    items = list(seq)
    block = as_block(fn)
    own = open_frame(frame, "group_by")
    groups: dict[Any, list[Value]] = {}

    for item in items:
        signal = invoke(block, [item], 1, own)
        if not isinstance(signal, Normal):
            return propagate(signal)
        groups.setdefault(_freeze(signal.value), []).append(item)

    return groups
