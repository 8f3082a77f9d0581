"""Sequence helpers that take no block: zip, unzip, index_of, first, initial.

These are also registered as named functions, so they can themselves be
passed to a combinator as a block, e.g. map(rows, "first").
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterable

from enumerable import Value
from enumerable.combinators import extrema, transform
from enumerable.combinators.base import open_frame
from enumerable.errors import InvalidArgument
from enumerable.truth import truthy
from enumerable.types.callable_fn import Lambda
from enumerable.types.frame import Frame
from enumerable.types.nil import Nil


def zip(*seqs: Iterable[Value], frame: Frame | None = None) -> list[tuple]:
    """Zip sequences together, joining elements that share an index.

    Example:
        zip(["Llama", "Cat", "Camel"], ["wool", "fur", "hair"], [1, 2, 3])
        # => [("Llama", "wool", 1), ("Cat", "fur", 2), ("Camel", "hair", 3)]

    The result is as long as the longest input; shorter inputs are padded with Nil.
    """
    if not seqs:
        raise InvalidArgument("zip requires at least one sequence")
    return unzip(seqs, frame=frame)


def unzip(seq: Iterable[Iterable[Value]], *, frame: Frame | None = None) -> list[tuple]:
    """Reverse zip: turn a sequence of rows into one tuple per index.

    Example:
        unzip([("Llama", "wool", 1), ("Cat", "fur", 2), ("Camel", "hair", 3)])
        # => [("Llama", "Cat", "Camel"), ("wool", "fur", "hair"), (1, 2, 3)]
    """
    rows = [list(row) for row in seq]
    if not rows:
        return []

    own = open_frame(frame, "unzip")
    longest = extrema.max(rows, Lambda(["row"], lambda f: len(f["row"])), frame=own)

    # `i` lives in this frame; the column block reads it through an alias.
    def pick(f: Frame) -> Value:
        row, i = f["row"], f["i"]
        return row[i] if i < len(row) else Nil

    column = Lambda(["row"], pick, aliases=["i"])

    output = []
    for i in range(len(longest)):
        own.define("i", i)
        output.append(tuple(transform.map(rows, column, frame=own)))
    return output


def index_of(seq: Iterable[Value], value: Value, is_sorted: Any = False) -> int:
    """Index of the first element equal to `value`, or -1.

    With `is_sorted` the sequence is assumed ascending and searched by bisection.
    """
    items = list(seq)
    if truthy(is_sorted):
        i = bisect_left(items, value)
        return i if i < len(items) and items[i] == value else -1
    for i, item in enumerate(items):
        if item == value:
            return i
    return -1


def first(seq: Iterable[Value], n: int = 1) -> list[Value]:
    """Return the first `n` elements."""
    return list(seq)[:max(n, 0)]


def initial(seq: Iterable[Value], n: int = 1) -> list[Value]:
    """Return everything but the last `n` elements."""
    items = list(seq)
    return items[:max(len(items) - max(n, 0), 0)]
