"""Control signals: how a block invocation ended.

Every run of a block through the invoker produces exactly one of these:

    Normal(value)                 ordinary completion
    Break(value)                  stop the surrounding iteration, carrying value
    Continue(value)               skip to the next step; value stands in for this step's result
    NonLocalReturn(depth, value)  stop this invocation and `depth` more frames; the frame
                                  `depth` levels up returns value
    Failure(error)                an exception escaped the body

Blocks request break/continue/return by *returning* the matching signal, e.g.

    Lambda(["x"], lambda f: Break(f["x"]) if f["x"] > 2 else f["x"])

Signals are plain values; nothing here unwinds the Python stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from enumerable.errors import InvalidArgument


class ControlSignal:
    """Base class for all invocation outcomes."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Normal(ControlSignal):
    value: Any


@dataclass(frozen=True, slots=True)
class Break(ControlSignal):
    value: Any = None


@dataclass(frozen=True, slots=True)
class Continue(ControlSignal):
    value: Any = None


@dataclass(frozen=True, slots=True)
class NonLocalReturn(ControlSignal):
    depth: int
    value: Any = None

    def __post_init__(self):
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 0:
            raise InvalidArgument(f"NonLocalReturn depth must be a non-negative integer, got {self.depth!r}")


@dataclass(frozen=True, slots=True)
class Failure(ControlSignal):
    error: BaseException


def is_signal(obj: Any) -> bool:
    return isinstance(obj, ControlSignal)


def settle(result: Any) -> Any:
    """Resolve a NonLocalReturn that has arrived at its target.

    A combinator hands `NonLocalReturn(0, v)` to its caller when the caller is the
    frame the return was aimed at; that caller should return `v`. Anything else
    (plain values, signals still travelling) comes back unchanged.
    """
    if isinstance(result, NonLocalReturn) and result.depth == 0:
        return result.value
    return result
