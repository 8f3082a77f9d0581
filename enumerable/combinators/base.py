"""Shared plumbing for combinators: frames, the omitted-argument marker and the transparent policy."""

from __future__ import annotations

from enumerable import Value
from enumerable.logger import logger
from enumerable.types.frame import Frame
from enumerable.types.signal import ControlSignal, Failure, NonLocalReturn


class _NoValue:
    def __repr__(self):
        return "<no value>"


# Marks an omitted optional argument where None (or Nil) would be a legitimate value.
NO_VALUE = _NoValue()


def open_frame(caller: Frame | None, name: str) -> Frame:
    """Open the combinator's own frame beneath its caller's (a fresh root if none was given)."""
    if caller is None:
        caller = Frame(name="root")
    return Frame(parent=caller, name=name)


def propagate(signal: ControlSignal) -> Value:
    """Apply the transparent policy to a signal the combinator does not handle itself.

    - Failure: re-raise the wrapped error.
    - NonLocalReturn(0, v): this combinator is the target; its result is v.
    - NonLocalReturn(d, v): one frame consumed; hand NonLocalReturn(d-1, v) to the caller.
    - Break / Continue: hand the signal to the caller unchanged.
    """
    match signal:
        case Failure(error=error):
            raise error
        case NonLocalReturn(depth=0, value=value):
            return value
        case NonLocalReturn(depth=depth, value=value):
            logger.debug("passing return up, %d frame(s) to go", depth - 1)
            return NonLocalReturn(depth - 1, value)
        case _:
            logger.debug("passing %r to caller", signal)
            return signal
