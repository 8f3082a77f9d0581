"""Invocation engine for enumerable.

This module centralizes how blocks are run on behalf of combinators:
- Dispatch on the two block variants (FunctionRef and Lambda).
- Positional binding with arity checks, delegated to bind_arguments.
- Aliasing of named variables into the frame `depth` levels above the
  invoking frame, torn down however the body finishes.
- Classification of the outcome into exactly one ControlSignal.

Keeping this logic in one place means combinators never touch ancestor
frames themselves; they only interpret the signal they get back.
"""

from __future__ import annotations

from enumerable import Value
from enumerable.errors import ArityError, EnumerableError, EnumerableTypeError
from enumerable.function_registry import get_registry
from enumerable.logger import logger
from enumerable.types.bind import bind_arguments
from enumerable.types.callable_fn import Block, FunctionRef, Lambda
from enumerable.types.frame import Frame
from enumerable.types.signal import (
    ControlSignal,
    Failure,
    NonLocalReturn,
    Normal,
)


def classify(outcome: Value) -> ControlSignal:
    """Turn whatever a body produced into the signal its invoker reports.

    A returned NonLocalReturn names its target relative to the body; the
    invoker's caller is one frame closer, so the depth drops by one (never
    below 0, which means "the direct caller").
    """
    match outcome:
        case NonLocalReturn(depth=depth, value=value):
            return NonLocalReturn(max(depth - 1, 0), value)
        case ControlSignal():
            return outcome
        case _:
            return Normal(outcome)


def invoke_function(fn: FunctionRef, args: list[Value]) -> ControlSignal:
    """Call a registered function positionally."""
    try:
        entry = get_registry().resolve(fn.name)
    except EnumerableError as ex:
        return Failure(ex)

    mismatch = entry.check_arity(args)
    if mismatch is not None:
        return Failure(ArityError(f"{fn.name}: {mismatch}"))

    try:
        outcome = entry.fn(*args)
    except Exception as ex:
        logger.debug("function %s failed: %r", fn.name, ex)
        return Failure(ex)
    return classify(outcome)


def invoke_lambda(fn: Lambda, args: list[Value], target: Frame) -> ControlSignal:
    """Run an inline block against `target`.

    The block gets a fresh frame whose parent is `target`. Its aliases are
    linked into `target` only while the body runs.
    """
    try:
        local_frame = bind_arguments(fn, args, target)
    except EnumerableError as ex:
        return Failure(ex)

    try:
        with local_frame.aliased(fn.aliases, target):
            outcome = fn.body(local_frame)
    except Exception as ex:
        logger.debug("block %s failed: %r", fn, ex)
        return Failure(ex)
    return classify(outcome)


def invoke(fn: Block, args: list[Value], depth: int, frame: Frame) -> ControlSignal:
    """Invoke a block on behalf of `frame`.

    Parameters:
    - fn: FunctionRef or Lambda.
    - args: positional arguments; their count must match the block's arity.
    - depth: how many frames above `frame` aliases resolve against. A
      combinator running its caller's block passes 1 (its caller's frame).
    - frame: the invoking frame.

    Returns exactly one ControlSignal; errors are reported as Failure, never raised.
    """
    try:
        target = frame.ancestor(depth)
    except EnumerableError as ex:
        return Failure(ex)

    match fn:
        case Lambda():
            signal = invoke_lambda(fn, list(args), target)
        case FunctionRef():
            signal = invoke_function(fn, list(args))
        case _:
            signal = Failure(EnumerableTypeError(f"Cannot invoke non-block {fn!r}"))

    if isinstance(signal, NonLocalReturn):
        logger.debug("%s requested return %d frame(s) past its caller", fn, signal.depth)
    return signal


def relay(fn: Block) -> Lambda:
    """Wrap a caller's block so a combinator can pass it down to another combinator.

    The relay is invoked by the nested combinator one frame below the
    combinator that owns `fn`, so it runs `fn` one frame further up (depth 2
    from its own frame): aliases then land in the owner's caller, as they
    would had the owner invoked `fn` directly. A NonLocalReturn coming out of
    `fn` has two extra frames to cross on the way back (the relay's own
    invocation and the nested combinator), so its depth is raised by two.

    Only sound when the nested combinator is transparent to every signal.
    """
    def body(frame: Frame) -> Value:
        signal = invoke(fn, frame["args"], 2, frame)
        match signal:
            case Normal(value=value):
                return value
            case Failure(error=error):
                raise error
            case NonLocalReturn(depth=depth, value=value):
                return NonLocalReturn(depth + 2, value)
            case _:
                return signal

    body.__name__ = f"relay({fn})"
    return Lambda((), body, rest="args")
