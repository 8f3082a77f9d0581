# Core type aliases for enumerable's data model.
# Sequences are plain Python lists (inputs may be any finite iterable and are
# materialized once); elements and block results are arbitrary Python objects.
#
# Naming guidance:
# - Value:  an element of a sequence or the result of running a block.
# - BodyFn: the Python callable behind a Lambda; it receives the invocation Frame.
# Both aliases resolve to `Any`: combinators never inspect elements.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Body of an inline block: called with the invocation Frame, returns a value or a ControlSignal
BodyFn = Callable[..., Value]

from enumerable.types.nil import Nil  # noqa: E402
from enumerable.types.signal import (  # noqa: E402
    ControlSignal,
    Normal,
    Break,
    Continue,
    NonLocalReturn,
    Failure,
    settle,
    is_signal,
)
from enumerable.types.frame import Frame  # noqa: E402
from enumerable.types.callable_fn import Lambda, FunctionRef  # noqa: E402
from enumerable.evaluation.invoke import invoke, relay  # noqa: E402
from enumerable.function_registry import define_function, function, get_registry  # noqa: E402

__all__ = [
    "Value",
    "BodyFn",
    "Nil",
    "ControlSignal",
    "Normal",
    "Break",
    "Continue",
    "NonLocalReturn",
    "Failure",
    "settle",
    "is_signal",
    "Frame",
    "Lambda",
    "FunctionRef",
    "invoke",
    "relay",
    "define_function",
    "function",
    "get_registry",
]
