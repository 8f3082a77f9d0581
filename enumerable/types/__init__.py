from enumerable.types.nil import Nil, NilType
from enumerable.types.signal import (
    ControlSignal,
    Normal,
    Break,
    Continue,
    NonLocalReturn,
    Failure,
    settle,
    is_signal,
)
from enumerable.types.frame import Frame
from enumerable.types.callable_fn import Lambda, FunctionRef, Block, as_block

__all__ = [
    "Nil",
    "NilType",
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
    "Block",
    "as_block",
]
