from __future__ import annotations

from typing import List

from enumerable import Value
from enumerable.errors import ArityError, InvalidArgument
from enumerable.types.callable_fn import Lambda
from enumerable.types.frame import Frame


def bind_arguments(
    fn: Lambda,
    supplied_args: List[Value],
    target: Frame,
) -> Frame:
    """
    Single source of truth for block parameter binding.

    Supports:
    - Positional required parameters
    - A rest parameter capturing the remaining supplied args as a list

    Returns a new Frame whose parent is `target` (the frame the block runs
    against), populated with the parameter bindings. Aliases are not linked
    here; the invoker links them for exactly the duration of the body.
    """
    formals = list(fn.params)
    supplied = list(supplied_args)
    local_frame = Frame(parent=target, name="block")

    if not fn.accepts(len(supplied)):
        if len(supplied) < len(formals):
            missing = formals[len(supplied):]
            raise ArityError(
                f"Too few arguments; missing {len(missing)} parameter(s): {missing}"
            )
        raise ArityError(f"Too many arguments: {supplied[len(formals):]}")

    # Simple positional
    for formal in formals:
        local_frame.define(formal, supplied.pop(0))

    # Rest gets whatever is left
    if fn.rest is not None:
        local_frame.define(fn.rest, supplied)

    clash = fn.aliases.intersection(local_frame.vars)
    if clash:
        raise InvalidArgument(f"Alias(es) {sorted(clash)} collide with parameter names")

    return local_frame
