from __future__ import annotations
from dataclasses import dataclass, field
import inspect
from typing import Any, Callable, Dict, Optional

from enumerable.errors import EnumerableTypeError, UnknownFunction


@dataclass
class RegisteredFunction:
    name: str
    fn: Callable[..., Any]
    signature: Optional[inspect.Signature] = field(default=None, repr=False)

    def check_arity(self, args: list[Any]) -> Optional[str]:
        """Return a description of the arity mismatch, or None if `args` fit."""
        if self.signature is None:
            return None
        try:
            self.signature.bind(*args)
        except TypeError as ex:
            return str(ex)
        return None


class FunctionRegistry:
    def __init__(self):
        self._functions: Dict[str, RegisteredFunction] = {}

    def define(self, name: str, fn: Callable[..., Any]) -> RegisteredFunction:
        if not callable(fn):
            raise EnumerableTypeError(f"Cannot register non-callable {fn!r} as {name!r}")
        try:
            signature = inspect.signature(fn)
        except (TypeError, ValueError):
            # Some C builtins have no introspectable signature; arity is then left to the call.
            signature = None
        entry = RegisteredFunction(name=name, fn=fn, signature=signature)
        self._functions[name] = entry
        return entry

    def get(self, name: str) -> Optional[RegisteredFunction]:
        return self._functions.get(name)

    def resolve(self, name: str) -> RegisteredFunction:
        entry = self._functions.get(name)
        if entry is None:
            raise UnknownFunction(f"No function registered as {name!r}")
        return entry

    def remove(self, name: str) -> None:
        self._functions.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._functions

    def all(self) -> Dict[str, RegisteredFunction]:
        return self._functions


# Module-level singleton
_registry: Optional[FunctionRegistry] = None

def get_registry() -> FunctionRegistry:
    global _registry
    if _registry is None:
        _registry = FunctionRegistry()
        # Lazy import to avoid circular dependency at module load time
        from enumerable.builtins import register
        register(_registry)
    return _registry


def define_function(name: str, fn: Callable[..., Any]) -> Callable[..., Any]:
    """Register `fn` so blocks can refer to it as FunctionRef(name) or by the plain string."""
    get_registry().define(name, fn)
    return fn


def function(name: Optional[str] = None):
    """Decorator form of define_function; defaults to the function's own name."""
    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        return define_function(name or fn.__name__, fn)
    return decorator
