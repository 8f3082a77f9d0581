"""Block representations: named function references and inline lambdas."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from io import StringIO
from typing import Any, Callable, Iterable

from enumerable import BodyFn
from enumerable.errors import ArityError, EnumerableTypeError


@dataclass(frozen=True)
class FunctionRef:
    """A reference to a function registered by name; invoked positionally."""

    name: str

    def __str__(self) -> str:
        return self.name


class Lambda:
    """An inline block with formal parameters, a body, and optional aliases.

    `body` is called with the invocation Frame: parameters are read as
    `frame["x"]`, aliased names are read and written the same way. `rest`
    names a parameter collecting surplus positional arguments as a list.
    """

    __slots__ = ("params", "body", "aliases", "rest")

    def __init__(
        self,
        params: Iterable[str],
        body: BodyFn,
        aliases: Iterable[str] = (),
        rest: str | None = None,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.body: BodyFn = body
        self.aliases: frozenset[str] = frozenset(aliases)
        self.rest: str | None = rest
        if not callable(body):
            raise EnumerableTypeError(f"Lambda body must be callable, got {body!r}")
        names = list(self.params) + ([rest] if rest is not None else [])
        if len(set(names)) != len(names):
            raise ArityError(f"Malformed parameter list: duplicate names in {names}")

    @property
    def arity(self) -> int:
        return len(self.params)

    def accepts(self, count: int) -> bool:
        if self.rest is not None:
            return count >= self.arity
        return count == self.arity

    @classmethod
    def wrap(cls, fn: Callable[..., Any]) -> Lambda:
        """Build a Lambda from a plain Python callable.

        Positional parameters become the block's parameters and a *args
        parameter becomes `rest`. The body calls `fn` with the bound values,
        so variables from the caller are shared through ordinary closures.

        Callables without an introspectable signature (builtin types such as
        int or str), or whose positional parameters are all optional, accept
        any argument count; arity is then left to the call itself.
        """
        try:
            signature = inspect.signature(fn)
        except (TypeError, ValueError):
            return cls._variadic(fn)

        params: list[str] = []
        rest: str | None = None
        for p in signature.parameters.values():
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
                # Parameters with defaults are optional in Python; blocks have fixed arity.
                if p.default is not p.empty:
                    if not params:
                        return cls._variadic(fn)
                    break
                params.append(p.name)
            elif p.kind is p.VAR_POSITIONAL:
                rest = p.name
                break
            else:
                break

        def body(frame):
            args = [frame[p] for p in params]
            if rest is not None:
                args.extend(frame[rest])
            return fn(*args)

        body.__name__ = getattr(fn, "__name__", "body")
        return cls(params, body, rest=rest)

    @classmethod
    def _variadic(cls, fn: Callable[..., Any]) -> Lambda:
        def body(frame):
            return fn(*frame["args"])

        body.__name__ = getattr(fn, "__name__", "body")
        return cls((), body, rest="args")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{{")
            names = list(self.params) + ([f"*{self.rest}"] if self.rest else [])
            buffer.write(" ".join(names))
            buffer.write("} ")
            buffer.write(getattr(self.body, "__name__", "<body>"))
            if self.aliases:
                buffer.write(" ^")
                buffer.write(",".join(sorted(self.aliases)))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


Block = FunctionRef | Lambda


def as_block(obj: Any) -> Block:
    """Coerce a combinator argument into one of the two block variants."""
    if isinstance(obj, (FunctionRef, Lambda)):
        return obj
    if isinstance(obj, str):
        return FunctionRef(obj)
    if callable(obj):
        return Lambda.wrap(obj)
    raise EnumerableTypeError(f"Expected a block, got {obj!r}")
