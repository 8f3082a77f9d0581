"""Frames: explicit scopes for block invocations.

A Frame stores bindings of names to values and links to the frame that
logically called it via `parent`. Unlike a lexical environment, lookups never
fall through to the parent: a frame sees its own bindings and, while an
invocation is running, the names it aliases into an ancestor frame.

Aliases are live two-way links. Reading an aliased name reads the ancestor's
current value; writing it writes the ancestor's binding directly, so nothing
has to be copied back when the alias is torn down.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterable, Iterator, Optional

from enumerable import Value
from enumerable.errors import InvalidArgument, UnboundVariable


class Frame:
    """Mapping from names to values with a parent link and alias support."""

    __slots__ = ("vars", "parent", "name", "links")

    def __init__(
        self,
        parent: Optional[Frame] = None,
        name: str | None = None,
        bindings: dict[str, Value] | None = None,
    ):
        self.vars: dict[str, Value] = dict(bindings) if bindings else {}
        self.parent: Frame | None = parent
        self.name: str | None = name
        # name -> frame the name is aliased into (only while an invocation runs)
        self.links: dict[str, Frame] = {}

    # --- Ancestry ---
    def ancestor(self, depth: int) -> Frame:
        """Return the frame `depth` levels up; depth 0 is this frame.

        Raises InvalidArgument if the chain is shorter than `depth`.
        """
        if depth < 0:
            raise InvalidArgument(f"Frame depth must be non-negative, got {depth}")
        frame = self
        for _ in range(depth):
            if frame.parent is None:
                raise InvalidArgument(f"No frame {depth} level(s) above {self.name or 'frame'}")
            frame = frame.parent
        return frame

    def owner(self, name: str) -> Frame:
        """Follow alias links until reaching the frame that actually holds `name`."""
        frame = self
        seen: set[int] = set()
        while name in frame.links:
            if id(frame) in seen:
                raise InvalidArgument(f"Circular alias for {name!r}")
            seen.add(id(frame))
            frame = frame.links[name]
        return frame

    # --- Bindings ---
    def define(self, name: str, value: Value) -> None:
        """Bind `name` locally, ignoring any alias."""
        self.vars[name] = value

    def lookup(self, name: str) -> Value:
        """Look up the value of `name`, following aliases.

        Raises UnboundVariable if the name is not bound.
        """
        frame = self.owner(name)
        try:
            return frame.vars[name]
        except KeyError:
            raise UnboundVariable(f"Cannot read unbound variable {name!r}") from None

    def set(self, name: str, value: Value) -> None:
        """Assign `name`; through an alias this writes the ancestor's binding."""
        self.owner(name).vars[name] = value

    def get(self, name: str, default: Value = None) -> Value:
        try:
            return self.lookup(name)
        except UnboundVariable:
            return default

    def __getitem__(self, name: str) -> Value:
        return self.lookup(name)

    def __setitem__(self, name: str, value: Value) -> None:
        self.set(name, value)

    def __contains__(self, name: str) -> bool:
        return name in self.owner(name).vars

    # --- Aliasing ---
    def link(self, name: str, target: Frame) -> None:
        if name in self.vars:
            raise InvalidArgument(f"Alias {name!r} collides with a variable bound in this frame")
        if target is self:
            raise InvalidArgument(f"Cannot alias {name!r} to its own frame")
        self.links[name] = target

    def unlink(self, name: str) -> None:
        self.links.pop(name, None)

    @contextmanager
    def aliased(self, names: Iterable[str], target: Frame) -> Iterator[Frame]:
        """Alias each of `names` into `target` for the duration of the block.

        Links are removed on every exit path. Writes already landed in the
        owning frame, so removing a link never loses a value.
        """
        linked: list[str] = []
        try:
            for name in names:
                self.link(name, target)
                linked.append(name)
            yield self
        finally:
            for name in linked:
                self.unlink(name)

    # --- Display ---
    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        for k in self.links:
            if not first:
                buffer.write(", ")
            buffer.write(f"{k} -> ^")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Frame chain: ")
            frame = self
            chain = []
            while frame is not None:
                frame_buf = StringIO()
                if frame.name:
                    frame_buf.write(f"{frame.name}=")
                frame._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
                frame = frame.parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
