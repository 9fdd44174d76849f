"""Runtime environment for twinscheme.

An Environment is one node of a parent-linked scope chain. Each node binds
Symbols to values and carries an extension registry in which host code can
park arbitrary Python objects behind CustomType handles. Nodes are shared by
reference between closures and call frames and are never copied.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Optional

from twinscheme import Value
from twinscheme.errors import SchemeTypeError, SchemeUnboundSymbol, SchemeUndefinedVariable
from twinscheme.types.custom import CustomType
from twinscheme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values with a host extension registry."""

    __slots__ = ("vars", "outer", "custom", "custom_types")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Value] = {}
        self.outer: Environment | None = outer
        # tag -> identifier -> host object
        self.custom: dict[str, dict[str, Any]] = {}
        # tag -> expected Python type, checked when storing
        self.custom_types: dict[str, type] = {}

    @classmethod
    def new_child(cls, parent: Environment) -> Environment:
        return cls(outer=parent)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` in this frame, overwriting any existing binding here."""
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: Value) -> None:
        """Update the nearest existing binding for `name`.

        Raises SchemeUndefinedVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SchemeUndefinedVariable(f'Can\'t set! an undefined variable: "{name}"')
        env.vars[name] = value

    def get(self, name: Symbol) -> Optional[Value]:
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> Value:
        env = self.find(name)
        if env is None:
            raise SchemeUnboundSymbol(f"Identifier not found: '{name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v

    # --- Extension registry ---
    def register_custom_type(self, tag: str, cls: type) -> None:
        self.custom_types[tag] = cls

    def _custom_type(self, tag: str) -> Optional[type]:
        env: Optional[Environment] = self
        while env is not None:
            if tag in env.custom_types:
                return env.custom_types[tag]
            env = env.outer
        return None

    def set_custom(self, tag: str, identifier: str, value: Any) -> CustomType:
        """Store host state under (tag, identifier) and return its handle."""
        expected = self._custom_type(tag)
        if expected is not None and not isinstance(value, expected):
            raise SchemeTypeError(
                f"Custom value for tag {tag!r} must be {expected.__name__}, got {type(value).__name__}"
            )
        self.custom.setdefault(tag, {})[identifier] = value
        return CustomType(tag, identifier)

    def get_custom(self, tag: str, identifier: str, cls: Optional[type] = None) -> Optional[Any]:
        """Fetch host state by (tag, identifier); None if missing or not a `cls`."""
        env: Optional[Environment] = self
        while env is not None:
            store = env.custom.get(tag)
            if store is not None and identifier in store:
                value = store[identifier]
                if cls is not None and not isinstance(value, cls):
                    return None
                return value
            env = env.outer
        return None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment vars={len(self.vars)} depth={depth}>"


def new_child(parent: Environment) -> Environment:
    return Environment.new_child(parent)


def get_root(env: Environment) -> Environment:
    return env.root()
