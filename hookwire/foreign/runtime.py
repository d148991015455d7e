# hookwire/foreign/runtime.py
"""
Embedded runtime boundary for foreign callbacks.

Foreign callbacks are callables owned by an embedded scripting runtime. The
engine never touches them directly; it only uses the four operations of
ForeignRuntime:

- new_args: build a fixed-arity argument container
- box_address / box_node: convert engine values into runtime values
- call: invoke a callable and report a result or an error
- is_node / unbox_node: check and convert a runtime value back into a node

InProcessRuntime is the default runtime. It hosts foreign callables in the
current interpreter and wraps nodes in AstNodeRef so that foreign code never
receives engine nodes directly.
"""

from __future__ import annotations

import importlib.util
import types
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from exprgraph.nodes import AstNode


@dataclass
class CallResult:
    """
    Outcome of a foreign call: a value, or the error the runtime reported.
    """

    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AstNodeRef:
    """
    Runtime-side wrapper around an expression node.

    Foreign simplification callbacks receive one of these and must return
    one of these.
    """

    __slots__ = ("_node",)

    def __init__(self, node: AstNode) -> None:
        if not isinstance(node, AstNode):
            raise TypeError(f"AstNodeRef wraps AstNode, not {type(node).__name__}")
        self._node = node

    @property
    def node(self) -> AstNode:
        return self._node

    @property
    def kind(self) -> str:
        return self._node.kind

    @property
    def size(self) -> int:
        return self._node.size

    @property
    def children(self) -> tuple[AstNodeRef, ...]:
        return tuple(AstNodeRef(child) for child in self._node.children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AstNodeRef):
            return NotImplemented
        return self._node == other._node

    def __hash__(self) -> int:
        return hash(self._node)

    def __str__(self) -> str:
        return str(self._node)

    def __repr__(self) -> str:
        return f"<AstNodeRef {self._node}>"


class ForeignRuntime:
    """
    Contract between the callback engine and an embedded runtime.
    """

    def new_args(self, arity: int) -> MutableSequence[Any]:
        raise NotImplementedError("Subclasses must implement new_args()")

    def box_address(self, address: int) -> Any:
        raise NotImplementedError("Subclasses must implement box_address()")

    def box_node(self, node: AstNode) -> Any:
        raise NotImplementedError("Subclasses must implement box_node()")

    def call(self, function: Any, args: MutableSequence[Any]) -> CallResult:
        """
        Invoke `function` with `args` as positional arguments.

        Must not raise for errors inside `function`; those are reported
        through CallResult.error.
        """
        raise NotImplementedError("Subclasses must implement call()")

    def is_node(self, value: Any) -> bool:
        raise NotImplementedError("Subclasses must implement is_node()")

    def unbox_node(self, value: Any) -> AstNode:
        raise NotImplementedError("Subclasses must implement unbox_node()")


class InProcessRuntime(ForeignRuntime):
    """
    Runs foreign callables inside the current interpreter.
    """

    def new_args(self, arity: int) -> list[Any]:
        if arity < 0:
            raise ValueError(f"Argument count cannot be negative: {arity}")
        return [None] * arity

    def box_address(self, address: int) -> int:
        return int(address)

    def box_node(self, node: AstNode) -> AstNodeRef:
        return AstNodeRef(node)

    def call(self, function: Callable[..., Any], args: MutableSequence[Any]) -> CallResult:
        try:
            value = function(*args)
        except Exception as exc:
            return CallResult(error=exc)
        return CallResult(value=value)

    def is_node(self, value: Any) -> bool:
        return isinstance(value, AstNodeRef)

    def unbox_node(self, value: AstNodeRef) -> AstNode:
        return value.node

    def load_file(self, path: Path, name: str | None = None) -> types.ModuleType:
        """
        Load a foreign module from a Python source file and return it.

        Each call builds a fresh module, so separately loaded files never
        share globals. The module is not registered in sys.modules.

        Raises:
            ImportError: if no loader can be created for `path`.
        """
        spec = importlib.util.spec_from_file_location(name or path.stem, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Could not load foreign module from {path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
