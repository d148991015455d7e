# hookwire/foreign/adapter.py
"""
Foreign call adapter.

The only code that knows how a foreign callback is reached. Each call builds
its own single-argument container, boxes the engine value, invokes the
callable through the runtime and checks the outcome.
"""

from typing import Any

from exprgraph.nodes import AstNode
from hookwire.engine.exceptions import CallbackExecutionFailure, TypeMismatchError
from hookwire.foreign.runtime import ForeignRuntime


class ForeignCallAdapter:
    """Marshals calls from the dispatcher into an embedded runtime."""

    def __init__(self, runtime: ForeignRuntime) -> None:
        self.runtime = runtime

    def notify(self, function: Any, address: int) -> None:
        """
        Call a foreign memory hit callback with `address`. The result is discarded.

        Raises:
            CallbackExecutionFailure: if the callback fails in the runtime.
        """
        args = self.runtime.new_args(1)
        args[0] = self.runtime.box_address(address)

        result = self.runtime.call(function, args)
        if not result.ok:
            raise CallbackExecutionFailure(
                "processCallbacks(MEMORY_HIT): Failed to call the foreign callback.",
                error=result.error,
            ) from result.error

    def transform(self, function: Any, node: AstNode) -> AstNode:
        """
        Call a foreign simplification callback with `node` and return the node it produced.

        Raises:
            CallbackExecutionFailure: if the callback fails in the runtime.
            TypeMismatchError: if the callback returns anything but a node wrapper.
        """
        args = self.runtime.new_args(1)
        args[0] = self.runtime.box_node(node)

        result = self.runtime.call(function, args)
        if not result.ok:
            raise CallbackExecutionFailure(
                "processCallbacks(SYMBOLIC_SIMPLIFICATION): Failed to call the foreign callback.",
                error=result.error,
            ) from result.error

        if not self.runtime.is_node(result.value):
            raise TypeMismatchError(
                "processCallbacks(SYMBOLIC_SIMPLIFICATION): You must return an AstNodeRef object, "
                f"got {type(result.value).__name__}."
            )

        return self.runtime.unbox_node(result.value)
