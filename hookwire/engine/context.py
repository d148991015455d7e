# hookwire/engine/context.py
"""
Analysis context for the hookwire engine.

The context owns a callback registry and is the place where the engine's
extension points fire:

- reading or writing concrete memory fires MEMORY_HIT
- simplify() fires SYMBOLIC_SIMPLIFICATION

The registry is only consulted when at least one handler is registered.
"""

import logging
from typing import Any

from exprgraph.nodes import AstNode
from hookwire.engine.callbacks import Callbacks
from hookwire.engine.kinds import CallbackKind, HandlerVariant
from hookwire.engine.pools import Handler
from hookwire.foreign.runtime import ForeignRuntime

logger = logging.getLogger(__name__)


class AnalysisContext:
    """
    Minimal engine state: a byte-addressed concrete memory and its callbacks.
    """

    def __init__(self, runtime: ForeignRuntime | None = None) -> None:
        self.callbacks = Callbacks(runtime)
        self.memory: dict[int, int] = {}

    def add_callback(
        self,
        handler: Handler,
        kind: Any,
        variant: HandlerVariant = HandlerVariant.NATIVE,
    ) -> None:
        self.callbacks.add_callback(handler, kind, variant)

    def remove_callback(
        self,
        handler: Handler,
        kind: Any,
        variant: HandlerVariant = HandlerVariant.NATIVE,
    ) -> None:
        self.callbacks.remove_callback(handler, kind, variant)

    def get_concrete_memory_value(self, address: int) -> int:
        """
        Return the byte stored at `address` (0 if never written).
        """
        if self.callbacks.is_defined:
            logger.debug("Memory read at %#x", address)
            self.callbacks.notify(CallbackKind.MEMORY_HIT, address)
        return self.memory.get(address, 0)

    def set_concrete_memory_value(self, address: int, value: int) -> None:
        """
        Store a byte at `address`.

        Raises:
            ValueError: if `value` does not fit in a byte.
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Memory value must fit in a byte, got {value:#x}")

        if self.callbacks.is_defined:
            logger.debug("Memory write at %#x", address)
            self.callbacks.notify(CallbackKind.MEMORY_HIT, address)
        self.memory[address] = value

    def simplify(self, node: AstNode) -> AstNode:
        """
        Hand `node` to the registered simplification callbacks.
        """
        if not self.callbacks.is_defined:
            return node
        logger.debug("Simplifying %s", node)
        return self.callbacks.transform(CallbackKind.SYMBOLIC_SIMPLIFICATION, node)
