# hookwire/engine/callbacks.py
"""
Callback registry for the hookwire analysis engine.

The registry is the extension surface of the engine. External code attaches
handlers to two extension points:

- MEMORY_HIT: notified with the address of every watched memory access
- SYMBOLIC_SIMPLIFICATION: given a node about to be simplified, returns a node

Handlers are either native (plain Python callables) or foreign (callables
owned by the embedded runtime). The registry is owned by an engine instance
and is never shared between engines; copying it yields an independent
snapshot of its handler lists.
"""

from __future__ import annotations

import logging
from typing import Any

from exprgraph.nodes import AstNode
from hookwire.engine import dispatcher
from hookwire.engine.kinds import CallbackKind, HandlerVariant
from hookwire.engine.pools import Handler, HandlerPools
from hookwire.foreign.adapter import ForeignCallAdapter
from hookwire.foreign.runtime import ForeignRuntime, InProcessRuntime

logger = logging.getLogger(__name__)


class Callbacks:
    """
    Registry of native and foreign callbacks, plus their dispatch entry points.

    `is_defined` is a cached "any handler registered" flag. Adding a handler
    sets it; removing one recomputes it from a full count.
    """

    def __init__(self, runtime: ForeignRuntime | None = None) -> None:
        self.runtime = runtime or InProcessRuntime()
        self._adapter = ForeignCallAdapter(self.runtime)
        self._pools = HandlerPools()
        self._is_defined: bool = False

    @property
    def is_defined(self) -> bool:
        return self._is_defined

    def add_callback(
        self,
        handler: Handler,
        kind: Any,
        variant: HandlerVariant = HandlerVariant.NATIVE,
    ) -> None:
        """
        Append a handler to the tail of its list.

        Raises:
            InvalidKind: if `kind` or `variant` is not recognised.
        """
        kind = CallbackKind.coerce(kind)
        variant = HandlerVariant.coerce(variant)

        self._pools.append(handler, kind, variant)
        self._is_defined = True
        logger.debug("Registered %s %s callback %r", variant.value, kind.value, handler)

    def remove_callback(
        self,
        handler: Handler,
        kind: Any,
        variant: HandlerVariant = HandlerVariant.NATIVE,
    ) -> None:
        """
        Remove every registration of `handler` from its list.

        Removing a handler that was never registered is a no-op.

        Raises:
            InvalidKind: if `kind` or `variant` is not recognised.
        """
        kind = CallbackKind.coerce(kind)
        variant = HandlerVariant.coerce(variant)

        removed = self._pools.remove(handler, kind, variant)
        self._is_defined = self.count_callbacks() != 0
        logger.debug(
            "Removed %d registration(s) of %s %s callback %r",
            removed,
            variant.value,
            kind.value,
            handler,
        )

    def count_callbacks(self) -> int:
        return self._pools.count()

    def get_callbacks(self, kind: Any, variant: HandlerVariant = HandlerVariant.NATIVE) -> list[Handler]:
        """
        Return a copy of the handlers registered for a (kind, variant) pair.
        """
        return list(self._pools.get(CallbackKind.coerce(kind), HandlerVariant.coerce(variant)))

    def notify(self, kind: Any, address: int) -> None:
        """
        Run the memory hit handlers for `address`. See dispatcher.notify().
        """
        dispatcher.notify(self._pools, kind, address, self._adapter)

    def transform(self, kind: Any, node: AstNode) -> AstNode:
        """
        Run the simplification pipeline over `node`. See dispatcher.transform().
        """
        return dispatcher.transform(self._pools, kind, node, self._adapter)

    def process_callbacks(self, kind: Any, value: int | AstNode) -> AstNode | None:
        """
        Route to notify() for an address and to transform() for a node.

        The protocol is chosen from the value, so asking for the other
        protocol's kind raises InvalidKind.
        """
        if isinstance(value, AstNode):
            return self.transform(kind, value)
        self.notify(kind, value)
        return None

    def copy(self) -> Callbacks:
        """
        Return an independent registry with the same handlers and flag.
        """
        clone = Callbacks(self.runtime)
        clone.assign(self)
        return clone

    def assign(self, other: Callbacks) -> None:
        """
        Replace this registry's handler lists and flag with copies of `other`'s.
        """
        self.runtime = other.runtime
        self._adapter = ForeignCallAdapter(other.runtime)
        self._pools = other._pools.copy()
        self._is_defined = other._is_defined

    def __copy__(self) -> Callbacks:
        return self.copy()
