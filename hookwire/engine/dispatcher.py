# hookwire/engine/dispatcher.py
"""
Dispatch protocols for the hookwire callback registry.

notify() and transform() run every handler of one kind synchronously, native
handlers first and foreign handlers second, each group in registration order.
The first failure stops the dispatch and propagates to the caller. Nothing a
handler already did is undone.

Handler lists are iterated live. Registering or removing handlers of a kind
from inside a handler of that same kind is not supported.
"""

from typing import Any

from exprgraph.nodes import AstNode
from hookwire.engine.exceptions import InvalidKind, NullResultError
from hookwire.engine.kinds import CallbackKind, HandlerVariant
from hookwire.engine.pools import HandlerPools
from hookwire.foreign.adapter import ForeignCallAdapter


def notify(
    pools: HandlerPools,
    kind: Any,
    address: int,
    adapter: ForeignCallAdapter,
) -> None:
    """
    Notify every memory hit handler that `address` was touched.

    Args:
        pools: Handler pools to dispatch from
        kind: Must resolve to CallbackKind.MEMORY_HIT
        address: The address that was accessed
        adapter: Adapter used to reach foreign handlers

    Raises:
        InvalidKind: if `kind` is not MEMORY_HIT; no handler runs.
        CallbackExecutionFailure: if a foreign handler fails.
    """
    if CallbackKind.coerce(kind) is not CallbackKind.MEMORY_HIT:
        raise InvalidKind(
            "processCallbacks(): Invalid kind of callback for an address notification."
        )

    for handler in pools.get(CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE):
        handler(address)

    for handler in pools.get(CallbackKind.MEMORY_HIT, HandlerVariant.FOREIGN):
        adapter.notify(handler, address)


def transform(
    pools: HandlerPools,
    kind: Any,
    node: AstNode,
    adapter: ForeignCallAdapter,
) -> AstNode:
    """
    Thread `node` through every simplification handler and return the result.

    Each handler receives the node produced by the previous one. With no
    handlers registered the input node is returned unchanged.

    Raises:
        InvalidKind: if `kind` is not SYMBOLIC_SIMPLIFICATION; no handler runs.
        NullResultError: if a native handler returns None.
        CallbackExecutionFailure: if a foreign handler fails.
        TypeMismatchError: if a foreign handler returns a non-node value.
    """
    if CallbackKind.coerce(kind) is not CallbackKind.SYMBOLIC_SIMPLIFICATION:
        raise InvalidKind(
            "processCallbacks(): Invalid kind of callback for a node transformation."
        )

    for handler in pools.get(CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.NATIVE):
        node = handler(node)
        if node is None:
            raise NullResultError(
                "processCallbacks(SYMBOLIC_SIMPLIFICATION): You cannot return a None node."
            )

    for handler in pools.get(CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.FOREIGN):
        node = adapter.transform(handler, node)

    return node
