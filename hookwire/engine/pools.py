# hookwire/engine/pools.py
"""
Handler pools for the hookwire callback registry.

Four ordered lists, one per (kind, variant) pair. Lists keep registration
order and allow the same handler more than once. Removing a handler removes
every occurrence of it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hookwire.engine.kinds import CallbackKind, HandlerVariant

Handler = Callable[..., Any]


class HandlerPools:
    """
    The four handler lists of a registry.

    Native handlers match on equality, foreign handlers on identity, since a
    foreign handler is a reference into the embedded runtime rather than a
    value.
    """

    def __init__(self) -> None:
        self.memory_hit: list[Handler] = []
        self.symbolic_simplification: list[Handler] = []
        self.foreign_memory_hit: list[Handler] = []
        self.foreign_symbolic_simplification: list[Handler] = []

    def get(self, kind: CallbackKind, variant: HandlerVariant) -> list[Handler]:
        """
        Return the live list for a (kind, variant) pair.
        """
        if variant is HandlerVariant.NATIVE:
            if kind is CallbackKind.MEMORY_HIT:
                return self.memory_hit
            return self.symbolic_simplification

        if kind is CallbackKind.MEMORY_HIT:
            return self.foreign_memory_hit
        return self.foreign_symbolic_simplification

    def append(self, handler: Handler, kind: CallbackKind, variant: HandlerVariant) -> None:
        self.get(kind, variant).append(handler)

    def remove(self, handler: Handler, kind: CallbackKind, variant: HandlerVariant) -> int:
        """
        Remove every occurrence of `handler` and return how many were removed.
        """
        handlers = self.get(kind, variant)
        before = len(handlers)

        if variant is HandlerVariant.FOREIGN:
            handlers[:] = [h for h in handlers if h is not handler]
        else:
            handlers[:] = [h for h in handlers if h != handler]

        return before - len(handlers)

    def count(self) -> int:
        return (
            len(self.memory_hit)
            + len(self.symbolic_simplification)
            + len(self.foreign_memory_hit)
            + len(self.foreign_symbolic_simplification)
        )

    def copy(self) -> HandlerPools:
        """
        Return new pools holding copies of the four lists.

        Handlers themselves are shared, not cloned.
        """
        clone = HandlerPools()
        clone.memory_hit = list(self.memory_hit)
        clone.symbolic_simplification = list(self.symbolic_simplification)
        clone.foreign_memory_hit = list(self.foreign_memory_hit)
        clone.foreign_symbolic_simplification = list(self.foreign_symbolic_simplification)
        return clone
