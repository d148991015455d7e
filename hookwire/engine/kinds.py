# hookwire/engine/kinds.py
"""
Tags that classify a registered callback.

A handler is identified by two tags: the extension point it attaches to
(CallbackKind) and the runtime it lives in (HandlerVariant).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from hookwire.engine.exceptions import InvalidKind


class CallbackKind(Enum):
    """
    Extension points of the analysis engine.

    MEMORY_HIT handlers are notified with an address.
    SYMBOLIC_SIMPLIFICATION handlers receive a node and return a node.
    """

    MEMORY_HIT = "memory_hit"
    SYMBOLIC_SIMPLIFICATION = "symbolic_simplification"

    @classmethod
    def coerce(cls, value: Any) -> CallbackKind:
        """
        Resolve a member, a member value or a member name to a CallbackKind.

        Raises:
            InvalidKind: if `value` names no known kind.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().lower()
            for kind in cls:
                if key in (kind.value, kind.name.lower()):
                    return kind

        raise InvalidKind(f"Invalid kind of callback: {value!r}")


class HandlerVariant(Enum):
    """
    Where a handler's code runs.

    NATIVE handlers are plain Python callables invoked directly.
    FOREIGN handlers live in the embedded runtime and are reached through
    the foreign call adapter.
    """

    NATIVE = "native"
    FOREIGN = "foreign"

    @classmethod
    def coerce(cls, value: Any) -> HandlerVariant:
        """
        Resolve a member or a member value to a HandlerVariant.

        Raises:
            InvalidKind: if `value` names no known variant.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().lower()
            for variant in cls:
                if key == variant.value:
                    return variant

        raise InvalidKind(f"Invalid variant of callback: {value!r}")
