"""
Unit tests for hookwire/engine/pools.py
"""

from hookwire.engine.kinds import CallbackKind, HandlerVariant
from hookwire.engine.pools import HandlerPools


def handler_a(_):
    pass


def handler_b(_):
    pass


class TestHandlerPools:
    """Test suite for the HandlerPools class."""

    def test_initialization(self):
        """Test that all four lists start empty."""
        pools = HandlerPools()
        assert pools.memory_hit == []
        assert pools.symbolic_simplification == []
        assert pools.foreign_memory_hit == []
        assert pools.foreign_symbolic_simplification == []
        assert pools.count() == 0

    def test_get_selects_list_by_kind_and_variant(self):
        """Test that each (kind, variant) pair maps to its own list."""
        pools = HandlerPools()

        assert pools.get(CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE) is pools.memory_hit
        assert pools.get(CallbackKind.MEMORY_HIT, HandlerVariant.FOREIGN) is pools.foreign_memory_hit
        assert (
            pools.get(CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.NATIVE)
            is pools.symbolic_simplification
        )
        assert (
            pools.get(CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.FOREIGN)
            is pools.foreign_symbolic_simplification
        )

    def test_append_allows_duplicates(self):
        """Test that the same handler can be appended more than once."""
        pools = HandlerPools()
        pools.append(handler_a, CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE)
        pools.append(handler_a, CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE)

        assert pools.memory_hit == [handler_a, handler_a]
        assert pools.count() == 2

    def test_remove_returns_removed_count(self):
        """Test that remove() drops every occurrence and reports how many."""
        pools = HandlerPools()
        for handler in (handler_a, handler_b, handler_a):
            pools.append(handler, CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE)

        removed = pools.remove(handler_a, CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE)

        assert removed == 2
        assert pools.memory_hit == [handler_b]

    def test_remove_keeps_list_object(self):
        """Test that removal edits the list in place."""
        pools = HandlerPools()
        live = pools.symbolic_simplification
        pools.append(handler_a, CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.NATIVE)

        pools.remove(handler_a, CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.NATIVE)

        assert pools.symbolic_simplification is live
        assert live == []

    def test_remove_missing_handler(self):
        """Test that removing an absent handler reports zero."""
        pools = HandlerPools()
        assert pools.remove(handler_a, CallbackKind.MEMORY_HIT, HandlerVariant.FOREIGN) == 0

    def test_copy_is_independent(self):
        """Test that copies do not share list objects."""
        pools = HandlerPools()
        pools.append(handler_a, CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE)
        pools.append(handler_b, CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.FOREIGN)

        clone = pools.copy()
        clone.append(handler_b, CallbackKind.MEMORY_HIT, HandlerVariant.NATIVE)

        assert pools.memory_hit == [handler_a]
        assert clone.memory_hit == [handler_a, handler_b]
        assert clone.foreign_symbolic_simplification == [handler_b]
        assert clone.foreign_symbolic_simplification is not pools.foreign_symbolic_simplification
        assert clone.memory_hit[0] is handler_a
