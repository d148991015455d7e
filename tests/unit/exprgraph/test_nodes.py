"""
Unit tests for exprgraph/nodes.py and exprgraph/parse.py
"""

import dataclasses

import pytest

from exprgraph import AstNode, bv, node_from_data, node_to_data, op, var


class TestBuilders:
    """Test suite for bv(), var() and op()."""

    def test_constant(self):
        node = bv(5, 8)
        assert node.kind == "bv"
        assert node.value == 5
        assert node.size == 8
        assert node.is_constant()
        assert not node.is_variable()

    def test_constant_is_truncated(self):
        """Test that constants are masked to their size."""
        assert bv(0x1FF, 8).value == 0xFF
        assert bv(-1, 4).value == 0xF

    def test_variable(self):
        node = var("x", 32)
        assert node.name == "x"
        assert node.is_variable()

    @pytest.mark.parametrize("builder, args", [(bv, (1, 0)), (var, ("x", -8)), (var, ("", 8))])
    def test_invalid_leaves(self, builder, args):
        with pytest.raises(ValueError):
            builder(*args)

    def test_operator_takes_first_operand_size(self):
        node = op("bvadd", var("a", 16), bv(1, 16))
        assert node.size == 16
        assert node.children == (var("a", 16), bv(1, 16))

    def test_unknown_operator(self):
        with pytest.raises(ValueError) as exc_info:
            op("bvfrobnicate", var("a", 8), var("b", 8))
        assert "Unknown operator" in str(exc_info.value)

    def test_wrong_arity(self):
        with pytest.raises(ValueError) as exc_info:
            op("bvnot", var("a", 8), var("b", 8))
        assert "expects 1 operand" in str(exc_info.value)

    def test_size_mismatch(self):
        with pytest.raises(ValueError) as exc_info:
            op("bvxor", var("a", 8), var("b", 16))
        assert "differ in size" in str(exc_info.value)


class TestAstNode:
    """Test suite for AstNode."""

    def test_structural_equality(self):
        """Test that separately built trees compare equal."""
        assert op("bvxor", var("x", 8), var("x", 8)) == op("bvxor", var("x", 8), var("x", 8))
        assert op("bvxor", var("x", 8), var("x", 8)) != op("bvxor", var("x", 8), var("y", 8))

    def test_nodes_are_immutable(self):
        node = var("x", 8)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "y"

    def test_nodes_are_hashable(self):
        assert len({var("x", 8), var("x", 8), bv(0, 8)}) == 2

    def test_rendering(self):
        node = op("bvadd", op("bvnot", var("a", 8)), bv(3, 8))
        assert str(node) == "(bvadd (bvnot a) (_ bv3 8))"


class TestParse:
    """Test suite for node_from_data() and node_to_data()."""

    def test_parse_nested(self):
        data = {
            "op": "bvsub",
            "args": [{"var": "a", "size": 8}, {"op": "bvneg", "args": [{"bv": 2, "size": 8}]}],
        }
        assert node_from_data(data) == op("bvsub", var("a", 8), op("bvneg", bv(2, 8)))

    def test_round_trip_of_sample(self):
        node = op("bvand", var("m", 64), bv(0xFF, 64))
        assert node_from_data(node_to_data(node)) == node

    def test_to_data_shapes(self):
        assert node_to_data(bv(1, 8)) == {"bv": 1, "size": 8}
        assert node_to_data(var("x", 8)) == {"var": "x", "size": 8}
        assert node_to_data(op("bvnot", var("x", 8))) == {
            "op": "bvnot",
            "args": [{"var": "x", "size": 8}],
        }

    @pytest.mark.parametrize(
        "data, message",
        [
            ([1, 2], "must be a mapping"),
            ({"op": "bvadd"}, "needs an 'args' list"),
            ({"bv": 1}, "missing 'size'"),
            ({"size": 8}, "Unrecognised expression"),
            ({"op": "bvadd", "args": [{"bv": 1, "size": 8}]}, "expects 2 operand"),
            ({"op": ["bvadd"], "args": []}, "'op' must be a string"),
            ({"bv": [1], "size": 8}, "'bv' must be an integer"),
            ({"bv": "1", "size": 8}, "'bv' must be an integer"),
            ({"bv": 1, "size": "8"}, "'size' must be an integer"),
            ({"bv": 1, "size": True}, "'size' must be an integer"),
            ({"var": ["x"], "size": 8}, "'var' must be a string"),
        ],
    )
    def test_malformed_data(self, data, message):
        with pytest.raises(ValueError) as exc_info:
            node_from_data(data)
        assert message in str(exc_info.value)

    def test_returns_astnode(self):
        assert isinstance(node_from_data({"var": "x", "size": 1}), AstNode)
