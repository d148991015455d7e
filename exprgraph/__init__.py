"""
Expression graph nodes for the hookwire analysis engine.

Provides the graph handle that symbolic simplification callbacks receive
and return.

Contents:
- AstNode: immutable expression node
- bv, var, op: node builders
- node_from_data, node_to_data: mapping form used by trace files
"""

from exprgraph.nodes import AstNode, bv, op, var
from exprgraph.parse import node_from_data, node_to_data

__all__ = [
    "AstNode",
    "bv",
    "var",
    "op",
    "node_from_data",
    "node_to_data",
]
