# exprgraph/parse.py
"""
Conversion between expression nodes and their mapping form.

Trace files describe expressions as nested mappings:

    {bv: 1, size: 8}
    {var: x, size: 8}
    {op: bvxor, args: [{var: x, size: 8}, {var: x, size: 8}]}
"""

from typing import Any

from exprgraph.nodes import AstNode, bv, op, var


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {type(value).__name__}")
    return value


def node_from_data(data: Any) -> AstNode:
    """
    Build a node from its mapping form.

    Raises:
        ValueError: if the mapping is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expression must be a mapping, got {type(data).__name__}")

    if "op" in data:
        if not isinstance(data["op"], str):
            raise ValueError(f"'op' must be a string, got {type(data['op']).__name__}")
        args = data.get("args")
        if not isinstance(args, list):
            raise ValueError(f"'{data['op']}' expression needs an 'args' list")
        return op(data["op"], *(node_from_data(arg) for arg in args))

    if "size" not in data:
        raise ValueError("Leaf expression is missing 'size'")
    size = _require_int(data, "size")

    if "bv" in data:
        return bv(_require_int(data, "bv"), size)
    if "var" in data:
        if not isinstance(data["var"], str):
            raise ValueError(f"'var' must be a string, got {type(data['var']).__name__}")
        return var(data["var"], size)

    raise ValueError(f"Unrecognised expression: {data!r}")


def node_to_data(node: AstNode) -> dict[str, Any]:
    """
    Inverse of node_from_data.
    """
    if node.is_constant():
        return {"bv": node.value, "size": node.size}
    if node.is_variable():
        return {"var": node.name, "size": node.size}
    return {"op": node.kind, "args": [node_to_data(child) for child in node.children]}
