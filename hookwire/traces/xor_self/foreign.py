"""
Foreign rules for the xor_self trace.

Loaded into the embedded runtime by hooks.py. Handlers here receive and
return AstNodeRef wrappers, never engine nodes.
"""


def add_zero(node):
    """(bvadd a 0) => a"""
    if node.kind == "bvadd":
        left, right = node.children
        if right.kind == "bv" and right.node.value == 0:
            return left
    return node
