"""
Hooks for the xor_self trace.

Registers one native and one foreign simplification, plus a native memory
hit logger.
"""

import sys
from pathlib import Path

from exprgraph import bv, op
from hookwire.engine.kinds import CallbackKind, HandlerVariant

FOREIGN_RULES = Path(__file__).with_name("foreign.py")


def xor_self(node):
    """(bvxor a a) => 0, anywhere in the tree."""
    if node.kind == "bvxor" and node.children[0] == node.children[1]:
        return bv(0, node.size)
    if node.children:
        children = [xor_self(child) for child in node.children]
        if children != list(node.children):
            return op(node.kind, *children)
    return node


def log_hit(address):
    print(f"memory hit at {address:#x}", file=sys.stderr)


def register(callbacks, runtime, trace_id):
    foreign = runtime.load_file(FOREIGN_RULES, name=f"{trace_id}_foreign")

    callbacks.add_callback(log_hit, CallbackKind.MEMORY_HIT)
    callbacks.add_callback(xor_self, CallbackKind.SYMBOLIC_SIMPLIFICATION)
    callbacks.add_callback(
        foreign.add_zero, CallbackKind.SYMBOLIC_SIMPLIFICATION, HandlerVariant.FOREIGN
    )
