# exprgraph/nodes.py
"""
Expression graph nodes.

A node is an immutable bit-vector expression: a constant, a named variable
or an operator applied to child nodes. Simplification passes never mutate a
node in place; they return a (possibly different) node instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field

UNARY_OPERATORS = frozenset({"bvnot", "bvneg"})
BINARY_OPERATORS = frozenset(
    {"bvadd", "bvsub", "bvmul", "bvand", "bvor", "bvxor", "bvshl", "bvlshr"}
)
OPERATORS = UNARY_OPERATORS | BINARY_OPERATORS


@dataclass(frozen=True)
class AstNode:
    """
    A single node of a symbolic expression graph.

    Nodes compare structurally, so two independently built `(bvxor x x)`
    trees are equal.
    """

    kind: str
    size: int
    value: int | None = None
    name: str | None = None
    children: tuple[AstNode, ...] = field(default_factory=tuple)

    def is_constant(self) -> bool:
        return self.kind == "bv"

    def is_variable(self) -> bool:
        return self.kind == "var"

    def __str__(self) -> str:
        if self.kind == "bv":
            return f"(_ bv{self.value} {self.size})"
        if self.kind == "var":
            return str(self.name)
        return "(" + " ".join([self.kind, *(str(c) for c in self.children)]) + ")"


def bv(value: int, size: int) -> AstNode:
    """
    Build a constant. The value is truncated to `size` bits.
    """
    if size <= 0:
        raise ValueError(f"Bit-vector size must be positive, got {size}")
    return AstNode(kind="bv", size=size, value=int(value) & ((1 << size) - 1))


def var(name: str, size: int) -> AstNode:
    """
    Build a named symbolic variable.
    """
    if not name:
        raise ValueError("Variable name must not be empty")
    if size <= 0:
        raise ValueError(f"Bit-vector size must be positive, got {size}")
    return AstNode(kind="var", size=size, name=name)


def op(kind: str, *children: AstNode) -> AstNode:
    """
    Apply an operator to child nodes.

    The result takes the size of its first operand. Binary operators
    require both operands to share a size.
    """
    if kind not in OPERATORS:
        raise ValueError(f"Unknown operator: {kind!r}")

    arity = 1 if kind in UNARY_OPERATORS else 2
    if len(children) != arity:
        raise ValueError(f"{kind} expects {arity} operand(s), got {len(children)}")

    if arity == 2 and children[0].size != children[1].size:
        raise ValueError(
            f"{kind} operands differ in size: {children[0].size} != {children[1].size}"
        )

    return AstNode(kind=kind, size=children[0].size, children=tuple(children))
