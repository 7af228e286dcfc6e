# formula_parser/ast_nodes.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Abstract Syntax Tree node classes for sentence formulas

"""AST node classes for representing sentence formulas.

This module defines immutable and hashable node classes used to build the
formula of a sentence. Besides the Boolean connectives, a formula may contain
B4 constants and references to other sentences by name; references are what
make a set of sentences self-referential.

Node Types:
    Literal: A B4 constant (true, false, both, neither)
    Reference: The value of another sentence, looked up by name
    Not, And, Or: Connectives

All nodes support the visitor design pattern for traversal and evaluation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from logic.truth_value import TruthValue


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_literal(self, n: Literal): ...

    def visit_reference(self, n: Reference): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all formula nodes.

    Concrete node types implement accept for visitor dispatch and __str__
    for rendering back into formula text.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """B4 constant appearing in a formula.

    Attributes:
        value: The constant truth value
    """

    value: TruthValue

    def accept(self, v: Visitor):
        return v.visit_literal(self)

    def __str__(self) -> str:
        return self.value.keyword


@dataclass(frozen=True, slots=True)
class Reference(Expr):
    """Reference to another sentence (or to the enclosing one) by name.

    Attributes:
        name: Name of the referenced sentence
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_reference(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """B4 negation of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """B4 conjunction of two operands.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """B4 disjunction of two operands.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


class ReferenceCollector:
    """Visitor collecting the names referenced by a formula, in first-seen order."""

    def __init__(self):
        self.names: list = []

    def collect(self, root: Expr) -> tuple:
        self.names = []
        root.accept(self)
        return tuple(self.names)

    def visit_literal(self, n: Literal):
        pass

    def visit_reference(self, n: Reference):
        if n.name not in self.names:
            self.names.append(n.name)

    def visit_not(self, n: Not):
        n.operand.accept(self)

    def visit_and(self, n: And):
        n.left.accept(self)
        n.right.accept(self)

    def visit_or(self, n: Or):
        n.left.accept(self)
        n.right.accept(self)


def references(root: Expr) -> tuple:
    """Return the distinct sentence names referenced by a formula."""
    return ReferenceCollector().collect(root)
