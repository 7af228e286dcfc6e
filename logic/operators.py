# logic/operators.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# B4 connectives and the operator bundle consumed by the solver

"""Negation, conjunction and disjunction of the four-valued logic B4.

Negation and conjunction are given by explicit tables; disjunction is derived
from them by De Morgan's law. All three connectives are monotone in the
information order, which is what lets the fixed-point solver converge.

The :class:`Semantics` bundle groups the connectives with the lattice join so
that the solver can be run against custom operators. Such operators must keep
the monotonicity contract; :meth:`Semantics.monotonicity_violations` lists
every counterexample over the finite domain.
"""

from dataclasses import dataclass
from itertools import product
from typing import Callable, List, Tuple

from .lattice import binary_violations, join, leq, unary_violations
from .truth_value import ALL_VALUES, TruthValue

T = TruthValue.TRUE
F = TruthValue.FALSE
B = TruthValue.BOTH
N = TruthValue.NEITHER

NEGATION_TABLE = {
    T: F,
    F: T,
    B: B,
    N: N,
}

CONJUNCTION_TABLE = {
    (T, T): T, (T, F): F, (T, B): B, (T, N): N,
    (F, T): F, (F, F): F, (F, B): F, (F, N): F,
    (B, T): B, (B, F): F, (B, B): B, (B, N): F,
    (N, T): N, (N, F): F, (N, B): F, (N, N): N,
}


def negate(v: TruthValue) -> TruthValue:
    """B4 negation: swaps TRUE and FALSE, fixes BOTH and NEITHER."""
    return NEGATION_TABLE[v]


def conjunction(v1: TruthValue, v2: TruthValue) -> TruthValue:
    """B4 conjunction by table lookup."""
    return CONJUNCTION_TABLE[(v1, v2)]


def disjunction(v1: TruthValue, v2: TruthValue) -> TruthValue:
    """B4 disjunction, derived as not(not v1 and not v2)."""
    return negate(conjunction(negate(v1), negate(v2)))


UnaryOp = Callable[[TruthValue], TruthValue]
BinaryOp = Callable[[TruthValue, TruthValue], TruthValue]


@dataclass(frozen=True)
class Semantics:
    """Operator bundle used to evaluate formulas and merge round results.

    Attributes:
        negate: Unary negation
        conjunction: Binary conjunction
        disjunction: Binary disjunction
        join: Evidence combination; must be monotone and an upper bound of
            both arguments for the solver's termination bound to hold
    """

    negate: UnaryOp = negate
    conjunction: BinaryOp = conjunction
    disjunction: BinaryOp = disjunction
    join: BinaryOp = join

    def monotonicity_violations(self) -> List[Tuple[str, str]]:
        """List (operator, description) for every contract counterexample."""
        violations = []

        for v1, v2 in unary_violations(self.negate):
            violations.append(
                ("negate", f"{v1} <= {v2} but {self.negate(v1)} !<= {self.negate(v2)}")
            )

        for name in ("conjunction", "disjunction", "join"):
            fn = getattr(self, name)
            for position, v1, v2, x in binary_violations(fn):
                violations.append(
                    (name, f"{v1} <= {v2} in {position} argument with {x} fixed")
                )

        for v1, v2 in product(ALL_VALUES, repeat=2):
            merged = self.join(v1, v2)
            if not (leq(v1, merged) and leq(v2, merged)):
                violations.append(
                    ("join", f"join({v1}, {v2}) = {merged} is not an upper bound")
                )

        return violations

    def is_monotone(self) -> bool:
        return not self.monotonicity_violations()


B4_SEMANTICS = Semantics()
