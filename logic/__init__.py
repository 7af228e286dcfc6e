# logic/__init__.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Truth values, connectives and the information lattice

"""The four-valued logic B4.

This package provides:
  • TruthValue: TRUE, FALSE, BOTH, NEITHER
  • negate / conjunction / disjunction: the B4 connectives
  • join / meet / leq: the information lattice
  • Semantics: operator bundle handed to the fixed-point solver
"""

from .lattice import (
    LATTICE_HEIGHT,
    is_monotone_binary,
    is_monotone_unary,
    join,
    join_all,
    leq,
    meet,
)
from .operators import (
    B4_SEMANTICS,
    CONJUNCTION_TABLE,
    NEGATION_TABLE,
    Semantics,
    conjunction,
    disjunction,
    negate,
)
from .truth_value import ALL_VALUES, TruthValue

__all__ = [
    "TruthValue",
    "ALL_VALUES",
    "negate",
    "conjunction",
    "disjunction",
    "NEGATION_TABLE",
    "CONJUNCTION_TABLE",
    "join",
    "join_all",
    "meet",
    "leq",
    "LATTICE_HEIGHT",
    "is_monotone_unary",
    "is_monotone_binary",
    "Semantics",
    "B4_SEMANTICS",
]
