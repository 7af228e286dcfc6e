# logic/lattice.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Information lattice over the B4 truth values

"""Information ordering, join and meet over B4 truth values.

The information lattice orders truth values by how much is known about a
sentence::

            BOTH
           /    \\
        TRUE    FALSE
           \\    /
           NEITHER

Join combines evidence without ever losing information and is the only
lattice operation the solver needs. Meet is its dual and is provided for
completeness. The monotonicity helpers check a candidate operator against
every ordered pair of the (finite) domain, which is how custom operators are
vetted before they are handed to the solver.
"""

from itertools import product
from typing import Callable, Iterable, List, Tuple

from .truth_value import ALL_VALUES, TruthValue

# Longest strictly increasing chain: NEITHER < TRUE|FALSE < BOTH
LATTICE_HEIGHT = 2


def leq(v1: TruthValue, v2: TruthValue) -> bool:
    """Return whether v1 carries no more information than v2."""
    if v1 == v2:
        return True
    return v1 == TruthValue.NEITHER or v2 == TruthValue.BOTH


def join(v1: TruthValue, v2: TruthValue) -> TruthValue:
    """Least upper bound of two values in the information lattice.

    Equal values join to themselves, NEITHER is the identity, and any other
    combination (TRUE with FALSE, or anything with BOTH) yields BOTH.
    """
    if v1 == v2:
        return v1
    if v1 == TruthValue.NEITHER:
        return v2
    if v2 == TruthValue.NEITHER:
        return v1
    return TruthValue.BOTH


def meet(v1: TruthValue, v2: TruthValue) -> TruthValue:
    """Greatest lower bound of two values in the information lattice."""
    if v1 == v2:
        return v1
    if v1 == TruthValue.BOTH:
        return v2
    if v2 == TruthValue.BOTH:
        return v1
    return TruthValue.NEITHER


def join_all(values: Iterable[TruthValue]) -> TruthValue:
    """Join an arbitrary number of values; the empty join is NEITHER."""
    result = TruthValue.NEITHER
    for value in values:
        result = join(result, value)
    return result


def _ordered_pairs() -> List[Tuple[TruthValue, TruthValue]]:
    return [(a, b) for a, b in product(ALL_VALUES, repeat=2) if leq(a, b)]


def unary_violations(fn: Callable[[TruthValue], TruthValue]) -> List[Tuple]:
    """Collect every (v1, v2) with v1 <= v2 but fn(v1) not <= fn(v2)."""
    return [(a, b) for a, b in _ordered_pairs() if not leq(fn(a), fn(b))]


def binary_violations(
    fn: Callable[[TruthValue, TruthValue], TruthValue]
) -> List[Tuple]:
    """Collect monotonicity counterexamples of a binary operator.

    The operator must be monotone in each argument separately. Each
    counterexample is reported as (position, v1, v2, x) where position is
    "left" or "right" and x is the fixed other argument.
    """
    violations = []
    for (a, b), x in product(_ordered_pairs(), ALL_VALUES):
        if not leq(fn(a, x), fn(b, x)):
            violations.append(("left", a, b, x))
        if not leq(fn(x, a), fn(x, b)):
            violations.append(("right", a, b, x))
    return violations


def is_monotone_unary(fn: Callable[[TruthValue], TruthValue]) -> bool:
    """Return whether a unary operator preserves the information order."""
    return not unary_violations(fn)


def is_monotone_binary(fn: Callable[[TruthValue, TruthValue], TruthValue]) -> bool:
    """Return whether a binary operator preserves the information order."""
    return not binary_violations(fn)
