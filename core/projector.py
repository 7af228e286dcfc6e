# core/projector.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Projection of stable truth values onto confidence intervals

"""Mapping from B4 truth values to closed confidence intervals in [0, 1].

    C(TRUE)    = [1.0, 1.0]
    C(FALSE)   = [0.0, 0.0]
    C(BOTH)    = [0.0, 1.0]
    C(NEITHER) = [0.0, 0.0]

BOTH spans the whole unit interval: the evidence supports full belief and
full disbelief at once. NEITHER projects to the same interval as FALSE, so
absence of evidence counts as disconfirming evidence for aggregation
purposes. That identification is a fixed convention of the projection; it
is not derived from the lattice and should not be assumed to carry over to
weighted or probabilistic variants.
"""

from typing import Dict, Mapping, NamedTuple

from logic.truth_value import TruthValue


class Interval(NamedTuple):
    """Closed interval [low, high] within [0, 1]."""
    low: float
    high: float

    @property
    def width(self) -> float:
        return self.high - self.low

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high

    def __str__(self) -> str:
        return f"[{self.low:.1f}, {self.high:.1f}]"


CONFIDENCE_INTERVALS = {
    TruthValue.TRUE: Interval(1.0, 1.0),
    TruthValue.FALSE: Interval(0.0, 0.0),
    TruthValue.BOTH: Interval(0.0, 1.0),
    TruthValue.NEITHER: Interval(0.0, 0.0),
}


def project_value(value: TruthValue) -> Interval:
    """Confidence interval of a single truth value."""
    return CONFIDENCE_INTERVALS[value]


def project(assignment: Mapping[str, TruthValue]) -> Dict[str, Interval]:
    """Confidence interval for every sentence of an assignment.

    Args:
        assignment: Name -> TruthValue mapping, typically a stable Assignment

    Returns:
        Name -> Interval, in the assignment's iteration order
    """
    return {name: project_value(value) for name, value in assignment.items()}
