# core/exceptions.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Error taxonomy for graph construction and solving

"""Exceptions raised while building sentence graphs and solving them.

Construction errors (undefined references, malformed formulas) abort graph
construction entirely, so no partially built graph is ever observable.
NonConvergenceError is raised by the solver when its safety bound runs out;
with monotone operators this cannot happen, so it points at a custom
operator that breaks the monotonicity contract.
"""

from typing import Optional, Sequence


class PRREngineError(RuntimeError):
    """Base class for all engine errors."""

    pass


class UndefinedReferenceError(PRREngineError):
    """A formula references a sentence name that is not defined in the graph."""

    def __init__(self, sentence: str, reference: str):
        self.sentence = sentence
        self.reference = reference
        super().__init__(
            f"Sentence '{sentence}' references undefined sentence '{reference}'"
        )


class MalformedFormulaError(PRREngineError):
    """A formula contains an unsupported or ill-formed expression node."""

    def __init__(self, sentence: Optional[str], detail: str):
        self.sentence = sentence
        self.detail = detail
        where = f"Sentence '{sentence}'" if sentence is not None else "Formula"
        super().__init__(f"{where} is malformed: {detail}")


class NonConvergenceError(PRREngineError):
    """The solver exhausted max_iterations without reaching a stable round.

    Attributes:
        rounds: Number of rounds executed
        last_assignment: Assignment computed by the final round (not stable)
        history: Assignments after every round, starting with the initial one
    """

    def __init__(self, rounds: int, last_assignment, history: Sequence = ()):
        self.rounds = rounds
        self.last_assignment = last_assignment
        self.history = tuple(history)
        super().__init__(
            f"No stable assignment after {rounds} round(s); the operators "
            f"likely violate the monotonicity contract"
        )
