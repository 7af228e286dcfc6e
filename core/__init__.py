# core/__init__.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Core module public API for solving sentence graphs

"""Core components of the PRR fixed-point engine.

Primary Components:
    FixedPointSolver: Synchronous round-based iteration to a stable Assignment
    solve: Convenience wrapper returning the stable Assignment
    project: Confidence intervals for a stable Assignment
    UndefinedReferenceError, MalformedFormulaError, NonConvergenceError:
        The engine's error taxonomy

Example:
    >>> from model import SentenceGraph
    >>> from core import solve, project
    >>> graph = SentenceGraph.from_source("L := !L")
    >>> result = solve(graph)
    >>> project(result)
    {'L': Interval(low=0.0, high=1.0)}
"""

# Exceptions first: model.sentence_graph imports them while core initializes
from .exceptions import (
    MalformedFormulaError,
    NonConvergenceError,
    PRREngineError,
    UndefinedReferenceError,
)
from .evaluator import FormulaEvaluator, evaluate, evaluate_candidate
from .projector import CONFIDENCE_INTERVALS, Interval, project, project_value
from .solver import (
    FixedPointSolver,
    SolveResult,
    SolverState,
    default_max_iterations,
    round_bound,
    solve,
    solve_changes,
    solve_graph,
)

__all__ = [
    "PRREngineError",
    "UndefinedReferenceError",
    "MalformedFormulaError",
    "NonConvergenceError",
    "FormulaEvaluator",
    "evaluate",
    "evaluate_candidate",
    "Interval",
    "CONFIDENCE_INTERVALS",
    "project",
    "project_value",
    "FixedPointSolver",
    "SolveResult",
    "SolverState",
    "default_max_iterations",
    "round_bound",
    "solve",
    "solve_graph",
    "solve_changes",
]
