# core/solver.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Synchronous, round-based fixed-point iteration over a sentence graph

"""Fixed-point solver for sentence graphs.

The solver starts from the all-NEITHER assignment (the bottom of the product
lattice) and runs synchronous rounds. In each round a sentence computes a
candidate value from the frozen assignment of the previous round and keeps
``join(previous, candidate)``. The round's results replace the previous
assignment in one step, so no sentence ever observes a half-finished round.

Rounds are scheduled per strongly connected component. A component waits
at NEITHER until every component it reads from is settled, so its cyclic
references are only ever hypothesised against final inputs. A name that is
NEITHER merely because its definition has not been reached yet is never
mistaken for an ungrounded one, and a sentence gets the same value whether
a dependency is written inline or behind another name. A component is
settled once the next round provably changes none of its members.

Termination: join only moves a value upward and the information lattice has
height 2 (NEITHER -> TRUE|FALSE -> BOTH), so each sentence changes at most
twice. A component of k sentences changes something in every round from
its first one until it settles, which takes at most 2k rounds, so the last
component on any dependency path settles by round 2N and round 2N + 1 at
the latest confirms stability. The ``max_iterations`` bound exists only to
stop operators that break this contract; hitting it raises
NonConvergenceError.

State machine::

    INITIALIZING -> ITERATING -> STABLE
                              -> NON_CONVERGENT
"""

from concurrent.futures import Executor
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Set, Tuple

from logic.operators import B4_SEMANTICS, Semantics
from logic.truth_value import TruthValue
from model.assignment import Assignment
from utils.logger import get_logger

from .evaluator import DEFAULT_HYPOTHESIS_LIMIT, evaluate_candidate
from .exceptions import NonConvergenceError

if TYPE_CHECKING:
    from model.sentence_graph import SentenceGraph


class SolverState(Enum):
    """Lifecycle of a FixedPointSolver."""
    INITIALIZING = auto()
    ITERATING = auto()
    STABLE = auto()
    NON_CONVERGENT = auto()

    def __str__(self) -> str:
        return self.name

    def is_terminal(self) -> bool:
        return self in (SolverState.STABLE, SolverState.NON_CONVERGENT)


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of a successful solver run.

    Attributes:
        assignment: The stable assignment.
        rounds: Rounds executed, including the final round that changed nothing.
        converged_at: Last round that changed a value (0 if none did).
        history: Assignment after each round; history[0] is the initial one.
    """
    assignment: Assignment
    rounds: int
    converged_at: int
    history: Tuple[Assignment, ...] = field(default=(), repr=False)


def round_bound(sentence_count: int) -> int:
    """Maximum number of rounds needed to stabilize N sentences."""
    return 2 * sentence_count + 1


def default_max_iterations(sentence_count: int) -> int:
    """Default safety bound, strictly above round_bound()."""
    return round_bound(sentence_count) + 1


class FixedPointSolver:
    """Round-based fixed-point iteration over a SentenceGraph.

    A solver instance runs once; create a new one per solve. The graph is
    only read, so any number of solvers may share it.

    Args:
        graph: Validated sentence graph
        max_iterations: Safety bound on the number of rounds (default 2N + 2)
        semantics: Connectives and join (default B4)
        executor: Optional executor evaluating the sentences of a round
            concurrently; the end of each round is the barrier
        hypothesis_limit: Max ungrounded cyclic references enumerated per
            sentence before falling back to reading them as BOTH

    Reading ungrounded names as BOTH is an upper bound of the hypothesis
    join, not the same value: ``A := A | !A`` is TRUE when its hypotheses
    are enumerated and BOTH once the limit is hit. A lower limit can
    therefore change the answer; each sentence that hits it is logged once
    as a warning.
    """

    def __init__(
        self,
        graph: "SentenceGraph",
        max_iterations: Optional[int] = None,
        semantics: Optional[Semantics] = None,
        executor: Optional[Executor] = None,
        hypothesis_limit: int = DEFAULT_HYPOTHESIS_LIMIT,
    ):
        if max_iterations is None:
            max_iterations = default_max_iterations(len(graph))
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        if hypothesis_limit < 0:
            raise ValueError(f"hypothesis_limit must be non-negative, got {hypothesis_limit}")

        self.graph = graph
        self.max_iterations = max_iterations
        self.semantics = semantics if semantics is not None else B4_SEMANTICS
        self.executor = executor
        self.hypothesis_limit = hypothesis_limit
        self.state = SolverState.INITIALIZING
        self.history: List[Assignment] = []

        # Cyclic references never change after construction
        self._cyclic = {name: graph.cyclic_references(name) for name in graph}

        self._components = graph.components()
        index = {name: idx for idx, comp in enumerate(self._components) for name in comp}
        self._upstream = [
            {index[ref] for name in comp for ref in graph.dependencies(name)} - {idx}
            for idx, comp in enumerate(self._components)
        ]
        self._settled: Set[int] = set()
        self._carried: Dict[str, TruthValue] = {}
        self._capped: Set[str] = set()

    @property
    def rounds(self) -> int:
        """Rounds executed so far."""
        return max(len(self.history) - 1, 0)

    def run(self) -> SolveResult:
        """Iterate to a stable assignment.

        Returns:
            SolveResult holding the stable assignment

        Raises:
            NonConvergenceError: max_iterations rounds ran without a stable one
            RuntimeError: The solver was already run
        """
        logger = get_logger()

        if self.state is not SolverState.INITIALIZING:
            raise RuntimeError(f"Solver already run (state: {self.state})")

        if self.semantics is not B4_SEMANTICS:
            for operator, detail in self.semantics.monotonicity_violations():
                logger.monotonicity_violation(operator, detail)

        current = self.graph.initial_assignment()
        self.history = [current]

        if len(self.graph) == 0:
            self.state = SolverState.STABLE
            logger.debug("Empty sentence graph: nothing to solve")
            return SolveResult(current, rounds=0, converged_at=0, history=(current,))

        logger.solve_start(len(self.graph), self.max_iterations)
        self.state = SolverState.ITERATING
        converged_at = 0

        for round_no in range(1, self.max_iterations + 1):
            active = self._ready()
            following = self._step(current, active)
            self.history.append(following)
            self._settle(following, active)

            changes = following.changes(current)
            logger.round_completed(round_no, changes)

            if not changes and len(self._settled) == len(self._components):
                self.state = SolverState.STABLE
                logger.solver_stable(round_no, converged_at)
                return SolveResult(
                    following,
                    rounds=round_no,
                    converged_at=converged_at,
                    history=tuple(self.history),
                )

            if changes:
                converged_at = round_no
            current = following

        self.state = SolverState.NON_CONVERGENT
        logger.solver_non_convergent(self.max_iterations)
        raise NonConvergenceError(self.max_iterations, current, self.history)

    def _ready(self) -> List[int]:
        """Unsettled components whose inputs are all settled."""
        return [
            idx for idx in range(len(self._components))
            if idx not in self._settled and self._upstream[idx] <= self._settled
        ]

    def _members(self, components: Sequence[int]) -> List[str]:
        return [name for idx in components for name in self._components[idx]]

    def _step(self, snapshot: Assignment, active: Sequence[int]) -> Assignment:
        """Compute one synchronous round from a frozen snapshot.

        Only members of `active` components are evaluated; everything else
        keeps its snapshot value.
        """
        names = self._members(active)
        candidates = dict(self._carried)
        candidates.update(
            self._candidates([name for name in names if name not in self._carried], snapshot)
        )

        join = self.semantics.join
        return snapshot.updated(
            {name: join(snapshot[name], candidates[name]) for name in names}
        )

    def _settle(self, following: Assignment, active: Sequence[int]) -> None:
        """Mark active components the next round would leave unchanged.

        The lookahead candidates are exactly what the next round computes
        for the components that stay unsettled, so they are carried over.
        """
        lookahead = self._candidates(self._members(active), following)
        join = self.semantics.join

        self._carried = {}
        for idx in active:
            members = self._components[idx]
            if all(join(following[name], lookahead[name]) == following[name] for name in members):
                self._settled.add(idx)
            else:
                self._carried.update((name, lookahead[name]) for name in members)

    def _candidates(self, names: Sequence[str], snapshot: Assignment) -> Dict[str, TruthValue]:
        if self.executor is not None:
            values = list(
                self.executor.map(lambda name: self._candidate(name, snapshot), names)
            )
        else:
            values = [self._candidate(name, snapshot) for name in names]
        return dict(zip(names, values))

    def _candidate(self, name: str, snapshot: Assignment) -> TruthValue:
        ungrounded = tuple(
            ref for ref in self._cyclic[name] if snapshot[ref] == TruthValue.NEITHER
        )
        if len(ungrounded) > self.hypothesis_limit and name not in self._capped:
            self._capped.add(name)
            get_logger().hypothesis_limit_exceeded(name, len(ungrounded), self.hypothesis_limit)
        return evaluate_candidate(
            self.graph[name].formula,
            snapshot,
            ungrounded,
            self.semantics,
            self.hypothesis_limit,
        )


def solve_graph(graph: "SentenceGraph", max_iterations: Optional[int] = None, **kwargs) -> SolveResult:
    """Run a fresh solver over `graph` and return the full SolveResult."""
    return FixedPointSolver(graph, max_iterations=max_iterations, **kwargs).run()


def solve(graph: "SentenceGraph", max_iterations: Optional[int] = None, **kwargs) -> Assignment:
    """Solve `graph` and return its stable Assignment.

    Raises:
        NonConvergenceError: No stable round within max_iterations
    """
    return solve_graph(graph, max_iterations, **kwargs).assignment


def solve_changes(history) -> Dict[int, Dict[str, Tuple[TruthValue, TruthValue]]]:
    """Per-round changes of a solver history, keyed by round number."""
    return {
        round_no: history[round_no].changes(history[round_no - 1])
        for round_no in range(1, len(history))
    }
