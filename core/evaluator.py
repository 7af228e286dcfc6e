# core/evaluator.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Formula evaluation against a frozen assignment snapshot

"""Evaluation of sentence formulas under B4 semantics.

References are resolved by looking the name up in an explicit, read-only
snapshot; evaluation never recurses into another sentence's formula. This
keeps self-reference finite and means a sentence can only ever observe the
values of the previous solver round.

The solver only evaluates a sentence once everything outside its own cycle
has settled, so a cyclic reference whose snapshot value is still NEITHER
carries no information yet. For such ungrounded names the formula is evaluated under
both classical hypotheses (TRUE and FALSE) and the results are joined, so a
sentence that contradicts itself under every hypothesis (the Liar) collects
BOTH while a cycle that agrees with itself either way (``A := true | A``)
settles on a classical value.
"""

from collections import ChainMap
from functools import reduce
from itertools import product
from typing import Mapping, Sequence

from formula_parser import ast_nodes as ast
from logic.operators import B4_SEMANTICS, Semantics
from logic.truth_value import TruthValue

# Above this many ungrounded names a sentence reads them all as BOTH instead
# of enumerating 2**k hypotheses. BOTH is an upper bound of the enumerated
# join and may be strictly above it.
DEFAULT_HYPOTHESIS_LIMIT = 10

_HYPOTHESES = (TruthValue.TRUE, TruthValue.FALSE)


class FormulaEvaluator(ast.Visitor):
    """Visitor computing the truth value of a formula.

    Attributes:
        lookup: Name -> TruthValue mapping used for references
        semantics: Connectives to evaluate with
    """

    def __init__(self, lookup: Mapping[str, TruthValue], semantics: Semantics = B4_SEMANTICS):
        self.lookup = lookup
        self.semantics = semantics

    def evaluate(self, root: ast.Expr) -> TruthValue:
        return root.accept(self)

    def visit_literal(self, n: ast.Literal) -> TruthValue:
        return n.value

    def visit_reference(self, n: ast.Reference) -> TruthValue:
        return self.lookup[n.name]

    def visit_not(self, n: ast.Not) -> TruthValue:
        return self.semantics.negate(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> TruthValue:
        return self.semantics.conjunction(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> TruthValue:
        return self.semantics.disjunction(n.left.accept(self), n.right.accept(self))


def evaluate(
    formula: ast.Expr,
    snapshot: Mapping[str, TruthValue],
    semantics: Semantics = B4_SEMANTICS,
) -> TruthValue:
    """Evaluate a formula reading every reference straight from `snapshot`."""
    return FormulaEvaluator(snapshot, semantics).evaluate(formula)


def evaluate_candidate(
    formula: ast.Expr,
    snapshot: Mapping[str, TruthValue],
    ungrounded: Sequence[str] = (),
    semantics: Semantics = B4_SEMANTICS,
    hypothesis_limit: int = DEFAULT_HYPOTHESIS_LIMIT,
) -> TruthValue:
    """Compute a sentence's candidate value for the next round.

    Args:
        formula: Defining formula of the sentence
        snapshot: Frozen assignment of the previous round
        ungrounded: Cyclic references whose snapshot value is NEITHER
        semantics: Connectives and join to use
        hypothesis_limit: Maximum number of ungrounded names to enumerate

    Returns:
        Join of the formula's value over all classical hypotheses for the
        ungrounded names (a plain evaluation when there are none)
    """
    if not ungrounded:
        return evaluate(formula, snapshot, semantics)

    if len(ungrounded) > hypothesis_limit:
        overlay = {name: TruthValue.BOTH for name in ungrounded}
        return evaluate(formula, ChainMap(overlay, snapshot), semantics)

    results = [
        evaluate(formula, ChainMap(dict(zip(ungrounded, values)), snapshot), semantics)
        for values in product(_HYPOTHESES, repeat=len(ungrounded))
    ]
    return reduce(semantics.join, results)
