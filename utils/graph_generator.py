# utils/graph_generator.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Random sentence graph generation for experiments and bound checks

import random
from typing import List, Optional, Tuple

from formula_parser.ast_nodes import And, Expr, Literal, Not, Or, Reference
from logic.truth_value import ALL_VALUES

Definition = Tuple[str, Expr]


def sentence_names(size: int, prefix: str = "S") -> List[str]:
    return [f"{prefix}{i}" for i in range(size)]


def random_formula(
    rng: random.Random, targets: List[str], max_depth: int, literal_weight: float = 0.3
) -> Expr:
    """Build a random formula whose references are drawn from `targets`.

    Leaves are references when targets are available, otherwise constants;
    inner nodes are chosen uniformly among !, & and |.
    """
    if max_depth <= 0 or rng.random() < 0.3:
        if not targets or rng.random() < literal_weight:
            return Literal(rng.choice(ALL_VALUES))
        return Reference(rng.choice(targets))

    kind = rng.choice(("not", "and", "or"))
    if kind == "not":
        return Not(random_formula(rng, targets, max_depth - 1, literal_weight))

    left = random_formula(rng, targets, max_depth - 1, literal_weight)
    right = random_formula(rng, targets, max_depth - 1, literal_weight)
    return And(left, right) if kind == "and" else Or(left, right)


def generate_definitions(
    size: int,
    cyclic: bool = True,
    max_depth: int = 3,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Definition]:
    """Generate `size` random sentence definitions.

    Args:
        size: Number of sentences
        cyclic: If False, sentence i only references sentences defined
            before it, so the dependency graph is acyclic. If True any
            sentence may be referenced and the last sentence is tied back
            to the first, closing at least one cycle.
        max_depth: Maximum connective nesting per formula
        seed: Seed for a fresh generator (ignored when rng is given)
        rng: Generator to draw from

    Returns:
        List of (name, formula) pairs
    """
    rng = rng if rng is not None else random.Random(seed)
    names = sentence_names(size)
    definitions: List[Definition] = []

    for idx, name in enumerate(names):
        targets = names if cyclic else names[:idx]
        formula = random_formula(rng, targets, max_depth)
        if cyclic and idx == size - 1:
            formula = Or(formula, Not(Reference(names[0])))
        definitions.append((name, formula))

    return definitions


def render_definitions(definitions: List[Definition], header: str = "") -> str:
    """Render definitions as ``.prr`` file text."""
    lines = [f"# {line}" for line in header.splitlines()]
    lines.extend(f"{name} := {formula}" for name, formula in definitions)
    return "\n".join(lines) + "\n"
