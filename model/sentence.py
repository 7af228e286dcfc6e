# model/sentence.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Named sentence with its defining formula

from dataclasses import dataclass
from formula_parser.ast_nodes import Expr, references


@dataclass(frozen=True)
class Sentence:
    """
    A named sentence defined by a formula.

    The sentence's value is not stored here: it lives in the Assignment of
    the current solver round, where every sentence starts at NEITHER.

    Attributes:
        name: Unique sentence name within its graph.
        formula: Defining formula; may reference any sentence, this one included.
    """
    name: str
    formula: Expr

    @property
    def references(self) -> tuple:
        """Distinct sentence names referenced by the formula."""
        return references(self.formula)

    def __str__(self) -> str:
        return f"{self.name} := {self.formula}"
