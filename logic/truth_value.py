# logic/truth_value.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# The four truth values of the paraconsistent logic B4

from enum import Enum


class TruthValue(Enum):
    """Four-valued truth domain of the logic B4.

    Besides the classical values, B4 carries two informational values:
    BOTH (the available evidence supports the sentence and its negation)
    and NEITHER (no evidence either way). Ordered by information content,
    NEITHER is the bottom, BOTH the top, and TRUE/FALSE sit incomparably
    in between.

    Values:
        TRUE: Only confirming evidence
        FALSE: Only disconfirming evidence
        BOTH: Contradictory evidence
        NEITHER: No evidence
    """

    TRUE = "true"
    FALSE = "false"
    BOTH = "both"
    NEITHER = "neither"

    def __str__(self) -> str:
        """Return the capitalized value name (True, False, Both, Neither)."""
        return self.value.capitalize()

    @property
    def keyword(self) -> str:
        """Keyword used for this value in formula text."""
        return self.value

    def is_classical(self) -> bool:
        """Whether the value is one of the two classical truth values."""
        return self in (TruthValue.TRUE, TruthValue.FALSE)

    @classmethod
    def from_keyword(cls, keyword: str) -> "TruthValue":
        """Look up a truth value by its formula keyword (case-insensitive).

        Raises:
            ValueError: If the keyword names no truth value
        """
        try:
            return cls(keyword.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown truth value keyword: {keyword!r}") from None


T = TruthValue.TRUE
F = TruthValue.FALSE
B = TruthValue.BOTH
N = TruthValue.NEITHER

ALL_VALUES = (T, F, B, N)
