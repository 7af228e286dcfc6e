# tests/logic_tests/test_truth_tables.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Test suite for the B4 connectives

"""Exact truth tables of the B4 connectives and their monotonicity."""

import pytest
from itertools import product

from logic.lattice import is_monotone_binary, is_monotone_unary, leq
from logic.operators import (
    B4_SEMANTICS,
    Semantics,
    conjunction,
    disjunction,
    negate,
)
from logic.truth_value import ALL_VALUES, TruthValue

T = TruthValue.TRUE
F = TruthValue.FALSE
B = TruthValue.BOTH
N = TruthValue.NEITHER


class TestNegation:

    @pytest.mark.parametrize("value, expected", [(T, F), (F, T), (B, B), (N, N)])
    def test_negation_table(self, value, expected):
        assert negate(value) == expected

    @pytest.mark.parametrize("value", [T, F, N])
    def test_double_negation_is_identity(self, value):
        assert negate(negate(value)) == value

    def test_double_negation_of_both(self):
        assert negate(negate(B)) == B


class TestConjunction:

    CONJUNCTION_CASES = [
        (T, T, T), (T, F, F), (T, B, B), (T, N, N),
        (F, T, F), (F, F, F), (F, B, F), (F, N, F),
        (B, T, B), (B, F, F), (B, B, B), (B, N, F),
        (N, T, N), (N, F, F), (N, B, F), (N, N, N),
    ]

    @pytest.mark.parametrize("v1, v2, expected", CONJUNCTION_CASES)
    def test_conjunction_table(self, v1, v2, expected):
        assert conjunction(v1, v2) == expected

    def test_table_covers_every_pair(self):
        assert {(v1, v2) for v1, v2, _ in self.CONJUNCTION_CASES} == set(
            product(ALL_VALUES, repeat=2)
        )

    @pytest.mark.parametrize("x", ALL_VALUES)
    def test_false_is_absorbing(self, x):
        assert conjunction(F, x) == F
        assert conjunction(x, F) == F


class TestDisjunction:

    @pytest.mark.parametrize("v1, v2", list(product(ALL_VALUES, repeat=2)))
    def test_de_morgan(self, v1, v2):
        assert disjunction(v1, v2) == negate(conjunction(negate(v1), negate(v2)))

    @pytest.mark.parametrize(
        "v1, v2, expected",
        [(T, F, T), (F, F, F), (N, B, T), (B, N, T), (N, F, N), (B, F, B), (N, N, N)],
    )
    def test_selected_entries(self, v1, v2, expected):
        assert disjunction(v1, v2) == expected

    @pytest.mark.parametrize("x", ALL_VALUES)
    def test_true_is_absorbing(self, x):
        assert disjunction(T, x) == T


class TestMonotonicity:
    """Every connective must preserve the information order."""

    ORDERED_PAIRS = [(a, b) for a, b in product(ALL_VALUES, repeat=2) if leq(a, b)]

    @pytest.mark.parametrize("v1, v2", ORDERED_PAIRS)
    def test_negation_monotone(self, v1, v2):
        assert leq(negate(v1), negate(v2))

    @pytest.mark.parametrize("v1, v2", ORDERED_PAIRS)
    @pytest.mark.parametrize("x", ALL_VALUES)
    def test_conjunction_monotone(self, v1, v2, x):
        assert leq(conjunction(v1, x), conjunction(v2, x))
        assert leq(conjunction(x, v1), conjunction(x, v2))

    @pytest.mark.parametrize("v1, v2", ORDERED_PAIRS)
    @pytest.mark.parametrize("x", ALL_VALUES)
    def test_disjunction_monotone(self, v1, v2, x):
        assert leq(disjunction(v1, x), disjunction(v2, x))

    def test_helpers_agree(self):
        assert is_monotone_unary(negate)
        assert is_monotone_binary(conjunction)
        assert is_monotone_binary(disjunction)


class TestSemantics:

    def test_default_semantics_has_no_violations(self):
        assert B4_SEMANTICS.monotonicity_violations() == []
        assert B4_SEMANTICS.is_monotone()

    def test_classical_collapse_of_negation_is_reported(self):
        # N <= T, but the images T and F are incomparable
        collapsing = {T: F, F: T, B: B, N: T}
        semantics = Semantics(negate=collapsing.__getitem__)

        violations = semantics.monotonicity_violations()

        assert any(op == "negate" for op, _ in violations)
        assert not semantics.is_monotone()

    def test_overwriting_join_is_reported(self):
        semantics = Semantics(join=lambda old, new: new)

        operators = {op for op, _ in semantics.monotonicity_violations()}

        assert operators == {"join"}
