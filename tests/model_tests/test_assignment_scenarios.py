# tests/model_tests/test_assignment_scenarios.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Test suite for immutable per-round assignments

import pytest

from logic.truth_value import TruthValue
from model.assignment import Assignment

T = TruthValue.TRUE
F = TruthValue.FALSE
B = TruthValue.BOTH
N = TruthValue.NEITHER


class TestAssignment:

    def test_mapping_behaviour(self):
        assignment = Assignment({"A": T, "B": N})

        assert assignment["A"] == T
        assert list(assignment) == ["A", "B"]
        assert len(assignment) == 2
        assert assignment.get("missing") is None

    def test_equal_to_plain_mapping(self):
        assert Assignment({"L": B}) == {"L": B}
        assert Assignment({"L": B}) != {"L": T}

    def test_hashable(self):
        assert hash(Assignment({"A": T, "B": F})) == hash(Assignment({"B": F, "A": T}))

    def test_cannot_be_mutated(self):
        assignment = Assignment({"A": T})

        with pytest.raises(TypeError):
            assignment["A"] = F

    def test_source_mapping_is_copied(self):
        source = {"A": T}
        assignment = Assignment(source)
        source["A"] = F

        assert assignment["A"] == T

    def test_rejects_non_truth_values(self):
        with pytest.raises(TypeError, match="TruthValue"):
            Assignment({"A": True})

    def test_bottom(self):
        assert Assignment.bottom(["A", "B"]) == {"A": N, "B": N}

    def test_product_order(self):
        low = Assignment({"A": N, "B": T})
        high = Assignment({"A": F, "B": B})

        assert low.leq(high)
        assert not high.leq(low)
        assert not Assignment({"A": T}).leq(Assignment({"A": F}))
        assert not low.leq(Assignment({"A": B}))

    def test_changes(self):
        before = Assignment({"A": N, "B": T})
        after = Assignment({"A": F, "B": T})

        assert after.changes(before) == {"A": (N, F)}
        assert before.changes(before) == {}

    def test_updated_returns_new_assignment(self):
        original = Assignment({"A": N})
        updated = original.updated({"A": T})

        assert original["A"] == N
        assert updated["A"] == T
