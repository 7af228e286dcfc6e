# model/assignment.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Immutable snapshot of sentence values for one solver round

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Tuple

from logic.lattice import leq
from logic.truth_value import TruthValue


class Assignment(Mapping):
    """
    Immutable mapping from sentence name to TruthValue.

    One Assignment is the complete result of one solver round. A new round
    never edits the previous Assignment; it builds a fresh one. Assignments
    compare equal to any mapping holding the same items, and are ordered
    pointwise by the information order (the product lattice).
    """

    __slots__ = ("_values",)

    def __init__(self, values=()):
        snapshot = dict(values)
        for name, value in snapshot.items():
            if not isinstance(value, TruthValue):
                raise TypeError(
                    f"Value for '{name}' must be a TruthValue, got {type(value).__name__}"
                )
        self._values = snapshot

    @classmethod
    def bottom(cls, names: Iterable[str]) -> "Assignment":
        """Assignment mapping every name to NEITHER."""
        return cls((name, TruthValue.NEITHER) for name in names)

    def __getitem__(self, name: str) -> TruthValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={value}" for name, value in self._values.items())
        return f"Assignment({inner})"

    def leq(self, other: "Assignment") -> bool:
        """Pointwise information order over the same set of names."""
        if set(self) != set(other):
            return False
        return all(leq(value, other[name]) for name, value in self._values.items())

    def changes(self, previous: "Assignment") -> Dict[str, Tuple[TruthValue, TruthValue]]:
        """Names whose value differs from `previous`, as name -> (old, new)."""
        return {
            name: (previous.get(name), value)
            for name, value in self._values.items()
            if previous.get(name) != value
        }

    def updated(self, updates) -> "Assignment":
        """Return a new Assignment with `updates` applied on top of this one."""
        merged = dict(self._values)
        merged.update(updates)
        return Assignment(merged)
