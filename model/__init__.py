# model/__init__.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver

"""
Domain objects for the fixed-point engine: named sentences, the validated
sentence graph they form, and the immutable per-round Assignment of truth
values. These types carry no solving logic.
"""

from .assignment import Assignment
from .sentence import Sentence
from .sentence_graph import SentenceGraph

__all__ = [
    "Assignment",
    "Sentence",
    "SentenceGraph",
]
