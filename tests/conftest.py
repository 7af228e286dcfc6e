# tests/conftest.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for PRR-Engine tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common sentence graphs used across test modules
"""

import random
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import formula_parser
        import logic
        import model
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def liar_graph():
    """The Liar sentence, L := !L."""
    from model.sentence_graph import SentenceGraph
    from formula_parser.ast_nodes import Not, Reference

    return SentenceGraph({"L": Not(Reference("L"))})


@pytest.fixture
def mutual_graph():
    """Two sentences negating each other."""
    from model.sentence_graph import SentenceGraph

    return SentenceGraph.from_source("A := !B\nB := !A")


@pytest.fixture
def rng():
    """Seeded generator for reproducible random graphs."""
    return random.Random(20240611)
