# formula_parser/__init__.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Formula parsing components for sentence definitions

"""Parsing of sentence formulas and definition lists.

Formulas are written over the connectives ``!`` (not), ``&`` (and) and
``|`` (or), the B4 constants ``true``, ``false``, ``both`` and ``neither``,
and sentence names, which refer to other sentences (or to the sentence being
defined). A definition list binds names to formulas::

    # the Liar
    L := !L
    C := true & false

Core Functions:
    parse_formula: Converts a formula string into an AST
    parse_definitions: Converts a definition list into (name, AST) pairs

Example:
    >>> from formula_parser import parse_definitions
    >>> parse_definitions("L := !L")
    [('L', Not(operand=Reference(name='L')))]
"""

from typing import List, Tuple

from .exceptions import ParseError
from .grammar import _FormulaParser
from .ast_nodes import Expr, Literal, Reference, Not, And, Or, references
from .lexer import KEYWORDS
from utils.logger import get_logger


def parse_formula(source: str) -> Expr:
    """Parse a single formula string into an AST.

    Uses a fresh parser instance for each invocation so parsing stays
    stateless.

    Args:
        source: Formula text, e.g. ``"!(A & B)"``

    Returns:
        Root AST node of the formula

    Raises:
        ParseError: Formula is malformed, or the text is a definition list
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    result = _FormulaParser().parse(source)
    if not isinstance(result, Expr):
        raise ParseError("Expected a single formula, found sentence definitions.")
    return result


def parse_definitions(source: str) -> List[Tuple[str, Expr]]:
    """Parse a definition list into (name, formula) pairs in source order.

    Args:
        source: Text with one or more ``name := formula`` definitions

    Returns:
        List of (name, AST) pairs

    Raises:
        ParseError: Text is malformed, is a bare formula, or defines a
            name more than once
    """
    logger = get_logger()
    logger.debug("Parsing sentence definitions")

    result = _FormulaParser().parse(source)
    if isinstance(result, Expr):
        raise ParseError(
            f"Expected sentence definitions (name := formula), found formula '{result}'."
        )

    seen = set()
    for name, _ in result:
        if name in seen:
            raise ParseError(f"Sentence '{name}' is defined more than once.")
        seen.add(name)

    logger.debug(f"Parsed {len(result)} definition(s)")
    return result


__all__ = [
    "parse_formula",
    "parse_definitions",
    "ParseError",
    "Expr",
    "Literal",
    "Reference",
    "Not",
    "And",
    "Or",
    "references",
    "KEYWORDS",
]
