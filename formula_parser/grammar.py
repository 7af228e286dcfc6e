# formula_parser/grammar.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# LALR(1) grammar and parser for sentence formulas using SLY

"""Formula grammar implementation using the SLY parser generator.

The parser accepts either a single formula or a list of sentence
definitions of the form ``name := formula``, optionally terminated by ``;``.
Both forms share the expression grammar; an identifier followed by ``:=``
starts a definition, any other identifier is a reference to a sentence.

Operator Precedence (lowest to highest):
- OR ('|'): left-associative
- AND ('&'): left-associative
- NOT ('!'): right-associative
"""

from sly import Parser
from logic.truth_value import TruthValue
from .lexer import FormulaLexer
from .ast_nodes import Expr, Literal, Reference, Not, And, Or
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for formulas and definition lists.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p):
        """A lone formula."""
        return p.expr

    @_("definitions")
    def start(self, p):
        """A list of sentence definitions."""
        return p.definitions

    @_("definitions definition")
    def definitions(self, p):
        return p.definitions + [p.definition]

    @_("definition")
    def definitions(self, p):
        return [p.definition]

    @_("ID DEFINE expr SEMI", "ID DEFINE expr")
    def definition(self, p):
        """Named sentence definition."""
        return (p.ID, p.expr)

    # Expression grammar rules
    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("ID")
    def expr(self, p) -> Expr:
        """Reference to a sentence by name."""
        return Reference(p.ID)

    @_("constant")
    def expr(self, p) -> Expr:
        return p.constant

    @_("TRUE")
    def constant(self, p) -> Literal:
        return Literal(TruthValue.TRUE)

    @_("FALSE")
    def constant(self, p) -> Literal:
        return Literal(TruthValue.FALSE)

    @_("BOTH")
    def constant(self, p) -> Literal:
        return Literal(TruthValue.BOTH)

    @_("NEITHER")
    def constant(self, p) -> Literal:
        return Literal(TruthValue.NEITHER)

    def parse(self, text: str):
        """Parse formula or definition text.

        Args:
            text: Formula string or definition list to parse

        Returns:
            Root Expr for a lone formula, or a list of (name, Expr) pairs

        Raises:
            ParseError: If the text is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing text: {text!r}")

        if text.strip() == "":
            raise ParseError("Input formula is empty.")

        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
