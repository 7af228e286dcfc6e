# tests/parser_tests/test_parse_errors.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Test suite for formula and definition parsing

"""Valid formulas and definition lists, and rejection of malformed input."""

import pytest
from formula_parser import ParseError, parse_definitions, parse_formula
from formula_parser.ast_nodes import And, Literal, Not, Or, Reference
from logic.truth_value import TruthValue
from utils.logger import get_logger


class TestFormulaParsing:

    def setup_method(self):
        self.logger = get_logger()

    BASIC_CASES = [
        ("L", Reference("L")),
        ("!L", Not(Reference("L"))),
        ("true & false", And(Literal(TruthValue.TRUE), Literal(TruthValue.FALSE))),
        ("both | neither", Or(Literal(TruthValue.BOTH), Literal(TruthValue.NEITHER))),
        ("  (sentence_1)  ", Reference("sentence_1")),
    ]

    @pytest.mark.parametrize("formula, expected", BASIC_CASES)
    def test_basic_formulas(self, formula, expected):
        assert parse_formula(formula) == expected

    @pytest.mark.parametrize(
        "formula", ["!(A & B) | C", "(L & !L) | neither", "!!x & (y | both)"]
    )
    def test_rendering_reparses_to_same_tree(self, formula):
        ast = parse_formula(formula)
        assert parse_formula(str(ast)) == ast

    INVALID_FORMULAS = [
        ("(a & b", "Unclosed parenthesis"),
        ("a & b)", "Unopened parenthesis"),
        ("()", "Empty parentheses"),
        ("a | | b", "Double operator"),
        ("a &", "Trailing operator"),
        ("a b", "Missing operator"),
        ("a ! b", "Infix negation"),
        ("a ; b", "Separator inside formula"),
        ("", "Empty input"),
        ("   \n", "Whitespace only"),
        ("a @ b", "Illegal character"),
        ("L := !L", "Definition where a formula is expected"),
    ]

    @pytest.mark.parametrize("text, description", INVALID_FORMULAS)
    def test_invalid_formulas(self, text, description):
        self.logger.debug(f"Expecting ParseError for {text!r} ({description})")
        with pytest.raises(ParseError) as exc_info:
            parse_formula(text)
        assert str(exc_info.value)

    def test_unexpected_end_message(self):
        with pytest.raises(ParseError, match="Unexpected end"):
            parse_formula("a &")


class TestDefinitionParsing:

    def test_single_definition(self):
        assert parse_definitions("L := !L") == [("L", Not(Reference("L")))]

    def test_definitions_keep_source_order(self):
        source = """
        # mutual reference
        B := !A;
        A := !B
        C := true & false   # grounded
        """
        names = [name for name, _ in parse_definitions(source)]
        assert names == ["B", "A", "C"]

    def test_semicolons_on_one_line(self):
        result = parse_definitions("A := !B; B := !A;")
        assert result == [("A", Not(Reference("B"))), ("B", Not(Reference("A")))]

    INVALID_DEFINITIONS = [
        ("L := !L\nL := L", "defined more than once"),
        ("!L", "Expected sentence definitions"),
        ("L :=", "Unexpected end"),
        ("L := !L B", "Unexpected end"),
        ("true := L", "Syntax error"),
        ("L := := L", "Syntax error"),
    ]

    @pytest.mark.parametrize("text, message", INVALID_DEFINITIONS)
    def test_invalid_definitions(self, text, message):
        with pytest.raises(ParseError, match=message):
            parse_definitions(text)
