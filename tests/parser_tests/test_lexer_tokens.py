# tests/parser_tests/test_lexer_tokens.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Test suite for formula lexer tokenization and error handling

"""Tokenization of formula text and rejection of illegal characters."""

import pytest
from formula_parser.lexer import FormulaLexer
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        self.logger.debug(f"Tokenizing: '{text}'")
        return [token.type for token in self.lexer.tokenize(text)]

    VALID_TOKENIZATION_CASES = [
        ("L := !L", ["ID", "DEFINE", "NOT", "ID"]),
        ("true false both neither", ["TRUE", "FALSE", "BOTH", "NEITHER"]),
        # Keywords are case-sensitive and must match whole identifiers
        ("True", ["ID"]),
        ("bothways", ["ID"]),
        ("liar_is_neither", ["ID"]),
        ("! & | ( ) ;", ["NOT", "AND", "OR", "LPAREN", "RPAREN", "SEMI"]),
        ("a&b|!c", ["ID", "AND", "ID", "OR", "NOT", "ID"]),
        ("a # trailing comment", ["ID"]),
        ("# only a comment", []),
        ("A := !B\n\nB := !A", ["ID", "DEFINE", "NOT", "ID", "ID", "DEFINE", "NOT", "ID"]),
    ]

    @pytest.mark.parametrize("text, expected", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, text, expected):
        assert self._tokenize_to_types(text) == expected

    def test_newlines_advance_line_numbers(self):
        tokens = list(self.lexer.tokenize("A := B\nB := A"))

        assert [t.lineno for t in tokens] == [1, 1, 1, 2, 2, 2]

    def test_keyword_values(self):
        tokens = list(self.lexer.tokenize("neither"))

        assert tokens[0].type == "NEITHER"
        assert tokens[0].value == "neither"

    @pytest.mark.parametrize("text", ["a @ b", "L : !L", "a = b", "¬L"])
    def test_illegal_characters(self, text):
        with pytest.raises(ValueError, match="Illegal character"):
            self._tokenize_to_types(text)
