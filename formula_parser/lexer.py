# formula_parser/lexer.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Lexical analyzer for sentence formulas using SLY

"""Lexical analyzer for sentence formulas and definition lists.

Breaks formula text into tokens for parser consumption. The lexer handles
operator recognition, keyword distinction and identifier processing while
providing meaningful error messages for invalid characters.

Supported Tokens:
- Operators: !, &, |, (, ), :=, ;
- Keywords: true, false, both, neither
- Identifiers: sentence names
- Comments: '#' to end of line
- Whitespace and newlines: ignored (newlines advance the line counter)
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "TRUE",
        "FALSE",
        "BOTH",
        "NEITHER",
        "ID",
        "DEFINE",
        "SEMI",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r"
    ignore_comment = r"\#.*"

    # Operator and punctuation tokens
    DEFINE = r":="
    SEMI = r";"
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Identifier pattern: starts with letter/underscore, followed by alphanumerics/underscores
    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    # Truth value constants are reserved words
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"
    ID["both"] = "BOTH"
    ID["neither"] = "NEITHER"

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += t.value.count("\n")

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at line {self.lineno}, "
            f"position {error_pos}"
        )


KEYWORDS = frozenset({"true", "false", "both", "neither"})
