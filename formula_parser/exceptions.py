# formula_parser/exceptions.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for sentence formula parsing."""


class ParseError(RuntimeError):
    """Exception raised when formula or definition text cannot be parsed.

    Indicates that the input does not conform to the formula grammar,
    contains an illegal character, or defines the same sentence twice.
    """

    pass
