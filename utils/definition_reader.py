# utils/definition_reader.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Reader for sentence definition files

"""Loading of sentence graphs from ``.prr`` definition files.

Expected format::

    # max_iterations: 20
    # the Liar and a pair of mutually negating sentences
    L := !L
    A := !B
    B := !A

Each definition binds a name to a formula; ``#`` starts a comment and a
trailing ``;`` is optional. An optional directive on the first line sets
the solver's safety bound.
"""

from pathlib import Path
from typing import Optional

from model.sentence_graph import SentenceGraph
from utils.logger import get_logger

MAX_ITERATIONS_DIRECTIVE = "# max_iterations:"


class DefinitionFormatError(Exception):
    """Exception raised when a definition file cannot be read or has a bad directive."""

    pass


def read_definition_text(filepath: str) -> str:
    """Return the raw text of a definition file.

    Raises:
        DefinitionFormatError: If the file is missing, unreadable or empty
    """
    path = Path(filepath)

    if not path.exists():
        raise DefinitionFormatError(f"Definition file not found: {filepath}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DefinitionFormatError(f"Error reading definition file: {e}") from e

    if not content.strip():
        raise DefinitionFormatError(f"Definition file is empty: {filepath}")

    return content


def read_definitions(filepath: str) -> SentenceGraph:
    """Build a SentenceGraph from a definition file.

    Args:
        filepath: Path to the ``.prr`` file

    Returns:
        Validated SentenceGraph

    Raises:
        DefinitionFormatError: If the file cannot be read
        MalformedFormulaError: If the definitions do not parse
        UndefinedReferenceError: If a formula references an undefined name
    """
    logger = get_logger()
    logger.debug(f"Reading definition file: {filepath}")

    graph = SentenceGraph.from_source(read_definition_text(filepath))

    logger.debug(f"Loaded {len(graph)} sentence(s) from {filepath}")
    return graph


def get_max_iterations(filepath: str) -> Optional[int]:
    """Extract the max_iterations directive from the first line of a file.

    Returns:
        The directive's value, or None if the file has no directive

    Raises:
        DefinitionFormatError: If the directive value is not a positive integer
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        return None

    with open(path, "r", encoding="utf-8") as file:
        first_line = file.readline().strip()

    if not first_line.startswith(MAX_ITERATIONS_DIRECTIVE):
        return None

    raw = first_line[len(MAX_ITERATIONS_DIRECTIVE):].strip()
    try:
        value = int(raw)
    except ValueError:
        raise DefinitionFormatError(f"Invalid max_iterations directive: {raw!r}") from None

    if value < 1:
        raise DefinitionFormatError(f"max_iterations must be positive, got {value}")

    logger.debug(f"Found max_iterations directive: {value}")
    return value


def validate_definitions_file(filepath: str) -> SentenceGraph:
    """Validate a definition file completely, directive included.

    Returns:
        The validated graph

    Raises:
        DefinitionFormatError, MalformedFormulaError, UndefinedReferenceError
    """
    logger = get_logger()
    logger.debug(f"Validating definition file: {filepath}")

    get_max_iterations(filepath)
    graph = read_definitions(filepath)
    logger.validation_result(True, f"{len(graph)} sentence(s) validated in {filepath}")
    return graph
