#!/usr/bin/env python3
# run_engine.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Command-line interface for solving sentence definition files

import sys
import argparse
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from core.exceptions import (
    MalformedFormulaError,
    NonConvergenceError,
    UndefinedReferenceError,
)
from core.projector import project
from core.solver import FixedPointSolver, SolveResult, solve_changes
from model.sentence_graph import SentenceGraph
from utils.definition_reader import (
    DefinitionFormatError,
    get_max_iterations,
    read_definitions,
    validate_definitions_file,
)
from utils.logger import LogLevel, get_logger

EXIT_OK = 0
EXIT_DEFINITION_FILE = 1
EXIT_MALFORMED = 2
EXIT_UNDEFINED_REFERENCE = 3
EXIT_NON_CONVERGENT = 4
EXIT_INTERRUPTED = 5
EXIT_UNEXPECTED = 6


def configure_logging_for_engine(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the engine.

    Results are reported at INFO, so INFO stays on without --verbose;
    verbose only adds the per-round report.

    Args:
        verbose: Accepted for symmetry with configure_logging()
        debug: Enable DEBUG level logging
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def resolve_max_iterations(cli_value: Optional[int], definitions_path: Path) -> Optional[int]:
    """CLI flag wins over the file directive; None means the solver default."""
    if cli_value is not None:
        return cli_value
    return get_max_iterations(str(definitions_path))


def run_solver(graph: SentenceGraph, max_iterations: Optional[int], workers: int) -> SolveResult:
    """Solve the graph, optionally spreading each round over a thread pool."""
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return FixedPointSolver(graph, max_iterations, executor=executor).run()
    return FixedPointSolver(graph, max_iterations).run()


def print_rounds(result: SolveResult) -> None:
    """Print per-round value changes."""
    logger = get_logger()

    logger.info(f"\n📊 Rounds executed: {result.rounds} (last change in round {result.converged_at})")
    for round_no, changes in solve_changes(result.history).items():
        if not changes:
            logger.info(f"  Round {round_no}: stable")
            continue
        change_str = ", ".join(f"{n}: {old} → {new}" for n, (old, new) in changes.items())
        logger.info(f"  Round {round_no}: {change_str}")


def print_assignment(result: SolveResult) -> None:
    """Print the stable value and confidence interval of every sentence."""
    intervals = project(result.assignment)
    rows = [
        (name, value, intervals[name]) for name, value in result.assignment.items()
    ]
    get_logger().final_assignment(rows)


def positive_int(text: str) -> int:
    """argparse type for options that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="PRR-Engine: stable B4 truth values for self-referential sentences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_engine.py -d liar.prr
  python run_engine.py -d liar.prr --show-rounds
  python run_engine.py -d graph.prr --max-iterations 50 --workers 4
  python run_engine.py -d graph.prr --validate-only

Definition file format:
  # max_iterations: 20        (optional, first line only)
  L := !L
  A := !B
  B := !A
  C := true & false
        """,
    )

    parser.add_argument(
        "-d", "--definitions", required=True, type=Path,
        help="Path to the sentence definition file",
    )

    parser.add_argument(
        "--max-iterations", type=positive_int, default=None,
        help="Safety bound on solver rounds (default: 2N + 2)",
    )

    parser.add_argument(
        "--workers", type=positive_int, default=1,
        help="Threads evaluating the sentences of a round (default: 1)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose output (implies --show-rounds)",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only", action="store_true",
        help="Only validate the definition file",
    )

    parser.add_argument(
        "--show-rounds", action="store_true", help="Print per-round value changes"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the engine.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_engine(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.validate_only:
            graph = validate_definitions_file(str(args.definitions))
            logger.info(f"✅ {len(graph)} sentence(s) validated. Exiting.")
            return EXIT_OK

        max_iterations = resolve_max_iterations(args.max_iterations, args.definitions)
        graph = read_definitions(str(args.definitions))
        logger.info(f"📋 Loaded {len(graph)} sentence(s) from {args.definitions}")

        result = run_solver(graph, max_iterations, args.workers)

        print_assignment(result)
        if args.show_rounds or args.verbose:
            print_rounds(result)

        return EXIT_OK

    except DefinitionFormatError as e:
        logger.error(f"Definition file error: {e}")
        return EXIT_DEFINITION_FILE

    except MalformedFormulaError as e:
        logger.error(f"Formula error: {e}")
        return EXIT_MALFORMED

    except UndefinedReferenceError as e:
        logger.error(f"Reference error: {e}")
        return EXIT_UNDEFINED_REFERENCE

    except NonConvergenceError as e:
        logger.error(f"Solver error: {e}")
        logger.error(f"Last assignment: {e.last_assignment}")
        return EXIT_NON_CONVERGENT

    except KeyboardInterrupt:
        logger.error("Solving interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
