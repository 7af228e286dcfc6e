#!/usr/bin/env python3
# scripts/generate_definitions.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver

"""
Command-line tool to generate random sentence definition files.

Writes cyclic or acyclic random graphs in the ``.prr`` format read by
run_engine.py, for stress runs and bound experiments.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.graph_generator import generate_definitions, render_definitions  # noqa: E402
from core.solver import default_max_iterations  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a random sentence definition file"
    )
    parser.add_argument(
        "-s", "--size",
        type=int,
        required=True,
        help="Number of sentences to generate.",
    )
    parser.add_argument(
        "--acyclic",
        action="store_true",
        help="Only reference previously defined sentences (no cycles).",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=3,
        help="Maximum connective nesting per formula (default: 3).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output.",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Path to the output .prr file. If not specified, prints to stdout.",
    )
    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be positive")

    definitions = generate_definitions(
        args.size, cyclic=not args.acyclic, max_depth=args.max_depth, seed=args.seed
    )
    header = f"max_iterations: {default_max_iterations(args.size)}"
    text = render_definitions(definitions, header=header)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Definitions with {args.size} sentences written to {args.output}")
    else:
        print(text, end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
