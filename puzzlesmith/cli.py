# -*- coding: utf-8 -*-
"""Command line entry point."""
import argparse
import json
import sys
from typing import List, Optional

import numpy as np

from puzzlesmith.common.config import Config, load_config
from puzzlesmith.puzzles import PUZZLE_GENERATORS
from puzzlesmith.utils.log import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzlesmith", description="Generate printable puzzles as JSON."
    )
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config.")
    parser.add_argument("--puzzle", type=str, default=None, help="Puzzle type, e.g. sudoku.")
    parser.add_argument("--size", type=int, default=None, help="Board size: 4, 6 or 9.")
    parser.add_argument(
        "--difficulty", type=str.lower, default=None, help="easy, medium, hard or expert."
    )
    parser.add_argument("--variant", type=str.lower, default=None, help="classic or diagonal.")
    parser.add_argument(
        "--symmetrical", action="store_true", default=None, help="Remove cells symmetrically."
    )
    parser.add_argument(
        "--show-hints", dest="show_hints", action="store_true", default=None, help="Add hints."
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output.")
    parser.add_argument(
        "--given-count", dest="given_count", type=int, default=None, help="Givens to keep."
    )
    parser.add_argument("--count", type=int, default=1, help="Number of puzzles to generate.")
    parser.add_argument(
        "--hide-solution",
        dest="hide_solution",
        action="store_true",
        help="Leave the solution out of the output.",
    )
    parser.add_argument("--output", type=str, default=None, help="Write JSON to this file.")
    parser.add_argument("--log-level", dest="log_level", type=str, default=None)
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Load the config file, if any, and apply command line overrides."""
    config = load_config(args.config) if args.config else Config()
    if args.puzzle is not None:
        config.puzzle = args.puzzle
    for key in ("size", "difficulty", "variant", "symmetrical", "show_hints", "seed", "given_count"):
        value = getattr(args, key)
        if value is not None:
            setattr(config.sudoku, key, value)
    if args.log_level is not None:
        config.log.level = args.log_level
    return config.check_and_update()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.count <= 0:
            raise ValueError(f"--count must be positive, got {args.count}")
        config = build_config(args)
    except (ValueError, OSError) as e:
        print(f"puzzlesmith: error: {e}", file=sys.stderr)
        return 2

    generator_cls = PUZZLE_GENERATORS.get(config.puzzle)
    rng = np.random.default_rng(config.sudoku.seed)
    puzzles = [
        generator_cls(config, rng).generate().to_dict(include_solution=not args.hide_solution)
        for _ in range(args.count)
    ]
    result = puzzles[0] if args.count == 1 else puzzles

    text = json.dumps(result, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info(f"Wrote {args.count} puzzle(s) to {args.output}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
