import argparse
import logging
import random
import sys

from board import format_board
from difficulty import UnsupportedDifficultyError, parse_difficulty, valid_difficulties
from generator import SudokuGenerator

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sudoku-generate",
        description="Generate a Sudoku puzzle with a unique solution.",
    )
    parser.add_argument(
        "difficulty",
        nargs="?",
        help=f"One of: {', '.join(valid_difficulties())} (default: medium).",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation details to stderr.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        difficulty = parse_difficulty(args.difficulty)
    except UnsupportedDifficultyError as e:
        print(str(e), file=sys.stderr)
        print(f"Valid difficulties: {', '.join(valid_difficulties())}", file=sys.stderr)
        return 1

    log.debug("Generating %s puzzle (seed=%s)", difficulty, args.seed)
    rng = random.Random(args.seed)
    result = SudokuGenerator(rng=rng).generate(difficulty)

    print(f"Difficulty: {result.difficulty}")
    print(f"Clues: {result.clue_count}")
    print("\nPuzzle:")
    print(format_board(result.puzzle))
    print("\nSolution:")
    print(format_board(result.solution))
    return 0


if __name__ == '__main__':
    sys.exit(main())
