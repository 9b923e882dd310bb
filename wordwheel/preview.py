"""
Print a generated level: placed words, letter pool, mask and grid.

Usage:
    python -m wordwheel.preview 5
    python -m wordwheel.preview --words SHINE SHE HEN HIS
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import WordWheelError
from .generator import GeneratedGrid, generate
from .levels import LevelLibrary


def render_mask(mask: List[List[bool]]) -> str:
    return "\n".join("".join("X" if playable else "." for playable in row) for row in mask)


def render_letters(generated: GeneratedGrid) -> str:
    lines = [["."] * generated.cols for _ in range(generated.rows)]
    for target in generated.target_words:
        for (row, col), letter in zip(target.coords, target.word):
            lines[row][col] = letter
    return "\n".join("".join(line) for line in lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Preview the grid generated for a level or word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordwheel.preview 5
  python -m wordwheel.preview --words CHOP HOT POT TOP
        """
    )
    parser.add_argument(
        "level",
        nargs="?",
        type=int,
        help="Level id from the levels file"
    )
    parser.add_argument(
        "--words", "-w",
        nargs="+",
        help="Generate from these words instead of a configured level"
    )
    parser.add_argument(
        "--levels", "-l",
        help="Path to a levels YAML file (default: bundled levels)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log placement details"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.level is None and not args.words:
        print("Error: give a level id or --words", file=sys.stderr)
        return 1

    try:
        if args.words:
            words = args.words
        else:
            words = LevelLibrary.from_yaml(args.levels).get_config(args.level).words
        generated = generate(words)
    except WordWheelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Placed words:", ", ".join(generated.placed_words))
    print("Available letters:", " ".join(generated.letters))
    print(f"Grid ({generated.rows}x{generated.cols}):")
    print(render_letters(generated))
    print("Mask:")
    print(render_mask(generated.mask))
    return 0


if __name__ == "__main__":
    sys.exit(main())
