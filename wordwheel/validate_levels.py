"""
Level validation tool: generates every configured level and checks that
no word was dropped.

Usage:
    python -m wordwheel.validate_levels
    python -m wordwheel.validate_levels --levels content/levels.yaml --strict

Exits with status 1 if any level fails.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import BaseModel, Field

from .errors import GenerationError, InvalidLevelError
from .generator import generate, verify_grid
from .levels import LevelConfig, LevelLibrary, assemble_level


GREEN = "\x1b[32m"
RED = "\x1b[31m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class LevelCheck(BaseModel):
    """Outcome of validating one level."""
    level_id: int
    title: str
    passed: bool
    rows: int = 0
    cols: int = 0
    words: List[str] = Field(default_factory=list)
    dropped: List[str] = Field(default_factory=list)
    error: Optional[str] = None


def check_level(level_id: int, config: LevelConfig, strict: bool = False) -> LevelCheck:
    """
    Run the placement engine over one level's words.

    With `strict`, the level is also assembled and structurally validated.
    """
    words = [spec.word for spec in config.words]
    check = LevelCheck(level_id=level_id, title=config.title, passed=False, words=words)

    try:
        generated = generate(config.words)
    except GenerationError as e:
        check.dropped = [w for w in words if w in e.unplaced]
        check.error = str(e)
        return check

    report = verify_grid(generated, config.words)
    check.rows, check.cols = generated.rows, generated.cols
    check.dropped = report.dropped_words

    if not report.valid:
        check.error = "; ".join(issue.message for issue in report.errors)
        return check

    if strict:
        try:
            assemble_level(
                level_id,
                config.words,
                difficulty=config.difficulty,
                title=config.title,
                extra_words_allowed=config.extra_words_allowed,
            )
        except (GenerationError, InvalidLevelError) as e:
            check.error = str(e)
            return check

    check.passed = True
    return check


def format_check(check: LevelCheck, color: bool = True) -> str:
    green, red, bold, reset = (GREEN, RED, BOLD, RESET) if color else ("", "", "", "")
    label = f"Level {check.level_id:02d} - {bold}{check.title}{reset}"

    if check.passed:
        return f"{green}✓{reset} {label}  [{check.rows}x{check.cols}]  {', '.join(check.words)}"

    lines = [f"{red}✗{reset} {label}"]
    if check.dropped:
        lines[0] += f"  {red}DROPPED: {', '.join(check.dropped)}{reset}"
    if check.error:
        lines.append(f"  {red}{check.error}{reset}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate that every configured level generates cleanly",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordwheel.validate_levels
  python -m wordwheel.validate_levels --levels my_levels.yaml --strict
        """
    )
    parser.add_argument(
        "--levels", "-l",
        help="Path to a levels YAML file (default: bundled levels)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Also run level assembly validation (letter pool, mask)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log placement details"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    color = not args.no_color

    try:
        library = LevelLibrary.from_yaml(args.levels)
    except InvalidLevelError as e:
        print(f"Error loading levels: {e}", file=sys.stderr)
        return 1

    checks = [
        check_level(level_id, config, strict=args.strict)
        for level_id, config in library.configs.items()
    ]
    for check in checks:
        print(format_check(check, color=color))

    failures = [c for c in checks if not c.passed]
    passed = len(checks) - len(failures)

    green, red, bold, reset = (GREEN, RED, BOLD, RESET) if color else ("", "", "", "")
    print()
    print("-" * 60)
    print(
        f"{bold}Results:{reset} {green}{passed} passed{reset}, "
        f"{red if failures else green}{len(failures)} failed{reset} / {len(checks)} total"
    )

    if failures:
        print(f"\n{bold}{red}Failed levels:{reset}")
        for f in failures:
            dropped = f"dropped [{', '.join(f.dropped)}]" if f.dropped else ""
            print(f"  Level {f.level_id} ({f.title}): {dropped}")
            if f.error:
                print(f"    {f.error}")
        return 1

    print(f"\n{green}{bold}All levels validated successfully.{reset}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
