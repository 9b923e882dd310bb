"""
Post-generation audit of a crossword skeleton.

Checks:
1. Every configured word was placed exactly once (nothing dropped)
2. Target coordinates agree on every shared cell (no letter clashes)
3. Placed letters match their words at the assigned coordinates
4. No accidental runs of 2+ letters appear outside the placed words
"""

from typing import Dict, Iterable, List, Union

from .grid import SparseGrid, extract_all_words_from_grid, render_grid
from .models import GeneratedGrid, GridIssue, GridReport, WordSpec
from .placement import coerce_words


def verify_grid(
    generated: GeneratedGrid,
    words: Iterable[Union[WordSpec, Dict, str]],
) -> GridReport:
    """
    Audit a generated grid against the word list it was generated from.

    Returns a GridReport with:
    - valid: True if no errors were found
    - errors: dropped words, duplicates, clashes, mask mismatches
    - warnings: accidental letter runs that are not placed words
    - dropped_words: configured words missing from the grid
    - grid: rendered skeleton
    """
    errors: List[GridIssue] = []
    warnings: List[GridIssue] = []

    configured = [spec.word for spec in coerce_words(words)]
    placed = generated.placed_words

    dropped = [w for w in configured if w not in placed]
    for word in dropped:
        errors.append(GridIssue(
            code="WORD_DROPPED",
            message=f"'{word}' was configured but never placed",
            word=word,
        ))

    for word in sorted(set(placed)):
        if placed.count(word) > 1:
            errors.append(GridIssue(
                code="WORD_DUPLICATED",
                message=f"'{word}' was placed {placed.count(word)} times",
                word=word,
            ))

    grid: SparseGrid = {}
    for target in generated.target_words:
        if len(target.coords) != len(target.word):
            errors.append(GridIssue(
                code="LENGTH_MISMATCH",
                message=(
                    f"'{target.word}' has {len(target.word)} letters "
                    f"but {len(target.coords)} coordinates"
                ),
                word=target.word,
            ))
            continue

        for (r, c), letter in zip(target.coords, target.word):
            if not (0 <= r < generated.rows and 0 <= c < generated.cols) or not generated.mask[r][c]:
                errors.append(GridIssue(
                    code="MASK_MISMATCH",
                    message=f"Cell ({r}, {c}) of '{target.word}' is not playable",
                    word=target.word,
                ))
            if (r, c) in grid and grid[(r, c)] != letter:
                errors.append(GridIssue(
                    code="GRID_CONFLICT",
                    message=(
                        f"Cell conflict at ({r}, {c}): existing '{grid[(r, c)]}' "
                        f"vs new '{letter}' from '{target.word}'"
                    ),
                    word=target.word,
                ))
            grid[(r, c)] = letter

    for run in sorted(extract_all_words_from_grid(grid) - set(placed)):
        warnings.append(GridIssue(
            code="ACCIDENTAL_RUN",
            message=f"Letter run '{run}' formed on grid but is not a placed word",
            word=run,
        ))

    return GridReport(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        placed_words=placed,
        dropped_words=dropped,
        grid=render_grid(grid) or None,
    )
