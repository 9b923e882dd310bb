"""
Greedy crossword skeleton generation.

Words are placed longest first. The first word seeds the grid horizontally
at the origin; every other word must cross an already placed word at a
shared letter, perpendicular to it, without touching any other word
edge-to-edge. The search is first-fit: the first valid crossing found in
scan order wins.
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from ..errors import GenerationError
from .grid import SparseGrid, get_bounds, is_valid_placement, perpendicular, place_word
from .models import GeneratedGrid, PlacedWord, TargetWord, WordSpec


logger = logging.getLogger(__name__)


def coerce_words(words: Iterable[Union[WordSpec, Dict, str]]) -> List[WordSpec]:
    """Turn dicts and bare strings into WordSpec instances."""
    specs = []
    for w in words:
        if isinstance(w, WordSpec):
            specs.append(w)
        elif isinstance(w, str):
            specs.append(WordSpec(word=w))
        else:
            specs.append(WordSpec(**w))
    return specs


def find_best_placement(
    word: str,
    placements: List[PlacedWord],
    grid: SparseGrid,
) -> Optional[PlacedWord]:
    """
    Find the first valid crossing for `word` against the placed words.

    Scan order: placed words in placement order, then each letter of the
    candidate, then each letter of the placed word. Despite the name this
    is first-fit; existing level content depends on that ordering.

    Returns:
        A PlacedWord (without meaning) or None if no crossing is valid
    """
    for placed in placements:
        direction = perpendicular(placed.direction)

        for i, letter in enumerate(word):
            for j, (shared_row, shared_col) in enumerate(placed.cells):
                if placed.word[j] != letter:
                    continue

                start_row = shared_row - i if direction == "V" else shared_row
                start_col = shared_col - i if direction == "H" else shared_col

                if is_valid_placement(word, start_row, start_col, direction, grid):
                    return PlacedWord(
                        word=word, row=start_row, col=start_col, direction=direction
                    )

    return None


def generate(words: Iterable[Union[WordSpec, Dict, str]]) -> GeneratedGrid:
    """
    Generate a crossword skeleton from an unordered word list.

    Args:
        words: WordSpec instances (or dicts / bare strings coercible to them)

    Returns:
        GeneratedGrid with a normalized mask, letter pool and target words

    Raises:
        GenerationError: If the list is empty or a word cannot be placed
            within the retry budget
    """
    specs = coerce_words(words)
    if not specs:
        raise GenerationError("Cannot generate a grid from an empty word list", word="")

    # Longest first; sorted() is stable so ties keep input order
    ordered = sorted(specs, key=lambda s: -len(s.word))

    grid: SparseGrid = {}
    placements: List[PlacedWord] = []

    def commit(placement: PlacedWord) -> None:
        placements.append(placement)
        place_word(grid, placement)
        logger.debug(
            "Placed %s at (%d, %d) %s",
            placement.word, placement.row, placement.col, placement.direction,
        )

    seed = ordered[0]
    commit(PlacedWord(word=seed.word, meaning=seed.meaning, row=0, col=0, direction="H"))

    remaining = ordered[1:]
    retries = 0

    while remaining and retries < 2 * len(remaining):
        placed_something = False

        for i, candidate in enumerate(remaining):
            move = find_best_placement(candidate.word, placements, grid)
            if move is not None:
                commit(move.model_copy(update={"meaning": candidate.meaning}))
                del remaining[i]
                placed_something = True
                break

        if not placed_something:
            remaining.append(remaining.pop(0))
            retries += 1
            logger.debug("No word placeable, rotated worklist (retry %d)", retries)

    if remaining:
        stuck = [s.word for s in remaining]
        raise GenerationError(
            f"Could not place word '{stuck[0]}' after {retries} retries "
            f"(unplaced: {', '.join(stuck)})",
            word=stuck[0],
            unplaced=stuck,
        )

    return _normalize(specs, placements)


def _normalize(specs: List[WordSpec], placements: List[PlacedWord]) -> GeneratedGrid:
    """Shift placements to a zero-based origin and build the mask."""
    min_row, max_row, min_col, max_col = get_bounds(placements)
    rows = max_row - min_row + 1
    cols = max_col - min_col + 1

    mask = [[False] * cols for _ in range(rows)]
    target_words: List[TargetWord] = []
    shifted: List[PlacedWord] = []

    for p in placements:
        moved = p.model_copy(update={"row": p.row - min_row, "col": p.col - min_col})
        for r, c in moved.cells:
            mask[r][c] = True
        shifted.append(moved)
        target_words.append(TargetWord(word=p.word, coords=moved.cells, meaning=p.meaning))

    # Distinct letters in order of first appearance across the input list
    letters: List[str] = []
    for spec in specs:
        for ch in spec.word:
            if ch not in letters:
                letters.append(ch)

    return GeneratedGrid(
        rows=rows,
        cols=cols,
        mask=mask,
        letters=letters,
        target_words=target_words,
        placements=shifted,
    )
