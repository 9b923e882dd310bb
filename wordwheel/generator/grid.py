"""Sparse grid helpers: placement, validity checks and rendering."""

from typing import Dict, Iterable, List, Set, Tuple

from .models import Coord, Direction, PlacedWord


SparseGrid = Dict[Coord, str]


def cells_for(length: int, row: int, col: int, direction: Direction) -> List[Coord]:
    """Coordinates covered by a word of `length` anchored at (row, col)."""
    if direction == "H":
        return [(row, col + i) for i in range(length)]
    return [(row + i, col) for i in range(length)]


def perpendicular(direction: Direction) -> Direction:
    return "V" if direction == "H" else "H"


def place_word(grid: SparseGrid, placement: PlacedWord) -> None:
    """Write a placement's letters into the grid."""
    for cell, letter in zip(placement.cells, placement.word):
        grid[cell] = letter


def is_valid_placement(
    word: str,
    row: int,
    col: int,
    direction: Direction,
    grid: SparseGrid,
) -> bool:
    """
    Check whether `word` can be written at (row, col) in `direction`.

    Rules:
    1. Occupied cells must already hold the same letter (crossing).
    2. New cells must have empty neighbours on both perpendicular sides.
    3. The cells just before the start and just after the end must be empty.
    """
    for i, (r, c) in enumerate(cells_for(len(word), row, col, direction)):
        existing = grid.get((r, c))
        if existing is not None:
            if existing != word[i]:
                return False
            continue

        if direction == "H":
            neighbours = ((r - 1, c), (r + 1, c))
        else:
            neighbours = ((r, c - 1), (r, c + 1))
        if any(n in grid for n in neighbours):
            return False

    if direction == "H":
        before, after = (row, col - 1), (row, col + len(word))
    else:
        before, after = (row - 1, col), (row + len(word), col)

    return before not in grid and after not in grid


def _bounds(cells: Iterable[Coord]) -> Tuple[int, int, int, int]:
    rows, cols = zip(*cells)
    return min(rows), max(rows), min(cols), max(cols)


def get_bounds(placements: Iterable[PlacedWord]) -> Tuple[int, int, int, int]:
    """Return (min_row, max_row, min_col, max_col) over all placements."""
    cells = [cell for p in placements for cell in p.cells]
    if not cells:
        raise ValueError("Cannot compute bounds of an empty placement list")
    return _bounds(cells)


def render_grid(grid: SparseGrid) -> str:
    """Render the grid to a string, '.' marking empty cells."""
    if not grid:
        return ""

    min_row, max_row, min_col, max_col = _bounds(grid)
    return "\n".join(
        "".join(grid.get((r, c), ".") for c in range(min_col, max_col + 1))
        for r in range(min_row, max_row + 1)
    )


def extract_all_words_from_grid(grid: SparseGrid) -> Set[str]:
    """All horizontal and vertical letter runs of length 2 or more."""
    if not grid:
        return set()

    rows = render_grid(grid).split("\n")
    columns = ["".join(column) for column in zip(*rows)]
    return {run for line in rows + columns for run in line.split(".") if len(run) >= 2}
