"""Crossword skeleton generation for wordwheel levels."""

from .models import (
    Direction,
    WordSpec,
    PlacedWord,
    TargetWord,
    GeneratedGrid,
    GridIssue,
    GridReport,
)
from .grid import (
    cells_for,
    place_word,
    is_valid_placement,
    get_bounds,
    render_grid,
    extract_all_words_from_grid,
)
from .placement import generate, find_best_placement
from .verify import verify_grid

__all__ = [
    # Engine
    "generate",
    "find_best_placement",
    "verify_grid",
    # Models
    "Direction",
    "WordSpec",
    "PlacedWord",
    "TargetWord",
    "GeneratedGrid",
    "GridIssue",
    "GridReport",
    # Grid utilities
    "cells_for",
    "place_word",
    "is_valid_placement",
    "get_bounds",
    "render_grid",
    "extract_all_words_from_grid",
]
