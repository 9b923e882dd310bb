"""
Pydantic models for the puzzle session.

Session state is immutable by convention: every transition in
`wordwheel.session.game` returns a new SessionState via `model_copy`.
"""

import random
from typing import List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..levels.models import Level


class Letter(BaseModel):
    """A tile on the letter wheel. Tiles are reusable across words."""
    char: str = Field(..., min_length=1, max_length=1)
    index: int = Field(..., ge=0)


class SelectionPath(BaseModel):
    """The player's in-progress swipe: wheel slots in order and the word they spell."""
    letter_indices: List[int] = Field(..., min_length=1)
    word: str


class Cell(BaseModel):
    """A grid cell. Blocked cells hold a blank letter and are never filled."""
    row: int
    col: int
    letter: Optional[str] = None
    filled: bool = False
    is_part_of_target_word: bool = False


class GridState(BaseModel):
    """Live grid for a session, derived from the level's mask."""
    rows: int
    cols: int
    cells: List[List[Cell]]
    mask: List[List[bool]]

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_blocked(self, row: int, col: int) -> bool:
        return not self.mask[row][col]


class SessionState(BaseModel):
    """
    Everything a play session needs for one level.

    Attributes:
        current_level: Read-only level template
        grid_state: Live grid (filled cells)
        letter_wheel: Wheel tiles in display order
        selected_path: In-progress selection, or None
        coins: Running coin balance (carried across levels)
        solved_words: Canonical target words solved this level
        extra_words_found: Canonical non-target words found this level
        sound_enabled: Player preference, passed through to the UI
        seed: Optional seed for the shared shuffle generator
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    current_level: Level
    grid_state: GridState
    letter_wheel: List[Letter]
    selected_path: Optional[SelectionPath] = None
    coins: int = Field(default=0, ge=0)
    solved_words: Set[str] = Field(default_factory=set)
    extra_words_found: Set[str] = Field(default_factory=set)
    sound_enabled: bool = True
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the shared random generator after model creation."""
        self._rng = random.Random(self.seed)

    @property
    def rng(self) -> random.Random:
        """Generator shared by every state derived from this one."""
        return self._rng

    @property
    def selected_word(self) -> str:
        return self.selected_path.word if self.selected_path else ""

    @property
    def wheel_chars(self) -> Tuple[str, ...]:
        return tuple(letter.char for letter in self.letter_wheel)


class LevelProgress(BaseModel):
    """Target-word progress for the current level."""
    total_words: int
    solved_words: int
    percentage: int
