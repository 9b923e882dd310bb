"""Data models for crossword grid generation."""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Type aliases
Direction = Literal["H", "V"]
Coord = Tuple[int, int]


class WordSpec(BaseModel):
    """A word to be placed on the grid, with its meaning."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    meaning: str = ""

    @field_validator("word", mode="before")
    @classmethod
    def _normalize_word(cls, value):
        if isinstance(value, str):
            return "".join(value.split()).upper()
        return value


class PlacedWord(BaseModel):
    """A word anchored on the grid at its first letter."""
    word: str
    meaning: str = ""
    row: int
    col: int
    direction: Direction

    @property
    def cells(self) -> List[Coord]:
        """Coordinates of every letter, in letter order."""
        if self.direction == "H":
            return [(self.row, self.col + i) for i in range(len(self.word))]
        return [(self.row + i, self.col) for i in range(len(self.word))]


class TargetWord(BaseModel):
    """A word the player must find, with its normalized grid coordinates."""
    model_config = ConfigDict(frozen=True)

    word: str
    coords: List[Coord]
    meaning: str = ""

    @property
    def length(self) -> int:
        return len(self.word)


class GeneratedGrid(BaseModel):
    """Output of the placement engine, normalized to a zero-based origin."""
    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int
    mask: List[List[bool]]
    letters: List[str]
    target_words: List[TargetWord]
    placements: List[PlacedWord] = Field(default_factory=list)

    @property
    def placed_words(self) -> List[str]:
        return [tw.word for tw in self.target_words]


class GridIssue(BaseModel):
    """A single problem found while auditing a generated grid."""
    code: str
    message: str
    word: Optional[str] = None


class GridReport(BaseModel):
    """Result of auditing a generated grid against its word list."""
    valid: bool
    errors: List[GridIssue] = Field(default_factory=list)
    warnings: List[GridIssue] = Field(default_factory=list)
    placed_words: List[str] = Field(default_factory=list)
    dropped_words: List[str] = Field(default_factory=list)
    grid: Optional[str] = None
