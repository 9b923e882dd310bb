"""Data models for level configuration and assembled levels."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..generator.models import TargetWord, WordSpec


Difficulty = Literal["easy", "medium", "hard"]


class LevelConfig(BaseModel):
    """A level as authored: a title and an unordered word list."""
    title: str = Field(..., min_length=1)
    difficulty: Difficulty = "medium"
    words: List[WordSpec] = Field(..., min_length=1)
    extra_words_allowed: bool = True
    flavor_text: Optional[str] = None

    @field_validator("words", mode="before")
    @classmethod
    def _bare_words(cls, words):
        if isinstance(words, list):
            return [{"word": w} if isinstance(w, str) else w for w in words]
        return words

    @field_validator("words")
    @classmethod
    def _no_duplicate_words(cls, words: List[WordSpec]) -> List[WordSpec]:
        seen = set()
        for spec in words:
            if spec.word in seen:
                raise ValueError(f"Duplicate word '{spec.word}'")
            seen.add(spec.word)
        return words


class Level(BaseModel):
    """
    A playable level: the generated grid plus its metadata.

    Read-only template for sessions; `mask[r][c]` is True for playable cells.
    """
    model_config = ConfigDict(frozen=True)

    level_id: int
    title: str
    difficulty: Difficulty = "medium"
    rows: int
    cols: int
    mask: List[List[bool]]
    letters: List[str]
    target_words: List[TargetWord]
    extra_words_allowed: bool = True
    flavor_text: Optional[str] = None
