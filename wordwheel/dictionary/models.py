"""Data models for dictionary entries."""

from typing import List, Literal, Optional, Protocol

from pydantic import BaseModel, Field


Difficulty = Literal["easy", "medium", "hard"]


class DictionaryEntry(BaseModel):
    """A dictionary word with its accepted spellings."""
    canonical: str
    variants: List[str] = Field(default_factory=list)  # includes canonical
    meaning: str = ""
    language_tag: str = "en"
    difficulty: Difficulty = "medium"


class WordValidator(Protocol):
    """Anything that can map a submitted word to its canonical form."""

    def validate(self, word: str) -> Optional[str]:
        ...
