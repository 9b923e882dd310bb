"""Exception hierarchy for level generation and loading."""

from typing import List, Optional


class WordWheelError(Exception):
    """Base class for all wordwheel failures."""


class GenerationError(WordWheelError):
    """A word could not be placed on the grid within the retry budget."""

    def __init__(self, message: str, word: str, unplaced: Optional[List[str]] = None):
        super().__init__(message)
        self.word = word
        self.unplaced = list(unplaced or [word])


class InvalidLevelError(WordWheelError):
    """A level failed structural validation and must not be played."""

    def __init__(self, message: str, level_id: Optional[int] = None):
        super().__init__(message)
        self.level_id = level_id


class DictionaryLoadError(WordWheelError):
    """The dictionary asset could not be read."""


class ConfigError(WordWheelError):
    """The configuration file is missing or malformed."""
