"""Crossword grid generation and letter-wheel puzzle sessions."""

from .errors import WordWheelError, GenerationError, InvalidLevelError, DictionaryLoadError, ConfigError
from .config import GameConfig, load_config
from .generator import WordSpec, GeneratedGrid, generate, verify_grid
from .levels import Level, LevelConfig, LevelLibrary, assemble_level, validate_level
from .dictionary import Dictionary
from .session import SessionState, SavedProgress, ProgressStore, WordWheel

__all__ = [
    # Errors
    "WordWheelError",
    "GenerationError",
    "InvalidLevelError",
    "DictionaryLoadError",
    "ConfigError",
    # Config
    "GameConfig",
    "load_config",
    # Generation
    "WordSpec",
    "GeneratedGrid",
    "generate",
    "verify_grid",
    # Levels
    "Level",
    "LevelConfig",
    "LevelLibrary",
    "assemble_level",
    "validate_level",
    # Play
    "Dictionary",
    "SessionState",
    "SavedProgress",
    "ProgressStore",
    "WordWheel",
]

__version__ = "0.1.0"
