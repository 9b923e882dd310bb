"""Level assembly and the level source."""

from .models import Difficulty, Level, LevelConfig
from .assembly import assemble_level, validate_level, can_spell
from .library import LevelLibrary, DEFAULT_LEVELS_PATH

__all__ = [
    "Difficulty",
    "Level",
    "LevelConfig",
    "assemble_level",
    "validate_level",
    "can_spell",
    "LevelLibrary",
    "DEFAULT_LEVELS_PATH",
]
