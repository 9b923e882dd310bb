"""
Level source: loads authored word lists from YAML and assembles levels.

Usage:
    library = LevelLibrary.from_yaml()
    level = library.load_level(1)
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from ..errors import InvalidLevelError
from .assembly import assemble_level
from .models import Level, LevelConfig


logger = logging.getLogger(__name__)

DEFAULT_LEVELS_PATH = Path(__file__).parent / "data" / "levels.yaml"


class LevelLibrary(BaseModel):
    """
    All configured levels, keyed by level id.

    Levels are generated on first load and cached; they are immutable.
    """

    configs: Dict[int, LevelConfig] = Field(default_factory=dict)
    _cache: Dict[int, Level] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LevelLibrary":
        """
        Build a library from a parsed `{levels: {id: config}}` mapping.

        Raises:
            InvalidLevelError: If the mapping is malformed
        """
        if not isinstance(data, dict) or not isinstance(data.get("levels"), dict):
            raise InvalidLevelError("Level file must contain a 'levels' mapping")

        configs: Dict[int, LevelConfig] = {}
        for key, raw in data["levels"].items():
            try:
                level_id = int(key)
            except (TypeError, ValueError):
                raise InvalidLevelError(f"Level id '{key}' is not an integer") from None
            try:
                configs[level_id] = LevelConfig(**(raw or {}))
            except ValidationError as e:
                raise InvalidLevelError(f"Level {level_id}: {e}", level_id=level_id) from e

        return cls(configs=dict(sorted(configs.items())))

    @classmethod
    def from_yaml(cls, path: Optional[str | Path] = None) -> "LevelLibrary":
        """Load levels from a YAML file (defaults to the bundled levels)."""
        path = Path(path) if path else DEFAULT_LEVELS_PATH

        if not path.exists():
            raise InvalidLevelError(f"Level file not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidLevelError(f"Could not parse {path}: {e}") from e

        library = cls.from_dict(data)
        logger.debug("Loaded %d level configs from %s", library.total_levels(), path)
        return library

    def level_ids(self) -> List[int]:
        return list(self.configs)

    def total_levels(self) -> int:
        return len(self.configs)

    def get_config(self, level_id: int) -> LevelConfig:
        config = self.configs.get(level_id)
        if config is None:
            raise InvalidLevelError(f"Level {level_id} not found in configuration", level_id=level_id)
        return config

    def load_level(self, level_id: int) -> Level:
        """
        Generate, validate and return a level.

        Raises:
            InvalidLevelError: Unknown id or failed validation
            GenerationError: The word list cannot be laid out
        """
        if level_id in self._cache:
            return self._cache[level_id]

        config = self.get_config(level_id)
        level = assemble_level(
            level_id,
            config.words,
            difficulty=config.difficulty,
            title=config.title,
            extra_words_allowed=config.extra_words_allowed,
            flavor_text=config.flavor_text,
        )
        self._cache[level_id] = level
        return level

    def get_next_level_id(self, level_id: int) -> Optional[int]:
        """The next configured level after `level_id`, or None after the last."""
        for candidate in self.configs:
            if candidate > level_id:
                return candidate
        return None
