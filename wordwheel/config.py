"""
Game configuration loaded from YAML.

Example config.yaml:
  levels_path: content/levels.yaml
  dictionary_path: content/dictionary.csv
  progress_path: ~/.wordwheel/progress.json
  starting_coins: 50
  auto_submit: true
  seed: 42
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError


class GameConfig(BaseModel):
    """Configuration for a game run. Missing paths use bundled assets."""
    levels_path: Optional[Path] = None
    dictionary_path: Optional[Path] = None
    progress_path: Optional[Path] = None
    starting_coins: int = Field(default=0, ge=0)
    auto_submit: bool = True
    seed: Optional[int] = None


def load_config(config_path: str | Path) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    try:
        config = GameConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    if config.progress_path is not None:
        config = config.model_copy(update={"progress_path": config.progress_path.expanduser()})
    return config
