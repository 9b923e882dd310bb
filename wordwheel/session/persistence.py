"""
Progress snapshots and their JSON file store.

The session transitions never touch storage; the orchestrator reads a
snapshot at start-up and writes one back around level changes.
"""

import json
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError


logger = logging.getLogger(__name__)


class SavedProgress(BaseModel):
    """Persisted player progress across levels."""
    coins: int = Field(default=0, ge=0)
    completed_levels: List[int] = Field(default_factory=list)
    sound_enabled: bool = True
    last_played: float = Field(default_factory=time.time)
    extra_words_found_by_level: Dict[int, List[str]] = Field(default_factory=dict)

    @classmethod
    def default(cls, coins: int = 0) -> "SavedProgress":
        return cls(coins=coins)


class ProgressStore:
    """Saves and loads a single SavedProgress as JSON."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> Optional[SavedProgress]:
        """
        Load saved progress.

        Returns:
            The saved progress, or None if nothing has been saved yet or the
            file is unreadable (a fresh profile is used instead)
        """
        if not self.path.exists():
            return None

        try:
            with open(self.path) as f:
                data = json.load(f)
            progress = SavedProgress(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning("Ignoring unreadable progress file %s: %s", self.path, e)
            return None

        logger.debug("Progress loaded from %s", self.path)
        return progress

    def save(self, progress: SavedProgress) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, 'w') as f:
            json.dump(progress.model_dump(), f, indent=2)
        logger.debug("Progress saved to %s", self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.debug("Progress cleared at %s", self.path)
