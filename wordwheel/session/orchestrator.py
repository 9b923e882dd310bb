"""
Top-level game orchestrator.

Owns the collaborators (level library, dictionary, progress store) and
the current SessionState, forwards player actions to the pure
transitions in `game`, and saves progress whenever coins, completed
levels or preferences change.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import GameConfig
from ..dictionary import Dictionary
from ..levels import LevelLibrary
from . import game
from .models import SessionState
from .persistence import ProgressStore, SavedProgress
from .stats import (
    AchievementTarget,
    GameStatistics,
    calculate_game_stats,
    get_achievements,
    get_next_achievement_target,
)


logger = logging.getLogger(__name__)


class WordWheel(BaseModel):
    """
    A single player's game across levels.

    Attributes:
        config: Game configuration
        library: Level source
        dictionary: Word validator for submissions
        store: Optional progress store (None keeps progress in memory)
        progress: Coins, completed levels and preferences
        state: Session for the level being played, if any
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    library: LevelLibrary
    dictionary: Dictionary
    store: Optional[ProgressStore] = None
    progress: SavedProgress = Field(default_factory=SavedProgress)
    state: Optional[SessionState] = None

    @classmethod
    def create(cls, config: Optional[GameConfig] = None, **config_kwargs: Any) -> "WordWheel":
        """
        Factory method wiring up collaborators from configuration.

        Args:
            config: Optional GameConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            A WordWheel with progress loaded (or a fresh profile)
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        library = LevelLibrary.from_yaml(config.levels_path)
        dictionary = Dictionary.from_csv(config.dictionary_path)
        store = ProgressStore(config.progress_path) if config.progress_path else None

        progress = store.load() if store else None
        if progress is None:
            progress = SavedProgress.default(coins=config.starting_coins)

        return cls(config=config, library=library, dictionary=dictionary, store=store, progress=progress)

    # ------------------------------------------------------------------
    # Level transitions
    # ------------------------------------------------------------------

    def first_unplayed_level(self) -> Optional[int]:
        for level_id in self.library.level_ids():
            if level_id not in self.progress.completed_levels:
                return level_id
        return None

    def start_level(self, level_id: Optional[int] = None) -> SessionState:
        """
        Start (or restart) a level, carrying over the coin balance.

        Defaults to the first level not yet completed, or the first level
        when everything has been completed.
        """
        if level_id is None:
            level_id = self.first_unplayed_level() or self.library.level_ids()[0]

        level = self.library.load_level(level_id)
        self.state = game.initialize_session(
            level,
            coins=self.progress.coins,
            sound_enabled=self.progress.sound_enabled,
            seed=self.config.seed,
        )
        logger.debug("Started level %d (%s)", level.level_id, level.title)
        return self.state

    def next_level(self) -> Optional[SessionState]:
        """Move to the level after the current one; None after the last level."""
        current = self._require_state().current_level.level_id
        next_id = self.library.get_next_level_id(current)
        if next_id is None:
            return None
        return self.start_level(next_id)

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def select(self, wheel_index: int) -> SessionState:
        state = self._require_state()
        if self.config.auto_submit:
            return self._apply(game.select_letter_with_auto_submit(state, wheel_index, self.dictionary))
        return self._apply(game.select_letter(state, wheel_index))

    def undo(self) -> SessionState:
        return self._apply(game.undo_selection(self._require_state()))

    def clear(self) -> SessionState:
        return self._apply(game.clear_selection(self._require_state()))

    def submit(self) -> SessionState:
        return self._apply(game.submit_word(self._require_state(), self.dictionary))

    def shuffle(self) -> SessionState:
        return self._apply(game.shuffle_letters(self._require_state()))

    def hint(self) -> SessionState:
        return self._apply(game.reveal_hint(self._require_state()))

    def reset(self) -> SessionState:
        return self._apply(game.reset_level(self._require_state()))

    def toggle_sound(self) -> bool:
        self.progress.sound_enabled = not self.progress.sound_enabled
        if self.state is not None:
            self.state = self.state.model_copy(update={"sound_enabled": self.progress.sound_enabled})
        self.save()
        return self.progress.sound_enabled

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    @property
    def is_level_complete(self) -> bool:
        return self.state is not None and game.is_level_complete(self.state)

    def snapshot(self) -> SavedProgress:
        return self.progress.model_copy(update={"last_played": time.time()}, deep=True)

    def save(self) -> None:
        if self.store is not None:
            self.store.save(self.snapshot())

    def stats(self) -> GameStatistics:
        """Statistics over completed levels."""
        words_per_level = {
            level_id: len(config.words) for level_id, config in self.library.configs.items()
        }
        return calculate_game_stats(
            self.progress,
            words_per_level=words_per_level,
            total_levels=self.library.total_levels(),
        )

    def achievements(self) -> List[str]:
        return get_achievements(self.stats())

    def next_achievement_target(self) -> Optional[AchievementTarget]:
        return get_next_achievement_target(self.stats())

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for serialization and logging.
        """
        state = self.state
        return {
            "level_id": state.current_level.level_id if state else None,
            "coins": self.progress.coins,
            "completed_levels": sorted(self.progress.completed_levels),
            "selected_word": state.selected_word if state else "",
            "solved_words": sorted(state.solved_words) if state else [],
            "extra_words_found": sorted(state.extra_words_found) if state else [],
            "is_level_complete": self.is_level_complete,
            "sound_enabled": self.progress.sound_enabled,
        }

    def _require_state(self) -> SessionState:
        if self.state is None:
            raise ValueError("No level in progress. Call start_level() first.")
        return self.state

    def _apply(self, new_state: SessionState) -> SessionState:
        """Adopt a new session state, sync progress from it and save on change."""
        coins_changed = new_state.coins != self.progress.coins
        self.state = new_state
        self.progress.coins = new_state.coins

        level_id = new_state.current_level.level_id
        if game.is_level_complete(new_state) and level_id not in self.progress.completed_levels:
            self.progress.completed_levels.append(level_id)
            self.progress.extra_words_found_by_level[level_id] = sorted(new_state.extra_words_found)
            logger.info("Level %d complete with %d coins", level_id, new_state.coins)
            self.save()
        elif coins_changed:
            self.save()

        return new_state
