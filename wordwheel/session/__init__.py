"""Puzzle session state machine and orchestration."""

from .models import Letter, SelectionPath, Cell, GridState, SessionState, LevelProgress
from .game import (
    TARGET_REWARD,
    EXTRA_REWARD,
    HINT_COST,
    initialize_session,
    select_letter,
    undo_selection,
    clear_selection,
    submit_word,
    try_auto_submit,
    select_letter_with_auto_submit,
    shuffle_letters,
    reveal_hint,
    reset_level,
    is_level_complete,
    get_coins_earned_this_level,
    get_level_progress,
    render_board,
)
from .persistence import SavedProgress, ProgressStore
from .stats import (
    GameStatistics,
    AchievementTarget,
    calculate_game_stats,
    get_achievements,
    get_next_achievement_target,
)
from .orchestrator import WordWheel

__all__ = [
    # Models
    "Letter",
    "SelectionPath",
    "Cell",
    "GridState",
    "SessionState",
    "LevelProgress",
    # Constants
    "TARGET_REWARD",
    "EXTRA_REWARD",
    "HINT_COST",
    # Transitions
    "initialize_session",
    "select_letter",
    "undo_selection",
    "clear_selection",
    "submit_word",
    "try_auto_submit",
    "select_letter_with_auto_submit",
    "shuffle_letters",
    "reveal_hint",
    "reset_level",
    "is_level_complete",
    "get_coins_earned_this_level",
    "get_level_progress",
    "render_board",
    # Statistics
    "GameStatistics",
    "AchievementTarget",
    "calculate_game_stats",
    "get_achievements",
    "get_next_achievement_target",
    # Persistence and orchestration
    "SavedProgress",
    "ProgressStore",
    "WordWheel",
]
