"""
Player statistics and achievement badges derived from saved progress.

Badges are threshold ids such as "level-5" or "coins-100"; the next
target is the first unmet level goal, then the first unmet coin goal.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

from .persistence import SavedProgress


# Badge thresholds
LEVEL_ACHIEVEMENTS = (5, 10, 25, 50)
COIN_ACHIEVEMENTS = (100, 500, 1000)
EXTRA_WORD_ACHIEVEMENTS = (10, 50, 100)

# Goals reported by get_next_achievement_target, in order
LEVEL_TARGETS = (5, 10, 25, 50, 120)
COIN_TARGETS = (100, 500, 1000, 5000)


class GameStatistics(BaseModel):
    """Totals across every completed level."""
    total_levels_solved: int
    total_coins_earned: int
    total_extra_words_found: int
    average_words_per_level: float
    progress_percent: int = 0


class AchievementTarget(BaseModel):
    """The next goal the player is working towards."""
    type: Literal["levels", "coins"]
    target: int
    current: int
    progress: int


def calculate_game_stats(
    progress: SavedProgress,
    words_per_level: Optional[Dict[int, int]] = None,
    total_levels: int = 0,
) -> GameStatistics:
    """
    Summarize saved progress.

    Args:
        progress: The player's saved progress
        words_per_level: Target word count per level id; completed levels
            missing from it count no target words
        total_levels: Number of levels available, for progress_percent

    Returns:
        GameStatistics for display
    """
    words_per_level = words_per_level or {}
    solved = len(progress.completed_levels)
    extras = sum(len(words) for words in progress.extra_words_found_by_level.values())
    target_words = sum(words_per_level.get(level_id, 0) for level_id in progress.completed_levels)

    return GameStatistics(
        total_levels_solved=solved,
        total_coins_earned=progress.coins,
        total_extra_words_found=extras,
        average_words_per_level=(target_words + extras) / solved if solved else 0.0,
        progress_percent=round(solved / total_levels * 100) if total_levels else 0,
    )


def get_achievements(stats: GameStatistics) -> List[str]:
    """Badge ids earned so far, level badges first."""
    achievements = [f"level-{n}" for n in LEVEL_ACHIEVEMENTS if stats.total_levels_solved >= n]
    achievements += [f"coins-{n}" for n in COIN_ACHIEVEMENTS if stats.total_coins_earned >= n]
    achievements += [f"extra-{n}" for n in EXTRA_WORD_ACHIEVEMENTS if stats.total_extra_words_found >= n]
    return achievements


def get_next_achievement_target(stats: GameStatistics) -> Optional[AchievementTarget]:
    """The first unmet level goal, else the first unmet coin goal, else None."""
    for target in LEVEL_TARGETS:
        if stats.total_levels_solved < target:
            return AchievementTarget(
                type="levels",
                target=target,
                current=stats.total_levels_solved,
                progress=round(stats.total_levels_solved / target * 100),
            )

    for target in COIN_TARGETS:
        if stats.total_coins_earned < target:
            return AchievementTarget(
                type="coins",
                target=target,
                current=stats.total_coins_earned,
                progress=round(stats.total_coins_earned / target * 100),
            )

    return None
