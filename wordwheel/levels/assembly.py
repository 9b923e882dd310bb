"""Turn generated grids into validated Level records."""

import logging
from collections import Counter
from typing import Dict, Iterable, Optional, Sequence, Union

from ..errors import InvalidLevelError
from ..generator import WordSpec, generate
from ..generator.models import TargetWord
from .models import Difficulty, Level


logger = logging.getLogger(__name__)


def can_spell(word: str, letters: Sequence[str]) -> bool:
    """True if `word` can be spelled using each letter of the pool at most once."""
    missing = Counter(word.upper()) - Counter(letter.upper() for letter in letters)
    return not missing


def assemble_level(
    level_id: int,
    words: Iterable[Union[WordSpec, Dict, str]],
    difficulty: Difficulty = "medium",
    title: Optional[str] = None,
    extra_words_allowed: bool = True,
    flavor_text: Optional[str] = None,
) -> Level:
    """
    Generate a grid for `words` and wrap it into a validated Level.

    Args:
        level_id: Identifier of the level (positive)
        words: The level's word list
        difficulty: easy, medium or hard
        title: Display title (defaults to "Level N")
        extra_words_allowed: Whether non-target dictionary words earn coins
        flavor_text: Optional description shown with the level

    Returns:
        A validated Level

    Raises:
        GenerationError: If the words cannot be laid out
        InvalidLevelError: If the resulting level fails validation
    """
    generated = generate(words)

    level = Level(
        level_id=level_id,
        title=title or f"Level {level_id}",
        difficulty=difficulty,
        rows=generated.rows,
        cols=generated.cols,
        mask=generated.mask,
        letters=generated.letters,
        target_words=generated.target_words,
        extra_words_allowed=extra_words_allowed,
        flavor_text=flavor_text,
    )

    validate_level(level)
    logger.debug(
        "Assembled level %d (%s): %dx%d, %d words",
        level_id, level.title, level.rows, level.cols, len(level.target_words),
    )
    return level


def validate_level(level: Level) -> None:
    """
    Check a level's structure before a session may use it.

    Raises:
        InvalidLevelError: Describing the first problem found
    """
    def fail(message: str) -> None:
        raise InvalidLevelError(f"Level {level.level_id}: {message}", level_id=level.level_id)

    if level.level_id <= 0:
        fail("invalid level id")

    if not level.title.strip():
        fail("missing title")

    if level.rows <= 0 or level.cols <= 0:
        fail(f"invalid grid dimensions {level.rows}x{level.cols}")

    if len(level.mask) != level.rows:
        fail(f"mask has {len(level.mask)} rows, expected {level.rows}")

    for row in level.mask:
        if len(row) != level.cols:
            fail(f"mask row has {len(row)} columns, expected {level.cols}")

    if not level.letters:
        fail("empty letter pool")

    if not level.target_words:
        fail("no target words defined")

    for target in level.target_words:
        _validate_target_word(target, level, fail)


def _validate_target_word(target: TargetWord, level: Level, fail) -> None:
    if not target.word:
        fail("empty target word")

    if len(target.coords) != len(target.word):
        fail(
            f"word length mismatch for {target.word}: "
            f"{len(target.word)} letters vs {len(target.coords)} coordinates"
        )

    for row, col in target.coords:
        if not (0 <= row < level.rows and 0 <= col < level.cols):
            fail(f"coordinate ({row}, {col}) out of bounds for word {target.word}")
        if not level.mask[row][col]:
            fail(f"coordinate ({row}, {col}) is not playable for word {target.word}")

    if not can_spell(target.word, level.letters):
        fail(f"letter pool {''.join(level.letters)} cannot spell '{target.word}'")
