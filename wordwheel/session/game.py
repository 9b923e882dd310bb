"""
Puzzle session transitions.

Every function takes a SessionState and returns a new one (or the same
object when the action is a no-op). Invalid words and unaffordable hints
are routine player input, so they never raise.
"""

import random
from typing import List, Optional, Tuple

from ..dictionary.models import WordValidator
from ..generator.models import TargetWord
from ..levels.models import Level
from .models import Cell, GridState, Letter, LevelProgress, SelectionPath, SessionState


# Coin economy
TARGET_REWARD = 10
EXTRA_REWARD = 5
HINT_COST = 15

BLOCKED_LETTER = " "


def create_grid_state(level: Level) -> GridState:
    """Build a fresh, unfilled grid from a level's mask."""
    cells: List[List[Cell]] = []

    for row in range(level.rows):
        cells.append([
            Cell(
                row=row,
                col=col,
                letter=None if level.mask[row][col] else BLOCKED_LETTER,
            )
            for col in range(level.cols)
        ])

    for target in level.target_words:
        for row, col in target.coords:
            cells[row][col].is_part_of_target_word = True

    return GridState(rows=level.rows, cols=level.cols, cells=cells, mask=level.mask)


def create_letter_wheel(letters: List[str]) -> List[Letter]:
    return [Letter(char=char.upper(), index=i) for i, char in enumerate(letters)]


def initialize_session(
    level: Level,
    coins: int = 0,
    sound_enabled: bool = True,
    seed: Optional[int] = None,
) -> SessionState:
    """
    Create the initial state for playing `level`.

    Args:
        level: A validated level
        coins: Starting coin balance carried over from earlier levels
        sound_enabled: Player preference
        seed: Optional seed for the shuffle generator

    Returns:
        A SessionState with no selection and nothing solved
    """
    return SessionState(
        current_level=level,
        grid_state=create_grid_state(level),
        letter_wheel=create_letter_wheel(level.letters),
        coins=coins,
        sound_enabled=sound_enabled,
        seed=seed,
    )


# ----------------------------------------------------------------------
# Selection
# ----------------------------------------------------------------------

def select_letter(state: SessionState, wheel_index: int) -> SessionState:
    """
    Extend the selection with the tile at `wheel_index`.

    A tile can appear once per selection; the same letter from a different
    tile is allowed. Unknown indices are ignored.
    """
    if not 0 <= wheel_index < len(state.letter_wheel):
        return state

    indices = state.selected_path.letter_indices if state.selected_path else []
    if wheel_index in indices:
        return state

    path = SelectionPath(
        letter_indices=[*indices, wheel_index],
        word=state.selected_word + state.letter_wheel[wheel_index].char,
    )
    return state.model_copy(update={"selected_path": path})


def undo_selection(state: SessionState) -> SessionState:
    """Drop the last selected tile; an emptied selection becomes None."""
    if state.selected_path is None:
        return state

    indices = state.selected_path.letter_indices[:-1]
    if not indices:
        return clear_selection(state)

    word = "".join(state.letter_wheel[i].char for i in indices)
    return state.model_copy(update={"selected_path": SelectionPath(letter_indices=indices, word=word)})


def clear_selection(state: SessionState) -> SessionState:
    return state.model_copy(update={"selected_path": None})


# ----------------------------------------------------------------------
# Submission
# ----------------------------------------------------------------------

def _find_target(level: Level, word: str) -> Optional[TargetWord]:
    for target in level.target_words:
        if target.word.upper() == word:
            return target
    return None


def _is_unsolved_target(state: SessionState, word: str) -> bool:
    return _find_target(state.current_level, word) is not None and word not in state.solved_words


def fill_grid_with_word(grid_state: GridState, word: str, coords: List[Tuple[int, int]]) -> GridState:
    """Return a grid with `word` written at `coords`; rows are shallow-copied."""
    cells = [list(row) for row in grid_state.cells]

    for letter, (row, col) in zip(word, coords):
        cells[row][col] = cells[row][col].model_copy(update={"letter": letter, "filled": True})

    return grid_state.model_copy(update={"cells": cells})


def submit_word(state: SessionState, dictionary: WordValidator) -> SessionState:
    """
    Resolve the current selection against the level and the dictionary.

    Target words earn TARGET_REWARD and are written into the grid. Other
    dictionary words earn EXTRA_REWARD when the level allows extras.
    Everything else (unknown, repeated, disallowed) just clears the
    selection.
    """
    if state.selected_path is None or not state.selected_path.word:
        return state

    canonical = dictionary.validate(state.selected_path.word)
    if canonical is None:
        return clear_selection(state)

    if canonical in state.solved_words or canonical in state.extra_words_found:
        return clear_selection(state)

    target = _find_target(state.current_level, canonical)

    if target is not None:
        return state.model_copy(update={
            "selected_path": None,
            "solved_words": state.solved_words | {canonical},
            "grid_state": fill_grid_with_word(state.grid_state, target.word, target.coords),
            "coins": state.coins + TARGET_REWARD,
        })

    if state.current_level.extra_words_allowed:
        return state.model_copy(update={
            "selected_path": None,
            "extra_words_found": state.extra_words_found | {canonical},
            "coins": state.coins + EXTRA_REWARD,
        })

    return clear_selection(state)


def try_auto_submit(state: SessionState, dictionary: WordValidator) -> SessionState:
    """
    Submit the selection early when it cannot usefully grow.

    Submits when the selection spells an unsolved target word, or a new
    dictionary word that is not the prefix of a longer unsolved target.
    Otherwise the selection is left for the player to extend.
    """
    if state.selected_path is None or len(state.selected_path.word) < 2:
        return state

    word = state.selected_path.word.upper()

    if _is_unsolved_target(state, word):
        return submit_word(state, dictionary)

    canonical = dictionary.validate(word)
    if canonical is None or canonical in state.solved_words or canonical in state.extra_words_found:
        return state

    if _is_unsolved_target(state, canonical):
        return submit_word(state, dictionary)

    if not state.current_level.extra_words_allowed:
        return state

    could_extend = any(
        target.word.upper().startswith(word)
        and len(target.word) > len(word)
        and target.word.upper() not in state.solved_words
        for target in state.current_level.target_words
    )
    if could_extend:
        return state

    return submit_word(state, dictionary)


def select_letter_with_auto_submit(
    state: SessionState,
    wheel_index: int,
    dictionary: WordValidator,
) -> SessionState:
    """select_letter followed by try_auto_submit."""
    return try_auto_submit(select_letter(state, wheel_index), dictionary)


# ----------------------------------------------------------------------
# Wheel, hints, reset
# ----------------------------------------------------------------------

def shuffle_letters(state: SessionState, rng: Optional[random.Random] = None) -> SessionState:
    """
    Uniformly permute the wheel and re-index tiles 0..n-1.

    Clears the selection, since its indices would point at moved tiles.
    Uses the state's shared generator unless `rng` is given.
    """
    rng = rng or state.rng
    wheel = list(state.letter_wheel)
    rng.shuffle(wheel)

    return state.model_copy(update={
        "letter_wheel": [letter.model_copy(update={"index": i}) for i, letter in enumerate(wheel)],
        "selected_path": None,
    })


def reveal_hint(state: SessionState) -> SessionState:
    """
    Spend HINT_COST coins to reveal one letter of the first unsolved word.

    Revealing a word's last missing letter does not solve it; the word must
    still be submitted. No-op when the player cannot afford the hint, every
    word is solved, or the first unsolved word is already fully revealed.
    """
    if state.coins < HINT_COST:
        return state

    unsolved = [
        target for target in state.current_level.target_words
        if target.word.upper() not in state.solved_words
    ]
    if not unsolved:
        return state

    target = unsolved[0]
    for i, (row, col) in enumerate(target.coords):
        if not state.grid_state.cells[row][col].filled:
            grid_state = fill_grid_with_word(state.grid_state, target.word[i], [(row, col)])
            return state.model_copy(update={
                "grid_state": grid_state,
                "coins": state.coins - HINT_COST,
            })

    return state


def reset_level(state: SessionState) -> SessionState:
    """Restart the current level. Coins are kept; progress is not."""
    level = state.current_level
    return state.model_copy(update={
        "grid_state": create_grid_state(level),
        "letter_wheel": create_letter_wheel(level.letters),
        "selected_path": None,
        "solved_words": set(),
        "extra_words_found": set(),
    })


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------

def is_level_complete(state: SessionState) -> bool:
    return all(
        target.word.upper() in state.solved_words
        for target in state.current_level.target_words
    )


def get_coins_earned_this_level(state: SessionState) -> int:
    """
    Coins earned from words this level.

    A display value; `state.coins` already includes it.
    """
    return TARGET_REWARD * len(state.solved_words) + EXTRA_REWARD * len(state.extra_words_found)


def get_level_progress(state: SessionState) -> LevelProgress:
    total = len(state.current_level.target_words)
    solved = sum(
        1 for target in state.current_level.target_words
        if target.word.upper() in state.solved_words
    )
    percentage = round(solved / total * 100) if total else 0
    return LevelProgress(total_words=total, solved_words=solved, percentage=percentage)


def render_board(state: SessionState) -> str:
    """Render the live grid: '#' blocked, '_' unfilled, letters when filled."""
    lines = []
    for row in state.grid_state.cells:
        line = ""
        for cell in row:
            if state.grid_state.is_blocked(cell.row, cell.col):
                line += "#"
            elif cell.filled:
                line += cell.letter
            else:
                line += "_"
        lines.append(line)
    return "\n".join(lines)
