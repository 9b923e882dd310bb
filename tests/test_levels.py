"""Test level assembly, validation and the YAML level library."""

import pytest
from pydantic import ValidationError

from wordwheel.errors import GenerationError, InvalidLevelError
from wordwheel.generator import TargetWord
from wordwheel.levels import (
    LevelConfig,
    LevelLibrary,
    assemble_level,
    can_spell,
    validate_level,
)


class TestCanSpell:
    """Test letter pool coverage."""

    def test_distinct_letters(self):
        assert can_spell("HOT", ["C", "H", "O", "P", "T"])

    def test_missing_letter(self):
        assert not can_spell("HAT", ["C", "H", "O", "P", "T"])

    def test_each_letter_used_once(self):
        """A repeated letter needs as many tiles as occurrences."""
        assert not can_spell("MAMA", ["M", "A"])
        assert can_spell("MAMA", ["M", "A", "M", "A"])

    def test_case_insensitive(self):
        assert can_spell("hot", ["H", "O", "T"])


class TestAssembleLevel:
    """Test turning word lists into levels."""

    def test_kitchen_level(self, kitchen_level):
        assert kitchen_level.level_id == 2
        assert kitchen_level.title == "Kitchen"
        assert (kitchen_level.rows, kitchen_level.cols) == (3, 6)
        assert kitchen_level.letters == ["C", "H", "O", "P", "T"]
        assert [t.word for t in kitchen_level.target_words] == ["CHOP", "HOT", "POT", "TOP"]

    def test_default_title(self):
        level = assemble_level(7, ["CHOP", "HOT"])
        assert level.title == "Level 7"
        assert level.difficulty == "medium"
        assert level.extra_words_allowed is True

    def test_generation_error_propagates(self):
        with pytest.raises(GenerationError):
            assemble_level(1, ["CAT", "DOG"])

    def test_repeated_letters_rejected(self):
        """The deduplicated pool cannot spell a word with a repeated letter."""
        with pytest.raises(InvalidLevelError, match="cannot spell"):
            assemble_level(1, ["MAMA"])

    def test_level_is_frozen(self, kitchen_level):
        with pytest.raises(ValidationError):
            kitchen_level.title = "Changed"


class TestValidateLevel:
    """Test structural validation failures."""

    def test_valid_level_passes(self, kitchen_level):
        validate_level(kitchen_level)

    def test_invalid_id(self, kitchen_level):
        with pytest.raises(InvalidLevelError, match="invalid level id"):
            validate_level(kitchen_level.model_copy(update={"level_id": 0}))

    def test_blank_title(self, kitchen_level):
        with pytest.raises(InvalidLevelError, match="missing title"):
            validate_level(kitchen_level.model_copy(update={"title": "  "}))

    def test_mask_row_count(self, kitchen_level):
        with pytest.raises(InvalidLevelError, match="mask has 2 rows"):
            validate_level(kitchen_level.model_copy(update={"mask": kitchen_level.mask[:2]}))

    def test_mask_column_count(self, kitchen_level):
        mask = [row[:-1] for row in kitchen_level.mask]
        with pytest.raises(InvalidLevelError, match="mask row has 5 columns"):
            validate_level(kitchen_level.model_copy(update={"mask": mask}))

    def test_empty_letters(self, kitchen_level):
        with pytest.raises(InvalidLevelError, match="empty letter pool"):
            validate_level(kitchen_level.model_copy(update={"letters": []}))

    def test_no_targets(self, kitchen_level):
        with pytest.raises(InvalidLevelError, match="no target words"):
            validate_level(kitchen_level.model_copy(update={"target_words": []}))

    def test_coordinate_count_mismatch(self, kitchen_level):
        targets = [TargetWord(word="HOT", coords=[(0, 1), (1, 1)])]
        with pytest.raises(InvalidLevelError, match="word length mismatch for HOT"):
            validate_level(kitchen_level.model_copy(update={"target_words": targets}))

    def test_out_of_bounds(self, kitchen_level):
        targets = [TargetWord(word="HOT", coords=[(0, 1), (1, 1), (3, 1)])]
        with pytest.raises(InvalidLevelError, match="out of bounds"):
            validate_level(kitchen_level.model_copy(update={"target_words": targets}))

    def test_blocked_cell(self, kitchen_level):
        targets = [TargetWord(word="HOT", coords=[(0, 4), (1, 4), (2, 4)])]
        with pytest.raises(InvalidLevelError, match="not playable"):
            validate_level(kitchen_level.model_copy(update={"target_words": targets}))

    def test_error_carries_level_id(self, kitchen_level):
        with pytest.raises(InvalidLevelError) as exc_info:
            validate_level(kitchen_level.model_copy(update={"letters": []}))
        assert exc_info.value.level_id == 2
        assert str(exc_info.value).startswith("Level 2:")


class TestLevelConfig:
    """Test authored level configuration."""

    def test_words_normalized(self):
        config = LevelConfig(title="Test", words=[{"word": " chop "}, "hot"])
        assert [w.word for w in config.words] == ["CHOP", "HOT"]

    def test_duplicate_words_rejected(self):
        with pytest.raises(ValidationError):
            LevelConfig(title="Test", words=["HOT", "hot"])

    def test_empty_words_rejected(self):
        with pytest.raises(ValidationError):
            LevelConfig(title="Test", words=[])

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            LevelConfig(title="Test", difficulty="extreme", words=["HOT"])


class TestLevelLibrary:
    """Test loading levels from YAML."""

    def test_bundled_levels_all_valid(self):
        """Every bundled level generates and validates."""
        library = LevelLibrary.from_yaml()

        assert library.total_levels() == 20
        for level_id in library.level_ids():
            level = library.load_level(level_id)
            validate_level(level)
            assert level.level_id == level_id

    def test_load_level_cached(self):
        library = LevelLibrary.from_yaml()
        assert library.load_level(1) is library.load_level(1)

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "levels.yaml"
        path.write_text(
            "levels:\n"
            "  3:\n"
            "    title: Kitchen\n"
            "    difficulty: easy\n"
            "    words: [CHOP, HOT, POT, TOP]\n"
            "  1:\n"
            "    title: Shine\n"
            "    extra_words_allowed: false\n"
            "    words:\n"
            "      - {word: SHINE, meaning: To look well}\n"
            "      - {word: HEN, meaning: A female chicken}\n"
        )
        library = LevelLibrary.from_yaml(path)

        assert library.level_ids() == [1, 3]
        level = library.load_level(1)
        assert level.extra_words_allowed is False
        assert level.target_words[0].meaning == "To look well"
        assert library.get_next_level_id(1) == 3
        assert library.get_next_level_id(3) is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidLevelError, match="not found"):
            LevelLibrary.from_yaml(tmp_path / "nope.yaml")

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "levels.yaml"
        path.write_text("levels: [unclosed\n")
        with pytest.raises(InvalidLevelError, match="Could not parse"):
            LevelLibrary.from_yaml(path)

    def test_missing_levels_key(self):
        with pytest.raises(InvalidLevelError, match="'levels' mapping"):
            LevelLibrary.from_dict({"stages": {}})

    def test_non_integer_id(self):
        with pytest.raises(InvalidLevelError, match="not an integer") as exc_info:
            LevelLibrary.from_dict({"levels": {"first": {"title": "X", "words": ["HOT"]}}})
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True

    def test_invalid_config(self):
        with pytest.raises(InvalidLevelError) as exc_info:
            LevelLibrary.from_dict({"levels": {4: {"title": "X", "words": []}}})
        assert exc_info.value.level_id == 4

    def test_unknown_level(self):
        library = LevelLibrary.from_yaml()
        with pytest.raises(InvalidLevelError, match="Level 99 not found"):
            library.load_level(99)
