"""Test dictionary loading and lookup."""

import pytest

from wordwheel.dictionary import Dictionary, DictionaryEntry
from wordwheel.errors import DictionaryLoadError


CSV = """word,variants,meaning,language_tag,difficulty,notes
OGA,OGAH,Boss or person in charge,pidgin,easy,
sabi,SABBI|SAABI,To know or understand,pidgin,easy,common
HOT,,Having a high temperature,en,scorching,
BROKEN,LINE
"""


class TestCsvLoading:
    """Test parsing the CSV word list."""

    def test_canonical_and_variants(self):
        dictionary = Dictionary.from_csv_text(CSV)

        assert dictionary.validate("OGA") == "OGA"
        assert dictionary.validate("ogah") == "OGA"
        assert dictionary.validate("Saabi") == "SABI"
        assert dictionary.validate(" sabbi ") == "SABI"

    def test_short_rows_skipped(self):
        dictionary = Dictionary.from_csv_text(CSV)
        assert "BROKEN" not in dictionary
        assert len(dictionary) == 3

    def test_unknown_difficulty_defaults(self):
        dictionary = Dictionary.from_csv_text(CSV)
        assert dictionary.entry("HOT").difficulty == "medium"

    def test_entry_fields(self):
        entry = Dictionary.from_csv_text(CSV).entry("sabbi")
        assert entry.canonical == "SABI"
        assert entry.variants == ["SABI", "SABBI", "SAABI"]
        assert entry.language_tag == "pidgin"

    def test_stats(self):
        stats = Dictionary.from_csv_text(CSV).stats()
        assert stats == {"total_entries": 3, "total_variants": 6}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryLoadError):
            Dictionary.from_csv(tmp_path / "missing.csv")

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text(CSV, encoding="utf-8")
        assert Dictionary.from_csv(path).validate("ogah") == "OGA"


class TestLookup:
    """Test lookups on an in-memory dictionary."""

    def test_unknown_word(self):
        dictionary = Dictionary.from_words(["HOT"])
        assert dictionary.validate("HAT") is None
        assert "HAT" not in dictionary

    def test_meaning(self):
        dictionary = Dictionary.from_words([("hot", "Warm"), "POT"])
        assert dictionary.meaning("HOT") == "Warm"
        assert dictionary.meaning("POT") is None
        assert dictionary.meaning("XYZ") is None

    def test_variants(self):
        dictionary = Dictionary.from_entries([
            DictionaryEntry(canonical="MOLD", variants=["MOLD", "MOULD"]),
        ])
        assert dictionary.variants("mould") == ["MOLD", "MOULD"]
        assert dictionary.variants("XYZ") == []

    def test_first_variant_registration_wins(self):
        dictionary = Dictionary.from_entries([
            DictionaryEntry(canonical="COLOR", variants=["COLOR", "COLOUR"]),
            DictionaryEntry(canonical="HUE", variants=["HUE", "COLOUR"]),
        ])
        assert dictionary.validate("COLOUR") == "COLOR"

    def test_canonical_overrides_variant(self):
        """A word's own entry wins over another word's variant."""
        dictionary = Dictionary.from_entries([
            DictionaryEntry(canonical="NAIJA", variants=["NAIJA", "NIJA"]),
            DictionaryEntry(canonical="NIJA", variants=["NIJA"]),
        ])
        assert dictionary.validate("NIJA") == "NIJA"


class TestBundledDictionary:
    """The bundled dictionary covers every bundled level word."""

    def test_level_words_present(self):
        from wordwheel.levels import LevelLibrary

        dictionary = Dictionary.from_csv()
        library = LevelLibrary.from_yaml()

        for config in library.configs.values():
            for spec in config.words:
                assert dictionary.validate(spec.word) == spec.word

    def test_variant_spellings(self):
        dictionary = Dictionary.from_csv()
        assert dictionary.validate("OGAH") == "OGA"
        assert dictionary.validate("MOULD") == "MOLD"
