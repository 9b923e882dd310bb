"""
Word lookup backed by a CSV word list.

CSV columns: word,variants,meaning,language_tag,difficulty[,notes]
Variants are '|'-separated; each one validates to the row's canonical word.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..errors import DictionaryLoadError
from .models import DictionaryEntry


logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = Path(__file__).parent / "data" / "dictionary.csv"

_DIFFICULTIES = ("easy", "medium", "hard")


def normalize(word: str) -> str:
    return word.upper().strip()


class Dictionary:
    """
    An owned dictionary index, passed explicitly to the session.

    Attributes:
        index: Maps every canonical form and variant to its entry
    """

    def __init__(self, index: Optional[Dict[str, DictionaryEntry]] = None):
        self.index: Dict[str, DictionaryEntry] = dict(index or {})

    @classmethod
    def from_entries(cls, entries: Iterable[DictionaryEntry]) -> "Dictionary":
        index: Dict[str, DictionaryEntry] = {}
        for entry in entries:
            index[entry.canonical] = entry
            for variant in entry.variants:
                # First registration wins on collisions
                index.setdefault(variant, entry)
        return cls(index=index)

    @classmethod
    def from_words(cls, words: Iterable[Union[str, Tuple[str, str]]]) -> "Dictionary":
        """Build a dictionary from bare words or (word, meaning) pairs."""
        entries = []
        for item in words:
            word, meaning = (item, "") if isinstance(item, str) else item
            canonical = normalize(word)
            entries.append(DictionaryEntry(canonical=canonical, variants=[canonical], meaning=meaning))
        return cls.from_entries(entries)

    @classmethod
    def from_csv_text(cls, content: str) -> "Dictionary":
        """Parse CSV content (with a header row) into a dictionary."""
        entries: List[DictionaryEntry] = []
        reader = csv.reader(io.StringIO(content.strip()))

        for line_no, parts in enumerate(reader, start=1):
            if line_no == 1 or not any(p.strip() for p in parts):
                continue
            if len(parts) < 5:
                logger.warning("Skipping dictionary line %d: expected 5+ fields, got %d", line_no, len(parts))
                continue

            word, variants_str, meaning, language_tag, difficulty = parts[:5]
            canonical = normalize(word)
            if not canonical:
                logger.warning("Skipping dictionary line %d: empty word", line_no)
                continue

            variants = [normalize(v) for v in variants_str.split("|") if v.strip()]
            if canonical not in variants:
                variants.insert(0, canonical)

            difficulty = difficulty.strip().lower()
            entries.append(DictionaryEntry(
                canonical=canonical,
                variants=variants,
                meaning=meaning.strip(),
                language_tag=language_tag.strip(),
                difficulty=difficulty if difficulty in _DIFFICULTIES else "medium",
            ))

        return cls.from_entries(entries)

    @classmethod
    def from_csv(cls, path: Optional[str | Path] = None) -> "Dictionary":
        """Load a dictionary CSV (defaults to the bundled one)."""
        path = Path(path) if path else DEFAULT_DICTIONARY_PATH
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DictionaryLoadError(f"Failed to load dictionary {path}: {e}") from e

        dictionary = cls.from_csv_text(content)
        logger.debug("Loaded %d dictionary entries from %s", len(dictionary), path)
        return dictionary

    def validate(self, word: str) -> Optional[str]:
        """Return the canonical form of `word`, or None if it is not a word."""
        entry = self.index.get(normalize(word))
        return entry.canonical if entry else None

    def entry(self, word: str) -> Optional[DictionaryEntry]:
        return self.index.get(normalize(word))

    def meaning(self, word: str) -> Optional[str]:
        entry = self.entry(word)
        return entry.meaning if entry and entry.meaning else None

    def variants(self, word: str) -> List[str]:
        entry = self.entry(word)
        return list(entry.variants) if entry else []

    def stats(self) -> Dict[str, int]:
        canonicals = {e.canonical: e for e in self.index.values()}
        return {
            "total_entries": len(canonicals),
            "total_variants": sum(len(e.variants) for e in canonicals.values()),
        }

    def __contains__(self, word: str) -> bool:
        return self.validate(word) is not None

    def __len__(self) -> int:
        return len({e.canonical for e in self.index.values()})
