"""Dictionary lookup for submitted words."""

from .models import DictionaryEntry, WordValidator
from .index import Dictionary, DEFAULT_DICTIONARY_PATH, normalize

__all__ = [
    "Dictionary",
    "DictionaryEntry",
    "WordValidator",
    "DEFAULT_DICTIONARY_PATH",
    "normalize",
]
