"""Shared fixtures: small levels and dictionaries built in memory."""

import pytest

from wordwheel.dictionary import Dictionary
from wordwheel.levels import assemble_level


KITCHEN_WORDS = ["CHOP", "HOT", "POT", "TOP"]
SHINE_WORDS = ["SHINE", "SHE", "HEN", "HIS"]


@pytest.fixture
def kitchen_level():
    """CHOP/HOT/POT/TOP: letters C H O P T on a 3x6 grid."""
    return assemble_level(2, KITCHEN_WORDS, title="Kitchen", difficulty="easy")


@pytest.fixture
def shine_level():
    """SHINE/SHE/HEN/HIS: letters S H I N E on a 4x5 grid."""
    return assemble_level(5, SHINE_WORDS, title="Shine", difficulty="easy")


@pytest.fixture
def kitchen_dictionary():
    return Dictionary.from_words(KITCHEN_WORDS + ["HOP", "COT", "OPT"])


@pytest.fixture
def shine_dictionary():
    return Dictionary.from_words(SHINE_WORDS + ["SHIN", "SIN"])
