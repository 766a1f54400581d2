"""
Acroname: acronym and initialism generator

This package turns a phrase into a name. Two engines share one normalization
pipeline ("mince"):

- acronym(): randomized search for a real dictionary word whose letters are
  drawn, in order, from the input words, bounded by a timeout.
- initialism(): the first letter of every word, deterministically.

Main Functions:
    acronym(text, ...): dictionary-backed acronym, or a SearchTimeoutNotice
    initialism(text, ...): first-letter initialism
    mince(text, ...): the normalized character stream both engines use

Example Usage:
    from acroname import acronym, initialism

    initialism("the Quick brown Fox")
    # 'QBF: Quick Brown Fox'

    acronym("Cold Air Transport", dictionary=["cat", "cot"])
    # e.g. 'CAT: Cold Air Transport'

Version: 1.0.0
"""

# src/acroname/__init__.py
from .engine import Engine, acronym, initialism  # re-export
from .errors import (
    AcronameError,
    EmptyInputError,
    MissingDictionaryResourceError,
    SearchTimeoutNotice,
)
from .loader import DictionaryProvider, DictionarySource, HunspellDictionary, StaticDictionary, WordfreqDictionary
from .models import Candidate, NormalizedInput, ResultRecord
from .normalize import mince

__version__ = "1.0.0"
__all__ = [
    "acronym", "initialism", "mince", "Engine",
    "AcronameError", "EmptyInputError", "MissingDictionaryResourceError", "SearchTimeoutNotice",
    "DictionaryProvider", "DictionarySource", "HunspellDictionary", "StaticDictionary",
    "WordfreqDictionary",
    "Candidate", "NormalizedInput", "ResultRecord",
]
