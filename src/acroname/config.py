from __future__ import annotations
import os
from pathlib import Path

# engine defaults
ACRONYM_LENGTH: int = 3
TIMEOUT: float = 60.0          # seconds, wall-clock budget for one acronym search
BOW_PROPORTION: float = 0.5
IGNORE_ARTICLES: bool = True
ALNUM_ONLY: bool = True

# words dropped when ignore_articles=True (compared case-insensitively)
ARTICLES = frozenset({"a", "an", "the"})

# /* ~~~ per-position selection weights for the candidate search ~~~ */
BASE_WEIGHT: float = 0.1        # any character
WORD_START_WEIGHT: float = 0.9  # first character of each word
LEADING_WEIGHT: float = 0.95    # position 0 of the collapsed stream (overrides the above)

# dictionary lookup order: $ACRONAME_DICTIONARY -> system hunspell -> wordfreq
DICTIONARY_ENV = "ACRONAME_DICTIONARY"
SYSTEM_DICTIONARY_PATHS = (
    Path("/usr/share/hunspell/en_US.dic"),
    Path("/usr/share/myspell/en_US.dic"),
    Path("/usr/share/myspell/dicts/en_US.dic"),
    Path("/Library/Spelling/en_US.dic"),
)
# wordfreq fallback: most frequent words of the "best" English list
WORDFREQ_LANG = "en"
WORDFREQ_WORDLIST = "best"
WORDFREQ_LIMIT = 150_000
ENCODING = "utf-8"

# logging (set ACRONAME_VERBOSE=1 to enable INFO output from entry points)
VERBOSE_ENV = "ACRONAME_VERBOSE"
VERBOSE = os.environ.get(VERBOSE_ENV) == "1"

# web frontend
HOST = "127.0.0.1"
PORT = 8000
