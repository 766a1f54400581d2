"""
Dictionary loading.

A dictionary is a frozenset of lowercase words. Providers hide where the words
come from so the search engine never cares:

- HunspellDictionary: a Hunspell ``.dic`` file or a plain one-word-per-line list.
- WordfreqDictionary: the most frequent words of a wordfreq language list.
- StaticDictionary:   words handed over by the caller.

default_provider() is used when the caller supplies nothing:
$ACRONAME_DICTIONARY, then a system Hunspell install, then wordfreq.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Protocol, Union, runtime_checkable

from wordfreq import top_n_list

from . import config as CFG
from .errors import MissingDictionaryResourceError

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@runtime_checkable
class DictionaryProvider(Protocol):
    def load(self) -> FrozenSet[str]: ...


def _clean_entry(raw: str) -> Optional[str]:
    """
    Turn one dictionary line into a word, or None if it should be skipped.
      "Zurich/M"   -> "zurich"
      "abbey/MS"   -> "abbey"
      "3rd/p"      -> None   (must start with a letter)
    """
    text = raw.strip()
    if not text:
        return None
    # drop affix flags ("/MS") and morphological fields ("po:noun")
    word = text.split()[0].split("/", 1)[0]
    if not word or not word[0].isalpha():
        return None
    return word.lower()

def iter_dic_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield cleaned words from .dic lines, skipping the leading entry-count line."""
    first_line = True
    for line in lines:
        if first_line:
            first_line = False
            if line.strip().isdigit():
                continue
        word = _clean_entry(line)
        if word is not None:
            yield word


class HunspellDictionary:
    """Words read from a Hunspell .dic (or plain word list) on disk."""

    def __init__(self, path: PathLike, encoding: str = CFG.ENCODING) -> None:
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> FrozenSet[str]:
        if not self.path.is_file():
            raise MissingDictionaryResourceError(f"dictionary file not found: {self.path}")
        with self.path.open("r", encoding=self.encoding, errors="ignore") as f:
            words = frozenset(iter_dic_words(f))
        log.info("Loaded %d words from %s", len(words), self.path)
        return words

    def __repr__(self) -> str:
        return f"HunspellDictionary({str(self.path)!r})"


class StaticDictionary:
    """Caller-supplied words, lowercased and stripped."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words = frozenset(w.strip().lower() for w in words if w and w.strip())

    def load(self) -> FrozenSet[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)


class WordfreqDictionary:
    """The `limit` most frequent words of a wordfreq language list."""

    def __init__(self, lang: str = CFG.WORDFREQ_LANG, limit: int = CFG.WORDFREQ_LIMIT,
                 wordlist: str = CFG.WORDFREQ_WORDLIST) -> None:
        self.lang = lang
        self.limit = limit
        self.wordlist = wordlist

    def load(self) -> FrozenSet[str]:
        top_words = top_n_list(self.lang, self.limit, wordlist=self.wordlist)
        words = frozenset(w for w in (_clean_entry(t) for t in top_words) if w is not None)
        log.info("Loaded %d words from wordfreq (%s, %s)", len(words), self.lang, self.wordlist)
        return words

    def __repr__(self) -> str:
        return f"WordfreqDictionary({self.lang!r}, limit={self.limit})"


DictionarySource = Union[None, DictionaryProvider, PathLike, Iterable[str]]


def default_dictionary_path() -> Optional[Path]:
    """
    Resolve a Hunspell file for the default dictionary, or None.

    An explicit $ACRONAME_DICTIONARY must exist; otherwise the first system
    Hunspell file found wins.
    """
    env = os.environ.get(CFG.DICTIONARY_ENV)
    if env:
        p = Path(env).expanduser()
        if not p.is_file():
            raise MissingDictionaryResourceError(
                f"{CFG.DICTIONARY_ENV}={env} does not point to a file"
            )
        return p
    for p in CFG.SYSTEM_DICTIONARY_PATHS:
        if p.is_file():
            return p
    return None

def default_provider() -> DictionaryProvider:
    path = default_dictionary_path()
    if path is None:
        log.info("No Hunspell dictionary found; using wordfreq")
        return WordfreqDictionary()
    return HunspellDictionary(path)

def coerce_provider(dictionary: DictionarySource) -> DictionaryProvider:
    """
    Accept whatever callers pass as `dictionary`:
      None                -> default provider
      DictionaryProvider  -> as is
      str / Path          -> HunspellDictionary(path)
      iterable of words   -> StaticDictionary
    """
    if dictionary is None:
        return default_provider()
    if isinstance(dictionary, DictionaryProvider):
        return dictionary
    if isinstance(dictionary, (str, os.PathLike)):
        return HunspellDictionary(dictionary)
    return StaticDictionary(dictionary)
