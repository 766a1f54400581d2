# acroname/engine.py
from __future__ import annotations

import logging
import random
import threading
import time
from typing import FrozenSet, Optional, Union

from . import config as CFG
from .errors import SearchTimeout, SearchTimeoutNotice
from .formatting import format_initialism, package
from .loader import DictionaryProvider, DictionarySource, coerce_provider
from .models import ResultRecord, SearchConfig
from .normalize import TextInput, mince
from .search import Clock, find_candidate

log = logging.getLogger(__name__)

AcronymResult = Union[str, ResultRecord, SearchTimeoutNotice]


class Engine:
    """
    Thin orchestration layer that glues together:
      - the dictionary provider (loaded lazily, once, then shared read-only),
      - the normalizer (mince),
      - the candidate search and the initialism formatter,
      - the result packager.

    Public API (used by the module functions, CLI and Flask):
      * load():        force the dictionary load (idempotent, thread-safe)
      * acronym(...):  dictionary-backed acronym search
      * initialism(...): first letters of every word
    """

    # ------------- lifecycle -------------

    def __init__(self, dictionary: DictionarySource = None, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        self._source = dictionary           # resolved lazily; default lookup may touch the filesystem
        self._provider: Optional[DictionaryProvider] = None
        self._words: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    # /* ~~~ Load the dictionary once; concurrent first callers wait on the lock ~~~ */
    def load(self) -> FrozenSet[str]:
        words = self._words
        if words is not None:
            return words
        with self._lock:
            if self._words is None:
                self._provider = coerce_provider(self._source)
                t0 = time.perf_counter()
                self._words = self._provider.load()
                log.info("Dictionary ready: %d words in %.2fs",
                         len(self._words), time.perf_counter() - t0)
            return self._words

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self.load()

    @property
    def loaded(self) -> bool:
        return self._words is not None

    # ------------- engines -------------

    # /* ~~~ Search the dictionary for a word built from the input's letters ~~~ */
    def acronym(
        self,
        text: TextInput,
        dictionary: DictionarySource = None,      # per-call override; loaded fresh, not cached
        acronym_length: int = CFG.ACRONYM_LENGTH,
        ignore_articles: bool = CFG.IGNORE_ARTICLES,
        alnum_only: bool = CFG.ALNUM_ONLY,
        timeout: float = CFG.TIMEOUT,
        bag_of_words: bool = False,
        bow_proportion: float = CFG.BOW_PROPORTION,
        as_table: bool = False,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> AcronymResult:
        rng = rng or random.Random()
        normalized = mince(text, ignore_articles=ignore_articles, alnum_only=alnum_only,
                           bag_of_words=bag_of_words, bow_proportion=bow_proportion, rng=rng)

        words = self.load() if dictionary is None else coerce_provider(dictionary).load()
        search = SearchConfig(acronym_length=acronym_length, dictionary=words, timeout=timeout)

        if log.isEnabledFor(logging.DEBUG) and not any(len(w) == acronym_length for w in words):
            log.debug("Dictionary has no %d-letter words; search cannot succeed", acronym_length)

        try:
            candidate = find_candidate(normalized, search, rng=rng, clock=clock or time.monotonic)
        except SearchTimeout as ex:
            notice = SearchTimeoutNotice(timeout=timeout, attempts=ex.attempts)
            log.warning(notice.message)
            return notice
        return package(candidate, normalized, as_table)

    # /* ~~~ Deterministic first-letter initialism; never touches the dictionary ~~~ */
    def initialism(
        self,
        text: TextInput,
        ignore_articles: bool = CFG.IGNORE_ARTICLES,
        alnum_only: bool = CFG.ALNUM_ONLY,
        bag_of_words: bool = False,
        bow_proportion: float = CFG.BOW_PROPORTION,
        as_table: bool = False,
        *,
        rng: Optional[random.Random] = None,
    ) -> Union[str, ResultRecord]:
        normalized = mince(text, ignore_articles=ignore_articles, alnum_only=alnum_only,
                           bag_of_words=bag_of_words, bow_proportion=bow_proportion, rng=rng)
        return package(format_initialism(normalized), normalized, as_table)


# process-wide engine behind the module-level functions; the default dictionary loads on first use
_engine = Engine()


def acronym(text: TextInput, dictionary: DictionarySource = None, acronym_length: int = CFG.ACRONYM_LENGTH,
            ignore_articles: bool = CFG.IGNORE_ARTICLES, alnum_only: bool = CFG.ALNUM_ONLY,
            timeout: float = CFG.TIMEOUT, bag_of_words: bool = False,
            bow_proportion: float = CFG.BOW_PROPORTION, as_table: bool = False,
            *, rng: Optional[random.Random] = None,
            clock: Optional[Clock] = None) -> AcronymResult:
    """
    Find a dictionary word whose letters come, in order, from the input words.

    Returns the formatted string ("CAT: Cold Air Transport"), a ResultRecord
    when as_table=True, or a falsy SearchTimeoutNotice when nothing was found
    within `timeout` seconds.
    """
    return _engine.acronym(text, dictionary, acronym_length, ignore_articles, alnum_only,
                           timeout, bag_of_words, bow_proportion, as_table,
                           rng=rng, clock=clock)

def initialism(text: TextInput, ignore_articles: bool = CFG.IGNORE_ARTICLES,
               alnum_only: bool = CFG.ALNUM_ONLY, bag_of_words: bool = False,
               bow_proportion: float = CFG.BOW_PROPORTION, as_table: bool = False,
               *, rng: Optional[random.Random] = None) -> Union[str, ResultRecord]:
    """First letters of each word: initialism("the Quick brown Fox") -> "QBF: Quick Brown Fox"."""
    return _engine.initialism(text, ignore_articles, alnum_only, bag_of_words,
                              bow_proportion, as_table, rng=rng)
