from __future__ import annotations
import math
import random
from typing import Iterable, List, Optional, Sequence, Union

from . import config as CFG
from .errors import EmptyInputError
from .models import NormalizedInput

TextInput = Union[str, Sequence[str]]


def _is_word_char(ch: str) -> bool:
    """Letters and digits are kept. Symbols/punctuation are dropped when alnum_only is set."""
    return ch.isalnum()

def _alnum(word: str) -> str:
    return "".join(ch for ch in word if _is_word_char(ch))

def _is_article(word: str) -> bool:
    # "The," and "(a)" still count; only the letters are compared
    return _alnum(word).casefold() in CFG.ARTICLES

def split_words(text: TextInput) -> List[str]:
    """Split one string or a sequence of strings into words on whitespace."""
    if isinstance(text, str):
        chunks: Iterable[str] = [text]
    else:
        chunks = text
    words: List[str] = []
    for chunk in chunks:
        words.extend(chunk.split())
    return words

def sample_words(words: Sequence[str], proportion: float,
                 rng: Optional[random.Random] = None) -> List[str]:
    """
    Keep ceil(proportion * len(words)) words chosen uniformly without
    replacement. Survivors stay in their original relative order.
    """
    if not 0 < proportion <= 1:
        raise ValueError(f"bow_proportion must be in (0, 1], got {proportion}")
    rng = rng or random.Random()
    k = math.ceil(proportion * len(words))
    keep = sorted(rng.sample(range(len(words)), k))
    return [words[i] for i in keep]

def mince(text: TextInput,
          ignore_articles: bool = CFG.IGNORE_ARTICLES,
          alnum_only: bool = CFG.ALNUM_ONLY,
          bag_of_words: bool = False,
          bow_proportion: float = CFG.BOW_PROPORTION,
          rng: Optional[random.Random] = None) -> NormalizedInput:
    """
    Normalize raw text into the character stream both engines work on.
    Rules, applied in order:
      * split on whitespace (a sequence of strings is treated as one text)
      * ignore_articles: drop "a", "an", "the" (case-insensitive)
      * alnum_only: strip every non-alphanumeric character; words left empty are dropped
      * bag_of_words: keep a random ceil(bow_proportion * n) subset, order preserved
    Raises EmptyInputError when no words survive.
    """
    words = split_words(text)
    if ignore_articles:
        words = [w for w in words if not _is_article(w)]
    if alnum_only:
        words = [_alnum(w) for w in words]
        words = [w for w in words if w]
    if not words:
        raise EmptyInputError(f"no usable words in input {text!r}")
    if bag_of_words:
        words = sample_words(words, bow_proportion, rng)

    return NormalizedInput(
        collapsed="".join(words),
        words=tuple(words),
        words_len=tuple(len(w) for w in words),
        first_chars=tuple(w[0] for w in words),
    )
