from __future__ import annotations
import logging
import random
import time
from typing import Callable, Iterable, List, Optional, Sequence

from . import config as CFG
from .errors import SearchTimeout
from .models import Candidate, NormalizedInput, SearchConfig

log = logging.getLogger(__name__)

Clock = Callable[[], float]


# /* ~~~ bias sampling toward word starts, like a human-made acronym ~~~ */
def selection_weights(words_len: Sequence[int]) -> List[float]:
    """
    Weight per position of the collapsed stream:
      word starts -> 0.9, everything else -> 0.1, position 0 -> 0.95.
    """
    total = sum(words_len)
    weights = [CFG.BASE_WEIGHT] * total
    pos = 0
    for n in words_len:
        weights[pos] = CFG.WORD_START_WEIGHT
        pos += n
    if weights:
        weights[0] = CFG.LEADING_WEIGHT
    return weights


class WeightedSampler:
    """
    Weighted sampling without replacement over positions 0..n-1.

    Each draw walks the cumulative weights of the positions still in play and
    removes the one it lands on. Only rng.random() is consumed, so a seeded
    Random reproduces the same draws.
    """

    def __init__(self, weights: Sequence[float], rng: Optional[random.Random] = None) -> None:
        assert all(w > 0 for w in weights), "selection weights must be positive"
        self._weights = list(weights)
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._weights)

    def draw(self, k: int) -> List[int]:
        """Return k distinct positions in draw order."""
        if k > len(self._weights):
            raise ValueError(f"cannot draw {k} positions from {len(self._weights)}")
        pool = list(range(len(self._weights)))
        pool_w = list(self._weights)
        total = sum(pool_w)
        out: List[int] = []
        for _ in range(k):
            r = self._rng.random() * total
            acc = 0.0
            j = len(pool) - 1  # float rounding can leave r just past the last bucket
            for i, w in enumerate(pool_w):
                acc += w
                if r < acc:
                    j = i
                    break
            out.append(pool.pop(j))
            total -= pool_w.pop(j)
        return out


def render_suffix(words: Sequence[str], selected: Iterable[int]) -> str:
    """
    Lowercase every word, uppercase the characters at `selected` positions of
    the collapsed stream, and join the words with single spaces.
    """
    chosen = set(selected)
    parts: List[str] = []
    pos = 0
    for word in words:
        chars = []
        for ch in word:
            chars.append(ch.upper() if pos in chosen else ch.lower())
            pos += 1
        parts.append("".join(chars))
    return " ".join(parts)

def build_candidate(normalized: NormalizedInput, positions: Sequence[int]) -> Candidate:
    """Candidate for a set of selected positions, letters taken in stream order."""
    ordered = sorted(positions)
    prefix = "".join(normalized.collapsed[i] for i in ordered).upper()
    suffix = render_suffix(normalized.words, ordered)
    return Candidate(formatted=f"{prefix}: {suffix}", prefix=prefix, suffix=suffix)


def find_candidate(normalized: NormalizedInput,
                   search: SearchConfig,
                   *,
                   rng: Optional[random.Random] = None,
                   clock: Clock = time.monotonic) -> Candidate:
    """
    Generate-and-test until a dictionary word turns up or the deadline passes.

    Every attempt draws `acronym_length` weighted positions, reads the letters
    back in stream order (not draw order), and checks the lowercase word
    against the dictionary. The deadline covers the whole loop and is checked
    before each attempt; on expiry SearchTimeout is raised and nothing is kept.
    """
    collapsed = normalized.collapsed
    k = search.acronym_length
    if k > len(collapsed):
        raise ValueError(
            f"acronym_length={k} exceeds the {len(collapsed)} characters available"
        )
    weights = search.weights or tuple(selection_weights(normalized.words_len))
    assert len(weights) == len(collapsed), "one weight per collapsed character"

    sampler = WeightedSampler(weights, rng)
    dictionary = search.dictionary
    # one entry per position: "İ".lower() is two code points
    lowered = [ch.lower() for ch in collapsed]

    start = clock()
    deadline = start + search.timeout
    attempts = 0
    while clock() < deadline:
        attempts += 1
        positions = sorted(sampler.draw(k))
        word = "".join(lowered[i] for i in positions)
        if word in dictionary:
            log.debug("Found %r after %d attempts (%.3fs)", word, attempts, clock() - start)
            return build_candidate(normalized, positions)

    log.debug("Search gave up after %d attempts", attempts)
    raise SearchTimeout(search.timeout, attempts)
