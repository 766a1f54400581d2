# src/acroname/models.py
"""
Data models for the acroname engine.

This module defines four small, focused data containers:

- NormalizedInput: the minced form of the caller's text, shared by both modes.
- SearchConfig: the knobs of one acronym search.
- Candidate: a generated acronym/initialism with its display strings.
- ResultRecord: the table row returned when the caller asks for a table.

These classes do not contain business logic; they only structure the data so
that normalizing, searching, and formatting remain simple and predictable.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple


@dataclass(frozen=True, slots=True)
class NormalizedInput:
    """
    Canonical character stream produced by mince().

    Attributes
    ----------
    collapsed : str
        All retained words concatenated, with no separators.
    words : Tuple[str, ...]
        The retained words, in input order, after article/punctuation
        filtering and optional bag-of-words sampling.
    words_len : Tuple[int, ...]
        Length of each retained word; sums to len(collapsed).
    first_chars : Tuple[str, ...]
        First character of each retained word.
    """
    collapsed: str
    words: Tuple[str, ...]
    words_len: Tuple[int, ...]
    first_chars: Tuple[str, ...]

    def __post_init__(self) -> None:
        assert sum(self.words_len) == len(self.collapsed), "words_len must cover collapsed"
        assert len(self.words) == len(self.words_len) == len(self.first_chars)

    @property
    def first_char_positions(self) -> Tuple[int, ...]:
        """0-based index in `collapsed` where each word starts."""
        out = []
        pos = 0
        for n in self.words_len:
            out.append(pos)
            pos += n
        return tuple(out)

    @property
    def last_char_positions(self) -> Tuple[int, ...]:
        """0-based index in `collapsed` of each word's final character."""
        return tuple(p + n - 1 for p, n in zip(self.first_char_positions, self.words_len))

    @property
    def original(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """
    Parameters for one acronym search.

    Attributes
    ----------
    acronym_length : int
        Number of characters in the acronym.
    dictionary : FrozenSet[str]
        Lowercase words a candidate must belong to.
    timeout : float
        Wall-clock seconds allowed for the whole search loop.
    weights : Tuple[float, ...]
        Selection weight for every position of the collapsed stream. Empty
        means "derive from the input" (see search.selection_weights).
    """
    acronym_length: int
    dictionary: FrozenSet[str]
    timeout: float
    weights: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.acronym_length < 1:
            raise ValueError(f"acronym_length must be positive, got {self.acronym_length}")
        if not self.timeout > 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    A generated name.

    Attributes
    ----------
    formatted : str
        "<PREFIX>: <suffix>", the single-string form shown to users.
    prefix : str
        The acronym or initialism, uppercased.
    suffix : str
        The retained words with the letters used in `prefix` capitalized.
    """
    formatted: str
    prefix: str
    suffix: str


@dataclass(frozen=True, slots=True)  # frozen=True so rows can be shared; column order is the table order
class ResultRecord:
    """
    One packaged output row.

    `original` is the space-joined retained words the candidate was built from.
    """
    formatted: str
    prefix: str
    suffix: str
    original: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "formatted": self.formatted,
            "prefix": self.prefix,
            "suffix": self.suffix,
            "original": self.original,
        }
