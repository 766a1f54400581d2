"""
Exceptions and outcome types shared by the acroname engine.

Only `SearchTimeoutNotice` is returned rather than raised: running out of time
while looking for an acronym is an expected result, not a crash.
"""
from __future__ import annotations
from dataclasses import dataclass


class AcronameError(Exception):
    """Base class for every error raised by this package."""


class EmptyInputError(AcronameError, ValueError):
    """Normalization left no usable words."""


class MissingDictionaryResourceError(AcronameError, FileNotFoundError):
    """The dictionary word list could not be located."""


class SearchTimeout(AcronameError):
    """Raised by the search loop when its deadline passes without a match."""

    def __init__(self, timeout: float, attempts: int = 0) -> None:
        super().__init__(f"no candidate after {attempts} attempts in {timeout:g}s")
        self.timeout = timeout
        self.attempts = attempts


@dataclass(frozen=True, slots=True)
class SearchTimeoutNotice:
    """
    Result of an acronym() call whose search ran out of time.

    Falsy, so `if result:` reads naturally at call sites.
    """
    timeout: float
    attempts: int = 0

    @property
    def message(self) -> str:
        return (
            f"Unable to find viable acronym in 'timeout' specified "
            f"({self.timeout:g} seconds) ... "
        )

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message
