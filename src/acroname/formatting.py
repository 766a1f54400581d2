from __future__ import annotations
from typing import Union

from .models import Candidate, NormalizedInput, ResultRecord
from .search import render_suffix


def format_initialism(normalized: NormalizedInput) -> Candidate:
    """First letter of every word, uppercased: "quick brown fox" -> "QBF: Quick Brown Fox"."""
    prefix = "".join(normalized.first_chars).upper()
    suffix = render_suffix(normalized.words, normalized.first_char_positions)
    return Candidate(formatted=f"{prefix}: {suffix}", prefix=prefix, suffix=suffix)

def package(candidate: Candidate, normalized: NormalizedInput,
            as_table: bool = False) -> Union[str, ResultRecord]:
    """Return the formatted string, or a full ResultRecord row when as_table=True."""
    if not as_table:
        return candidate.formatted
    return ResultRecord(
        formatted=candidate.formatted,
        prefix=candidate.prefix,
        suffix=candidate.suffix,
        original=normalized.original,
    )
