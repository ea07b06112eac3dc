from __future__ import annotations

import sys
from dataclasses import dataclass, field


MAX_WORD_COUNT = sys.maxsize


@dataclass(frozen=True)
class WordCount:
    value: int
    warnings: list[str] = field(default_factory=list)


def parse_word_count(raw: str | None) -> WordCount:
    """Parse a requested word count without ever refusing it.

    Unreadable or non-numeric input counts as 0. Out-of-range values are
    clamped into [0, MAX_WORD_COUNT]. Every adjustment is reported in
    `warnings`.
    """
    if raw is None:
        return WordCount(0, ["Could not read the number of words; using 0."])

    s = str(raw).strip()
    try:
        n = int(s)
    except ValueError:
        return WordCount(0, [f"Not a whole number: {s!r}; using 0."])

    if n < 0:
        return WordCount(0, ["You must enter a positive number of words; using 0."])
    if n > MAX_WORD_COUNT:
        return WordCount(
            MAX_WORD_COUNT,
            [f"You must enter a word count lesser than {MAX_WORD_COUNT}; using {MAX_WORD_COUNT}."],
        )
    return WordCount(n)
