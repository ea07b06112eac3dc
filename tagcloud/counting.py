from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import AbstractSet, Iterable, TextIO

from .tokenizer import is_separator_token, iter_tokens


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountResult:
    counts: Counter[str]
    complete: bool = True
    error: str | None = None


def count_words(
    lines: Iterable[str],
    separators: AbstractSet[str],
    counts: Counter[str] | None = None,
) -> Counter[str]:
    """Add the lowercased words of each line to `counts` (a new Counter by default)."""
    c: Counter[str] = Counter() if counts is None else counts
    for line in lines:
        if "\n" not in separators or "\r" not in separators:
            line = line.rstrip("\r\n")
        for tok in iter_tokens(line, separators):
            if is_separator_token(tok, separators):
                continue
            c[tok.lower()] += 1
    return c


def count_file(fp: TextIO, separators: AbstractSet[str]) -> CountResult:
    """Count words from an open text stream, one line at a time.

    A read failure stops the pass; the words counted so far are kept.
    """
    counts: Counter[str] = Counter()
    lines = iter(fp)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as e:
            log.error("Error reading from file: %s", e)
            return CountResult(counts=counts, complete=False, error=str(e))
        count_words([line], separators, counts)
    log.debug("Counted %d unique words", len(counts))
    return CountResult(counts=counts)
