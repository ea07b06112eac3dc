from __future__ import annotations

from typing import AbstractSet, Iterator


DEFAULT_SEPARATORS = " \t\n\r,.-;*`/\"@#$%&()[]"


def make_separators(chars: str = DEFAULT_SEPARATORS) -> frozenset[str]:
    return frozenset(chars)


def next_word_or_separator(text: str, position: int, separators: AbstractSet[str]) -> str:
    """Return the maximal word or separator run in `text` starting at `position`.

    A run is either all separator characters or all non-separator characters;
    it ends at the first character of the other class or at the end of `text`.
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} out of range for text of length {len(text)}")

    is_sep = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_sep:
        end += 1
    return text[position:end]


def iter_tokens(text: str, separators: AbstractSet[str]) -> Iterator[str]:
    pos = 0
    while pos < len(text):
        tok = next_word_or_separator(text, pos, separators)
        pos += len(tok)
        yield tok


def is_separator_token(token: str, separators: AbstractSet[str]) -> bool:
    # Runs are homogeneous, so the first character decides.
    return bool(token) and token[0] in separators
