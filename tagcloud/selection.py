from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping


@dataclass(frozen=True)
class Selection:
    """Top-N words in alphabetical order, with the count range among them."""

    words: tuple[tuple[str, int], ...] = ()
    min_count: int = 0
    max_count: int = 0

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self.words)


def by_count_desc(counts: Mapping[str, int]) -> list[tuple[str, int]]:
    # Equal counts fall back to alphabetical order so output never depends on
    # table iteration order.
    items = [(k, int(v)) for k, v in counts.items()]
    items.sort(key=lambda kv: (-kv[1], kv[0]))
    return items


def select_top(counts: Mapping[str, int], n: int) -> Selection:
    n = int(n)
    if n < 0:
        raise ValueError("n must be >= 0")
    if n == 0 or not counts:
        return Selection()

    taken: list[tuple[str, int]] = []
    lo = hi = 0
    for word, cnt in by_count_desc(counts)[:n]:
        if not taken:
            lo = hi = cnt
        elif cnt > hi:
            hi = cnt
        elif cnt < lo:
            lo = cnt
        taken.append((word, cnt))

    taken.sort(key=lambda kv: (kv[0].lower(), kv[0]))
    return Selection(words=tuple(taken), min_count=lo, max_count=hi)
