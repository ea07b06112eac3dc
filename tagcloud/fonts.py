from __future__ import annotations


MIN_FONT_SIZE = 11
MAX_FONT_SIZE = 47


def font_size(count: int, min_count: int, max_count: int) -> int:
    """Map `count` linearly from [min_count, max_count] onto the font range.

    When every selected word shares one count the smallest size is used.
    """
    if not min_count <= count <= max_count:
        raise ValueError(f"count {count} outside [{min_count}, {max_count}]")
    if max_count == min_count:
        return MIN_FONT_SIZE
    span = MAX_FONT_SIZE - MIN_FONT_SIZE
    return MIN_FONT_SIZE + (count - min_count) * span // (max_count - min_count)


def font_class(size: int) -> str:
    return f"f{int(size)}"
