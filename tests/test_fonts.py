from __future__ import annotations

import pytest

from tagcloud.fonts import MAX_FONT_SIZE, MIN_FONT_SIZE, font_class, font_size


def test_font_size_bounds() -> None:
    assert font_size(1, 1, 9) == MIN_FONT_SIZE == 11
    assert font_size(9, 1, 9) == MAX_FONT_SIZE == 47


def test_font_size_truncates() -> None:
    # 11 + (2 - 1) * 36 // 7 == 11 + 5
    assert font_size(2, 1, 8) == 16
    assert font_size(2, 1, 3) == 29


def test_font_size_degenerate_range() -> None:
    assert font_size(4, 4, 4) == 11


def test_font_size_rejects_count_outside_range() -> None:
    with pytest.raises(ValueError):
        font_size(0, 1, 3)
    with pytest.raises(ValueError):
        font_size(4, 1, 3)


def test_font_class() -> None:
    assert font_class(23) == "f23"
