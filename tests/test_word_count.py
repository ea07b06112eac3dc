from __future__ import annotations

from tagcloud.word_count import MAX_WORD_COUNT, parse_word_count


def test_parse_word_count_plain_number() -> None:
    wc = parse_word_count(" 12 ")
    assert wc.value == 12
    assert wc.warnings == []


def test_parse_word_count_zero() -> None:
    assert parse_word_count("0").value == 0


def test_parse_word_count_non_numeric_defaults_to_zero() -> None:
    wc = parse_word_count("lots")
    assert wc.value == 0
    assert len(wc.warnings) == 1


def test_parse_word_count_unreadable_defaults_to_zero() -> None:
    wc = parse_word_count(None)
    assert wc.value == 0
    assert wc.warnings


def test_parse_word_count_negative_warns_and_clamps() -> None:
    wc = parse_word_count("-5")
    assert wc.value == 0
    assert "positive" in wc.warnings[0]


def test_parse_word_count_too_large_warns_and_clamps() -> None:
    wc = parse_word_count(str(MAX_WORD_COUNT + 1))
    assert wc.value == MAX_WORD_COUNT
    assert "lesser than" in wc.warnings[0]
