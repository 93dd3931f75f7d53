"""Tests for the Range value object."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from gcloudkit import Range


def test_creates_inclusive_range():
    range_ = Range(1, 100)

    assert range_.begin == 1
    assert range_.end == 100
    assert range_.exclude_begin is False
    assert range_.exclude_end is False


def test_creates_exclusive_range():
    range_ = Range(1, 100, exclude_begin=True, exclude_end=True)

    assert range_.begin == 1
    assert range_.end == 100
    assert range_.exclude_begin is True
    assert range_.exclude_end is True


def test_creates_range_that_excludes_beginning():
    range_ = Range(1, 100, exclude_begin=True)

    assert range_.begin == 1
    assert range_.end == 100
    assert range_.exclude_begin is True
    assert range_.exclude_end is False


def test_creates_range_that_excludes_ending():
    range_ = Range(1, 100, exclude_end=True)

    assert range_.begin == 1
    assert range_.end == 100
    assert range_.exclude_begin is False
    assert range_.exclude_end is True


def test_accepts_begin_greater_than_end():
    """Ranges are parameter carriers; no ordering is enforced."""
    range_ = Range(100, 1)

    assert range_.begin == 100
    assert range_.end == 1


def test_holds_timestamps():
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    stop = datetime(2025, 2, 1, tzinfo=timezone.utc)

    range_ = Range(start, stop, exclude_end=True)

    assert range_.begin is start
    assert range_.end is stop


def test_flags_are_keyword_only():
    with pytest.raises(TypeError):
        Range(1, 100, True)  # type: ignore[misc]


def test_is_immutable():
    range_ = Range(1, 100)

    with pytest.raises(FrozenInstanceError):
        range_.begin = 2  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        range_.exclude_end = True  # type: ignore[misc]


def test_repeated_reads_are_stable():
    range_ = Range("a", "z", exclude_begin=True)

    for _ in range(3):
        assert range_.begin == "a"
        assert range_.end == "z"
        assert range_.exclude_begin is True
        assert range_.exclude_end is False


def test_equal_ranges_compare_and_hash_equal():
    assert Range(1, 100, exclude_end=True) == Range(1, 100, exclude_end=True)
    assert Range(1, 100) != Range(1, 100, exclude_end=True)
    assert len({Range(1, 100), Range(1, 100)}) == 1


def test_str_uses_bracket_notation():
    assert str(Range(1, 100)) == "[1, 100]"
    assert str(Range(1, 100, exclude_begin=True)) == "(1, 100]"
    assert str(Range(1, 100, exclude_end=True)) == "[1, 100)"
    assert str(Range("a", "b", exclude_begin=True, exclude_end=True)) == "('a', 'b')"
