"""Tests for natcmp.segmenter module."""

import pytest

from natcmp.compare_config import CompareConfig
from natcmp.segmenter import SegmentIter, is_digit, split_segments
from natcmp.types import Segment


def digits(text, start):
    return Segment(kind="digits", text=text, char_start=start, char_end=start + len(text))


def chars(text, start):
    return Segment(
        kind="characters", text=text, char_start=start, char_end=start + len(text)
    )


class TestSegmentIter:
    """Tests for the lazy segment iterator."""

    def test_empty_string(self):
        assert next(SegmentIter(""), None) is None

    def test_single_element_strings(self):
        assert next(SegmentIter("123")) == digits("123", 0)
        assert next(SegmentIter("xyz")) == chars("xyz", 0)

    def test_digits_then_characters(self):
        it = SegmentIter("12xy")
        assert next(it) == digits("12", 0)
        assert next(it) == chars("xy", 2)
        assert next(it, None) is None

    def test_characters_then_digits(self):
        it = SegmentIter("xy12")
        assert next(it) == chars("xy", 0)
        assert next(it) == digits("12", 2)
        assert next(it, None) is None

    def test_three_segments(self):
        it = SegmentIter("xy12ab")
        assert next(it) == chars("xy", 0)
        assert next(it) == digits("12", 2)
        assert next(it) == chars("ab", 4)
        assert next(it, None) is None

    def test_multibyte_characters(self):
        assert list(SegmentIter("Löwe1老虎32Léopard")) == [
            chars("Löwe", 0),
            digits("1", 4),
            chars("老虎", 5),
            digits("32", 7),
            chars("Léopard", 9),
        ]

    def test_exhausted_iterator_stays_exhausted(self):
        it = SegmentIter("a1")
        assert len(list(it)) == 2
        assert list(it) == []
        with pytest.raises(StopIteration):
            next(it)

    def test_remaining_shrinks(self):
        it = SegmentIter("ab12cd")
        assert it.remaining == "ab12cd"
        next(it)
        assert it.remaining == "12cd"
        next(it)
        next(it)
        assert it.remaining == ""


def test_split_segments_covers_input_without_gaps():
    text = "v1.2.10-rc03 build 0042"
    segments = split_segments(text)

    assert "".join(seg.text for seg in segments) == text
    assert segments[0].char_start == 0
    assert segments[-1].char_end == len(text)
    for seg in segments:
        assert text[seg.char_start : seg.char_end] == seg.text
    for prev, cur in zip(segments, segments[1:]):
        assert prev.char_end == cur.char_start
        assert prev.kind != cur.kind


def test_split_segments_empty():
    assert split_segments("") == []


def test_ascii_mode_treats_other_digits_as_characters():
    assert split_segments("file٣") == [chars("file٣", 0)]


def test_unicode_mode_splits_other_digits():
    cfg = CompareConfig(digits="unicode")
    assert split_segments("file٣٤x", cfg) == [
        chars("file", 0),
        digits("٣٤", 4),
        chars("x", 6),
    ]


@pytest.mark.parametrize(
    ("ch", "ascii_result", "unicode_result"),
    [
        ("7", True, True),
        ("a", False, False),
        ("٣", False, True),
        ("²", False, False),
        ("½", False, False),
    ],
)
def test_is_digit(ch, ascii_result, unicode_result):
    assert is_digit(ch) is ascii_result
    assert is_digit(ch, CompareConfig(digits="unicode")) is unicode_result
