"""Split strings into alternating runs of digits and non-digits."""

from __future__ import annotations

import re

from .compare_config import DEFAULT_CONFIG, CompareConfig
from .constants import ASCII_DIGITS
from .types import Segment

__all__ = ["SegmentIter", "is_digit", "split_segments"]

# One alternative per run class; the first group is the digit run.
_RUN_PATTERNS = {
    "ascii": re.compile(r"([0-9]+)|[^0-9]+"),
    "unicode": re.compile(r"(\d+)|\D+"),
}


def is_digit(ch: str, cfg: CompareConfig | None = None) -> bool:
    cfg = cfg or DEFAULT_CONFIG
    if cfg.digits == "ascii":
        return ch in ASCII_DIGITS
    return ch.isdecimal()


class SegmentIter:
    """Lazy, one-shot iterator over the segments of ``text``.

    The iterator only holds the source string and the current scan position.
    Each step consumes the maximal run of characters sharing the class of the
    first remaining character. Once exhausted it stays exhausted; build a new
    iterator to scan the string again.
    """

    def __init__(self, text: str, cfg: CompareConfig | None = None) -> None:
        self._text = text
        self._pos = 0
        self._pattern = _RUN_PATTERNS[(cfg or DEFAULT_CONFIG).digits]

    def __iter__(self) -> SegmentIter:
        return self

    def __next__(self) -> Segment:
        if self._pos >= len(self._text):
            raise StopIteration
        match = self._pattern.match(self._text, self._pos)
        # The two alternatives cover every character, so a run always matches.
        assert match is not None
        start, end = match.span()
        self._pos = end
        return Segment(
            kind="digits" if match.group(1) is not None else "characters",
            text=match.group(0),
            char_start=start,
            char_end=end,
        )

    @property
    def remaining(self) -> str:
        """The not yet consumed suffix of the source string."""
        return self._text[self._pos :]


def split_segments(text: str, cfg: CompareConfig | None = None) -> list[Segment]:
    """Eagerly segment ``text``; an empty string gives an empty list."""
    return list(SegmentIter(text, cfg))
