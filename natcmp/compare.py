"""Natural order comparison of strings.

Digit runs are compared by magnitude, everything else by code point::

    >>> natural_cmp("z2.doc", "z10.doc")
    <Ordering.LESS: -1>
"""

from __future__ import annotations

import unicodedata

from .compare_config import DEFAULT_CONFIG, CompareConfig
from .segmenter import SegmentIter, is_digit
from .types import Ordering, Segment

__all__ = ["cmp_digit_str", "natural_cmp"]


def _only_digits(s: str, cfg: CompareConfig) -> bool:
    return all(is_digit(ch, cfg) for ch in s)


def _to_ascii_digits(s: str) -> str:
    return "".join(str(unicodedata.decimal(ch)) for ch in s)


def cmp_digit_str(
    lhs: str, rhs: str, cfg: CompareConfig | None = None
) -> Ordering:
    """Compare two digit runs as unsigned integers of any length.

    The runs are never converted to ``int``: after stripping leading zeros
    the longer run is the larger number, and runs of equal length compare
    lexicographically. Empty and all-zero runs are equal.
    """
    cfg = cfg or DEFAULT_CONFIG
    assert _only_digits(lhs, cfg), f"not a digit run: {lhs!r}"
    assert _only_digits(rhs, cfg), f"not a digit run: {rhs!r}"

    if cfg.digits == "unicode":
        lhs = _to_ascii_digits(lhs)
        rhs = _to_ascii_digits(rhs)

    lhs = lhs.lstrip("0")
    rhs = rhs.lstrip("0")
    if len(lhs) != len(rhs):
        return Ordering.of(len(lhs), len(rhs))
    return Ordering.of(lhs, rhs)


def _pair_text(segment: Segment, cfg: CompareConfig) -> str:
    # Digits of every script order like their ASCII form against non-digits.
    if segment.is_digits and cfg.digits == "unicode":
        return _to_ascii_digits(segment.text)
    return segment.text


def natural_cmp(lhs: str, rhs: str, cfg: CompareConfig | None = None) -> Ordering:
    """Three-way natural comparison of ``lhs`` and ``rhs``.

    Segments are paired positionally until either string runs out. Two digit
    runs compare numerically; any pair involving a non-digit run compares by
    code point. The first unequal pair decides. If every pair is equal the
    complete strings are compared by code point, which orders prefixes and
    empty strings.

    Runs that are numerically equal but spelled differently (``"7"`` and
    ``"007"``) are only told apart by that final comparison, so orderings
    mixing such spellings with longer strings are not guaranteed to be
    transitive.
    """
    cfg = cfg or DEFAULT_CONFIG
    for left, right in zip(SegmentIter(lhs, cfg), SegmentIter(rhs, cfg)):
        if left.is_digits and right.is_digits:
            result = cmp_digit_str(left.text, right.text, cfg)
        else:
            result = Ordering.of(_pair_text(left, cfg), _pair_text(right, cfg))
        if result != Ordering.EQUAL:
            return result
    return Ordering.of(lhs, rhs)
