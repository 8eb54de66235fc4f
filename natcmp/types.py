from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Literal


class Ordering(IntEnum):
    """Three-way comparison result.

    The values follow the ``cmp`` sign convention, so an ``Ordering`` can be
    returned wherever ``functools.cmp_to_key`` expects an int.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, lhs: Any, rhs: Any) -> Ordering:
        if lhs < rhs:
            return cls.LESS
        if lhs > rhs:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        return Ordering(-self.value)


@dataclass(frozen=True)
class Segment:
    """A maximal digit or non-digit run with offsets into the source string."""

    kind: Literal["digits", "characters"]
    text: str
    char_start: int
    char_end: int

    @property
    def is_digits(self) -> bool:
        return self.kind == "digits"
