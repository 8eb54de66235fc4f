from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import DIGIT_MODES


@dataclass(frozen=True)
class CompareConfig:
    """Options for natural comparison.

    Keep this frozen+hashable so it can be shared freely between threads and
    used in ``functools.partial`` objects.
    """

    # "ascii" only treats 0-9 as digits; "unicode" accepts any decimal digit
    digits: Literal["ascii", "unicode"] = "ascii"

    def __post_init__(self) -> None:
        if self.digits not in DIGIT_MODES:
            raise ValueError(
                f"Unknown digits mode {self.digits!r}, "
                f"expected one of {', '.join(DIGIT_MODES)}"
            )


DEFAULT_CONFIG = CompareConfig()
