"""natcmp - natural order string comparison."""

from .compare import cmp_digit_str, natural_cmp
from .compare_config import CompareConfig
from .segmenter import SegmentIter, split_segments
from .sorting import natural_argsort, natural_key, natural_sort, natural_sorted
from .types import Ordering, Segment

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "CompareConfig",
    "Ordering",
    "Segment",
    "SegmentIter",
    "cmp_digit_str",
    "natural_argsort",
    "natural_cmp",
    "natural_key",
    "natural_sort",
    "natural_sorted",
    "split_segments",
]
