"""Sorting helpers built on :func:`natcmp.compare.natural_cmp`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key, partial
from typing import Any, TypeVar

import numpy as np

from .compare import natural_cmp
from .compare_config import DEFAULT_CONFIG, CompareConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def natural_key(cfg: CompareConfig | None = None) -> Callable[[str], Any]:
    """Return a ``key=`` function ordering strings naturally.

    >>> sorted(["z10", "z2"], key=natural_key())
    ['z2', 'z10']
    """
    return cmp_to_key(partial(natural_cmp, cfg=cfg or DEFAULT_CONFIG))


def _record_key(
    key: Callable[[T], str] | None, cfg: CompareConfig | None
) -> Callable[[T], Any]:
    string_key = natural_key(cfg)
    if key is None:
        return string_key
    return lambda item: string_key(key(item))


def natural_sorted(
    items: Iterable[T],
    *,
    key: Callable[[T], str] | None = None,
    reverse: bool = False,
    cfg: CompareConfig | None = None,
) -> list[T]:
    """Return a new list with ``items`` in natural order.

    ``key`` extracts the string to compare from each item. The sort is stable.
    """
    result = list(items)
    natural_sort(result, key=key, reverse=reverse, cfg=cfg)
    return result


def natural_sort(
    items: list[T],
    *,
    key: Callable[[T], str] | None = None,
    reverse: bool = False,
    cfg: CompareConfig | None = None,
) -> None:
    """Sort ``items`` in place in natural order."""
    items.sort(key=_record_key(key, cfg), reverse=reverse)
    logger.debug(
        f"Naturally sorted {len(items)} items (reverse={reverse}, "
        f"digits={(cfg or DEFAULT_CONFIG).digits})"
    )


def natural_argsort(
    values: Sequence[str] | np.ndarray,
    *,
    reverse: bool = False,
    cfg: CompareConfig | None = None,
) -> np.ndarray:
    """Indices that would sort a 1-D array of strings in natural order.

    Mirrors :func:`numpy.argsort` with a stable sort. Non-string elements are
    compared through ``str()``.
    """
    arr = np.asarray(values, dtype=object)
    if arr.ndim != 1:
        raise ValueError(f"natural_argsort expects a 1-D array, got shape {arr.shape}")

    string_key = natural_key(cfg)
    order = sorted(
        range(arr.shape[0]), key=lambda i: string_key(str(arr[i])), reverse=reverse
    )
    logger.debug(f"Computed natural argsort over {arr.shape[0]} values")
    return np.asarray(order, dtype=np.intp)
