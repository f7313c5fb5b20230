"""Core descriptive statistics.

This module provides the closed-form statistics every other part of kirstine
builds on:
- Central tendency: mean, median, mode
- Dispersion: range and coefficient of range, sum of squares
- Association: Pearson correlation, chi-squared statistic

Empty input to a statistic that needs at least one value raises
``EmptyDatasetError``. Degenerate divisions (a zero divisor that comes from the
data itself) are evaluated in float64 and return ``inf`` or ``nan`` exactly as
IEEE-754 prescribes.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

import numpy as np

from kirstine.config import get_settings
from kirstine.core.validation import as_dataset, as_pairs, require_non_empty

logger = logging.getLogger(__name__)

# Degenerate divisions yield inf/nan without a RuntimeWarning
_IEEE = {"divide": "ignore", "invalid": "ignore"}

# Default for arguments that fall back to Settings
_UNSET = object()


class RangeResult(NamedTuple):
    """Arithmetic range of a dataset.

    Attributes:
        range: largest - smallest
        coefficient: range / (largest + smallest)
        bounds: (smallest, largest)
    """

    range: float
    coefficient: float
    bounds: tuple[float, float]

    @property
    def smallest(self) -> float:
        return self.bounds[0]

    @property
    def largest(self) -> float:
        return self.bounds[1]


def mean(data: Any) -> float:
    """Arithmetic mean.

    Example:
        >>> mean([1.0, 3.0, 3.0, 2.0, 1.0])
        2.0
    """
    arr = require_non_empty(as_dataset(data), "mean")
    return float(arr.sum() / arr.size)


def median(data: Any) -> float:
    """Median of an unsorted dataset.

    Sorts a copy of the data, so prefer ``median_from_sorted`` when the input
    is already in ascending order. NaN sorts after every number.

    Example:
        >>> median([2.0, 5.0, 1.0])
        2.0
        >>> median([2.0, 5.0, 3.0, 1.0])
        2.5
    """
    arr = require_non_empty(as_dataset(data), "median")
    return median_from_sorted(np.sort(arr))


def median_from_sorted(data: Any) -> float:
    """Median of a dataset the caller has already sorted ascending."""
    arr = require_non_empty(as_dataset(data), "median")
    n = arr.size
    if n % 2 == 1:
        return float(arr[(n - 1) // 2])
    upper = n // 2
    return float((arr[upper] + arr[upper - 1]) / 2.0)


def _group_key(value: float, precision: int | None) -> str:
    if precision is None:
        return repr(value)
    return format(value, f".{precision}g")


def mode(data: Any, precision: Any = _UNSET) -> float:
    """Most frequent value of a dataset.

    Values are grouped by their decimal text rather than by float equality,
    so ``0.1 + 0.2`` and ``0.3`` only fall in the same group when
    ``precision`` (significant digits) is small enough to merge them. The
    value returned is the first member seen of the largest group. When
    several groups tie, which one wins is not part of the contract.

    Args:
        data: Dataset to inspect
        precision: Significant digits of the grouping key, or None for the
            shortest round-trip repr; defaults to ``Settings.mode_precision``

    Example:
        >>> mode([2.0, 5.0, 1.0, 3.0, 1.0])
        1.0
    """
    arr = require_non_empty(as_dataset(data), "mode")
    if precision is _UNSET:
        precision = get_settings().mode_precision

    groups: dict[str, list] = {}
    for value in arr.tolist():
        key = _group_key(value, precision)
        if key in groups:
            groups[key][0] += 1
        else:
            groups[key] = [1, value]

    _, representative = max(groups.values(), key=lambda entry: entry[0])
    return representative


def range(data: Any) -> RangeResult:
    """Arithmetic range and coefficient of range.

    A single pass keeps the running extremes with strict comparisons, so NaN
    values never replace them.

    Example:
        >>> r = range([89.0, 73.0, 84.0, 91.0, 87.0, 77.0, 94.0])
        >>> r.range, r.bounds
        (21.0, (73.0, 94.0))
    """
    arr = require_non_empty(as_dataset(data), "range")
    values = arr.tolist()

    smallest = largest = values[0]
    for x in values:
        if x > largest:
            largest = x
        if x < smallest:
            smallest = x

    with np.errstate(**_IEEE):
        spread = np.float64(largest) - np.float64(smallest)
        total = np.float64(largest) + np.float64(smallest)
        if total == 0:
            logger.debug("Coefficient of range divides by zero (largest + smallest == 0)")
        coefficient = spread / total

    return RangeResult(float(spread), float(coefficient), (smallest, largest))


def correlation(data: Any) -> float:
    """Pearson correlation coefficient of ``(x, y)`` pairs.

    Uses the sum-based formula::

        r = (nΣxy - ΣxΣy) / sqrt((nΣx² - (Σx)²)(nΣy² - (Σy)²))

    Empty or constant input yields ``nan``.
    """
    pairs = as_pairs(data)
    x = pairs[:, 0]
    y = pairs[:, 1]
    n = np.float64(len(pairs))

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_x2 = (x**2).sum()
    sum_y2 = (y**2).sum()

    with np.errstate(**_IEEE):
        dividend = n * sum_xy - sum_x * sum_y
        divisor = np.sqrt((n * sum_x2 - sum_x**2) * (n * sum_y2 - sum_y**2))
        return float(dividend / divisor)


def sum_of_squares(data: Any, mu: float) -> float:
    """Sum of squared deviations of each value from ``mu``.

    ``mu`` is taken as given so that a mean computed once can be reused.
    """
    arr = as_dataset(data)
    return float(((arr - mu) ** 2).sum())


def chi_squared(data: Any) -> float:
    """Pearson's chi-squared statistic.

    Args:
        data: Sequence of ``(expected, observed)`` pairs

    Example:
        >>> pairs = [(25.0, 23.0), (16.0, 20.0), (4.0, 3.0), (24.0, 24.0), (8.0, 10.0)]
        >>> round(chi_squared(pairs), 2)
        1.91
    """
    pairs = as_pairs(data)
    expected = pairs[:, 0]
    observed = pairs[:, 1]

    if (expected == 0).any():
        logger.debug("Chi-squared has a zero expected count; result is not finite")
    with np.errstate(**_IEEE):
        return float(((expected - observed) ** 2 / expected).sum())
