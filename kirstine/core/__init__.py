"""Core functionality for kirstine.

This module contains:
- Central tendency, dispersion and association statistics
- Input coercion and the empty-dataset precondition
"""

from kirstine.core.descriptive import (
    RangeResult,
    chi_squared,
    correlation,
    mean,
    median,
    median_from_sorted,
    mode,
    range,
    sum_of_squares,
)
from kirstine.core.validation import EmptyDatasetError

__all__ = [
    "EmptyDatasetError",
    "RangeResult",
    "chi_squared",
    "correlation",
    "mean",
    "median",
    "median_from_sorted",
    "mode",
    "range",
    "sum_of_squares",
]
