"""Input coercion and precondition checks.

Every statistic reads its input through these helpers so that lists, tuples,
numpy arrays and pandas objects behave identically. The only value check
performed is emptiness; anything else (NaN, infinities, zero divisors) flows
through the formulas unchanged.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd


class EmptyDatasetError(ValueError):
    """Raised when a statistic that needs at least one value gets none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Can not compute {operation} of an empty dataset")


def as_dataset(data: Any) -> np.ndarray:
    """Coerce a one-dimensional sequence of numbers to a float64 array.

    The returned array may share memory with ``data``; callers must not
    modify it in place.

    Raises:
        ValueError: If ``data`` is not one-dimensional
    """
    if isinstance(data, pd.Series):
        data = data.to_numpy()
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a one-dimensional dataset, got shape {arr.shape}")
    return arr


def as_pairs(data: Any) -> np.ndarray:
    """Coerce a sequence of 2-tuples (or a two-column DataFrame) to an (n, 2) array.

    Raises:
        ValueError: If the input cannot be read as pairs
    """
    if isinstance(data, pd.DataFrame):
        data = data.to_numpy()
    arr = np.asarray(data, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected a sequence of pairs, got shape {arr.shape}")
    return arr


def require_non_empty(arr: np.ndarray, operation: str) -> np.ndarray:
    """Fail fast if ``arr`` holds no values."""
    if arr.size == 0:
        raise EmptyDatasetError(operation)
    return arr
