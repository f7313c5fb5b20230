"""Population statistics.

Variance and standard deviation of a complete population, using ``N`` as the
divisor. See ``kirstine.sample`` for the Bessel-corrected (``N - 1``)
estimators; the two are deliberately kept apart.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from kirstine.core.descriptive import sum_of_squares
from kirstine.core.validation import as_dataset, require_non_empty


def variance(population: Any, mu: float) -> float:
    """Population variance by the two-pass algorithm.

    Args:
        population: Every observation of the population
        mu: Population mean, usually from ``kirstine.mean``

    Example:
        >>> from kirstine import mean
        >>> population = [600.0, 470.0, 170.0, 430.0, 300.0]
        >>> variance(population, mean(population))
        21704.0
    """
    arr = require_non_empty(as_dataset(population), "population variance")
    tss = sum_of_squares(arr, mu)
    return float(np.float64(tss) / arr.size)


def standard_deviation(population: Any, mu: float) -> float:
    """Square root of the population variance."""
    return math.sqrt(variance(population, mu))
