"""Sample statistics.

Variance and standard deviation of a sample drawn from a larger population,
using ``N - 1`` as the divisor (Bessel's correction), plus z-scores.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from kirstine.core.descriptive import sum_of_squares
from kirstine.core.validation import as_dataset, require_non_empty

logger = logging.getLogger(__name__)


def variance(sample: Any, mu: float) -> float:
    """Unbiased sample variance by the two-pass algorithm.

    A single observation leaves ``N - 1 == 0`` and the result is ``nan`` (or
    ``inf`` if ``mu`` is not the observation itself).

    Example:
        >>> from kirstine import mean
        >>> sample = [600.0, 470.0, 170.0, 430.0, 300.0]
        >>> variance(sample, mean(sample))
        27130.0
    """
    arr = require_non_empty(as_dataset(sample), "sample variance")
    tss = sum_of_squares(arr, mu)
    if arr.size == 1:
        logger.debug("Sample variance of a single observation divides by zero")
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(tss) / (arr.size - 1))


def standard_deviation(sample: Any, mu: float) -> float:
    """Square root of the sample variance."""
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(variance(sample, mu)))


def z_score(
    sample_mean: float,
    sample_size: int,
    population_mean: float,
    population_std_dev: float,
) -> float:
    """Standard errors between a sample mean and the population mean.

    z = (sample_mean - population_mean) / (population_std_dev / sqrt(sample_size))
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        standard_error = np.float64(population_std_dev) / np.sqrt(np.float64(sample_size))
        if standard_error == 0:
            logger.debug("z-score standard error is zero")
        return float((np.float64(sample_mean) - population_mean) / standard_error)


def z_score_single_sample(observation: float, mu: float, sigma: float) -> float:
    """z-score of a single observation against a population.

    Example:
        >>> z_score_single_sample(105.0, 100.0, 4.0)
        1.25
    """
    return z_score(observation, 1, mu, sigma)
