"""Tests for the population statistics module."""

import math

import numpy as np
import pytest

from kirstine import mean, population, sample
from kirstine.core.validation import EmptyDatasetError


class TestPopulationVariance:
    """Tests for population.variance."""

    def test_variance_of_scores(self, scores: list[float]) -> None:
        """Test the divisor-N reference value."""
        assert population.variance(scores, mean(scores)) == 21704.0

    def test_variance_matches_numpy(self, random_datasets: list[np.ndarray]) -> None:
        """Test against numpy.var with ddof=0."""
        for data in random_datasets:
            assert population.variance(data, mean(data)) == pytest.approx(
                float(np.var(data, ddof=0))
            )

    def test_variance_single_value(self) -> None:
        """Test that one observation has zero population variance."""
        assert population.variance([3.0], 3.0) == 0.0

    def test_variance_uses_given_mu(self) -> None:
        """Test that mu is taken as given."""
        assert population.variance([1.0, 3.0], 0.0) == 5.0

    def test_variance_empty_raises(self) -> None:
        """Test that empty input fails."""
        with pytest.raises(EmptyDatasetError, match="population variance"):
            population.variance([], 0.0)


class TestPopulationStandardDeviation:
    """Tests for population.standard_deviation."""

    def test_standard_deviation_of_scores(self, scores: list[float]) -> None:
        """Test the square root of the reference variance."""
        assert population.standard_deviation(scores, mean(scores)) == pytest.approx(
            math.sqrt(21704.0)
        )

    def test_square_is_variance(self, random_datasets: list[np.ndarray]) -> None:
        """Test std squared equals variance."""
        for data in random_datasets:
            mu = mean(data)
            std = population.standard_deviation(data, mu)
            assert std**2 == pytest.approx(population.variance(data, mu))

    def test_standard_deviation_empty_raises(self) -> None:
        """Test that empty input fails."""
        with pytest.raises(EmptyDatasetError):
            population.standard_deviation([], 0.0)


class TestEstimatorRelation:
    """Tests relating the population and sample estimators."""

    def test_divisors_differ(self, scores: list[float]) -> None:
        """Test that identical input gives N and N - 1 results."""
        mu = mean(scores)
        assert population.variance(scores, mu) == 21704.0
        assert sample.variance(scores, mu) == 27130.0

    def test_bessel_correction(self, random_datasets: list[np.ndarray]) -> None:
        """Test sample == population * n / (n - 1)."""
        for data in random_datasets:
            n = len(data)
            mu = mean(data)
            assert sample.variance(data, mu) == pytest.approx(
                population.variance(data, mu) * n / (n - 1)
            )
