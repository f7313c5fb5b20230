"""Pytest configuration and fixtures for kirstine tests."""

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def scores() -> list[float]:
    """Return the dataset used for the population/sample variance examples."""
    return [600.0, 470.0, 170.0, 430.0, 300.0]


@pytest.fixture
def paired_fixture() -> list[tuple[float, float]]:
    """Return (age, glucose level) pairs with r ≈ 0.529809."""
    return [
        (43.0, 99.0),
        (21.0, 65.0),
        (25.0, 79.0),
        (42.0, 75.0),
        (57.0, 87.0),
        (59.0, 81.0),
    ]


@pytest.fixture
def chi_squared_fixture() -> list[tuple[float, float]]:
    """Return twelve (expected, observed) pairs with chi-squared ≈ 5.09375."""
    observed = [29.0, 24.0, 22.0, 19.0, 21.0, 18.0, 19.0, 20.0, 23.0, 18.0, 20.0, 23.0]
    return [(21.33333334, o) for o in observed]


@pytest.fixture
def measurements_df() -> pd.DataFrame:
    """Return a small mixed-type DataFrame with missing values."""
    return pd.DataFrame({
        "height": [150.0, 160.0, 170.0, 180.0, 190.0],
        "weight": [50.0, 58.0, np.nan, 80.0, 85.0],
        "shoe": [36.0, 38.0, 41.0, 43.0, 45.0],
        "name": ["a", "b", "c", "d", "e"],
    })


@pytest.fixture
def random_datasets() -> list[np.ndarray]:
    """Return reproducible random datasets of varying size."""
    rng = np.random.default_rng(20240613)
    return [rng.normal(loc=10.0, scale=3.0, size=n) for n in (2, 3, 10, 250)]
