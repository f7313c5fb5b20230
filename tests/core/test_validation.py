"""Tests for input coercion and the empty-dataset precondition."""

import numpy as np
import pandas as pd
import pytest

from kirstine.core.validation import (
    EmptyDatasetError,
    as_dataset,
    as_pairs,
    require_non_empty,
)


class TestEmptyDatasetError:
    """Tests for EmptyDatasetError."""

    def test_is_value_error(self) -> None:
        """Test that callers can catch it as ValueError."""
        assert issubclass(EmptyDatasetError, ValueError)

    def test_message_names_operation(self) -> None:
        """Test the error message and attribute."""
        error = EmptyDatasetError("median")
        assert error.operation == "median"
        assert "median" in str(error)
        assert "empty" in str(error)


class TestAsDataset:
    """Tests for as_dataset."""

    def test_list_to_float_array(self) -> None:
        """Test coercion of a list of integers."""
        arr = as_dataset([1, 2, 3])
        assert arr.dtype == np.float64
        assert arr.tolist() == [1.0, 2.0, 3.0]

    def test_series(self) -> None:
        """Test coercion of a pandas Series."""
        arr = as_dataset(pd.Series([1.5, 2.5], index=["a", "b"]))
        assert arr.tolist() == [1.5, 2.5]

    def test_empty(self) -> None:
        """Test that empty input becomes an empty array."""
        assert as_dataset([]).size == 0

    def test_rejects_two_dimensional(self) -> None:
        """Test that a matrix is not a dataset."""
        with pytest.raises(ValueError, match="one-dimensional"):
            as_dataset([[1.0, 2.0], [3.0, 4.0]])


class TestAsPairs:
    """Tests for as_pairs."""

    def test_list_of_tuples(self) -> None:
        """Test coercion of (x, y) tuples."""
        arr = as_pairs([(1, 2), (3, 4)])
        assert arr.shape == (2, 2)
        assert arr.dtype == np.float64

    def test_empty_has_two_columns(self) -> None:
        """Test that empty input still has pair shape."""
        assert as_pairs([]).shape == (0, 2)

    def test_dataframe(self) -> None:
        """Test coercion of a two-column DataFrame."""
        df = pd.DataFrame({"x": [1.0, 2.0], "y": [3.0, 4.0]})
        assert as_pairs(df).tolist() == [[1.0, 3.0], [2.0, 4.0]]

    def test_rejects_flat_sequence(self) -> None:
        """Test that a flat list is not a sequence of pairs."""
        with pytest.raises(ValueError, match="pairs"):
            as_pairs([1.0, 2.0, 3.0])


class TestRequireNonEmpty:
    """Tests for require_non_empty."""

    def test_passes_through(self) -> None:
        """Test that non-empty arrays are returned unchanged."""
        arr = np.array([1.0])
        assert require_non_empty(arr, "mean") is arr

    def test_raises_on_empty(self) -> None:
        """Test that empty arrays fail."""
        with pytest.raises(EmptyDatasetError, match="variance"):
            require_non_empty(np.array([]), "variance")
