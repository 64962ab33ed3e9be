"""Tests for validation helper functions."""

from __future__ import annotations

import pandas as pd
import pytest

from climatefit.schemas.validate import (
    require_columns,
    require_exact_columns,
    require_no_nulls,
    require_numeric,
    require_unique,
)


class TestRequireColumns:
    """Tests for require_columns helper."""

    def test_all_columns_present_passes(self) -> None:
        """Should pass when all required columns are present."""
        columns = ["a", "b", "c", "d"]
        require_columns(columns, ["a", "b"])

    def test_missing_column_raises(self) -> None:
        """Should raise when required column is missing."""
        columns = ["a", "b"]
        with pytest.raises(ValueError, match="Missing columns"):
            require_columns(columns, ["a", "b", "c"])

    def test_dataset_name_in_error(self) -> None:
        """Dataset name should appear in error message."""
        columns = ["a"]
        with pytest.raises(ValueError, match="test_dataset"):
            require_columns(columns, ["a", "b"], dataset="test_dataset")


class TestRequireExactColumns:
    """Tests for require_exact_columns helper."""

    def test_exact_match_passes(self) -> None:
        """Should pass when columns equal the expected set."""
        require_exact_columns(["b", "a"], ["a", "b"])

    def test_missing_column_raises(self) -> None:
        """Missing columns are reported before extras."""
        with pytest.raises(ValueError, match="Missing columns"):
            require_exact_columns(["a", "z"], ["a", "b"])

    def test_extra_column_raises(self) -> None:
        """Should raise when an unexpected column is present."""
        with pytest.raises(ValueError, match=r"Unexpected columns: \['c'\]"):
            require_exact_columns(["a", "b", "c"], ["a", "b"])


class TestRequireNumeric:
    """Tests for require_numeric helper."""

    def test_numeric_passes(self) -> None:
        """Should pass for numeric columns, nulls included."""
        df = pd.DataFrame({"a": [1, 2, 3], "b": [1.5, None, 2.5]})
        require_numeric(df, ["a", "b"])

    def test_numeric_strings_pass(self) -> None:
        """Object columns that all parse as numbers are accepted."""
        df = pd.DataFrame({"a": ["1", "2.5"]})
        require_numeric(df, ["a"])

    def test_text_raises(self) -> None:
        """Should raise when text is found in a numeric column."""
        df = pd.DataFrame({"a": [1, "x", 3, "y"]})
        with pytest.raises(ValueError, match="Non-numeric values"):
            require_numeric(df, ["a"])

    def test_includes_count_and_indices(self) -> None:
        """Error message should include the count and sample indices."""
        df = pd.DataFrame({"a": [1, "x", 3, "y"]})
        with pytest.raises(ValueError, match=r"2 rows\) \| sample indices: \[1, 3\]"):
            require_numeric(df, ["a"])

    def test_missing_column_ignored(self) -> None:
        """Missing columns are left to require_columns."""
        df = pd.DataFrame({"a": [1]})
        require_numeric(df, ["b"])


class TestRequireNoNulls:
    """Tests for require_no_nulls helper."""

    def test_no_nulls_passes(self) -> None:
        """Should pass when no nulls in specified columns."""
        df = pd.DataFrame({"a": [1, 2, 3], "b": ["x", "y", "z"]})
        require_no_nulls(df, ["a", "b"])

    def test_null_raises(self) -> None:
        """Should raise when null found."""
        df = pd.DataFrame({"a": [1, None, 3], "b": ["x", "y", "z"]})
        with pytest.raises(ValueError, match="Null values"):
            require_no_nulls(df, ["a"])

    def test_includes_count(self) -> None:
        """Error message should include count of nulls."""
        df = pd.DataFrame({"a": [None, None, 3]})
        with pytest.raises(ValueError, match="2 rows"):
            require_no_nulls(df, ["a"])


class TestRequireUnique:
    """Tests for require_unique helper."""

    def test_unique_passes(self) -> None:
        """Should pass when keys are unique."""
        df = pd.DataFrame({"a": [1, 2, 3], "b": ["x", "y", "z"]})
        require_unique(df, ["a", "b"])

    def test_duplicate_raises(self) -> None:
        """Should raise when duplicates found."""
        df = pd.DataFrame({"a": [1, 1, 3], "b": ["x", "x", "z"]})
        with pytest.raises(ValueError, match="Duplicate keys"):
            require_unique(df, ["a", "b"])

    def test_empty_df_passes(self) -> None:
        """Empty DataFrame should pass."""
        df = pd.DataFrame({"a": [], "b": []})
        require_unique(df, ["a", "b"])
