"""Validation helpers for schema enforcement.

These helpers ensure DataFrames conform to expected schemas.
All helpers raise ValueError with actionable messages including:
- Dataset name (if provided)
- Offending columns
- Count of failing rows
- Sample of failing row indices (first 5)
"""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd


def _format_error(
    dataset: str | None,
    rule: str,
    detail: str,
    failing_indices: list[Any] | None = None,
    count: int | None = None,
) -> str:
    """Format a validation error message consistently."""
    parts = []
    if dataset:
        parts.append(f"[{dataset}]")
    parts.append(rule)
    parts.append(f": {detail}")
    if count is not None:
        parts.append(f" ({count} rows)")
    if failing_indices:
        sample = failing_indices[:5]
        parts.append(f" | sample indices: {sample}")
    return "".join(parts)


def require_columns(
    df_columns: Iterable[str],
    required: Iterable[str],
    dataset: str | None = None,
) -> None:
    """Raise ValueError if required columns are missing.

    Args:
        df_columns: Column names from a DataFrame (e.g., df.columns)
        required: Required column names
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: If any required columns are missing
    """
    df_set = set(df_columns)
    missing = [col for col in required if col not in df_set]
    if missing:
        raise ValueError(
            _format_error(dataset, "Missing columns", f"{sorted(missing)}")
        )


def require_exact_columns(
    df_columns: Iterable[str],
    expected: Iterable[str],
    dataset: str | None = None,
) -> None:
    """Raise ValueError unless the columns are exactly the expected set.

    Missing columns are reported first (as in require_columns). Extra
    columns, including pandas-renamed repeats such as "state.1", are
    reported as unexpected.

    Args:
        df_columns: Column names from a DataFrame (e.g., df.columns)
        expected: The complete set of allowed column names
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: If any column is missing or unexpected
    """
    df_columns = list(df_columns)
    expected = list(expected)
    require_columns(df_columns, expected, dataset=dataset)

    expected_set = set(expected)
    unexpected = [col for col in df_columns if col not in expected_set]
    if unexpected:
        raise ValueError(
            _format_error(dataset, "Unexpected columns", f"{unexpected}")
        )


def require_numeric(
    df: pd.DataFrame,
    cols: Iterable[str],
    dataset: str | None = None,
) -> None:
    """Raise ValueError if columns hold values that are not numbers.

    Object columns are coerced with pd.to_numeric to locate the offending
    rows. Object columns whose values all parse as numbers pass; the caller
    is expected to coerce them. Nulls are not reported here (see
    require_no_nulls).

    Args:
        df: DataFrame to check
        cols: Column names that must be numeric
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: If any column contains non-numeric values
    """
    for col in cols:
        if col not in df.columns:
            continue  # Let require_columns handle missing columns

        series = df[col]
        if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
            continue

        coerced = pd.to_numeric(series, errors="coerce")
        bad_mask = coerced.isna() & series.notna()
        bad_count = int(bad_mask.sum())
        if bad_count == 0:
            continue  # Numeric strings; caller coerces

        failing_indices = df.index[bad_mask].tolist()
        raise ValueError(
            _format_error(
                dataset,
                "Non-numeric values",
                f"column '{col}' must be numeric, got {series.dtype}",
                failing_indices,
                bad_count,
            )
        )


def require_no_nulls(
    df: pd.DataFrame,
    cols: Iterable[str],
    dataset: str | None = None,
) -> None:
    """Raise ValueError if specified columns contain null values.

    Args:
        df: DataFrame to check
        cols: Column names that must not have nulls
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: If any specified columns have null values
    """
    for col in cols:
        if col not in df.columns:
            continue  # Let require_columns handle missing columns

        null_mask = df[col].isna()
        null_count = null_mask.sum()
        if null_count > 0:
            failing_indices = df.index[null_mask].tolist()
            raise ValueError(
                _format_error(
                    dataset,
                    "Null values",
                    f"column '{col}' has nulls",
                    failing_indices,
                    null_count,
                )
            )


def require_unique(
    df: pd.DataFrame,
    key_cols: list[str],
    dataset: str | None = None,
) -> None:
    """Raise ValueError if key columns have duplicate combinations.

    Args:
        df: DataFrame to check
        key_cols: Column names that form a unique key
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: If duplicate key combinations exist
    """
    if df.empty:
        return

    for col in key_cols:
        if col not in df.columns:
            return  # Let require_columns handle missing columns

    dup_mask = df.duplicated(subset=key_cols, keep=False)
    dup_count = dup_mask.sum()
    if dup_count > 0:
        failing_indices = df.index[dup_mask].tolist()
        raise ValueError(
            _format_error(
                dataset,
                "Duplicate keys",
                f"columns {key_cols} have duplicates",
                failing_indices,
                dup_count,
            )
        )
