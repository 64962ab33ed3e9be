"""Cleaned climate observation schema.

This is what every stage after cleaning consumes:
- the ranker
- the similarity search
- the state grouping and export

Non-negotiables:
- exactly one row per (state, county)
- temperatures are Fahrenheit
- precipitation stays in millimeters (only the column name changes)
"""

from __future__ import annotations

from typing import TypedDict

import pandas as pd

from climatefit.schemas.validate import (
    require_columns,
    require_no_nulls,
    require_numeric,
    require_unique,
)


class CleanedObservation(TypedDict):
    """One deduplicated, unit-normalized observation."""

    state: str
    county: str
    zip: int
    yyyymm: int  # Month stamp of the first occurrence kept
    precipitation: float  # Millimeters
    tempMaxF: float
    tempMinF: float
    tempAvgF: float


CLEANED_OBSERVATION_FIELDS = [
    "state",
    "county",
    "zip",
    "yyyymm",
    "precipitation",
    "tempMaxF",
    "tempMinF",
    "tempAvgF",
]

# Raw column -> cleaned column, for the fields copied without conversion
RAW_TO_CLEANED_RENAMES = {
    "ZIP": "zip",
    "YYYYMM": "yyyymm",
    "precipitation(mm)": "precipitation",
}

# Raw Celsius column -> cleaned Fahrenheit column
RAW_TO_CLEANED_TEMPS = {
    "tempMax(C)": "tempMaxF",
    "tempMin(C)": "tempMinF",
    "tempAvg(C)": "tempAvgF",
}

# Fields used by the scoring functions
METRIC_FIELDS = ["precipitation", "tempMaxF", "tempMinF", "tempAvgF"]

UNIQUE_KEY = ["state", "county"]

REQUIRED_COLUMNS = CLEANED_OBSERVATION_FIELDS.copy()

_DATASET_NAME = "cleaned_observation"


def empty_cleaned_frame() -> pd.DataFrame:
    """Return an empty DataFrame with the cleaned columns."""
    return pd.DataFrame(columns=CLEANED_OBSERVATION_FIELDS)


def validate_cleaned_observations(
    df: pd.DataFrame,
    require_unique_keys: bool = True,
) -> None:
    """Validate that a DataFrame conforms to the cleaned observation schema.

    Checks performed:
    - All required columns present
    - Metric and identifier columns are numeric
    - No nulls in state/county
    - Uniqueness on (state, county) if require_unique_keys=True

    The ordering tempMinF <= tempAvgF <= tempMaxF is NOT checked; source data
    is passed through as-is.

    Args:
        df: DataFrame to validate
        require_unique_keys: If True, enforce uniqueness on (state, county).
            Set to False for subsets built by callers that may repeat keys.

    Raises:
        ValueError: If any validation check fails
    """
    require_columns(df.columns, REQUIRED_COLUMNS, dataset=_DATASET_NAME)

    if df.empty:
        return

    require_numeric(df, ["zip", "yyyymm", *METRIC_FIELDS], dataset=_DATASET_NAME)
    require_no_nulls(df, UNIQUE_KEY, dataset=_DATASET_NAME)

    if require_unique_keys:
        require_unique(df, UNIQUE_KEY, dataset=_DATASET_NAME)
