"""Raw monthly climate observation schema.

This is the shape of one row in the source climate CSV, exactly as
the loader hands it over:
- one row per county per month, so (state, county) repeats across months
- temperatures are Celsius
- precipitation is millimeters
"""

from __future__ import annotations

from typing import TypedDict

import pandas as pd

from climatefit.schemas.validate import (
    require_columns,
    require_no_nulls,
    require_numeric,
)


# Column names carry units, so they are not valid identifiers.
RawObservation = TypedDict(
    "RawObservation",
    {
        "state": str,  # State code (e.g., "NY")
        "county": str,  # County name
        "ZIP": int,  # ZIP code
        "YYYYMM": int,  # Month stamp (e.g., 202308)
        "precipitation(mm)": float,
        "tempMax(C)": float,
        "tempMin(C)": float,
        "tempAvg(C)": float,
    },
)


# Column order as found in the source file
RAW_OBSERVATION_FIELDS = [
    "state",
    "county",
    "ZIP",
    "YYYYMM",
    "precipitation(mm)",
    "tempMax(C)",
    "tempMin(C)",
    "tempAvg(C)",
]

RAW_TEXT_FIELDS = ["state", "county"]

RAW_NUMERIC_FIELDS = [
    "ZIP",
    "YYYYMM",
    "precipitation(mm)",
    "tempMax(C)",
    "tempMin(C)",
    "tempAvg(C)",
]

# Required columns for validation
REQUIRED_COLUMNS = RAW_OBSERVATION_FIELDS.copy()

# Dataset name for error messages
_DATASET_NAME = "raw_observation"


def validate_raw_observations(df: pd.DataFrame) -> None:
    """Validate that a DataFrame conforms to the raw observation schema.

    Checks performed:
    - All required columns present
    - Numeric columns hold numbers only
    - No nulls in any required column

    Duplicate (state, county) pairs are expected here and are not checked.

    Raises:
        ValueError: If any validation check fails
    """
    require_columns(df.columns, REQUIRED_COLUMNS, dataset=_DATASET_NAME)

    if df.empty:
        return

    require_numeric(df, RAW_NUMERIC_FIELDS, dataset=_DATASET_NAME)
    require_no_nulls(df, RAW_OBSERVATION_FIELDS, dataset=_DATASET_NAME)
