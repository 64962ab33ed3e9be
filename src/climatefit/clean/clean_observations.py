"""Clean raw climate observations.

This stage:
- Validates input schema (early fail on malformed data)
- Deduplicates observations (by state-county, first occurrence wins)
- Renames columns to their cleaned names
- Converts temperatures from Celsius to Fahrenheit
- Validates output schema

Design principles:
- Input order is meaningful: the first month listed for a county is kept
- Deterministic rules only
- Idempotent: deduplicating cleaned output changes nothing
- Schema-safe: output must pass validate_cleaned_observations
- No range or ordering checks on temperatures; values pass through as-is
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from climatefit.clean.dedupe import dedupe_observations
from climatefit.load.read_observations import read_observations_csv
from climatefit.schemas.cleaned_observation import (
    CLEANED_OBSERVATION_FIELDS,
    RAW_TO_CLEANED_RENAMES,
    RAW_TO_CLEANED_TEMPS,
    empty_cleaned_frame,
    validate_cleaned_observations,
)
from climatefit.schemas.raw_observation import (
    RAW_OBSERVATION_FIELDS,
    validate_raw_observations,
)
from climatefit.units import celsius_to_fahrenheit


def to_cleaned_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Project raw rows onto the cleaned schema.

    Renames ZIP, YYYYMM and precipitation(mm) and converts the three Celsius
    temperature columns to Fahrenheit. Precipitation values are unchanged.

    Args:
        df: DataFrame with raw observation columns

    Returns:
        New DataFrame with CLEANED_OBSERVATION_FIELDS columns
    """
    if df.empty:
        return empty_cleaned_frame()

    out = df.rename(columns=RAW_TO_CLEANED_RENAMES)
    for clean_col in RAW_TO_CLEANED_RENAMES.values():
        out[clean_col] = pd.to_numeric(out[clean_col])
    for raw_col, clean_col in RAW_TO_CLEANED_TEMPS.items():
        out[clean_col] = celsius_to_fahrenheit(df[raw_col].astype(float))
    return out[CLEANED_OBSERVATION_FIELDS].reset_index(drop=True)


def print_cleaning_stats(
    df: pd.DataFrame,
    original_count: int,
    duplicates_removed: int,
) -> None:
    """Print summary statistics after cleaning.

    Args:
        df: Cleaned DataFrame
        original_count: Number of rows before cleaning
        duplicates_removed: Number of duplicate rows removed
    """
    print("[clean] Cleaning summary:")
    print(f"  Total rows: {original_count} -> {len(df)} ({duplicates_removed} duplicates removed)")

    if df.empty:
        print("  No observations left")
        return

    print(f"  States: {df['state'].nunique()}")
    print(f"  Avg temp range: {df['tempAvgF'].min():.1f}F to {df['tempAvgF'].max():.1f}F")
    print(
        f"  Precipitation range: {df['precipitation'].min():.1f}mm "
        f"to {df['precipitation'].max():.1f}mm"
    )


def clean_observations(df: pd.DataFrame, verbose: bool = True) -> pd.DataFrame:
    """Clean a raw observations DataFrame.

    Cleaning steps (in order):
    1. Validate input schema (early fail on malformed data)
    2. Drop repeated (state, county) rows, keeping the first
    3. Rename columns and convert temperatures to Fahrenheit
    4. Validate output schema

    Args:
        df: Raw observations DataFrame (not modified)
        verbose: If True, print cleaning statistics (default True)

    Returns:
        Cleaned DataFrame, one row per (state, county), in input order

    Raises:
        ValueError: If input or output fails schema validation
    """
    # Step 1: Validate input schema (early fail)
    validate_raw_observations(df)

    original_count = len(df)
    df = df[RAW_OBSERVATION_FIELDS]

    # Step 2: Deduplicate
    df = dedupe_observations(df)
    duplicates_removed = original_count - len(df)

    # Step 3: Project onto cleaned schema
    df = to_cleaned_columns(df)

    # Step 4: Validate output schema
    validate_cleaned_observations(df, require_unique_keys=True)

    if verbose:
        print_cleaning_stats(df, original_count, duplicates_removed)

    return df


def clean_observations_file(path: Path | str, verbose: bool = True) -> pd.DataFrame:
    """Read and clean an observations CSV.

    This is a convenience wrapper around read_observations_csv and
    clean_observations for file-based workflows.

    Raises:
        FileNotFoundError: If the file does not exist
        ObservationParseError: If the file is malformed
    """
    raw = read_observations_csv(path, verbose=verbose)
    return clean_observations(raw, verbose=verbose)
