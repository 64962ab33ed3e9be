"""Read raw climate observations from CSV.

The source file is a comma-delimited CSV with a header row. Numeric columns
are cast by the parser; text columns (state, county) stay strings. The result
is checked against the raw observation schema before it is returned, so
callers can rely on the column set and dtypes.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from climatefit.errors import ObservationParseError
from climatefit.schemas.raw_observation import (
    RAW_NUMERIC_FIELDS,
    RAW_OBSERVATION_FIELDS,
    RAW_TEXT_FIELDS,
    validate_raw_observations,
)
from climatefit.schemas.validate import require_exact_columns


def read_observations_csv(path: Path | str, verbose: bool = False) -> pd.DataFrame:
    """Load raw observations from a CSV file.

    Args:
        path: Path to the climate CSV
        verbose: If True, print the number of rows read

    Returns:
        DataFrame with RAW_OBSERVATION_FIELDS columns, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ObservationParseError: If rows are malformed, the header does not
            match the expected columns exactly, or numeric columns contain
            non-numeric values
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Observation file not found: {path}")

    try:
        df = pd.read_csv(
            path,
            sep=",",
            skipinitialspace=True,
            dtype={col: str for col in RAW_TEXT_FIELDS},
            keep_default_na=False,
            na_values={col: [""] for col in RAW_NUMERIC_FIELDS},
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ObservationParseError(f"Malformed CSV {path}: {e}") from e

    # pandas moves surplus leading fields into the index when every row is wider
    if not isinstance(df.index, pd.RangeIndex):
        raise ObservationParseError(f"Malformed CSV {path}: rows have more fields than the header")

    df.columns = [str(col).strip() for col in df.columns]

    try:
        require_exact_columns(df.columns, RAW_OBSERVATION_FIELDS, dataset="raw_observation")
        validate_raw_observations(df)
    except ValueError as e:
        raise ObservationParseError(f"{path}: {e}") from e

    df = df[RAW_OBSERVATION_FIELDS].copy()
    for col in RAW_NUMERIC_FIELDS:
        df[col] = pd.to_numeric(df[col])

    if verbose:
        print(f"[load] Read {len(df)} rows from {path}")

    return df
