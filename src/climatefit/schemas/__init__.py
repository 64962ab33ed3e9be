"""Schema definitions for the climate fit pipeline.

This package defines the contract layer - what "valid data" looks like.
Nothing here should do work, only define structure.

Schemas:
- raw_observation: Rows as read from the source climate CSV
- cleaned_observation: Deduplicated, Fahrenheit-normalized rows
- validate: Validation helpers
"""

from climatefit.schemas.cleaned_observation import (
    CLEANED_OBSERVATION_FIELDS,
    METRIC_FIELDS,
    REQUIRED_COLUMNS as CLEANED_REQUIRED_COLUMNS,
    CleanedObservation,
    empty_cleaned_frame,
    validate_cleaned_observations,
)
from climatefit.schemas.raw_observation import (
    RAW_NUMERIC_FIELDS,
    RAW_OBSERVATION_FIELDS,
    REQUIRED_COLUMNS as RAW_REQUIRED_COLUMNS,
    RawObservation,
    validate_raw_observations,
)
from climatefit.schemas.validate import (
    require_columns,
    require_exact_columns,
    require_no_nulls,
    require_numeric,
    require_unique,
)

__all__ = [
    # Raw observations
    "RawObservation",
    "RAW_OBSERVATION_FIELDS",
    "RAW_NUMERIC_FIELDS",
    "RAW_REQUIRED_COLUMNS",
    "validate_raw_observations",
    # Cleaned observations
    "CleanedObservation",
    "CLEANED_OBSERVATION_FIELDS",
    "CLEANED_REQUIRED_COLUMNS",
    "METRIC_FIELDS",
    "empty_cleaned_frame",
    "validate_cleaned_observations",
    # Validation helpers
    "require_columns",
    "require_exact_columns",
    "require_numeric",
    "require_no_nulls",
    "require_unique",
]
