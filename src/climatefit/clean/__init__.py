"""Data cleaning modules."""

from climatefit.clean.clean_observations import (
    clean_observations,
    clean_observations_file,
    to_cleaned_columns,
)
from climatefit.clean.dedupe import (
    dedupe_observations,
    filter_unique,
    observation_key,
)

__all__ = [
    "clean_observations",
    "clean_observations_file",
    "to_cleaned_columns",
    "dedupe_observations",
    "filter_unique",
    "observation_key",
]
