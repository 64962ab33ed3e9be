"""Rank locations against an ideal climate profile.

A location is admitted when:
- tempAvgF lies within ideal_temp_f +/- ideal_avg_temp_fluctuation (inclusive)
- tempMaxF - tempMinF is strictly below ideal_min_max_fluctuation

Admitted locations are ordered by a lower-is-better score:

    |ideal_temp_f - tempAvgF| + (tempMaxF - tempMinF)
        + |precipitation reference - precipitation|

The score is never stored on the cleaned dataset; it only drives ordering.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from climatefit.profile import ClimateProfile
from climatefit.schemas.cleaned_observation import (
    CLEANED_OBSERVATION_FIELDS,
    validate_cleaned_observations,
)

SCORE_COLUMN = "score"


def admit_mask(profile: ClimateProfile, df: pd.DataFrame) -> pd.Series:
    """Boolean mask of rows inside the profile's tolerance bands."""
    low, high = profile.avg_temp_band
    spread = df["tempMaxF"] - df["tempMinF"]
    in_band = (df["tempAvgF"] >= low) & (df["tempAvgF"] <= high)
    return in_band & (spread < profile.ideal_min_max_fluctuation)


def score_ideal(profile: ClimateProfile, df: pd.DataFrame) -> pd.Series:
    """Score every row against the profile (lower is better).

    Returns:
        Float Series aligned on df.index
    """
    avg_score = np.abs(profile.ideal_temp_f - df["tempAvgF"])
    fluctuation = df["tempMaxF"] - df["tempMinF"]
    precip_score = np.abs(profile.precipitation_reference_mm - df["precipitation"])
    return (avg_score + fluctuation + precip_score).astype(float)


def find_ideal(
    profile: ClimateProfile,
    df: pd.DataFrame,
    include_score: bool = False,
    verbose: bool = False,
) -> pd.DataFrame:
    """Filter and rank cleaned observations, best match first.

    Ties keep their input order (stable sort). No admitted rows is not an
    error: an empty DataFrame with the cleaned columns is returned.

    Args:
        profile: Target climate
        df: Cleaned observations (not modified)
        include_score: If True, add a "score" column to the result
        verbose: If True, print how many rows were admitted

    Returns:
        New DataFrame of admitted rows sorted ascending by score

    Raises:
        ValueError: If df does not conform to the cleaned schema
    """
    validate_cleaned_observations(df, require_unique_keys=False)

    columns = CLEANED_OBSERVATION_FIELDS + ([SCORE_COLUMN] if include_score else [])
    if df.empty:
        if verbose:
            print("[rank] 0 vs 0")
        return pd.DataFrame(columns=columns)

    admitted = df.loc[admit_mask(profile, df), CLEANED_OBSERVATION_FIELDS]

    if verbose:
        print(f"[rank] {len(df)} vs {len(admitted)}")

    if admitted.empty:
        return pd.DataFrame(columns=columns)

    scores = score_ideal(profile, admitted).to_numpy()
    order = np.argsort(scores, kind="stable")

    ranked = admitted.iloc[order].reset_index(drop=True)
    if include_score:
        ranked[SCORE_COLUMN] = scores[order]
    return ranked
