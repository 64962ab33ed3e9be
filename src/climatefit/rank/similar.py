"""Find out-of-state locations with a similar climate.

Similarity to a reference location is the sum of absolute differences in
precipitation and the three Fahrenheit temperatures (lower is closer). Rows
in the reference's own state are never candidates.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np
import pandas as pd

from climatefit.errors import NoCandidateError
from climatefit.schemas.cleaned_observation import (
    CLEANED_OBSERVATION_FIELDS,
    METRIC_FIELDS,
    validate_cleaned_observations,
)

SCORE_COLUMN = "score"


def score_similarity(reference: Mapping, df: pd.DataFrame) -> pd.Series:
    """Distance from each row to the reference (lower is closer).

    Args:
        reference: Mapping or Series with the cleaned metric fields
        df: Cleaned observations

    Returns:
        Float Series aligned on df.index
    """
    total = pd.Series(0.0, index=df.index)
    for col in METRIC_FIELDS:
        total = total + np.abs(df[col] - float(reference[col]))
    return total


def out_of_state(reference: Mapping, df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose state differs from the reference's state."""
    return df[df["state"] != reference["state"]]


def rank_similar_out_of_state(
    reference: Mapping,
    df: pd.DataFrame,
    n: int | None = None,
    include_score: bool = False,
) -> pd.DataFrame:
    """Rank out-of-state rows by similarity to the reference, closest first.

    Ties keep their input order (stable sort).

    Args:
        reference: Reference observation (Mapping or Series)
        df: Cleaned observations (not modified)
        n: If set, return at most the n closest rows
        include_score: If True, add a "score" column to the result

    Returns:
        New DataFrame, possibly empty
    """
    validate_cleaned_observations(df, require_unique_keys=False)

    columns = CLEANED_OBSERVATION_FIELDS + ([SCORE_COLUMN] if include_score else [])
    if df.empty:
        return pd.DataFrame(columns=columns)

    candidates = out_of_state(reference, df)[CLEANED_OBSERVATION_FIELDS]
    if candidates.empty:
        return pd.DataFrame(columns=columns)

    scores = score_similarity(reference, candidates).to_numpy()
    order = np.argsort(scores, kind="stable")
    if n is not None:
        order = order[:n]

    ranked = candidates.iloc[order].reset_index(drop=True)
    if include_score:
        ranked[SCORE_COLUMN] = scores[order]
    return ranked


def find_similar_out_of_state(reference: Mapping, df: pd.DataFrame) -> pd.Series:
    """Return the out-of-state row closest to the reference.

    The first row in input order wins among equal scores.

    Raises:
        NoCandidateError: If no row outside the reference's state exists
    """
    ranked = rank_similar_out_of_state(reference, df, n=1)
    if ranked.empty:
        raise NoCandidateError(
            f"No out-of-state observations to compare against state {reference['state']!r}"
        )
    return ranked.iloc[0]
