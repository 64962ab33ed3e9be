"""Pipeline entry points.

Pipeline flow:
    read_observations_csv -> clean_observations -> find_ideal
        -> find_similar_out_of_state (on the best match)

    read_observations_csv -> clean_observations -> group_by_state
        -> pair_state_metric -> write_state_comparison_csv

Nothing runs on import; scripts call run() / run_state_comparison().
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from climatefit.clean.clean_observations import clean_observations_file
from climatefit.errors import NoCandidateError
from climatefit.group import (
    group_by_state,
    pair_state_metric,
    write_state_comparison_csv,
)
from climatefit.profile import ClimateProfile
from climatefit.rank.ideal import find_ideal
from climatefit.rank.similar import find_similar_out_of_state
from climatefit.report import print_observation


@dataclass
class PipelineResult:
    """Outputs of one ranking run.

    Attributes:
        cleaned: All cleaned observations
        ideal: Admitted observations, best match first
        best: Best match, or None if nothing was admitted
        similar: Closest out-of-state match to best, or None
    """

    cleaned: pd.DataFrame
    ideal: pd.DataFrame
    best: pd.Series | None = None
    similar: pd.Series | None = None


def run(
    profile: ClimateProfile,
    input_path: Path | str,
    verbose: bool = True,
) -> PipelineResult:
    """Clean the observations file, rank it, and find an out-of-state match.

    Raises:
        FileNotFoundError: If input_path does not exist
        ObservationParseError: If the file is malformed
    """
    cleaned = clean_observations_file(input_path, verbose=verbose)
    ideal = find_ideal(profile, cleaned, verbose=verbose)
    result = PipelineResult(cleaned=cleaned, ideal=ideal)

    if ideal.empty:
        if verbose:
            print_observation("Your ideal location", None)
        return result

    result.best = ideal.iloc[0]
    if verbose:
        print_observation("Your ideal location", result.best)

    try:
        result.similar = find_similar_out_of_state(result.best, cleaned)
    except NoCandidateError as e:
        if verbose:
            print(f"[pipeline] {e}")
        return result

    if verbose:
        print_observation("Similar to your ideal location", result.similar)

    return result


def run_state_comparison(
    input_path: Path | str,
    output_path: Path | str,
    state_a: str = "NY",
    state_b: str = "CA",
    metric: str = "tempAvgF",
    verbose: bool = True,
) -> Path:
    """Export one metric for two states side by side.

    Raises:
        FileNotFoundError: If input_path does not exist
        KeyError: If either state has no observations
    """
    cleaned = clean_observations_file(input_path, verbose=verbose)
    groups = group_by_state(cleaned)

    if verbose:
        for state in (state_a, state_b):
            count = len(groups[state]) if state in groups else 0
            print(f"[pipeline] {state}: {count} locations")

    pairs = pair_state_metric(groups, state_a, state_b, metric=metric)
    return write_state_comparison_csv(pairs, output_path, verbose=verbose)
