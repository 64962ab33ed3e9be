"""Console reporting for pipeline results.

Human-readable only; nothing here is a stable machine interface.
"""

from __future__ import annotations

from typing import Mapping

import pandas as pd

from climatefit.schemas.cleaned_observation import CLEANED_OBSERVATION_FIELDS


def precipitation_metrics(df: pd.DataFrame) -> dict[str, float]:
    """Min, max and mean precipitation over cleaned observations.

    Useful for checking where the Low/Medium/High reference levels sit
    relative to the data.

    Raises:
        ValueError: If df has no rows
    """
    if df.empty:
        raise ValueError("Cannot compute precipitation metrics on an empty dataset")

    precip = df["precipitation"].astype(float)
    return {
        "min": float(precip.min()),
        "max": float(precip.max()),
        "avg": float(precip.mean()),
    }


def format_observation(row: Mapping) -> str:
    """One observation as aligned "field: value" lines."""
    width = max(len(f) for f in CLEANED_OBSERVATION_FIELDS)
    lines = []
    for field in CLEANED_OBSERVATION_FIELDS:
        value = row[field]
        if isinstance(value, float):
            value = f"{value:.2f}"
        lines.append(f"  {field:<{width}}  {value}")
    return "\n".join(lines)


def print_observation(title: str, row: Mapping | None, stage: str = "pipeline") -> None:
    """Print a titled observation, or a note when there is none."""
    if row is None:
        print(f"[{stage}] {title}: none found")
        return
    print(f"[{stage}] {title}:")
    print(format_observation(row))


def print_precipitation_metrics(metrics: Mapping[str, float]) -> None:
    print("[report] Precipitation (mm):")
    print(f"  min={metrics['min']:.1f}, avg={metrics['avg']:.1f}, max={metrics['max']:.1f}")


def print_ranking(ranked: pd.DataFrame, top: int = 5) -> None:
    """Print the first rows of a ranking as a table."""
    if ranked.empty:
        print("[rank] No locations matched")
        return
    print(f"[rank] Top {min(top, len(ranked))} of {len(ranked)}:")
    print(ranked.head(top).to_string(index=False, float_format=lambda v: f"{v:.2f}"))
