"""First-occurrence-wins deduplication.

Observations repeat once per month for every (state, county); only the first
row seen for a location is kept. Keys are plain strings so the same filter
works for DataFrame rows, dicts, or anything else a caller can key.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

import pandas as pd

E = TypeVar("E")

KeyFn = Callable[[E, int, Sequence[E]], str]


def observation_key(state: str, county: str) -> str:
    """Location key used for deduplication (case-sensitive)."""
    return f"{state}-{county}"


def filter_unique(items: Sequence[E], key_fn: KeyFn) -> list[E]:
    """Keep the first item for each distinct key, preserving input order.

    Args:
        items: Sequence to filter (not modified)
        key_fn: Called as key_fn(item, index, items); must return the same
            key for the same item within one call

    Returns:
        New list with later duplicates dropped
    """
    kept: list[E] = []
    seen: set[str] = set()
    for i, item in enumerate(items):
        key = key_fn(item, i, items)
        if key not in seen:
            kept.append(item)
            seen.add(key)
    return kept


def observation_keys(df: pd.DataFrame) -> pd.Series:
    """Build the state-county key for every row of an observation frame."""
    return df["state"].astype(str) + "-" + df["county"].astype(str)


def dedupe_observations(df: pd.DataFrame) -> pd.DataFrame:
    """Remove repeated (state, county) rows, keeping the first.

    Works on raw or cleaned frames since both carry state and county.

    Args:
        df: DataFrame with state and county columns

    Returns:
        DataFrame with duplicates removed (first occurrence kept)
    """
    if df.empty:
        return df.reset_index(drop=True)

    keys = observation_keys(df).tolist()
    positions = filter_unique(range(len(df)), lambda pos, _i, _all: keys[pos])
    return df.iloc[positions].reset_index(drop=True)
