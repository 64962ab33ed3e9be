"""Group observations by key and export state-vs-state comparisons.

The comparison CSV pairs one metric from two states row by row, e.g.
average temperature in NY next to average temperature in CA, truncated to
the shorter state's row count.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, TypeVar

import pandas as pd

T = TypeVar("T")


def group_by(items: Iterable[T], key_fn: Callable[[T], str]) -> dict[str, list[T]]:
    """Bucket items by key, keeping insertion order within each bucket.

    Example:
        group_by([1, 2, 3], str) -> {"1": [1], "2": [2], "3": [3]}
    """
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def group_by_state(df: pd.DataFrame) -> dict[str, pd.DataFrame]:
    """Split cleaned observations into one DataFrame per state.

    Each bucket keeps input order and gets a fresh 0-based index.
    """
    if df.empty:
        return {}

    states = df["state"].astype(str).tolist()
    positions = group_by(range(len(df)), lambda pos: states[pos])
    return {
        state: df.iloc[rows].reset_index(drop=True)
        for state, rows in positions.items()
    }


def pair_state_metric(
    groups: dict[str, pd.DataFrame],
    state_a: str,
    state_b: str,
    metric: str = "tempAvgF",
) -> pd.DataFrame:
    """Pair one metric from two states by position.

    Args:
        groups: Output of group_by_state
        state_a: First state code (left column)
        state_b: Second state code (right column)
        metric: Cleaned column to compare

    Returns:
        DataFrame with columns named by the lower-cased state codes,
        length min(len(state_a rows), len(state_b rows))

    Raises:
        KeyError: If a state has no observations or metric is unknown
    """
    for state in (state_a, state_b):
        if state not in groups:
            raise KeyError(f"No observations for state {state!r}")

    a_values = groups[state_a][metric].tolist()
    b_values = groups[state_b][metric].tolist()
    n = min(len(a_values), len(b_values))

    return pd.DataFrame(
        {
            state_a.lower(): a_values[:n],
            state_b.lower(): b_values[:n],
        }
    )


def format_value(value: object) -> str:
    """Whole-number floats are written without a trailing ".0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_comparison_csv(pairs: pd.DataFrame) -> str:
    """Render a two-column pairing as "a, b" lines with a header."""
    lines = [", ".join(str(col) for col in pairs.columns)]
    for row in pairs.itertuples(index=False):
        lines.append(", ".join(format_value(value) for value in row))
    return "\n".join(lines) + "\n"


def write_state_comparison_csv(
    pairs: pd.DataFrame,
    output_path: Path | str,
    verbose: bool = True,
) -> Path:
    """Write a state comparison to disk.

    Args:
        pairs: Output of pair_state_metric
        output_path: Destination CSV path
        verbose: If True, print where the file was written

    Returns:
        Path to written output file
    """
    output_path = Path(output_path)

    # Atomic write
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_suffix(".csv.tmp")
    tmp_path.write_text(format_comparison_csv(pairs))
    tmp_path.replace(output_path)

    if verbose:
        print(f"[export] Wrote {len(pairs)} rows to {output_path}")

    return output_path
