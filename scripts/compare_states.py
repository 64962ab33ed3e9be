"""CLI wrapper for the state-vs-state comparison export.

Usage:
    python scripts/compare_states.py --input data/202308.csv --output data/nycali.csv

Writes a two-column CSV ("ny, ca") holding the chosen metric for each state,
paired row by row up to the shorter state's location count.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from climatefit.config import observations_csv_path, state_comparison_csv_path
from climatefit.pipeline import run_state_comparison
from climatefit.schemas.cleaned_observation import METRIC_FIELDS


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export one climate metric for two states side by side."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=observations_csv_path(),
        help="Climate observations CSV (default: data/202308.csv)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output CSV (default: data/<a><b>.csv)",
    )
    parser.add_argument("--state-a", default="NY", help="Left state (default: NY)")
    parser.add_argument("--state-b", default="CA", help="Right state (default: CA)")
    parser.add_argument(
        "--metric",
        choices=METRIC_FIELDS,
        default="tempAvgF",
        help="Metric to compare (default: tempAvgF)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    output = args.output or state_comparison_csv_path(args.state_a, args.state_b)

    print(f"[pipeline] Comparing {args.metric}: {args.state_a} vs {args.state_b}")
    run_state_comparison(
        args.input,
        output,
        state_a=args.state_a,
        state_b=args.state_b,
        metric=args.metric,
    )


if __name__ == "__main__":
    main()
