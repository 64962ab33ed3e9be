"""Print precipitation min/avg/max for a cleaned observations file.

Usage:
    python scripts/precipitation_metrics.py --input data/202308.csv

Used to check where the Low/Medium/High precipitation levels sit.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from climatefit.clean import clean_observations_file
from climatefit.config import observations_csv_path
from climatefit.profile import PRECIP_REFERENCE_MM
from climatefit.report import precipitation_metrics, print_precipitation_metrics


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize precipitation levels.")
    parser.add_argument(
        "--input",
        type=Path,
        default=observations_csv_path(),
        help="Climate observations CSV (default: data/202308.csv)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    cleaned = clean_observations_file(args.input)
    print_precipitation_metrics(precipitation_metrics(cleaned))

    print("[report] Reference levels (mm):")
    for level, mm in PRECIP_REFERENCE_MM.items():
        print(f"  {level.value}: {mm:.0f}")


if __name__ == "__main__":
    main()
