"""Rank locations against an ideal climate and find an out-of-state match.

Usage:
    python scripts/find_ideal_climate.py --input data/202308.csv
    python scripts/find_ideal_climate.py --input data/202308.csv --temp 65 --precip Medium
    python scripts/find_ideal_climate.py --input data/202308.csv --profile profiles/mine.json

Profile resolution: --profile JSON (or the default 70F / Low / +-5 / <20
profile), then any individual flags override its fields.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from climatefit.config import observations_csv_path
from climatefit.pipeline import run
from climatefit.profile import DEFAULT_PROFILE, ClimateProfile, PrecipLevel
from climatefit.report import print_ranking


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rank locations against an ideal climate profile."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=observations_csv_path(),
        help="Climate observations CSV (default: data/202308.csv)",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Profile JSON to start from (default: built-in profile)",
    )
    parser.add_argument("--temp", type=float, help="Ideal average temperature in F")
    parser.add_argument(
        "--precip",
        choices=[level.value for level in PrecipLevel],
        help="Ideal precipitation level",
    )
    parser.add_argument(
        "--avg-fluct",
        type=float,
        help="Allowed distance of tempAvgF from the ideal temperature",
    )
    parser.add_argument(
        "--min-max-fluct",
        type=float,
        help="Upper bound (exclusive) on tempMaxF - tempMinF",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="Number of ranked locations to print (default: 5)",
    )
    parser.add_argument(
        "--save-profile",
        type=Path,
        default=None,
        help="Write the resolved profile to this JSON path",
    )
    return parser.parse_args()


def resolve_profile(args: argparse.Namespace) -> ClimateProfile:
    profile = ClimateProfile.load(args.profile) if args.profile else DEFAULT_PROFILE

    overrides = {}
    if args.temp is not None:
        overrides["ideal_temp_f"] = args.temp
    if args.precip is not None:
        overrides["ideal_precipitation"] = PrecipLevel.parse(args.precip)
    if args.avg_fluct is not None:
        overrides["ideal_avg_temp_fluctuation"] = args.avg_fluct
    if args.min_max_fluct is not None:
        overrides["ideal_min_max_fluctuation"] = args.min_max_fluct

    return replace(profile, **overrides) if overrides else profile


def main() -> None:
    args = parse_args()
    profile = resolve_profile(args)

    if args.save_profile:
        path = profile.save(args.save_profile)
        print(f"[pipeline] Saved profile to {path}")

    print(f"[pipeline] Profile: {profile.to_json(indent=None)}")
    result = run(profile, args.input)

    if result.ideal.empty:
        print("[pipeline] ERROR: No location matches this profile")
        sys.exit(1)

    print_ranking(result.ideal, top=args.top)


if __name__ == "__main__":
    main()
