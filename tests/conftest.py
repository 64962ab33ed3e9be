"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from climatefit.schemas.cleaned_observation import CLEANED_OBSERVATION_FIELDS
from climatefit.schemas.raw_observation import RAW_OBSERVATION_FIELDS

# Directory containing test fixtures
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def observations_csv() -> Path:
    """Path to the sample observations CSV (7 raw rows, 5 locations)."""
    return FIXTURES_DIR / "observations_sample.csv"


@pytest.fixture
def raw_observations_sample(observations_csv: Path) -> pd.DataFrame:
    """Load sample raw observations fixture."""
    return pd.read_csv(observations_csv, dtype={"state": str, "county": str})


@pytest.fixture
def make_raw_observations():
    """Factory fixture for creating raw observation DataFrames.

    Each row is (state, county, precip_mm, tmax_c, tmin_c, tavg_c).
    """

    def _make(rows: list[tuple], yyyymm: int = 202308) -> pd.DataFrame:
        records = [
            {
                "state": state,
                "county": county,
                "ZIP": 10000 + i,
                "YYYYMM": yyyymm,
                "precipitation(mm)": precip,
                "tempMax(C)": tmax,
                "tempMin(C)": tmin,
                "tempAvg(C)": tavg,
            }
            for i, (state, county, precip, tmax, tmin, tavg) in enumerate(rows)
        ]
        return pd.DataFrame(records, columns=RAW_OBSERVATION_FIELDS)

    return _make


@pytest.fixture
def make_cleaned_observations():
    """Factory fixture for creating cleaned observation DataFrames.

    Each row is (state, county, precip_mm, tmax_f, tmin_f, tavg_f).
    """

    def _make(rows: list[tuple]) -> pd.DataFrame:
        records = [
            {
                "state": state,
                "county": county,
                "zip": 10000 + i,
                "yyyymm": 202308,
                "precipitation": float(precip),
                "tempMaxF": float(tmax),
                "tempMinF": float(tmin),
                "tempAvgF": float(tavg),
            }
            for i, (state, county, precip, tmax, tmin, tavg) in enumerate(rows)
        ]
        return pd.DataFrame(records, columns=CLEANED_OBSERVATION_FIELDS)

    return _make
