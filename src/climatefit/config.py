"""Configuration settings for the climate fit pipeline."""

from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def data_root() -> Path:
    return project_root() / "data"


def observations_csv_path(yyyymm: str = "202308") -> Path:
    return data_root() / f"{yyyymm}.csv"


def state_comparison_csv_path(state_a: str = "NY", state_b: str = "CA") -> Path:
    return data_root() / f"{state_a.lower()}{state_b.lower()}.csv"
