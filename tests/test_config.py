"""Tests for path configuration."""

from __future__ import annotations

from climatefit.config import (
    data_root,
    observations_csv_path,
    project_root,
    state_comparison_csv_path,
)


def test_data_root_under_project() -> None:
    assert data_root() == project_root() / "data"


def test_observations_csv_path() -> None:
    assert observations_csv_path().name == "202308.csv"
    assert observations_csv_path("202401").parent == data_root()


def test_state_comparison_csv_path() -> None:
    assert state_comparison_csv_path().name == "nyca.csv"
    assert state_comparison_csv_path("TX", "FL").name == "txfl.csv"
