"""End-to-end tests for the pipeline entry points."""

from __future__ import annotations

from pathlib import Path

import pytest

from climatefit.errors import ObservationParseError
from climatefit.pipeline import run, run_state_comparison
from climatefit.profile import DEFAULT_PROFILE, ClimateProfile, PrecipLevel


class TestRun:
    def test_fixture_run(self, observations_csv: Path) -> None:
        result = run(DEFAULT_PROFILE, observations_csv, verbose=False)

        assert len(result.cleaned) == 5
        assert list(result.ideal["county"]) == ["San Diego", "Los Angeles"]
        assert result.best["county"] == "San Diego"
        assert result.similar is not None
        assert result.similar["state"] != "CA"

    def test_no_match(self, observations_csv: Path) -> None:
        profile = ClimateProfile(20, PrecipLevel.HIGH, 1, 5)
        result = run(profile, observations_csv, verbose=False)

        assert result.ideal.empty
        assert result.best is None
        assert result.similar is None

    def test_no_out_of_state_candidate(self, tmp_path: Path) -> None:
        path = tmp_path / "obs.csv"
        path.write_text(
            "state,county,ZIP,YYYYMM,precipitation(mm),tempMax(C),tempMin(C),tempAvg(C)\n"
            "CA,A,90001,202308,0,24,18,21\n"
            "CA,B,90002,202308,5,30,10,20\n"
        )
        result = run(DEFAULT_PROFILE, path, verbose=False)

        assert result.best["county"] == "A"
        assert result.similar is None

    def test_verbose_output(self, observations_csv: Path, capsys) -> None:
        run(DEFAULT_PROFILE, observations_csv, verbose=True)
        out = capsys.readouterr().out

        assert "[rank] 5 vs 2" in out
        assert "[pipeline] Your ideal location:" in out
        assert "San Diego" in out

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            run(DEFAULT_PROFILE, tmp_path / "missing.csv", verbose=False)

    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("state,county,ZIP\nNY,A,1\n")
        with pytest.raises(ObservationParseError):
            run(DEFAULT_PROFILE, path, verbose=False)


class TestRunStateComparison:
    def test_writes_ny_vs_ca(self, observations_csv: Path, tmp_path: Path) -> None:
        out = run_state_comparison(observations_csv, tmp_path / "nycali.csv", verbose=False)

        lines = out.read_text().splitlines()
        assert lines[0] == "ny, ca"
        assert len(lines) == 3  # header + min(2 NY, 2 CA)
        ny_first, ca_first = (float(v) for v in lines[1].split(", "))
        assert ny_first == pytest.approx(77.0)
        assert ca_first == pytest.approx(71.6)

    def test_unknown_state(self, observations_csv: Path, tmp_path: Path) -> None:
        with pytest.raises(KeyError):
            run_state_comparison(
                observations_csv, tmp_path / "out.csv", state_b="WA", verbose=False
            )
