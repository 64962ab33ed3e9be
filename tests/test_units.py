"""Tests for unit conversion."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from climatefit.units import celsius_to_fahrenheit


class TestCelsiusToFahrenheit:
    """Tests for temperature conversion."""

    def test_freezing_point(self) -> None:
        assert celsius_to_fahrenheit(0) == 32

    def test_boiling_point(self) -> None:
        assert celsius_to_fahrenheit(100) == 212

    def test_room_temperature(self) -> None:
        assert celsius_to_fahrenheit(25) == pytest.approx(77)

    def test_negative_40(self) -> None:
        """-40 is the same in both scales."""
        assert celsius_to_fahrenheit(-40) == pytest.approx(-40)

    def test_series_elementwise(self) -> None:
        result = celsius_to_fahrenheit(pd.Series([0.0, 100.0, 25.0]))
        assert isinstance(result, pd.Series)
        np.testing.assert_allclose(result.to_numpy(), [32.0, 212.0, 77.0])
