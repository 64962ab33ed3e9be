"""Unit conversions."""

from __future__ import annotations

from typing import TypeVar

import numpy as np
import pandas as pd

Temperature = TypeVar("Temperature", float, np.ndarray, pd.Series)


def celsius_to_fahrenheit(celsius: Temperature) -> Temperature:
    """Convert Celsius to Fahrenheit.

    Works element-wise on numpy arrays and pandas Series.
    """
    return celsius * 1.8 + 32
