"""Data loading modules."""

from climatefit.load.read_observations import read_observations_csv

__all__ = ["read_observations_csv"]
