"""Climate fit: rank locations against an ideal climate profile."""

from climatefit.clean import clean_observations, clean_observations_file
from climatefit.profile import DEFAULT_PROFILE, ClimateProfile, PrecipLevel
from climatefit.rank import find_ideal, find_similar_out_of_state

__all__ = [
    "ClimateProfile",
    "PrecipLevel",
    "DEFAULT_PROFILE",
    "clean_observations",
    "clean_observations_file",
    "find_ideal",
    "find_similar_out_of_state",
]
