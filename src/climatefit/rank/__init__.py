"""Ranking of cleaned observations."""

from climatefit.rank.ideal import admit_mask, find_ideal, score_ideal
from climatefit.rank.similar import (
    find_similar_out_of_state,
    rank_similar_out_of_state,
    score_similarity,
)

__all__ = [
    "admit_mask",
    "score_ideal",
    "find_ideal",
    "score_similarity",
    "rank_similar_out_of_state",
    "find_similar_out_of_state",
]
