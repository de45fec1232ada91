"""Voting strategies that pick the most plausible tracks for an observation."""

from .base import ObservationMetricResult, Voting
from .observations import observations_from_distances
from .topn import TopNVoting, TopNVotingElt

__all__ = [
    "ObservationMetricResult",
    "Voting",
    "TopNVoting",
    "TopNVotingElt",
    "observations_from_distances",
]
