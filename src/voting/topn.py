"""Top-N majority voting over gated feature distances."""
from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List

from .base import ObservationMetricResult, Voting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopNVotingElt:
    """A winning track and the number of votes it gathered."""

    track_id: int
    votes: int

    def to_dict(self) -> dict:
        return {"track_id": self.track_id, "votes": self.votes}


@dataclass(frozen=True)
class TopNVoting(Voting[TopNVotingElt]):
    """Select the ``topn`` tracks with the most close feature distances.

    Winners are computed as follows:

    1. drop candidates without a feature distance or with one above ``max_distance``
    2. count the remaining candidates per track id
    3. drop tracks with fewer than ``min_votes`` votes
    4. sort tracks by vote count, highest first
    5. keep the first ``topn``

    Order between tracks with equal vote counts is not defined.
    """

    topn: int
    max_distance: float
    min_votes: int

    def _accepts(self, distance) -> bool:
        if distance is None or math.isnan(distance):
            return False
        return distance <= self.max_distance

    def winners(self, distances: Iterable[ObservationMetricResult]) -> List[TopNVotingElt]:
        total = 0
        counts: Counter = Counter()
        for track_id, _attribute_distance, feature_distance in distances:
            total += 1
            if self._accepts(feature_distance):
                counts[track_id] += 1

        ranked = sorted(
            (
                TopNVotingElt(track_id=track_id, votes=votes)
                for track_id, votes in counts.items()
                if votes >= self.min_votes
            ),
            key=lambda elt: elt.votes,
            reverse=True,
        )
        result = ranked[: max(self.topn, 0)]

        logger.debug(
            "Top-N voting: %d candidates, %d retained, %d tracks, %d winners",
            total,
            sum(counts.values()),
            len(counts),
            len(result),
        )
        return result


__all__ = ["TopNVoting", "TopNVotingElt"]
