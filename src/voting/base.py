"""Shared types for voting strategies that pick track winners from distance candidates."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, NamedTuple, Optional, TypeVar

ResultT = TypeVar("ResultT")


class ObservationMetricResult(NamedTuple):
    """Distances between a query observation and one known track."""

    track_id: int
    attribute_distance: Optional[float]
    feature_distance: Optional[float]


class Voting(ABC, Generic[ResultT]):
    """Strategy that ranks track identities given per-candidate distances."""

    @abstractmethod
    def winners(self, distances: Iterable[ObservationMetricResult]) -> List[ResultT]:
        """Return the winning tracks, best first."""


__all__ = ["ObservationMetricResult", "Voting"]
