"""Helpers turning numpy distance rows into voting candidates."""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .base import ObservationMetricResult


def _as_row(values, name: str, expected: int) -> np.ndarray:
    row = np.asarray(values, dtype=np.float64)
    if row.ndim != 1 or len(row) != expected:
        raise ValueError(
            f"{name} must be a 1-D array of length {expected}, got shape {row.shape}"
        )
    return row


def _optional(value: float) -> Optional[float]:
    # NaN and infinities mark a pair that could not be compared
    return float(value) if np.isfinite(value) else None


def observations_from_distances(
    track_ids: Sequence[int] | np.ndarray,
    feature_distances: Sequence[float] | np.ndarray,
    attribute_distances: Optional[Sequence[float] | np.ndarray] = None,
) -> List[ObservationMetricResult]:
    """Pair each track id with its feature (and optional attribute) distance.

    Non-finite entries are reported as ``None`` so that voting skips them.
    """

    ids = np.asarray(track_ids)
    if ids.ndim != 1:
        raise ValueError(f"track_ids must be a 1-D array, got shape {ids.shape}")
    if ids.size and not np.issubdtype(ids.dtype, np.integer):
        raise ValueError(f"track_ids must be an integer array, got dtype {ids.dtype}")
    if ids.size and (ids < 0).any():
        raise ValueError(f"track_ids must be non-negative, got {ids.min()}")
    features = _as_row(feature_distances, "feature_distances", len(ids))
    if attribute_distances is None:
        attributes: List[Optional[float]] = [None] * len(ids)
    else:
        attributes = [
            _optional(value)
            for value in _as_row(attribute_distances, "attribute_distances", len(ids))
        ]

    return [
        ObservationMetricResult(int(track_id), attribute, _optional(feature))
        for track_id, attribute, feature in zip(ids, attributes, features)
    ]


__all__ = ["observations_from_distances"]
