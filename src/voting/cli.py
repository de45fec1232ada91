"""Run Top-N voting over candidate distances stored as JSON."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .base import ObservationMetricResult
from .topn import TopNVoting


def _optional_float(value) -> Optional[float]:
    return None if value is None else float(value)


def _track_id(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"track_id must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"track_id must be a whole number, got {value!r}")
    if value < 0:
        raise ValueError(f"track_id must be non-negative, got {value!r}")
    return int(value)


def _parse_entry(entry) -> ObservationMetricResult:
    if isinstance(entry, dict):
        track_id = entry["track_id"]
        attribute_distance = entry.get("attribute_distance")
        feature_distance = entry.get("feature_distance")
    else:
        track_id, attribute_distance, feature_distance = entry
    return ObservationMetricResult(
        _track_id(track_id),
        _optional_float(attribute_distance),
        _optional_float(feature_distance),
    )


def load_observations(path: Path | str) -> List[ObservationMetricResult]:
    """Read candidates from a JSON list of ``[track_id, attr, feat]`` rows or objects."""

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Candidates file not found: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON list of candidates in {path}")

    observations: List[ObservationMetricResult] = []
    for index, entry in enumerate(payload):
        try:
            observations.append(_parse_entry(entry))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(
                f"Failed to parse candidate {index} in {path}: {entry!r}"
            ) from exc
    return observations


def parse_args(
    argv: Optional[Sequence[str]] = None,
) -> Tuple[TopNVoting, Path, Optional[Path]]:
    parser = argparse.ArgumentParser(description="Pick the most voted tracks from candidate distances")
    parser.add_argument(
        "candidates",
        type=Path,
        help="JSON file with [track_id, attribute_distance, feature_distance] entries",
    )
    parser.add_argument("--topn", type=int, default=5, help="Maximum number of winners")
    parser.add_argument(
        "--max-distance",
        type=float,
        default=0.32,
        help="Largest feature distance that still counts as a vote",
    )
    parser.add_argument(
        "--min-votes",
        type=int,
        default=1,
        help="Fewest votes a track needs to be reported",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write winners to this JSON file instead of stdout",
    )
    args = parser.parse_args(argv)

    voting = TopNVoting(
        topn=args.topn,
        max_distance=args.max_distance,
        min_votes=args.min_votes,
    )
    return voting, args.candidates, args.output


def main(argv: Optional[Sequence[str]] = None) -> None:
    voting, candidates_path, output_path = parse_args(argv)
    winners = voting.winners(load_observations(candidates_path))
    payload = json.dumps([winner.to_dict() for winner in winners], indent=2)

    if output_path is None:
        print(payload)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
        print(f"Wrote {len(winners)} winners to {output_path.as_posix()}")


if __name__ == "__main__":  # pragma: no cover
    main()
