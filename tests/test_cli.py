import json

import pytest

from src.voting import ObservationMetricResult, TopNVoting
from src.voting.cli import load_observations, main, parse_args


def _write_candidates(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_observations_accepts_rows_and_objects(tmp_path):
    path = _write_candidates(
        tmp_path / "candidates.json",
        [
            [1, 0.0, 0.2],
            [2, None, None],
            {"track_id": 3, "feature_distance": 0.1},
        ],
    )
    assert load_observations(path) == [
        ObservationMetricResult(1, 0.0, 0.2),
        ObservationMetricResult(2, None, None),
        ObservationMetricResult(3, None, 0.1),
    ]


def test_load_observations_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_observations(tmp_path / "missing.json")

    bad = _write_candidates(tmp_path / "bad.json", [[1, 0.0, 0.2], [2, 0.1]])
    with pytest.raises(ValueError, match="candidate 1"):
        load_observations(bad)

    not_a_list = _write_candidates(tmp_path / "object.json", {"track_id": 1})
    with pytest.raises(ValueError):
        load_observations(not_a_list)


def test_parse_args_defaults(tmp_path):
    voting, candidates, output = parse_args([str(tmp_path / "c.json")])
    assert voting == TopNVoting(topn=5, max_distance=0.32, min_votes=1)
    assert candidates == tmp_path / "c.json"
    assert output is None


def test_main_prints_winners(tmp_path, capsys):
    path = _write_candidates(
        tmp_path / "candidates.json",
        [[1, 0.0, 0.2], [1, 0.0, 0.3], [2, 0.0, 0.4]],
    )
    main([str(path)])
    assert json.loads(capsys.readouterr().out) == [{"track_id": 1, "votes": 2}]


def test_main_writes_output(tmp_path):
    path = _write_candidates(
        tmp_path / "candidates.json",
        [[1, 0.0, 0.2], [2, 0.0, 0.2], [2, 0.0, 0.25], [3, 0.0, 0.1]],
    )
    output = tmp_path / "out" / "winners.json"
    main([str(path), "--topn", "1", "--min-votes", "2", "--output", str(output)])
    assert json.loads(output.read_text(encoding="utf-8")) == [{"track_id": 2, "votes": 2}]


@pytest.mark.parametrize("track_id", [1.5, True, -2, "3"])
def test_load_observations_rejects_bad_track_ids(tmp_path, track_id):
    path = _write_candidates(tmp_path / "candidates.json", [[0, 0.0, 0.1], [track_id, 0.0, 0.1]])
    with pytest.raises(ValueError, match="candidate 1"):
        load_observations(path)


def test_load_observations_accepts_whole_float_ids(tmp_path):
    path = _write_candidates(tmp_path / "candidates.json", [[4.0, None, 0.1]])
    assert load_observations(path) == [ObservationMetricResult(4, None, 0.1)]


def test_load_observations_rejects_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_observations(tmp_path)
