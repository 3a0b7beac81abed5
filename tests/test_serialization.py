import json
import sys

import pytest

from untangle.errors import DescriptionRangeError, PuzzleFileError
from untangle.generator import generate_puzzle
from untangle.io import PuzzleRecord, load_json, record_from_dict, record_to_dict, save_json
from untangle.models import PuzzleParams


def test_round_trip_json(tmp_path):
    puzzle = generate_puzzle(PuzzleParams(6), seed=8)
    record = PuzzleRecord(puzzle.params, puzzle.desc, puzzle.aux, 8)

    path = tmp_path / "puzzle.json"
    save_json(record, path)
    loaded = load_json(path)

    assert loaded == record


def test_aux_is_optional():
    record = record_from_dict({"version": "1.0", "points": 4, "desc": "0-1,2-3"})
    assert record.aux is None
    assert record_to_dict(record)["aux"] is None


@pytest.mark.parametrize(
    "payload",
    [
        {"version": "1.0", "points": 3, "desc": "0-1"},
        {"version": "1.0", "points": 4},
        {"version": "1.0", "points": 4, "desc": "0-1,"},
        {"version": "1.0", "points": 4, "desc": "0-1", "aux": "P0:1,1/1"},
        {"version": "1.0", "points": 4, "desc": "0-1", "extra": True},
        {"version": "1.0", "points": 4, "desc": "0-1", "aux": "S;P9:1,1/1"},
    ],
)
def test_invalid_payloads(payload):
    with pytest.raises(PuzzleFileError):
        record_from_dict(payload)


def test_description_range_checked():
    with pytest.raises(DescriptionRangeError):
        record_from_dict({"version": "1.0", "points": 4, "desc": "0-7"})


def test_not_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PuzzleFileError):
        load_json(path)


def test_saved_file_is_plain_json(tmp_path):
    path = tmp_path / "puzzle.json"
    save_json(PuzzleRecord(PuzzleParams(4), "0-2,1-3"), path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"version": "1.0", "points": 4, "desc": "0-2,1-3", "aux": None, "seed": None}


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="interpreter has no integer string conversion limit",
)
def test_oversized_number_in_file(tmp_path):
    path = tmp_path / "huge.json"
    path.write_text('{"version": "1.0", "points": ' + "9" * 5000 + ', "desc": ""}', encoding="utf-8")
    with pytest.raises(PuzzleFileError):
        load_json(path)
