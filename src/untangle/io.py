from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .codec import parse_move, validate_description
from .errors import MoveSyntaxError, PuzzleFileError
from .models import PuzzleParams


PathLike = Union[str, Path]

VERSION = "1.0"

PUZZLE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Untangle puzzle",
    "type": "object",
    "required": ["version", "points", "desc"],
    "properties": {
        "version": {"type": "string"},
        "points": {"type": "integer", "minimum": 4},
        "desc": {"type": "string", "pattern": r"^(\d+-\d+(,\d+-\d+)*)?$"},
        "aux": {"type": ["string", "null"], "pattern": r"^S"},
        "seed": {"type": ["integer", "null"]},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class PuzzleRecord:
    """A puzzle as stored on disk: parameters plus its text encodings."""

    params: PuzzleParams
    desc: str
    aux: Optional[str] = None
    seed: Optional[int] = None


def record_to_dict(record: PuzzleRecord) -> dict:
    return {
        "version": VERSION,
        "points": record.params.n,
        "desc": record.desc,
        "aux": record.aux,
        "seed": record.seed,
    }


def record_from_dict(payload: dict) -> PuzzleRecord:
    import jsonschema

    try:
        jsonschema.validate(instance=payload, schema=PUZZLE_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise PuzzleFileError(f"Invalid puzzle file: {exc.message}") from exc

    params = PuzzleParams(payload["points"])
    validate_description(payload["desc"], params.n)
    aux = payload.get("aux")
    if aux:
        try:
            parse_move(aux, params.n)
        except MoveSyntaxError as exc:
            raise PuzzleFileError(f"Invalid solution in puzzle file: {exc}") from exc
    return PuzzleRecord(params, payload["desc"], aux, payload.get("seed"))


def load_json(path: PathLike) -> PuzzleRecord:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except ValueError as exc:
        raise PuzzleFileError(f"{path} is not valid JSON: {exc}") from exc
    return record_from_dict(data)


def save_json(record: PuzzleRecord, path: PathLike) -> None:
    Path(path).write_text(
        json.dumps(record_to_dict(record), indent=2, sort_keys=True),
        encoding="utf-8",
    )
