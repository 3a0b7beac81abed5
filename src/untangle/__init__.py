"""Untangle — planar-graph untangling puzzle generator and checker.

Public API is organised into layers:

- **Core** — rational points, edges, the edge set and shared graph handle
- **Geometry** — exact segment-crossing predicate and layouts
- **Generation** — random puzzle construction
- **State** — live puzzle states, moves and completion
- **Formats** — description / move / solution strings and puzzle files
- **UI** — drag bookkeeping and animation timing
"""

# ── Core ────────────────────────────────────────────────────────────
from .config import DEFAULT_CONFIG, UntangleConfig
from .errors import (
    UntangleError,
    ParameterError,
    DescriptionError,
    DescriptionSyntaxError,
    DescriptionRangeError,
    MoveSyntaxError,
    NoKnownSolution,
    PuzzleFileError,
    GenerationError,
)
from .models import Point, Edge, PuzzleParams, default_params, fetch_preset
from .graph import EdgeSet, Graph
from .algorithms import DegreeQueue, crossing_pairs, find_crossing, has_edge_crossings

# ── Geometry ────────────────────────────────────────────────────────
from .geometry import segments_cross, point_on_segment, coord_limit, compute_size, make_circle

# ── Generation ──────────────────────────────────────────────────────
from .generator import GeneratedPuzzle, generate_puzzle

# ── State ───────────────────────────────────────────────────────────
from .state import PuzzleState, new_game, execute_move, try_execute_move, solve_game

# ── Formats ─────────────────────────────────────────────────────────
from .codec import (
    Move,
    encode_description,
    decode_description,
    validate_description,
    encode_move,
    encode_point_move,
    encode_solution,
    parse_move,
)
from .io import PuzzleRecord, load_json, save_json

# ── UI ──────────────────────────────────────────────────────────────
from .ui import Button, PuzzleUI, interpret_move, changed_state, anim_length, flash_length

__all__ = [
    # Core
    "DEFAULT_CONFIG",
    "UntangleConfig",
    "UntangleError",
    "ParameterError",
    "DescriptionError",
    "DescriptionSyntaxError",
    "DescriptionRangeError",
    "MoveSyntaxError",
    "NoKnownSolution",
    "PuzzleFileError",
    "GenerationError",
    "Point",
    "Edge",
    "PuzzleParams",
    "default_params",
    "fetch_preset",
    "EdgeSet",
    "Graph",
    "DegreeQueue",
    "crossing_pairs",
    "find_crossing",
    "has_edge_crossings",
    # Geometry
    "segments_cross",
    "point_on_segment",
    "coord_limit",
    "compute_size",
    "make_circle",
    # Generation
    "GeneratedPuzzle",
    "generate_puzzle",
    # State
    "PuzzleState",
    "new_game",
    "execute_move",
    "try_execute_move",
    "solve_game",
    # Formats
    "Move",
    "encode_description",
    "decode_description",
    "validate_description",
    "encode_move",
    "encode_point_move",
    "encode_solution",
    "parse_move",
    "PuzzleRecord",
    "load_json",
    "save_json",
    # UI
    "Button",
    "PuzzleUI",
    "interpret_move",
    "changed_state",
    "anim_length",
    "flash_length",
]
