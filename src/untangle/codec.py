"""Text formats shared between the generator, the state engine and callers.

Description
    ``A-B`` edge tokens joined by ``,``; decimal vertex indices in
    ``[0, n)``; canonical output is sorted with ``A < B``.
Move
    An optional leading ``S`` (solve marker) and then ``P<i>:<x>,<y>/<d>``
    placements, each token optionally followed by ``;``.
Aux solution
    A move string starting with ``S`` that places every vertex in index
    order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .errors import DescriptionRangeError, DescriptionSyntaxError, MoveSyntaxError
from .graph import EdgeSet
from .models import Edge, Point

_NUMBER_RE = re.compile(r"\d+")
_PLACE_RE = re.compile(r"P([+-]?\d+):([+-]?\d+),([+-]?\d+)/([+-]?\d+)")

Placement = Tuple[int, Point]


# ── Description ─────────────────────────────────────────────────────

def encode_description(edges: Iterable[Edge]) -> str:
    return ",".join(str(edge) for edge in sorted(edges))


def _read_vertex(desc: str, pos: int, n: int) -> tuple[int, int]:
    m = _NUMBER_RE.match(desc, pos)
    if m is None:
        found = repr(desc[pos]) if pos < len(desc) else "end of string"
        raise DescriptionSyntaxError(
            f"Expected a number at position {pos} in game description, found {found}"
        )
    try:
        value = int(m.group(0))
    except ValueError as exc:
        raise DescriptionRangeError(
            f"Number out of range in game description at position {pos}"
        ) from exc
    if value >= n:
        raise DescriptionRangeError(
            f"Number out of range in game description: {value} (must be below {n})"
        )
    return value, m.end()


def decode_description(desc: str, n: int) -> EdgeSet:
    """Parse and validate *desc* for an *n*-point puzzle.

    Reversed pairs such as ``3-1`` are accepted and canonicalised.  Raises
    :class:`DescriptionSyntaxError` or :class:`DescriptionRangeError`.
    """
    edges = EdgeSet()
    if not desc:
        return edges

    pos = 0
    while True:
        a, pos = _read_vertex(desc, pos, n)
        if pos >= len(desc) or desc[pos] != "-":
            raise DescriptionSyntaxError("Expected '-' after number in game description")
        b, pos = _read_vertex(desc, pos + 1, n)
        if a == b:
            raise DescriptionSyntaxError(f"Edge {a}-{b} joins a point to itself")
        edge = Edge(a, b)
        if edge in edges:
            raise DescriptionSyntaxError(f"Edge {edge} appears twice in game description")
        edges.add_edge(edge)

        if pos == len(desc):
            break
        if desc[pos] != ",":
            raise DescriptionSyntaxError("Expected ',' after number in game description")
        pos += 1

    return edges


def validate_description(desc: str, n: int) -> None:
    decode_description(desc, n)


# ── Moves ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Move:
    """Parsed form of a move string."""

    solve: bool = False
    placements: Tuple[Placement, ...] = ()


def encode_point_move(index: int, point: Point) -> str:
    return f"P{index}:{point.x},{point.y}/{point.d}"


def encode_move(move: Move) -> str:
    parts = ["S"] if move.solve else []
    parts.extend(encode_point_move(i, p) for i, p in move.placements)
    return ";".join(parts)


def encode_solution(points: Sequence[Point]) -> str:
    """Aux solution string placing every vertex, e.g. ``S;P0:1,3/2;P1:...``."""
    return encode_move(Move(solve=True, placements=tuple(enumerate(points))))


def parse_move(move: str, n: int) -> Move:
    """Parse a move string for an *n*-point puzzle.

    The whole string is checked before anything is returned, so callers
    can apply the result without partial failure.
    """
    pos = 0
    solve = False
    if move.startswith("S"):
        solve = True
        pos = 1
        if move.startswith(";", pos):
            pos += 1

    placements: list[Placement] = []
    while pos < len(move):
        m = _PLACE_RE.match(move, pos)
        if m is None:
            raise MoveSyntaxError(
                f"Malformed move token at position {pos}: {move[pos:pos + 24]!r}"
            )
        try:
            index, x, y, d = (int(g) for g in m.groups())
        except ValueError as exc:
            raise MoveSyntaxError(f"Number too long in move at position {pos}") from exc
        if not 0 <= index < n:
            raise MoveSyntaxError(f"Point index {index} out of range for {n} points")
        if d <= 0:
            raise MoveSyntaxError(f"Denominator must be positive in move, got {d}")
        placements.append((index, Point(x, y, d)))
        pos = m.end()
        if move.startswith(";", pos):
            pos += 1

    return Move(solve=solve, placements=tuple(placements))
