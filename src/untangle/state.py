"""Live puzzle state and move application.

A :class:`PuzzleState` couples one shared, immutable :class:`Graph` with a
private list of vertex positions.  States are never mutated once handed
out: :func:`execute_move` returns a fresh state and leaves its input alone,
so a caller can keep old and new states side by side (e.g. to animate
between them).  Each state owns one reference to the graph and must be
released when discarded.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .algorithms import crossing_pairs, find_crossing
from .codec import decode_description, parse_move
from .config import DEFAULT_CONFIG, UntangleConfig
from .errors import MoveSyntaxError, NoKnownSolution
from .geometry import coord_limit, make_circle
from .graph import Graph
from .models import Edge, Point, PuzzleParams

logger = logging.getLogger(__name__)


class PuzzleState:
    def __init__(
        self,
        params: PuzzleParams,
        points: List[Point],
        graph: Graph,
        *,
        w: Optional[int] = None,
        h: Optional[int] = None,
        completed: bool = False,
        cheated: bool = False,
        just_solved: bool = False,
    ) -> None:
        if len(points) != params.n:
            raise ValueError(f"Expected {params.n} points, got {len(points)}")
        self.params = params
        self.w = w if w is not None else coord_limit(params.n)
        self.h = h if h is not None else self.w
        self.points = points
        self.graph = graph
        self.completed = completed
        self.cheated = cheated
        self.just_solved = just_solved
        self._released = False

    @property
    def n(self) -> int:
        return self.params.n

    @property
    def edges(self) -> List[Edge]:
        return self.graph.edges.enumerate()

    def dup(self) -> "PuzzleState":
        """Copy the positions; share the graph by taking another reference."""
        return PuzzleState(
            self.params,
            list(self.points),
            self.graph.acquire(),
            w=self.w,
            h=self.h,
            completed=self.completed,
            cheated=self.cheated,
            just_solved=self.just_solved,
        )

    def release(self) -> None:
        if self._released:
            raise RuntimeError("PuzzleState released twice")
        self._released = True
        self.graph.release()

    def find_crossing(self) -> Optional[Tuple[Edge, Edge]]:
        return find_crossing(self.points, self.graph.edges)

    def crossing_pairs(self) -> List[Tuple[Edge, Edge]]:
        return list(crossing_pairs(self.points, self.graph.edges))

    def __repr__(self) -> str:
        return (
            f"PuzzleState(n={self.n}, edges={len(self.graph.edges)}, "
            f"completed={self.completed}, cheated={self.cheated})"
        )


def new_game(
    params: PuzzleParams,
    desc: str,
    config: UntangleConfig = DEFAULT_CONFIG,
) -> PuzzleState:
    """Build the starting state: the described graph on the circular layout."""
    params.validate()
    edges = decode_description(desc, params.n)
    w = coord_limit(params.n, config.point_density)
    points = make_circle(params.n, w, config.preferred_tilesize)
    logger.debug("New game: %d points, %d edges", params.n, len(edges))
    return PuzzleState(params, points, Graph(edges), w=w, h=w)


def execute_move(state: PuzzleState, move: str) -> PuzzleState:
    """Apply *move* to a copy of *state* and return the copy.

    Raises :class:`MoveSyntaxError` if any token is malformed, in which
    case nothing is applied.  Completion is re-checked only while the
    puzzle is unsolved; once solved it stays solved.
    """
    parsed = parse_move(move, state.n)

    ret = state.dup()
    ret.just_solved = False
    if parsed.solve:
        ret.cheated = ret.just_solved = True
    for index, point in parsed.placements:
        ret.points[index] = point

    if not ret.completed:
        crossing = ret.find_crossing()
        ret.completed = crossing is None
        if crossing is not None:
            logger.debug("Edges %s and %s still cross", crossing[0], crossing[1])
        else:
            logger.debug("Puzzle completed (cheated=%s)", ret.cheated)

    return ret


def try_execute_move(state: PuzzleState, move: str) -> Optional[PuzzleState]:
    """Like :func:`execute_move` but returns ``None`` for a rejected move."""
    try:
        return execute_move(state, move)
    except MoveSyntaxError as exc:
        logger.debug("Rejected move %r: %s", move, exc)
        return None


def solve_game(state: PuzzleState, aux: Optional[str]) -> str:
    """Return the move string that solves *state*.

    Only the solution recorded at generation time is known; there is no
    solver.
    """
    if not aux:
        raise NoKnownSolution("Solution not known for this puzzle")
    return aux
