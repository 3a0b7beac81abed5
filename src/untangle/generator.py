"""Random puzzle generation.

Generation runs in three stages:

1. **Point placement** — *n* distinct cells of a ``w x w`` integer grid,
   chosen by shuffling every cell and keeping the first *n*.
2. **Greedy edge construction** — repeatedly give the lowest-degree vertex
   an edge to its nearest eligible partner, refusing edges that would
   exceed the degree bound, run through another point, or cross an
   existing edge.  The result is planar in the grid layout by
   construction.
3. **Forced-crossing shuffle** — relabel the vertices at random until the
   relabeled graph, drawn on the standard circular layout, has at least one
   crossing, so the puzzle never starts out solved.

The description names edges under the final labels; the aux string
records the original grid layout (nudged half a unit off the grid lines)
under the same labels, which is a known solution.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .algorithms import DegreeQueue, edge_is_clear, has_edge_crossings
from .codec import encode_description, encode_solution
from .config import DEFAULT_CONFIG, UntangleConfig
from .errors import GenerationError
from .geometry import coord_limit, make_circle
from .graph import EdgeSet
from .models import Edge, Point, PuzzleParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedPuzzle:
    """Everything produced by :func:`generate_puzzle`.

    *points* and *edges* use the pre-shuffle labels; *permutation* maps an
    original label to its published label.  *desc* and *aux* are the
    strings handed to the state engine.
    """

    params: PuzzleParams
    desc: str
    aux: str
    points: Tuple[Point, ...]
    edges: Tuple[Edge, ...]
    permutation: Tuple[int, ...]

    @property
    def relabeled_edges(self) -> List[Edge]:
        return sorted(edge.relabeled(self.permutation) for edge in self.edges)

    def solution_points(self) -> List[Point]:
        return solution_layout(self.points, self.permutation)


def place_points(n: int, w: int, rng: random.Random) -> List[Point]:
    cells = list(range(w * w))
    rng.shuffle(cells)
    return [Point(cell % w, cell // w, 1) for cell in cells[:n]]


def build_edges(points: Sequence[Point], max_degree: int = 4) -> EdgeSet:
    """Greedily add non-crossing edges until no vertex can take another."""
    n = len(points)
    queue = DegreeQueue(n)
    edges = EdgeSet()
    passes = 0

    while True:
        passes += 1
        added = False

        for i in range(n):
            degree, v = queue[i]
            if degree >= max_degree:
                break  # queue is sorted by degree; the rest are saturated too

            # Vertices earlier in the queue already tried this pairing.
            candidates: List[Tuple[int, int]] = []
            for k in range(i + 1, n):
                other_degree, u = queue[k]
                if other_degree >= max_degree or edges.contains(u, v):
                    continue
                dx = points[u].x - points[v].x
                dy = points[u].y - points[v].y
                candidates.append((dx * dx + dy * dy, u))
            candidates.sort()

            for _, u in candidates:
                if not edge_is_clear(points, edges, v, u):
                    continue
                edges.add(v, u)
                queue.increment(v)
                queue.increment(u)
                added = True
                break

            if added:
                break

        if not added:
            break

    logger.debug("Built %d edges over %d points in %d passes", len(edges), n, passes)
    return edges


def shuffle_until_crossed(
    edges: Sequence[Edge],
    n: int,
    w: int,
    rng: random.Random,
    config: UntangleConfig = DEFAULT_CONFIG,
) -> List[int]:
    """Return a relabeling under which the circular layout has a crossing.

    ``perm[old] == new``.  Raises :class:`GenerationError` once
    ``config.max_shuffle_attempts`` permutations have all come out
    uncrossed.
    """
    circle = make_circle(n, w, config.preferred_tilesize)
    perm = list(range(n))
    for attempt in range(1, config.max_shuffle_attempts + 1):
        rng.shuffle(perm)
        relabeled = [edge.relabeled(perm) for edge in edges]
        if has_edge_crossings(circle, relabeled):
            logger.debug("Found a crossed relabeling after %d attempt(s)", attempt)
            return perm
    raise GenerationError(
        f"No crossed relabeling of {len(edges)} edges found "
        f"in {config.max_shuffle_attempts} attempts"
    )


def solution_layout(points: Sequence[Point], permutation: Sequence[int]) -> List[Point]:
    """Original layout under the published labels, offset half a unit.

    Odd denominators are doubled first so the half-unit offset stays
    integral.
    """
    layout: List[Optional[Point]] = [None] * len(points)
    for i, point in enumerate(points):
        if point.d % 2:
            point = point.scaled(2)
        half = point.d // 2
        layout[permutation[i]] = Point(point.x + half, point.y + half, point.d)
    return [p for p in layout if p is not None]


def generate_puzzle(
    params: PuzzleParams,
    rng: Optional[random.Random] = None,
    *,
    seed: Optional[int] = None,
    config: UntangleConfig = DEFAULT_CONFIG,
) -> GeneratedPuzzle:
    """Generate a new puzzle for *params*.

    Parameters
    ----------
    params : PuzzleParams
        Validated first; fewer than four points raises ``ParameterError``.
    rng : random.Random, optional
        Source of randomness.  When omitted a ``random.Random(seed)`` is
        used, so a fixed *seed* reproduces the same puzzle.
    config : UntangleConfig
        Point density, degree bound, circle denominator and shuffle cap.
    """
    params.validate()
    if rng is None:
        rng = random.Random(seed)

    n = params.n
    w = coord_limit(n, config.point_density)
    points = place_points(n, w, rng)
    edges = build_edges(points, config.max_degree)
    edge_list = edges.enumerate()
    perm = shuffle_until_crossed(edge_list, n, w, rng, config)

    desc = encode_description(edge.relabeled(perm) for edge in edge_list)
    aux = encode_solution(solution_layout(points, perm))
    logger.info("Generated %d-point puzzle with %d edges on a %dx%d grid", n, len(edge_list), w, w)

    return GeneratedPuzzle(
        params=params,
        desc=desc,
        aux=aux,
        points=tuple(points),
        edges=tuple(edge_list),
        permutation=tuple(perm),
    )
