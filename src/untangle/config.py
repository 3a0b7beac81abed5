"""Process-wide constants for the generator, state engine and drag controller.

All tunables live on one immutable :class:`UntangleConfig` which is passed
explicitly to the functions that need it.  :data:`DEFAULT_CONFIG` carries
the values the game ships with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class UntangleConfig:
    """Tunable constants.

    *point_density*: the solution grid has about ``point_density * n``
    cells, so roughly one cell in three holds a point.
    *max_degree*: upper bound on the degree of any generated vertex.
    *preferred_tilesize*: denominator used for the circular layout and
    the default pixel scale of the drag controller.
    *max_shuffle_attempts*: cap on the forced-crossing rejection loop.
    """

    circle_radius: int = 6
    drag_threshold: int = 12
    preferred_tilesize: int = 64
    flash_time: float = 0.13
    anim_time: float = 0.13
    solve_anim_time: float = 0.50
    point_density: int = 3
    max_degree: int = 4
    max_shuffle_attempts: int = 10_000
    presets: Tuple[int, ...] = (6, 10, 15, 20, 25)
    default_points: int = 10

    def __post_init__(self) -> None:
        if self.point_density < 1:
            raise ValueError(f"point_density must be >= 1, got {self.point_density}")
        if self.max_degree < 1:
            raise ValueError(f"max_degree must be >= 1, got {self.max_degree}")
        if self.preferred_tilesize < 1:
            raise ValueError(
                f"preferred_tilesize must be >= 1, got {self.preferred_tilesize}"
            )
        if self.max_shuffle_attempts < 1:
            raise ValueError(
                f"max_shuffle_attempts must be >= 1, got {self.max_shuffle_attempts}"
            )
        if self.drag_threshold < 0:
            raise ValueError(f"drag_threshold must be >= 0, got {self.drag_threshold}")


DEFAULT_CONFIG = UntangleConfig()
