from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_CONFIG, UntangleConfig
from .errors import ParameterError


@dataclass(frozen=True)
class Point:
    """A rational point ``(x/d, y/d)``.

    Both coordinates share the denominator *d*, which must be positive.
    Points with different denominators are only ever compared through the
    exact predicates in :mod:`untangle.geometry`.
    """

    x: int
    y: int
    d: int = 1

    def __post_init__(self) -> None:
        if self.d <= 0:
            raise ValueError(f"Point denominator must be positive, got {self.d}")

    def scaled(self, k: int) -> "Point":
        """Same position expressed over denominator ``k * d``."""
        if k <= 0:
            raise ValueError(f"Scale factor must be positive, got {k}")
        return Point(self.x * k, self.y * k, self.d * k)

    def to_pixels(self, tilesize: int) -> tuple[int, int]:
        return self.x * tilesize // self.d, self.y * tilesize // self.d


@dataclass(frozen=True, order=True)
class Edge:
    """Undirected edge between two vertex indices, stored with ``a < b``."""

    a: int
    b: int

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise ValueError(f"Edge endpoints must differ, got {self.a}-{self.b}")
        if self.a > self.b:
            lo, hi = self.b, self.a
            object.__setattr__(self, "a", lo)
            object.__setattr__(self, "b", hi)

    @property
    def vertex_ids(self) -> tuple[int, int]:
        return self.a, self.b

    def shares_endpoint(self, other: "Edge") -> bool:
        return (
            self.a == other.a
            or self.a == other.b
            or self.b == other.a
            or self.b == other.b
        )

    def relabeled(self, permutation) -> "Edge":
        return Edge(permutation[self.a], permutation[self.b])

    def __str__(self) -> str:
        return f"{self.a}-{self.b}"


@dataclass(frozen=True)
class PuzzleParams:
    n: int = DEFAULT_CONFIG.default_points

    def validate(self) -> None:
        if self.n < 4:
            raise ParameterError("Number of points must be at least four")

    def encode(self) -> str:
        return str(self.n)

    @classmethod
    def decode(cls, text: str) -> "PuzzleParams":
        text = text.strip()
        try:
            if not text.isdigit():
                raise ValueError(text)
            return cls(int(text))
        except ValueError as exc:
            raise ParameterError(
                f"Number of points must be a positive integer, got {text[:24]!r}"
            ) from exc


def default_params(config: UntangleConfig = DEFAULT_CONFIG) -> PuzzleParams:
    return PuzzleParams(config.default_points)


def fetch_preset(
    i: int, config: UntangleConfig = DEFAULT_CONFIG
) -> Optional[tuple[str, PuzzleParams]]:
    """Return ``(menu name, params)`` for preset *i*, or ``None`` past the end."""
    if i < 0 or i >= len(config.presets):
        return None
    n = config.presets[i]
    return f"{n} points", PuzzleParams(n)
