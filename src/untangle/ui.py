"""Drag bookkeeping that turns pointer positions into move strings.

Nothing here draws or listens to devices: a front end reports pointer
positions in pixels, and :func:`interpret_move` answers with ``None`` (not
interested), ``""`` (UI-only change, redraw) or a move string for
:func:`untangle.state.execute_move`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .codec import encode_point_move
from .config import DEFAULT_CONFIG, UntangleConfig
from .models import Point
from .state import PuzzleState


class Button(enum.Enum):
    LEFT_PRESS = "press"
    LEFT_DRAG = "drag"
    LEFT_RELEASE = "release"


@dataclass
class PuzzleUI:
    drag_point: Optional[int] = None
    new_point: Optional[Point] = None
    just_dragged: bool = False
    just_moved: bool = False
    anim_length: float = 0.0

    @property
    def dragging(self) -> bool:
        return self.drag_point is not None


def nearest_point(state: PuzzleState, tilesize: int, x: int, y: int) -> tuple[int, int]:
    """Return ``(vertex, squared pixel distance)`` of the vertex nearest (x, y)."""
    best = -1
    best_d = 0
    for i, point in enumerate(state.points):
        px, py = point.to_pixels(tilesize)
        d = (px - x) ** 2 + (py - y) ** 2
        if best == -1 or d < best_d:
            best, best_d = i, d
    return best, best_d


def interpret_move(
    state: PuzzleState,
    ui: PuzzleUI,
    tilesize: int,
    x: int,
    y: int,
    button: Button,
    config: UntangleConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    if button is Button.LEFT_PRESS:
        best, best_d = nearest_point(state, tilesize, x, y)
        if best >= 0 and best_d <= config.drag_threshold ** 2:
            ui.drag_point = best
            ui.new_point = Point(x, y, tilesize)
            return ""
        return None

    if button is Button.LEFT_DRAG and ui.dragging:
        ui.new_point = Point(x, y, tilesize)
        return ""

    if button is Button.LEFT_RELEASE and ui.dragging:
        p = ui.drag_point
        point = ui.new_point
        ui.drag_point = None
        # Dropping the point outside the playing area cancels the drag.
        if (
            point is None
            or not 0 <= point.x < state.w * point.d
            or not 0 <= point.y < state.h * point.d
        ):
            return ""
        ui.just_dragged = True
        return encode_point_move(p, point)

    return None


def changed_state(ui: PuzzleUI, old: Optional[PuzzleState], new: PuzzleState) -> None:
    ui.drag_point = None
    ui.new_point = None
    ui.just_moved = ui.just_dragged
    ui.just_dragged = False


def anim_length(
    old: PuzzleState,
    new: PuzzleState,
    direction: int,
    ui: PuzzleUI,
    config: UntangleConfig = DEFAULT_CONFIG,
) -> float:
    """Seconds to animate between *old* and *new*; zero right after a drag."""
    if ui.just_moved:
        return 0.0
    target = old if direction < 0 else new
    ui.anim_length = config.solve_anim_time if target.just_solved else config.anim_time
    return ui.anim_length


def flash_length(
    old: PuzzleState,
    new: PuzzleState,
    config: UntangleConfig = DEFAULT_CONFIG,
) -> float:
    if not old.completed and new.completed and not old.cheated and not new.cheated:
        return config.flash_time
    return 0.0
