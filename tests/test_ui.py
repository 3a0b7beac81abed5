import pytest

from untangle.models import Point, PuzzleParams
from untangle.state import execute_move, new_game
from untangle.ui import (
    Button,
    PuzzleUI,
    anim_length,
    changed_state,
    flash_length,
    interpret_move,
    nearest_point,
)

TILE = 64


@pytest.fixture
def state():
    # Circle layout in pixels: 0 (128, 19), 1 (237, 128), 2 (128, 237), 3 (19, 128).
    return new_game(PuzzleParams(4), "0-2,1-3")


@pytest.fixture
def ui():
    return PuzzleUI()


def test_nearest_point(state):
    assert nearest_point(state, TILE, 130, 20) == (0, 5)


def test_press_near_a_point_starts_drag(state, ui):
    assert interpret_move(state, ui, TILE, 130, 20, Button.LEFT_PRESS) == ""
    assert ui.drag_point == 0
    assert ui.new_point == Point(130, 20, TILE)


def test_press_far_from_points_is_ignored(state, ui):
    assert interpret_move(state, ui, TILE, 0, 0, Button.LEFT_PRESS) is None
    assert not ui.dragging


def test_drag_and_release_builds_move(state, ui):
    interpret_move(state, ui, TILE, 130, 20, Button.LEFT_PRESS)
    assert interpret_move(state, ui, TILE, 50, 60, Button.LEFT_DRAG) == ""
    assert ui.new_point == Point(50, 60, TILE)

    move = interpret_move(state, ui, TILE, 50, 60, Button.LEFT_RELEASE)
    assert move == "P0:50,60/64"
    assert ui.just_dragged
    assert not ui.dragging

    moved = execute_move(state, move)
    assert moved.points[0] == Point(50, 60, TILE)


def test_release_outside_cancels(state, ui):
    interpret_move(state, ui, TILE, 130, 20, Button.LEFT_PRESS)
    interpret_move(state, ui, TILE, -5, 60, Button.LEFT_DRAG)
    assert interpret_move(state, ui, TILE, -5, 60, Button.LEFT_RELEASE) == ""
    assert not ui.just_dragged
    assert not ui.dragging


def test_release_without_drag_is_ignored(state, ui):
    assert interpret_move(state, ui, TILE, 10, 10, Button.LEFT_RELEASE) is None
    assert interpret_move(state, ui, TILE, 10, 10, Button.LEFT_DRAG) is None


def test_changed_state_resets_drag(state, ui):
    interpret_move(state, ui, TILE, 130, 20, Button.LEFT_PRESS)
    move = interpret_move(state, ui, TILE, 50, 60, Button.LEFT_RELEASE)
    moved = execute_move(state, move)
    changed_state(ui, state, moved)
    assert ui.just_moved
    assert not ui.just_dragged
    assert ui.drag_point is None


def test_anim_length(state, ui):
    moved = execute_move(state, "P0:1,1/1")
    assert anim_length(state, moved, 1, ui) == pytest.approx(0.13)

    solved = execute_move(state, "S;P0:0,0/1;P2:1,0/1")
    assert anim_length(state, solved, 1, ui) == pytest.approx(0.5)
    assert anim_length(solved, moved, -1, ui) == pytest.approx(0.5)

    ui.just_moved = True
    assert anim_length(state, moved, 1, ui) == 0.0


def test_flash_only_on_honest_completion(state):
    honest = execute_move(state, "P0:0,0/1;P2:1,0/1")
    cheated = execute_move(state, "S;P0:0,0/1;P2:1,0/1")
    assert flash_length(state, honest) == pytest.approx(0.13)
    assert flash_length(state, cheated) == 0.0
    assert flash_length(honest, execute_move(honest, "")) == 0.0
