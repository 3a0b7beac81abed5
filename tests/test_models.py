import sys

import pytest

from untangle.config import DEFAULT_CONFIG, UntangleConfig
from untangle.errors import ParameterError
from untangle.models import Point, PuzzleParams, default_params, fetch_preset


def test_point_requires_positive_denominator():
    with pytest.raises(ValueError):
        Point(1, 1, 0)
    with pytest.raises(ValueError):
        Point(1, 1, -2)


def test_point_scaling_keeps_position():
    p = Point(3, 5, 2)
    q = p.scaled(3)
    assert q == Point(9, 15, 6)
    assert q.x * p.d == p.x * q.d and q.y * p.d == p.y * q.d


def test_point_to_pixels():
    assert Point(3, 5, 2).to_pixels(64) == (96, 160)
    assert Point(1, 1, 3).to_pixels(64) == (21, 21)


def test_params_validation():
    PuzzleParams(4).validate()
    with pytest.raises(ParameterError, match="at least four"):
        PuzzleParams(3).validate()


def test_params_encoding():
    assert PuzzleParams(15).encode() == "15"
    assert PuzzleParams.decode("15") == PuzzleParams(15)
    with pytest.raises(ParameterError):
        PuzzleParams.decode("fifteen")


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="interpreter has no integer string conversion limit",
)
def test_params_decoding_very_long_number():
    with pytest.raises(ParameterError):
        PuzzleParams.decode("9" * 5000)


def test_default_params():
    assert default_params() == PuzzleParams(10)


def test_presets():
    assert fetch_preset(0) == ("6 points", PuzzleParams(6))
    assert fetch_preset(4) == ("25 points", PuzzleParams(25))
    assert fetch_preset(5) is None
    assert fetch_preset(-1) is None


def test_config_defaults():
    assert DEFAULT_CONFIG.max_degree == 4
    assert DEFAULT_CONFIG.point_density == 3
    assert DEFAULT_CONFIG.drag_threshold == 2 * DEFAULT_CONFIG.circle_radius


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_degree": 0},
        {"point_density": 0},
        {"preferred_tilesize": 0},
        {"max_shuffle_attempts": 0},
        {"drag_threshold": -1},
    ],
)
def test_config_rejects_nonsense(kwargs):
    with pytest.raises(ValueError):
        UntangleConfig(**kwargs)
