import dataclasses

import pytest

from minigames.geometry import (
    Color,
    CurrentGame,
    Direction2d,
    FPoint,
    FRect,
    Point,
    Rect,
    SnakeGridRect,
    SnakeRectState,
)


def test_point_add_then_sub_round_trips():
    a, b = Point(3, -7), Point(11, 4)
    assert (a + b) - b == a


def test_point_add_is_commutative():
    a, b = Point(2, 5), Point(-9, 1)
    assert a + b == b + a


def test_point_sub_self_is_origin():
    p = Point(8, 13)
    assert p - p == Point()


def test_point_is_immutable_and_hashable():
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5
    assert {p: "x"}[Point(1, 2)] == "x"


def test_point_add_rejects_other_types():
    with pytest.raises(TypeError):
        Point(1, 2) + (1, 2)


def test_fpoint_round_trip():
    a, b = FPoint(1.5, -2.25), FPoint(0.5, 4.0)
    assert (a + b) - b == a
    assert a - a == FPoint()


def test_rects_are_mutable():
    r = Rect(1, 2, 3, 4)
    r.x = 10
    assert r == Rect(10, 2, 3, 4)
    f = FRect(1.0, 2.0, 3.0, 4.0)
    f.h = 9.5
    assert f.h == 9.5


def test_color_defaults_to_opaque_white():
    assert Color().rgba() == (255, 255, 255, 255)


def test_color_rgb_drops_alpha():
    c = Color(1, 2, 3, 4)
    assert c.rgb() == (1, 2, 3)
    assert c.rgba() == (1, 2, 3, 4)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


@pytest.mark.parametrize("enum", [CurrentGame, Direction2d, SnakeRectState])
def test_enum_values_look_up_their_own_member(enum):
    members = list(enum)
    looked_up = [enum(member.value) for member in members]
    assert looked_up == members
    assert len({m.value for m in members}) == len(members)


def test_snake_grid_rect_starts_as_grid():
    cell = SnakeGridRect(0, 0, 10)
    assert cell.state is SnakeRectState.GRID
    cell.state = SnakeRectState.FOOD
    assert cell.state is SnakeRectState.FOOD