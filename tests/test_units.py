import math

import pytest

from pibot.units import Range, Vec2, XYTurn, deg_to_rad


def test_deg_to_rad_half_turn():
    assert deg_to_rad(180) == pytest.approx(math.pi)


@pytest.mark.parametrize("deg", [0, 45, 90, 270, 360, -30])
def test_deg_to_rad_round_trip(deg):
    assert math.degrees(deg_to_rad(deg)) == pytest.approx(deg)


def test_range_diff():
    assert Range(500, 2500).diff() == 2000


def test_range_diff_negative_when_reversed():
    r = Range(10, 3)
    assert r.diff() == -(Range(3, 10).diff())


def test_xyturn_holds_values():
    value = XYTurn(Vec2(0.25, -0.5), 0.75)
    assert value.xy.x == 0.25
    assert value.xy.y == -0.5
    assert value.turn == 0.75
    assert value == XYTurn(Vec2(0.25, -0.5), 0.75)