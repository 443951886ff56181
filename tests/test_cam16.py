import pytest

from materialcolor.cam16 import Cam16
from materialcolor.viewing_conditions import default_viewing_conditions

BLACK = (0xFF, 0x00, 0x00, 0x00)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)
MIDGRAY = (0xFF, 0x77, 0x77, 0x77)


def _check(cam, j, chroma, hue, m, s, q):
    assert cam.j == pytest.approx(j, abs=0.001)
    assert cam.chroma == pytest.approx(chroma, abs=0.001)
    assert cam.hue == pytest.approx(hue, abs=0.001)
    assert cam.m == pytest.approx(m, abs=0.001)
    assert cam.s == pytest.approx(s, abs=0.001)
    assert cam.q == pytest.approx(q, abs=0.001)


def test_conversions_are_reflexive():
    cam = Cam16.from_argb(RED)
    assert cam.viewed(default_viewing_conditions()) == RED


def test_cam_red():
    _check(Cam16.from_argb(RED), 46.445, 113.357, 27.408, 89.494, 91.889, 105.988)


def test_cam_green():
    _check(Cam16.from_argb(GREEN), 79.331, 108.410, 142.139, 85.587, 78.604, 138.520)


def test_cam_blue():
    _check(Cam16.from_argb(BLUE), 25.465, 87.230, 282.788, 68.867, 93.674, 78.481)


def test_cam_black():
    _check(Cam16.from_argb(BLACK), 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def test_cam_white():
    _check(Cam16.from_argb(WHITE), 100.0, 2.869, 209.492, 2.265, 12.068, 155.521)


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, BLACK, MIDGRAY])
def test_to_int_round_trip(argb):
    assert Cam16.from_argb(argb).to_int() == argb


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, MIDGRAY])
def test_from_jch_round_trip(argb):
    cam = Cam16.from_argb(argb)
    assert Cam16.from_jch(cam.j, cam.chroma, cam.hue).to_int() == argb


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, MIDGRAY])
def test_from_ucs_recovers_dimensions(argb):
    cam = Cam16.from_argb(argb)
    back = Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar)
    assert back.j == pytest.approx(cam.j, abs=1e-6)
    assert back.chroma == pytest.approx(cam.chroma, abs=1e-6)
    assert back.hue == pytest.approx(cam.hue, abs=1e-6)
    assert back.to_int() == argb


def test_from_jch_in_viewing_conditions_matches_default():
    vc = default_viewing_conditions()
    assert Cam16.from_jch_in_viewing_conditions(50.0, 30.0, 120.0, vc) == Cam16.from_jch(
        50.0, 30.0, 120.0
    )


def test_from_argb_in_viewing_conditions_matches_default():
    vc = default_viewing_conditions()
    assert Cam16.from_argb_in_viewing_conditions(BLUE, vc) == Cam16.from_argb(BLUE)


def test_distance_properties():
    red = Cam16.from_argb(RED)
    green = Cam16.from_argb(GREEN)
    blue = Cam16.from_argb(BLUE)
    assert red.distance(Cam16.from_argb(RED)) == pytest.approx(0.0)
    assert red.distance(green) == pytest.approx(green.distance(red))
    assert red.distance(green) > 0.0
    near = Cam16.from_argb((0xFF, 0xFE, 0x01, 0x00))
    assert red.distance(near) < red.distance(blue)