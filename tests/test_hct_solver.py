import pytest

from materialcolor.cam16 import Cam16
from materialcolor.color import argb_from_lstar, lstar_from_argb
from materialcolor.hct_solver import solve_to_cam, solve_to_int
from materialcolor.maths import difference_degrees

BLACK = (0xFF, 0x00, 0x00, 0x00)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)
MIDGRAY = (0xFF, 0x77, 0x77, 0x77)


@pytest.mark.parametrize("color", [RED, GREEN, BLUE, WHITE, BLACK, MIDGRAY])
def test_solving_cam_of_color_gives_color_back(color):
    cam = Cam16.from_argb(color)
    assert solve_to_int(cam.hue, cam.chroma, lstar_from_argb(color)) == color


def test_zero_chroma_gives_grey():
    assert solve_to_int(120.0, 0.0, 50.0) == argb_from_lstar(50.0)


def test_extreme_tones():
    assert solve_to_int(40.0, 60.0, 0.0) == BLACK
    assert solve_to_int(40.0, 60.0, 100.0) == WHITE


@pytest.mark.parametrize("hue", [0.0, 45.0, 137.0, 250.0])
def test_hue_is_sanitized(hue):
    assert solve_to_int(hue + 360.0, 30.0, 60.0) == solve_to_int(hue, 30.0, 60.0)
    assert solve_to_int(hue - 360.0, 30.0, 60.0) == solve_to_int(hue, 30.0, 60.0)


@pytest.mark.parametrize("hue", [h * 30.0 for h in range(12)])
@pytest.mark.parametrize("tone", [20.0, 50.0, 80.0])
def test_tone_is_preserved(hue, tone):
    for chroma in (10.0, 40.0, 200.0):
        color = solve_to_int(hue, chroma, tone)
        assert color[0] == 255
        assert abs(lstar_from_argb(color) - tone) < 1.0


@pytest.mark.parametrize("hue", [h * 30.0 for h in range(12)])
def test_out_of_gamut_chroma_is_reduced_and_hue_kept(hue):
    cam = solve_to_cam(hue, 200.0, 50.0)
    assert cam.chroma < 200.0
    assert difference_degrees(cam.hue, hue) < 5.0


@pytest.mark.parametrize("hue", [30.0, 150.0, 270.0])
def test_in_gamut_chroma_is_matched(hue):
    cam = solve_to_cam(hue, 16.0, 60.0)
    assert abs(cam.chroma - 16.0) < 2.0
    assert difference_degrees(cam.hue, hue) < 5.0


def test_solve_to_cam_matches_solve_to_int():
    color = solve_to_int(210.0, 36.0, 40.0)
    assert solve_to_cam(210.0, 36.0, 40.0) == Cam16.from_argb(color)


def test_higher_tone_is_lighter():
    darker = solve_to_int(90.0, 30.0, 30.0)
    lighter = solve_to_int(90.0, 30.0, 70.0)
    assert lstar_from_argb(lighter) > lstar_from_argb(darker)