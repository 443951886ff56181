import pytest

from materialcolor.blend import cam16ucs, harmonize, hct_hue
from materialcolor.color import lstar_from_argb
from materialcolor.hct import Hct
from materialcolor.maths import difference_degrees

RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)


def test_harmonize_with_itself_is_identity():
    assert harmonize(RED, RED) == RED


def test_harmonize_moves_towards_source():
    result = Hct.from_int(harmonize(RED, BLUE))
    red = Hct.from_int(RED)
    blue = Hct.from_int(BLUE)
    assert difference_degrees(result.hue, blue.hue) < difference_degrees(red.hue, blue.hue)


def test_harmonize_rotation_is_limited():
    result = Hct.from_int(harmonize(RED, BLUE))
    red = Hct.from_int(RED)
    assert difference_degrees(result.hue, red.hue) <= 16.0


def test_harmonize_keeps_tone():
    result = harmonize(GREEN, BLUE)
    assert abs(lstar_from_argb(result) - lstar_from_argb(GREEN)) < 1.0


@pytest.mark.parametrize("color", [RED, GREEN, BLUE])
def test_cam16ucs_amount_zero_returns_from(color):
    result = cam16ucs(color, BLUE, 0.0)
    assert result[0] == color[0]
    assert max(abs(x - y) for x, y in zip(result[1:], color[1:])) <= 1


def test_cam16ucs_amount_one_returns_to():
    result = cam16ucs(RED, BLUE, 1.0)
    assert result[0] == BLUE[0]
    assert max(abs(x - y) for x, y in zip(result[1:], BLUE[1:])) <= 1


def test_cam16ucs_midpoint_lightness_between():
    mid = lstar_from_argb(cam16ucs(RED, BLUE, 0.5))
    low, high = sorted((lstar_from_argb(RED), lstar_from_argb(BLUE)))
    assert low <= mid <= high


def test_hct_hue_keeps_tone():
    result = hct_hue(RED, BLUE, 0.5)
    assert abs(lstar_from_argb(result) - lstar_from_argb(RED)) < 1.0


def test_hct_hue_amount_zero_returns_from():
    result = hct_hue(RED, GREEN, 0.0)
    assert result[0] == RED[0]
    assert max(abs(x - y) for x, y in zip(result[1:], RED[1:])) <= 2