import pytest

from materialcolor.maths import (
    difference_degrees,
    lerp,
    matrix_multiply,
    rotation_direction,
    sanitize_degrees_double,
)


@pytest.mark.parametrize("start,stop", [(0.0, 10.0), (-5.0, 5.0), (3.5, 3.5)])
def test_lerp_endpoints(start, stop):
    assert lerp(start, stop, 0.0) == pytest.approx(start)
    assert lerp(start, stop, 1.0) == pytest.approx(stop)


def test_lerp_midpoint_is_between():
    value = lerp(2.0, 8.0, 0.5)
    assert 2.0 < value < 8.0
    assert value - 2.0 == pytest.approx(8.0 - value)


@pytest.mark.parametrize("degrees", [-725.0, -360.0, -1.5, 0.0, 45.0, 359.9, 360.0, 1000.0])
def test_sanitize_in_range(degrees):
    result = sanitize_degrees_double(degrees)
    assert 0.0 <= result < 360.0


@pytest.mark.parametrize("degrees", [12.0, 200.0, 359.0])
def test_sanitize_is_periodic(degrees):
    for k in (-3, -1, 1, 4):
        assert sanitize_degrees_double(degrees + 360.0 * k) == pytest.approx(degrees)


@pytest.mark.parametrize("a,b", [(0.0, 90.0), (10.0, 350.0), (180.0, 0.0), (45.0, 45.0)])
def test_difference_is_symmetric_and_bounded(a, b):
    d = difference_degrees(a, b)
    assert d == pytest.approx(difference_degrees(b, a))
    assert 0.0 <= d <= 180.0


def test_difference_wraps_around():
    assert difference_degrees(10.0, 350.0) == pytest.approx(difference_degrees(10.0, -10.0))


def test_rotation_direction():
    assert rotation_direction(10.0, 20.0) == 1.0
    assert rotation_direction(20.0, 10.0) == -1.0
    assert rotation_direction(350.0, 10.0) == rotation_direction(10.0, 20.0)


def test_matrix_multiply_identity():
    identity = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    assert matrix_multiply([3.0, -2.0, 7.5], identity) == (3.0, -2.0, 7.5)


def test_matrix_multiply_permutation():
    permutation = [[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
    assert matrix_multiply([3.0, -2.0, 7.5], permutation) == (7.5, 3.0, -2.0)