import dataclasses
import math

import pytest

from materialcolor.color import WHITE_POINT_D65, y_from_lstar
from materialcolor.viewing_conditions import (
    DEFAULT_ADAPTING_LUMINANCE,
    ViewingConditions,
    default_viewing_conditions,
    make_viewing_conditions,
)


def test_default_matches_explicit_parameters():
    explicit = make_viewing_conditions(
        WHITE_POINT_D65, 200.0 / math.pi * y_from_lstar(50.0) / 100.0, 50.0, 2.0, False
    )
    assert default_viewing_conditions() == explicit


def test_default_is_cached():
    first = default_viewing_conditions()
    second = default_viewing_conditions()
    assert first is second
    assert first.c == pytest.approx(0.69)


def test_default_adapting_luminance_constant():
    assert DEFAULT_ADAPTING_LUMINANCE == pytest.approx(200.0 / math.pi * y_from_lstar(50.0) / 100.0)


def test_derived_relationships():
    vc = default_viewing_conditions()
    assert vc.ncb == vc.nbb
    assert vc.fl_root == pytest.approx(vc.fl**0.25)
    assert vc.z == pytest.approx(1.48 + math.sqrt(vc.n))
    assert vc.nbb == pytest.approx(0.725 / vc.n**0.2)
    assert vc.n * 100.0 == pytest.approx(y_from_lstar(50.0))
    assert vc.aw > 0.0


def test_surround_average_gives_upper_c():
    vc = make_viewing_conditions(WHITE_POINT_D65, 11.72, 50.0, 2.0, False)
    assert vc.c == pytest.approx(0.69)


def test_surround_dark_gives_lower_c():
    vc = make_viewing_conditions(WHITE_POINT_D65, 11.72, 50.0, 0.0, False)
    assert vc.c == pytest.approx(0.525)


@pytest.mark.parametrize("surround", [0.0, 0.5, 1.0, 1.5, 2.0])
def test_nc_follows_surround(surround):
    vc = make_viewing_conditions(WHITE_POINT_D65, 11.72, 50.0, surround, False)
    assert vc.nc == pytest.approx(0.8 + surround / 10.0)


def test_discounting_illuminant_changes_rgb_d():
    full = make_viewing_conditions(WHITE_POINT_D65, 11.72, 50.0, 2.0, True)
    partial = make_viewing_conditions(WHITE_POINT_D65, 11.72, 50.0, 2.0, False)
    for discounted, normal in zip(full.rgb_d, partial.rgb_d):
        assert discounted != pytest.approx(normal)
    assert full.fl == pytest.approx(partial.fl)


def test_is_frozen():
    vc = default_viewing_conditions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        vc.aw = 1.0  # type: ignore[misc]
    assert isinstance(vc, ViewingConditions) and vc.aw > 0.0