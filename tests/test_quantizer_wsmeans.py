import pytest

from materialcolor.quantizer_wsmeans import quantize_wsmeans

RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)


def test_empty_input_gives_empty_result():
    assert quantize_wsmeans([], [], 4) == {}


def test_max_colors_must_be_positive():
    with pytest.raises(ValueError):
        quantize_wsmeans([RED], [RED], 0)


def test_single_colour_with_starting_cluster():
    assert quantize_wsmeans([RED, RED, RED], [RED], 8) == {RED: 3}


def test_single_colour_with_random_start():
    assert quantize_wsmeans([BLUE] * 4, [], 8) == {BLUE: 4}


def test_two_colours_with_exact_starting_clusters():
    pixels = [RED] * 3 + [BLUE] * 2
    assert quantize_wsmeans(pixels, [RED, BLUE], 4) == {RED: 3, BLUE: 2}


def test_three_colours_with_exact_starting_clusters():
    pixels = [RED, GREEN, GREEN, BLUE]
    result = quantize_wsmeans(pixels, [BLUE, GREEN, RED], 3)
    assert result == {RED: 1, GREEN: 2, BLUE: 1}


def test_cluster_count_limited_by_max_colors():
    result = quantize_wsmeans([RED, BLUE], [RED, BLUE], 1)
    assert len(result) == 1
    assert sum(result.values()) == 2


def test_cluster_count_limited_by_starting_clusters():
    result = quantize_wsmeans([RED, GREEN, BLUE], [GREEN], 3)
    assert len(result) == 1
    assert sum(result.values()) == 3


def test_accepts_lists_as_pixels():
    assert quantize_wsmeans([list(RED)], [list(RED)], 2) == {RED: 1}