from materialcolor.quantizer_map import quantize_map

RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)


def test_empty_input_gives_empty_map():
    assert quantize_map([]) == {}


def test_single_pixel():
    assert quantize_map([RED]) == {RED: 1}


def test_counts_repeated_pixels():
    result = quantize_map([RED, RED, GREEN, GREEN, GREEN, BLUE])
    assert result == {RED: 2, GREEN: 3, BLUE: 1}


def test_counts_sum_to_pixel_count():
    pixels = [RED, GREEN, BLUE, RED, BLUE, BLUE, BLUE]
    result = quantize_map(pixels)
    assert sum(result.values()) == len(pixels)
    assert set(result) == set(pixels)


def test_accepts_lists_and_generators():
    result = quantize_map(list(p) for p in [RED, RED])
    assert result == {RED: 2}