# materialcolor

Colour utilities for Material Design colour work, in pure Python with no
third-party dependencies.

Colours are ARGB tuples of four integers in the range 0–255:
`(alpha, red, green, blue)`.

## Modules

- `materialcolor.color`: conversions between ARGB, linear RGB, CIE XYZ, CIE L\*a\*b\*
  and L\* (`xyz_from_argb`, `argb_from_xyz`, `argb_from_linrgb`, `lab_from_argb`,
  `argb_from_lab`, `y_from_lstar`, `lstar_from_y`, `lstar_from_argb`,
  `argb_from_lstar`, `linearized`, `delinearized`).
- `materialcolor.maths`: `lerp`, `sanitize_degrees_double`, `difference_degrees`,
  `rotation_direction` and `matrix_multiply`.
- `materialcolor.viewing_conditions`: the frozen `ViewingConditions` dataclass,
  `make_viewing_conditions(...)` to build one from a white point, adapting
  luminance, background L\*, surround and illuminant discounting, and
  `default_viewing_conditions()` for the standard sRGB conditions. The default
  conditions are built once and cached.
- `materialcolor.cam16`: the `Cam16` colour appearance model. You can create a colour with
  `Cam16.from_argb`, `from_jch` or `from_ucs`. Each has an `..._in_viewing_conditions`
  variant. Convert a colour back with `to_int()` or `viewed(conditions)`, and compare two
  colours with `distance(other)`.
- `materialcolor.hct_solver`: `solve_to_int(hue, chroma, lstar)` and `solve_to_cam(...)`.
  They find the sRGB colour closest to the requested hue, chroma and L\*. If the chroma
  is out of gamut, the most chromatic reachable colour is returned.
- `materialcolor.hct`: the `Hct` class, created with `Hct.from_hct(hue, chroma, tone)` or
  `Hct.from_int(argb)`. Its `hue`, `chroma` and `tone` properties can be set. Setting one
  solves the colour again, so the chroma may come out lower than requested.
- `materialcolor.blend`:
  - `harmonize(design, source)` shifts the hue of `design` towards `source`. The shift is
    half the hue difference, at most 15°.
  - `hct_hue(from, to, amount)` blends the hue only.
  - `cam16ucs(from, to, amount)` blends in CAM16-UCS.
- `materialcolor.tonal_palette`: `TonalPalette`, created with `from_int` or
  `from_hue_and_chroma`. `tone(t)` returns the colour at an integer tone and caches it.
  Tones outside 0–255 raise `ValueError`.
- `materialcolor.core_palette`: `CorePalette.from_argb(argb, is_content, color_palette)`.
  It builds the accent palettes `a1`–`a3`, the neutral palettes `n1` and `n2`, and an
  `error` palette.
  - `ColorPalette.DEFAULT`, `TRIADIC` and `ADJACENT` choose how content palettes spread
    the accent hues.
  - Non-content palettes use fixed chromas.
- Quantization:
  - `materialcolor.quantizer_map.quantize_map(pixels)` counts each distinct colour.
  - `materialcolor.quantizer_wu.QuantizerWu().quantize(pixels, max_colors)` returns
    representative colours found by Wu's box cutting of the RGB histogram.
  - `materialcolor.quantizer_wsmeans.quantize_wsmeans(pixels, starting_clusters, max_colors)`
    runs weighted k-means in L\*a\*b\*. If `starting_clusters` is empty, the starting
    centroids are random.
  - `materialcolor.quantizer_celebi.quantize_celebi(pixels, max_colors)` runs Wu first and
    then k-means.

  The map, k-means and Wu-then-k-means functions return a dict from colour to pixel count.
  The quantizers raise `ValueError` when `max_colors` is below 1.
- `materialcolor.point_provider`: the `PointProvider` interface. Its implementation,
  `LabPointProvider`, works in L\*a\*b\* and uses squared Euclidean distance.

## Installation

```
pip install .
```

## Examples

```python
from materialcolor.cam16 import Cam16
from materialcolor.hct import Hct

red = (0xFF, 0xFF, 0x00, 0x00)

cam = Cam16.from_argb(red)
print(cam.hue, cam.chroma, cam.j)

hct = Hct.from_int(red)
print(hct.hue, hct.chroma, hct.tone)
hct.tone = 80.0
print(hct.to_int())

print(Hct.from_hct(120.0, 40.0, 60.0).to_int())
```

```python
from materialcolor.core_palette import ColorPalette, CorePalette
from materialcolor.tonal_palette import TonalPalette

palette = TonalPalette.from_int((0xFF, 0x42, 0x85, 0xF4))
print(palette.tone(40), palette.tone(90))

core = CorePalette.from_argb((0xFF, 0x42, 0x85, 0xF4), False, ColorPalette.DEFAULT)
print(core.a1.tone(40), core.n1.tone(99), core.error.tone(40))
```

```python
from materialcolor.blend import cam16ucs, harmonize

print(harmonize((0xFF, 0xFF, 0x00, 0x00), (0xFF, 0x00, 0x00, 0xFF)))
print(cam16ucs((0xFF, 0xFF, 0x00, 0x00), (0xFF, 0x00, 0x00, 0xFF), 0.5))
```

```python
from materialcolor.quantizer_celebi import quantize_celebi

red = (0xFF, 0xFF, 0x00, 0x00)
green = (0xFF, 0x00, 0xFF, 0x00)
result = quantize_celebi([red, red, green, green, green], 128)
print(result[red], result[green])  # 2 3
```

## What it does not do

This is a library only. It has no command-line tool. It does not build complete
light or dark colour schemes from the palettes, and it does not score or rank
quantized colours to pick a theme's key colour. Image decoding is also left to
the caller: the quantizers take an iterable of ARGB tuples.

## Running the tests

```
pip install .[test]
pytest
```