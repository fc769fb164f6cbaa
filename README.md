# msdfkit

Pure-Python building blocks for working with multi-channel signed distance
fields (MSDF): 2D vector math, float and byte bitmaps, bilinear sampling,
the clash-based MSDF error correction, and writers for a few simple image
formats. It has no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Modules

- `msdfkit.vector2` – immutable `Vector2` (also available as `Point2`) with
  arithmetic operators, `squared_length`, `length`, `normalize`,
  `get_orthogonal` and `get_orthonormal`; plus `dot_product` and
  `cross_product`. `Vector2(v)` sets both components to `v`.
- `msdfkit.arithmetics` – `median`, `mix`, `clamp` (to `[0, 1]`, `[0, b]` or
  `[a, b]` depending on how many bounds are given), `sign`, `non_zero_sign`.
- `msdfkit.range` – frozen `Range(lower, upper)` that can be multiplied and
  divided by a number, with `Range.symmetric(width)` for a range centred on
  zero.
- `msdfkit.signed_distance` – `SignedDistance`, ordered by absolute distance
  and then by its `dot` term, and the `EdgeColor` channel flags
  (`BLACK`, `RED`, `GREEN`, `YELLOW`, `BLUE`, `MAGENTA`, `CYAN`, `WHITE`).
- `msdfkit.bitmap` – `Bitmap(width, height, channels, pixel_type, pixels)`
  storing float or byte values (`PixelType.FLOAT`, `PixelType.BYTE`).
  Pixels are read and written as `bitmap[x, y]`; reads return a tuple of
  channel values, writes accept a tuple or a single value for all channels.
  `copy()` returns an independent bitmap. `interpolate(bitmap, position)`
  samples all channels bilinearly, with pixel centres at half-integer
  coordinates and edge pixels repeated beyond the border.
- `msdfkit.pixel_conversion` – `pixel_float_to_byte`, `pixel_byte_to_float`,
  and `simulate_8bit`, which snaps a float bitmap in place to the 256 byte
  levels.
- `msdfkit.error_correction` – `detect_clash` and
  `msdf_error_correction_legacy(output, threshold)`, which equalizes, in
  place, texels of a 3- or 4-channel float bitmap whose channels clash with
  a neighbour: horizontal neighbours against `threshold.x`, vertical ones
  against `threshold.y`, diagonal ones against their sum. The fourth channel
  is left untouched.

## Image writers

Each writer has an `encode_*` function returning the file contents as
`bytes` and a `save_*` function writing them to a path. Unsupported bitmaps
raise `ValueError`.

| Function | Bitmaps accepted | Notes |
| --- | --- | --- |
| `msdfkit.save_bmp.save_bmp` | 1 or 3 channels, float or byte | 24-bit BMP; storage row 0 is the bottom row |
| `msdfkit.save_tiff.save_tiff` | float, 1, 3 or 4 channels | uncompressed 32-bit float TIFF, last storage row first |
| `msdfkit.save_rgba.save_rgba` | 1, 3 or 4 channels, float or byte | `RGBA` magic, big-endian width and height, 4 bytes per pixel, last storage row first |
| `msdfkit.save_fl32.save_fl32` | float, 1 to 4 channels | `FL32` magic, little-endian height, width and channel count, raw floats in storage order |

Float values are converted to bytes with `pixel_float_to_byte`, which clamps
them to `[0, 1]` first.

## Example

```python
from msdfkit.bitmap import Bitmap, PixelType
from msdfkit.vector2 import Vector2
from msdfkit.error_correction import msdf_error_correction_legacy
from msdfkit.save_tiff import save_tiff

msdf = Bitmap(32, 32, channels=3, pixel_type=PixelType.FLOAT)
# ... fill msdf[x, y] with (r, g, b) distance values ...
msdf_error_correction_legacy(msdf, Vector2(0.5, 0.5))
save_tiff(msdf, "glyph.tiff")
```

Distance values are expected in normalized form, where 0.5 lies on the
shape's edge; the median of the three channels gives the shape.

## What this package does not do

msdfkit works on distance fields that already exist. It has no shape or
contour model, so it does not generate distance fields from outlines, load
fonts or SVG files, render a field back into an image, or write PNG. It
offers no command-line program.