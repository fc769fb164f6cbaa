"""Conversion between floating-point and 8-bit channel values."""

from __future__ import annotations

from array import array

from .arithmetics import clamp
from .bitmap import Bitmap, PixelType

__all__ = ["pixel_float_to_byte", "pixel_byte_to_float", "simulate_8bit"]


def pixel_float_to_byte(x: float) -> int:
    """Map a value in [0, 1] to a byte, clamping values outside the interval."""
    return ~int(255.5 - 255.0 * clamp(float(x))) & 0xFF


def pixel_byte_to_float(x: int) -> float:
    """Map a byte to a value in [0, 1]."""
    return 1.0 / 255.0 * float(x)


def simulate_8bit(bitmap: Bitmap) -> None:
    """Snap every value of a floating-point bitmap to one of 256 byte levels."""
    if bitmap.pixel_type is not PixelType.FLOAT:
        raise ValueError("simulate_8bit requires a floating-point bitmap")
    bitmap.pixels[:] = array(
        PixelType.FLOAT.value,
        (pixel_byte_to_float(pixel_float_to_byte(v)) for v in bitmap.pixels),
    )