"""Writing bitmaps as 24-bit uncompressed BMP images."""

from __future__ import annotations

import os
import struct
from typing import Callable, Union

from .bitmap import Bitmap, PixelType
from .pixel_conversion import pixel_float_to_byte

__all__ = ["encode_bmp", "save_bmp"]

_PathLike = Union[str, "os.PathLike[str]"]

_SIGNATURE = 0x4D42
_BITMAP_START = 54
_INFO_HEADER_SIZE = 40
_BITS_PER_PIXEL = 24
_PIXELS_PER_METRE = 2835


def _byte_converter(bitmap: Bitmap) -> Callable[[float], int]:
    if bitmap.pixel_type is PixelType.FLOAT:
        return pixel_float_to_byte
    return lambda value: int(value) & 0xFF


def encode_bmp(bitmap: Bitmap) -> bytes:
    """Encode a 1- or 3-channel bitmap as BMP file contents.

    Storage row 0 becomes the bottom row of the image. RGBA bitmaps cannot
    be represented and raise ``ValueError``.
    """
    if bitmap.channels not in (1, 3):
        raise ValueError(
            f"BMP supports only 1 or 3 channel bitmaps, got {bitmap.channels}"
        )
    to_byte = _byte_converter(bitmap)
    width, height = bitmap.width, bitmap.height
    padded_width = (3 * width + 3) & ~3
    bitmap_size = padded_width * height

    out = bytearray(
        struct.pack(
            "<HIHHI", _SIGNATURE, _BITMAP_START + bitmap_size, 0, 0, _BITMAP_START
        )
    )
    out += struct.pack(
        "<IiiHHIIIIII",
        _INFO_HEADER_SIZE,
        width,
        height,
        1,
        _BITS_PER_PIXEL,
        0,
        bitmap_size,
        _PIXELS_PER_METRE,
        _PIXELS_PER_METRE,
        0,
        0,
    )

    padding = bytes(padded_width - 3 * width)
    for y in range(height):
        for x in range(width):
            pixel = bitmap[x, y]
            if bitmap.channels == 1:
                value = to_byte(pixel[0])
                out += bytes((value, value, value))
            else:
                out += bytes(to_byte(channel) for channel in reversed(pixel))
        out += padding
    return bytes(out)


def save_bmp(bitmap: Bitmap, filename: _PathLike) -> None:
    """Save a 1- or 3-channel bitmap as a BMP file."""
    data = encode_bmp(bitmap)
    with open(filename, "wb") as file:
        file.write(data)