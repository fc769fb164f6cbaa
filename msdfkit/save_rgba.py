"""Writing bitmaps in a trivial RGBA container format."""

from __future__ import annotations

import os
import struct
from typing import Callable, Union

from .bitmap import Bitmap, PixelType
from .pixel_conversion import pixel_float_to_byte

__all__ = ["encode_rgba", "save_rgba"]

_PathLike = Union[str, "os.PathLike[str]"]

_MAGIC = b"RGBA"
_OPAQUE = 0xFF


def _byte_converter(bitmap: Bitmap) -> Callable[[float], int]:
    if bitmap.pixel_type is PixelType.FLOAT:
        return pixel_float_to_byte
    return lambda value: int(value) & 0xFF


def encode_rgba(bitmap: Bitmap) -> bytes:
    """Encode a 1-, 3- or 4-channel bitmap as RGBA file contents.

    The header is the magic ``RGBA`` followed by width and height as
    big-endian 32-bit integers; pixel rows follow from the last storage
    row to the first, four bytes per pixel.
    """
    channels = bitmap.channels
    if channels not in (1, 3, 4):
        raise ValueError(f"RGBA supports only 1, 3 or 4 channel bitmaps, got {channels}")
    to_byte = _byte_converter(bitmap)
    out = bytearray(_MAGIC)
    out += struct.pack(">II", bitmap.width, bitmap.height)
    for y in reversed(range(bitmap.height)):
        for x in range(bitmap.width):
            pixel = [to_byte(value) for value in bitmap[x, y]]
            if channels == 1:
                out += bytes((pixel[0], pixel[0], pixel[0], _OPAQUE))
            elif channels == 3:
                out += bytes(pixel + [_OPAQUE])
            else:
                out += bytes(pixel)
    return bytes(out)


def save_rgba(bitmap: Bitmap, filename: _PathLike) -> None:
    """Save a bitmap as an RGBA file."""
    data = encode_rgba(bitmap)
    with open(filename, "wb") as file:
        file.write(data)