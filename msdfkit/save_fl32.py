"""Writing floating-point bitmaps in the trivial FL32 container format."""

from __future__ import annotations

import os
import struct
from typing import Union

from .bitmap import Bitmap, PixelType

__all__ = ["encode_fl32", "save_fl32"]

_PathLike = Union[str, "os.PathLike[str]"]

_MAGIC = b"FL32"


def encode_fl32(bitmap: Bitmap) -> bytes:
    """Encode a floating-point bitmap with 1 to 4 channels as FL32 contents.

    The 16-byte header holds the magic ``FL32``, height and width as
    little-endian 32-bit integers and the channel count; raw little-endian
    32-bit floats follow in storage order.
    """
    if bitmap.pixel_type is not PixelType.FLOAT:
        raise ValueError("FL32 output requires a floating-point bitmap")
    if not 1 <= bitmap.channels <= 4:
        raise ValueError(f"FL32 supports 1 to 4 channels, got {bitmap.channels}")
    header = struct.pack(
        "<4sIIB3x",
        _MAGIC,
        bitmap.height & 0xFFFFFFFF,
        bitmap.width & 0xFFFFFFFF,
        bitmap.channels,
    )
    body = struct.pack(f"<{len(bitmap.pixels)}f", *bitmap.pixels)
    return header + body


def save_fl32(bitmap: Bitmap, filename: _PathLike) -> None:
    """Save a floating-point bitmap as an FL32 file."""
    data = encode_fl32(bitmap)
    with open(filename, "wb") as file:
        file.write(data)