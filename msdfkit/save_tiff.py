"""Writing floating-point bitmaps as uncompressed TIFF images."""

from __future__ import annotations

import os
import struct
from typing import Union

from .bitmap import Bitmap, PixelType

__all__ = ["encode_tiff", "save_tiff"]

_PathLike = Union[str, "os.PathLike[str]"]

_SHORT = 0x0003
_LONG = 0x0004
_RATIONAL = 0x0005
_FLOAT = 0x000B
_RESOLUTION = 300


def _entry(tag: int, field_type: int, count: int, value: bytes) -> bytes:
    return struct.pack("<HHI", tag, field_type, count) + value


def _short_value(value: int) -> bytes:
    return struct.pack("<HH", value, 0)


def _tiff_header(width: int, height: int, channels: int) -> bytes:
    multi = channels > 1
    extra = channels if multi else 0

    if multi:
        bits_per_sample = struct.pack("<I", 0x00C2)
        sample_format = struct.pack("<I", 0x00D2 + channels * 2)
        min_value = struct.pack("<I", 0x00D2 + channels * 4)
        max_value = struct.pack("<I", 0x00D2 + channels * 8)
    else:
        bits_per_sample = _short_value(32)
        sample_format = _short_value(3)
        min_value = struct.pack("<f", 0.0)
        max_value = struct.pack("<f", 1.0)

    entries = [
        _entry(0x0100, _LONG, 1, struct.pack("<i", width)),
        _entry(0x0101, _LONG, 1, struct.pack("<i", height)),
        _entry(0x0102, _SHORT, channels, bits_per_sample),
        _entry(0x0103, _SHORT, 1, _short_value(1)),
        _entry(0x0106, _SHORT, 1, _short_value(2 if channels >= 3 else 1)),
        _entry(0x0111, _LONG, 1, struct.pack("<I", 0x00D2 + extra * 12)),
        _entry(0x0115, _SHORT, 1, _short_value(channels)),
        _entry(0x0116, _LONG, 1, struct.pack("<i", height)),
        _entry(0x0117, _LONG, 1, struct.pack("<i", 4 * channels * width * height)),
        _entry(0x011A, _RATIONAL, 1, struct.pack("<I", 0x00C2 + extra * 2)),
        _entry(0x011B, _RATIONAL, 1, struct.pack("<I", 0x00CA + extra * 2)),
        _entry(0x0128, _SHORT, 1, _short_value(2)),
        _entry(0x0153, _SHORT, channels, sample_format),
        _entry(0x0154, _FLOAT, channels, min_value),
        _entry(0x0155, _FLOAT, channels, max_value),
    ]

    out = bytearray(struct.pack("<HHI", 0x4949, 42, 0x0008))
    out += struct.pack("<H", len(entries))
    for entry in entries:
        out += entry
    out += struct.pack("<I", 0)

    resolution = struct.pack("<II", _RESOLUTION, 1)
    if multi:
        out += struct.pack(f"<{channels}H", *([32] * channels))
        out += resolution
        out += resolution
        out += struct.pack(f"<{channels}H", *([3] * channels))
        out += struct.pack(f"<{channels}f", *([0.0] * channels))
        out += struct.pack(f"<{channels}f", *([1.0] * channels))
    else:
        out += resolution
        out += resolution
    return bytes(out)


def encode_tiff(bitmap: Bitmap) -> bytes:
    """Encode a floating-point bitmap with 1, 3 or 4 channels as TIFF contents.

    Rows are written from the last storage row to the first.
    """
    if bitmap.pixel_type is not PixelType.FLOAT:
        raise ValueError("TIFF output requires a floating-point bitmap")
    if bitmap.channels not in (1, 3, 4):
        raise ValueError(
            f"TIFF supports only 1, 3 or 4 channel bitmaps, got {bitmap.channels}"
        )
    width, height, channels = bitmap.width, bitmap.height, bitmap.channels
    out = bytearray(_tiff_header(width, height, channels))
    row_length = channels * width
    for y in reversed(range(height)):
        row = bitmap.pixels[row_length * y : row_length * (y + 1)]
        out += struct.pack(f"<{row_length}f", *row)
    return bytes(out)


def save_tiff(bitmap: Bitmap, filename: _PathLike) -> None:
    """Save a floating-point bitmap as an uncompressed TIFF file."""
    data = encode_tiff(bitmap)
    with open(filename, "wb") as file:
        file.write(data)