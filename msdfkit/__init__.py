"""Vectors, bitmaps, clash-based error correction and image writers for multi-channel signed distance fields."""

__version__ = "0.1.0"

__all__ = [
    "arithmetics",
    "bitmap",
    "error_correction",
    "pixel_conversion",
    "range",
    "save_bmp",
    "save_fl32",
    "save_rgba",
    "save_tiff",
    "signed_distance",
    "vector2",
]