"""Two-dimensional multi-channel bitmaps and bilinear sampling."""

from __future__ import annotations

import math
from array import array
from enum import Enum
from typing import Iterable, Sequence, Union

from .arithmetics import clamp, mix
from .vector2 import Point2

__all__ = ["PixelType", "Bitmap", "interpolate"]


class PixelType(Enum):
    """Storage type of one channel value; the value is the array type code."""

    FLOAT = "f"
    BYTE = "B"


_PixelValue = Union[float, int, Sequence[float], Sequence[int]]


class Bitmap:
    """A ``width`` x ``height`` image with ``channels`` values per pixel.

    Pixels are addressed as ``bitmap[x, y]`` and read back as tuples of
    channel values. Row 0 is the first row in storage.
    """

    __slots__ = ("_width", "_height", "_channels", "_pixel_type", "pixels")

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        channels: int = 1,
        pixel_type: PixelType = PixelType.FLOAT,
        pixels: Iterable[float] | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"bitmap dimensions must not be negative: {width}x{height}")
        if channels < 1:
            raise ValueError(f"bitmap needs at least one channel, got {channels}")
        pixel_type = PixelType(pixel_type)
        size = width * height * channels
        if pixels is None:
            data = array(pixel_type.value, [0]) * size
        else:
            data = array(pixel_type.value, pixels)
            if len(data) != size:
                raise ValueError(f"expected {size} channel values, got {len(data)}")
        self._width = width
        self._height = height
        self._channels = channels
        self._pixel_type = pixel_type
        self.pixels = data

    @property
    def width(self) -> int:
        """Bitmap width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Bitmap height in pixels."""
        return self._height

    @property
    def channels(self) -> int:
        """Number of values stored per pixel."""
        return self._channels

    @property
    def pixel_type(self) -> PixelType:
        """Storage type of channel values."""
        return self._pixel_type

    def __repr__(self) -> str:
        return (
            f"Bitmap(width={self._width}, height={self._height}, "
            f"channels={self._channels}, pixel_type={self._pixel_type.name})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._channels == other._channels
            and self._pixel_type is other._pixel_type
            and self.pixels == other.pixels
        )

    __hash__ = None  # type: ignore[assignment]

    def _offset(self, position: tuple[int, int]) -> int:
        x, y = position
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel {position!r} outside {self._width}x{self._height} bitmap")
        return self._channels * (self._width * y + x)

    def __getitem__(self, position: tuple[int, int]) -> tuple:
        start = self._offset(position)
        return tuple(self.pixels[start : start + self._channels])

    def __setitem__(self, position: tuple[int, int], value: _PixelValue) -> None:
        start = self._offset(position)
        if isinstance(value, (int, float)):
            values = [value] * self._channels
        else:
            values = list(value)
            if len(values) != self._channels:
                raise ValueError(
                    f"pixel has {self._channels} channels, got {len(values)} values"
                )
        self.pixels[start : start + self._channels] = array(self._pixel_type.value, values)

    def copy(self) -> Bitmap:
        """Return an independent copy of the bitmap."""
        return Bitmap(self._width, self._height, self._channels, self._pixel_type, self.pixels)


def interpolate(bitmap: Bitmap, position: Point2) -> tuple[float, ...]:
    """Sample all channels of ``bitmap`` bilinearly at ``position``.

    Pixel centres lie at half-integer coordinates; samples beyond the
    border take the value of the nearest edge pixel.
    """
    px = position.x - 0.5
    py = position.y - 0.5
    left = math.floor(px)
    bottom = math.floor(py)
    lr = px - left
    bt = py - bottom
    right = clamp(left + 1, bitmap.width - 1)
    top = clamp(bottom + 1, bitmap.height - 1)
    left = clamp(left, bitmap.width - 1)
    bottom = clamp(bottom, bitmap.height - 1)
    lb, rb = bitmap[left, bottom], bitmap[right, bottom]
    lt, rt = bitmap[left, top], bitmap[right, top]
    return tuple(
        mix(mix(a, b, lr), mix(c, d, lr), bt) for a, b, c, d in zip(lb, rb, lt, rt)
    )