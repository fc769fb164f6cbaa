"""The original clash-based error correction for multi-channel distance fields."""

from __future__ import annotations

from typing import Iterable, Sequence

from .arithmetics import median
from .bitmap import Bitmap, PixelType
from .vector2 import Vector2

__all__ = ["detect_clash", "msdf_error_correction_legacy"]

_Offsets = Sequence[tuple[int, int, float]]


def detect_clash(a: Sequence[float], b: Sequence[float], threshold: float) -> bool:
    """Tell whether texel ``a`` clashes with its neighbour ``b``.

    Only the first three channels are considered. Of a clashing pair, only
    the texel farther from a shape edge is flagged.
    """
    pairs = sorted(
        zip(a[:3], b[:3]), key=lambda pair: abs(pair[1] - pair[0]), reverse=True
    )
    (a0, b0), (a1, b1), (a2, b2) = pairs
    return (
        abs(b1 - a1) >= threshold
        and not (b0 == b1 and b0 == b2)
        and abs(a2 - 0.5) >= abs(b2 - 0.5)
    )


def _find_clashes(output: Bitmap, offsets: _Offsets) -> list[tuple[int, int]]:
    w, h = output.width, output.height
    return [
        (x, y)
        for y in range(h)
        for x in range(w)
        if any(
            0 <= x + dx < w
            and 0 <= y + dy < h
            and detect_clash(output[x, y], output[x + dx, y + dy], limit)
            for dx, dy, limit in offsets
        )
    ]


def _equalize(output: Bitmap, clashes: Iterable[tuple[int, int]]) -> None:
    for position in clashes:
        pixel = output[position]
        med = median(pixel[0], pixel[1], pixel[2])
        output[position] = (med, med, med) + pixel[3:]


def msdf_error_correction_legacy(output: Bitmap, threshold: Vector2) -> None:
    """Equalize texels whose channels clash with a neighbour, in place.

    Horizontal neighbours use ``threshold.x``, vertical ones ``threshold.y``
    and diagonal ones their sum.
    """
    if output.pixel_type is not PixelType.FLOAT or output.channels < 3:
        raise ValueError("error correction needs a floating-point bitmap with 3 or 4 channels")
    tx, ty = threshold.x, threshold.y
    orthogonal = ((-1, 0, tx), (1, 0, tx), (0, -1, ty), (0, 1, ty))
    _equalize(output, _find_clashes(output, orthogonal))
    diagonal_limit = tx + ty
    diagonal = (
        (-1, -1, diagonal_limit),
        (1, -1, diagonal_limit),
        (-1, 1, diagonal_limit),
        (1, 1, diagonal_limit),
    )
    _equalize(output, _find_clashes(output, diagonal))