"""Small numeric helpers shared by the distance-field code."""

from __future__ import annotations

from typing import TypeVar

__all__ = ["median", "mix", "clamp", "sign", "non_zero_sign"]

T = TypeVar("T", int, float)


def _min(a, b):
    return b if b < a else a


def _max(a, b):
    return b if a < b else a


def median(a, b, c):
    """Return the middle of three values."""
    return _max(_min(a, b), _min(_max(a, b), c))


def mix(a, b, weight):
    """Return the weighted average of ``a`` and ``b``."""
    return (1 - weight) * a + weight * b


def clamp(n, *args):
    """Clamp ``n`` to [0, 1], [0, b] or [a, b] depending on the bounds given."""
    if not args:
        if 0 <= n <= 1:
            return n
        return type(n)(n > 0)
    if len(args) == 1:
        (upper,) = args
        if 0 <= n <= upper:
            return n
        return upper if n > 0 else upper * 0
    if len(args) == 2:
        lower, upper = args
        if lower <= n <= upper:
            return n
        return lower if n < lower else upper
    raise TypeError(f"clamp() takes at most 3 arguments ({len(args) + 1} given)")


def sign(n) -> int:
    """Return 1 for positive, -1 for negative and 0 for zero."""
    return int(0 < n) - int(n < 0)


def non_zero_sign(n) -> int:
    """Return 1 for positive values and -1 otherwise."""
    return 2 * int(n > 0) - 1