"""Two-dimensional euclidean floating-point vectors."""

from __future__ import annotations

import math
from typing import Iterator, Union

__all__ = ["Vector2", "Point2", "dot_product", "cross_product"]

_Operand = Union["Vector2", float, int]


class Vector2:
    """An immutable 2D vector. ``Vector2(v)`` sets both components to ``v``."""

    __slots__ = ("x", "y")

    x: float
    y: float

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(x if y is None else y))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __bool__(self) -> bool:
        return bool(self.x or self.y)

    def squared_length(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self, allow_zero: bool = False) -> Vector2:
        """Return a unit vector of the same direction.

        A zero vector yields ``(0, 0)`` if ``allow_zero`` else ``(0, 1)``.
        """
        length = self.length()
        if length:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0 if allow_zero else 1.0)

    def get_orthogonal(self, polarity: bool = True) -> Vector2:
        """Return a vector of the same length orthogonal to this one."""
        if polarity:
            return Vector2(-self.y, self.x)
        return Vector2(self.y, -self.x)

    def get_orthonormal(self, polarity: bool = True, allow_zero: bool = False) -> Vector2:
        """Return a unit vector orthogonal to this one."""
        length = self.length()
        if length:
            if polarity:
                return Vector2(-self.y / length, self.x / length)
            return Vector2(self.y / length, -self.x / length)
        unit = 0.0 if allow_zero else 1.0
        return Vector2(0.0, unit if polarity else -unit)

    @staticmethod
    def _parts(other: _Operand) -> tuple[float, float] | None:
        if isinstance(other, Vector2):
            return other.x, other.y
        if isinstance(other, (int, float)):
            return float(other), float(other)
        return None

    def __pos__(self) -> Vector2:
        return self

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: _Operand) -> Vector2:
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return Vector2(self.x * parts[0], self.y * parts[1])

    def __rmul__(self, other: _Operand) -> Vector2:
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return Vector2(parts[0] * self.x, parts[1] * self.y)

    def __truediv__(self, other: _Operand) -> Vector2:
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return Vector2(self.x / parts[0], self.y / parts[1])

    def __rtruediv__(self, other: _Operand) -> Vector2:
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return Vector2(parts[0] / self.x, parts[1] / self.y)


Point2 = Vector2
"""A vector used to denote a position."""


def dot_product(a: Vector2, b: Vector2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def cross_product(a: Vector2, b: Vector2) -> float:
    """Scalar cross product of two 2D vectors."""
    return a.x * b.y - a.y * b.x