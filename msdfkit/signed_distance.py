"""Signed distances to edge segments and the colour channels of edges."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntFlag

__all__ = ["SignedDistance", "EdgeColor"]


class EdgeColor(IntFlag):
    """Which colour channels an edge belongs to."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class SignedDistance:
    """A signed distance with an alignment term that breaks ties.

    Ordering compares absolute distance first, then ``dot``.
    The default is the farthest possible distance.
    """

    distance: float = -sys.float_info.max
    dot: float = 0.0

    def __lt__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        a, b = abs(self.distance), abs(other.distance)
        return a < b or (a == b and self.dot < other.dot)

    def __gt__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        a, b = abs(self.distance), abs(other.distance)
        return a > b or (a == b and self.dot > other.dot)

    def __le__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        a, b = abs(self.distance), abs(other.distance)
        return a < b or (a == b and self.dot <= other.dot)

    def __ge__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        a, b = abs(self.distance), abs(other.distance)
        return a > b or (a == b and self.dot >= other.dot)