"""An interval between two real values, such as a range of signed distances."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Range"]


@dataclass(frozen=True)
class Range:
    """The range between ``lower`` and ``upper``."""

    lower: float = 0.0
    upper: float = 0.0

    @classmethod
    def symmetric(cls, width: float) -> Range:
        """Return a range of the given width centred on zero."""
        return cls(-0.5 * width, 0.5 * width)

    def __mul__(self, factor: float) -> Range:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Range(self.lower * factor, self.upper * factor)

    def __rmul__(self, factor: float) -> Range:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Range(factor * self.lower, factor * self.upper)

    def __truediv__(self, divisor: float) -> Range:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Range(self.lower / divisor, self.upper / divisor)