"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed interval [min, max]; the default interval is empty."""

    min: float = math.inf
    max: float = -math.inf

    @classmethod
    def enclosing(cls, a: "Interval", b: "Interval") -> "Interval":
        """Return the tightest interval enclosing both ``a`` and ``b``."""
        return cls(a.min if a.min <= b.min else b.min, a.max if a.max >= b.max else b.max)

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        """Return the interval widened by ``delta`` in total."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __add__(self, displacement: float) -> "Interval":
        return Interval(self.min + displacement, self.max + displacement)

    __radd__ = __add__


EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)