"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math

from .interval import EMPTY, UNIVERSE, Interval
from .ray import Ray
from .vec3 import Vec3

_MIN_WIDTH = 0.0001


def _padded(iv: Interval) -> Interval:
    return iv.expand(_MIN_WIDTH) if iv.size() < _MIN_WIDTH else iv


class AABB:
    """A box given by one interval per axis; no side is narrower than a small delta."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = EMPTY, y: Interval = EMPTY, z: Interval = EMPTY) -> None:
        self.x = _padded(x)
        self.y = _padded(y)
        self.z = _padded(z)

    @classmethod
    def _unpadded(cls, x: Interval, y: Interval, z: Interval) -> "AABB":
        box = cls.__new__(cls)
        box.x, box.y, box.z = x, y, z
        return box

    @classmethod
    def from_points(cls, a: Vec3, b: Vec3) -> "AABB":
        """Return the box with ``a`` and ``b`` as extrema, in any order."""
        x, y, z = (
            Interval(p, q) if p <= q else Interval(q, p) for p, q in zip(a, b)
        )
        return cls(x, y, z)

    @classmethod
    def surrounding(cls, box0: "AABB", box1: "AABB") -> "AABB":
        """Return the box enclosing both boxes."""
        return cls._unpadded(
            Interval.enclosing(box0.x, box1.x),
            Interval.enclosing(box0.y, box1.y),
            Interval.enclosing(box0.z, box1.z),
        )

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, r: Ray, ray_t: Interval) -> bool:
        """Return True if the ray passes through the box within ``ray_t``."""
        t_min, t_max = ray_t.min, ray_t.max
        for ax, origin, direction in zip((self.x, self.y, self.z), r.origin, r.direction):
            adinv = 1.0 / direction if direction else math.copysign(math.inf, direction)
            t0 = (ax.min - origin) * adinv
            t1 = (ax.max - origin) * adinv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True

    def longest_axis(self) -> int:
        """Return the index of the longest axis of the box."""
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def __add__(self, offset: Vec3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    __radd__ = __add__


EMPTY_BOX = AABB(EMPTY, EMPTY, EMPTY)
UNIVERSE_BOX = AABB(UNIVERSE, UNIVERSE, UNIVERSE)