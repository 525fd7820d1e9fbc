"""Orthonormal bases."""

from __future__ import annotations

from .vec3 import Vec3, cross, unit_vector


class ONB:
    """An orthonormal basis whose ``w`` axis follows a given direction."""

    __slots__ = ("u", "v", "w")

    def __init__(self, n: Vec3) -> None:
        self.w = unit_vector(n)
        a = Vec3(0.0, 1.0, 0.0) if abs(self.w.x) > 0.9 else Vec3(1.0, 0.0, 0.0)
        self.v = unit_vector(cross(self.w, a))
        self.u = cross(self.w, self.v)

    def transform(self, v: Vec3) -> Vec3:
        """Map basis coordinates to local space."""
        return v.x * self.u + v.y * self.v + v.z * self.w