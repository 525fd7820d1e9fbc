"""Planar parallelograms."""

from __future__ import annotations

from typing import Optional

from .aabb import AABB
from .hittable import HitRecord, Hittable, Material
from .interval import Interval
from .ray import Ray
from .vec3 import Vec3, cross, dot, unit_vector

_UNIT_INTERVAL = Interval(0.0, 1.0)


class Quad(Hittable):
    """A parallelogram with corner ``q`` and edge vectors ``u`` and ``v``."""

    def __init__(self, q: Vec3, u: Vec3, v: Vec3, mat: Optional[Material]) -> None:
        self.q = q
        self.u = u
        self.v = v
        self.mat = mat
        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        self._bbox = AABB.surrounding(
            AABB.from_points(q, q + u + v),
            AABB.from_points(q + u, q + v),
        )

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = dot(self.normal, r.direction)

        # A ray parallel to the plane never hits it.
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar_hitpt_vector = intersection - self.q
        alpha = dot(self.w, cross(planar_hitpt_vector, self.v))
        beta = dot(self.w, cross(self.u, planar_hitpt_vector))

        uv = self.is_interior(alpha, beta)
        if uv is None:
            return None

        rec = HitRecord(p=intersection, mat=self.mat, t=t, u=uv[0], v=uv[1])
        rec.set_face_normal(r, self.normal)
        return rec

    def is_interior(self, a: float, b: float) -> Optional[tuple[float, float]]:
        """Return the (u, v) surface coordinates for plane coordinates inside the shape, else None."""
        if not _UNIT_INTERVAL.contains(a) or not _UNIT_INTERVAL.contains(b):
            return None
        return a, b