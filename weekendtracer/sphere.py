"""Stationary and moving spheres."""

from __future__ import annotations

import math
from typing import Optional

from .aabb import AABB
from .hittable import HitRecord, Hittable, Material
from .interval import Interval
from .ray import Ray
from .vec3 import PI, Vec3, dot


def sphere_uv(p: Vec3) -> tuple[float, float]:
    """Return the (u, v) texture coordinates of point ``p`` on the unit sphere."""
    theta = math.acos(-p.y)
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2 * PI), theta / PI


class Sphere(Hittable):
    """A sphere whose centre may move linearly between time 0 and time 1."""

    def __init__(self, center: Vec3, radius: float, mat: Optional[Material]) -> None:
        rvec = Vec3(radius, radius, radius)
        self._setup(
            Ray(center, Vec3(0.0, 0.0, 0.0)),
            radius,
            mat,
            AABB.from_points(center - rvec, center + rvec),
        )

    @classmethod
    def moving(
        cls, center1: Vec3, center2: Vec3, radius: float, mat: Optional[Material]
    ) -> "Sphere":
        """Return a sphere at ``center1`` at time 0 and ``center2`` at time 1."""
        sphere = cls.__new__(cls)
        center = Ray(center1, center2 - center1)
        rvec = Vec3(radius, radius, radius)
        box1 = AABB.from_points(center.at(0) - rvec, center.at(0) + rvec)
        box2 = AABB.from_points(center.at(1) - rvec, center.at(1) + rvec)
        sphere._setup(center, radius, mat, AABB.surrounding(box1, box2))
        return sphere

    def _setup(self, center: Ray, radius: float, mat: Optional[Material], bbox: AABB) -> None:
        self.center = center
        self.radius = max(0.0, radius)
        self.mat = mat
        self._bbox = bbox

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        current_center = self.center.at(r.time)
        oc = current_center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        inv_radius = 1.0 / self.radius if self.radius else math.inf
        outward_normal = (p - current_center) * inv_radius
        u, v = sphere_uv(outward_normal)
        rec = HitRecord(p=p, mat=self.mat, t=root, u=u, v=v)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox