"""Hit records, the hittable interface, and instancing transforms."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .aabb import AABB
from .interval import Interval
from .ray import Ray
from .vec3 import Vec3, degrees_to_radians, dot


class Material(ABC):
    """Base surface material; concrete materials decide how rays scatter."""

    @abstractmethod
    def scatter(self, r_in: Ray, rec: "HitRecord") -> Optional[tuple[Vec3, Ray]]:
        """Return ``(attenuation, scattered)`` or None when the ray is absorbed."""

    def emitted(self, u: float, v: float, p: Vec3) -> Vec3:
        """Return the light emitted at surface point ``p``."""
        return Vec3(0.0, 0.0, 0.0)


@dataclass
class HitRecord:
    """Details of a ray-object intersection."""

    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    mat: Optional[Material] = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Set the normal to face against the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    #: Sampling density reported by objects that do not support direction sampling.
    unsampled_density: float = 0.0

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the nearest hit within ``ray_t``, or None."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """Return a box enclosing the object."""

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Return the density of sampling ``direction`` towards this object from ``origin``."""
        return float(self.unsampled_density)

    def random(self, origin: Vec3) -> Vec3:
        """Return a direction from ``origin`` towards this object."""
        return Vec3(1.0, 0.0, 0.0)


class Translate(Hittable):
    """An object displaced by a fixed offset."""

    def __init__(self, obj: Hittable, offset: Vec3) -> None:
        self.obj = obj
        self.offset = offset
        self._bbox = obj.bounding_box() + offset

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        offset_r = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.obj.hit(offset_r, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj: Hittable, angle: float) -> None:
        self.obj = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        box = obj.bounding_box()

        corners = [
            Vec3(self.cos_theta * x + self.sin_theta * z, y, -self.sin_theta * x + self.cos_theta * z)
            for x in (box.x.min, box.x.max)
            for y in (box.y.min, box.y.max)
            for z in (box.z.min, box.z.max)
        ]
        low = Vec3(*(min(c[axis] for c in corners) for axis in range(3)))
        high = Vec3(*(max(c[axis] for c in corners) for axis in range(3)))
        self._bbox = AABB.from_points(low, high)

    def _to_object(self, v: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def _to_world(self, v: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rotated_r = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.obj.hit(rotated_r, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox