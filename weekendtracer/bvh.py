"""Bounding volume hierarchies."""

from __future__ import annotations

from typing import Iterable, Optional

from .aabb import AABB, EMPTY_BOX
from .hittable import HitRecord, Hittable
from .interval import Interval
from .ray import Ray


class BVHNode(Hittable):
    """A binary tree of bounding boxes over a collection of hittables."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        objects = list(objects)
        if not objects:
            raise ValueError("cannot build a bounding volume hierarchy from no objects")

        bbox = EMPTY_BOX
        for obj in objects:
            bbox = AABB.surrounding(bbox, obj.bounding_box())
        self._bbox = bbox

        axis = bbox.longest_axis()

        if len(objects) == 1:
            self.left = self.right = objects[0]
        elif len(objects) == 2:
            self.left, self.right = objects
        else:
            objects.sort(key=lambda o: o.bounding_box().axis_interval(axis).min)
            mid = len(objects) // 2
            self.left = BVHNode(objects[:mid])
            self.right = BVHNode(objects[mid:])

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self._bbox.hit(r, ray_t):
            return None

        left_rec = self.left.hit(r, ray_t)
        right_max = left_rec.t if left_rec is not None else ray_t.max
        right_rec = self.right.hit(r, Interval(ray_t.min, right_max))
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self) -> AABB:
        return self._bbox