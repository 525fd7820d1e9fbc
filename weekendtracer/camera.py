"""A positionable thin-lens camera that renders PPM images."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .color import Color, write_color
from .hittable import Hittable
from .interval import Interval
from .ray import Ray
from .vec3 import (
    Vec3,
    cross,
    degrees_to_radians,
    random_double,
    random_in_unit_disk,
    unit_vector,
)


@dataclass
class Camera:
    """Camera settings; derived geometry is computed by :meth:`initialize`."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10
    background: Color = field(default_factory=Vec3)

    vfov: float = 90.0
    lookfrom: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    lookat: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: int = field(default=0, init=False)

    def initialize(self) -> None:
        """Compute the image height and the viewport geometry from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self._pixel_samples_scale = 1.0 / self.samples_per_pixel
        self._center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (float(self.image_width) / self.image_height)

        w = unit_vector(self.lookfrom - self.lookat)
        u = unit_vector(cross(self.vup, w))
        v = cross(w, u)

        viewport_u = viewport_width * u
        viewport_v = viewport_height * -v

        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self._center - (self.focus_dist * w) - viewport_u / 2 - viewport_v / 2
        )
        self._pixel00_loc = viewport_upper_left + 0.5 * (self._pixel_delta_u + self._pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self._defocus_disk_u = u * defocus_radius
        self._defocus_disk_v = v * defocus_radius

    def render(self, world: Hittable, out: Optional[TextIO] = None) -> None:
        """Render ``world`` as a plain-text PPM image to ``out`` (standard output by default)."""
        out = sys.stdout if out is None else out
        log = sys.stderr
        self.initialize()

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")

        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel_color = Vec3(0.0, 0.0, 0.0)
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                write_color(out, self._pixel_samples_scale * pixel_color)

        log.write("\rDone.                 \n")

    def get_ray(self, i: int, j: int) -> Ray:
        """Return a ray from the defocus disk through a random point around pixel (i, j)."""
        offset = Vec3(random_double() - 0.5, random_double() - 0.5, 0.0)
        pixel_sample = (
            self._pixel00_loc
            + ((i + offset.x) * self._pixel_delta_u)
            + ((j + offset.y) * self._pixel_delta_v)
        )
        ray_origin = self._center if self.defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin, random_double())

    def _defocus_disk_sample(self) -> Vec3:
        p = random_in_unit_disk()
        return self._center + (p.x * self._defocus_disk_u) + (p.y * self._defocus_disk_v)

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """Return the light gathered along ``r`` with at most ``depth`` bounces."""
        if depth <= 0:
            return Vec3(0.0, 0.0, 0.0)

        rec = world.hit(r, Interval(0.001, math.inf))
        if rec is None:
            return self.background

        color_from_emission = rec.mat.emitted(rec.u, rec.v, rec.p)
        scattered = rec.mat.scatter(r, rec)
        if scattered is None:
            return color_from_emission

        attenuation, scattered_ray = scattered
        color_from_scatter = attenuation * self.ray_color(scattered_ray, depth - 1, world)
        return color_from_emission + color_from_scatter