"""Textures that give a colour for surface coordinates and a point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .color import Color
from .image import RtwImage
from .interval import Interval
from .perlin import Perlin
from .vec3 import Vec3

_UNIT_INTERVAL = Interval(0.0, 1.0)


class Texture(ABC):
    """A colour that varies over a surface."""

    @abstractmethod
    def value(self, u: float, v: float, p: Vec3) -> Color:
        """Return the colour at texture coordinates (u, v) and point ``p``."""


class SolidColor(Texture):
    """The same colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def value(self, u: float, v: float, p: Vec3) -> Color:
        return self.albedo


class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures."""

    def __init__(self, scale: float, even: Texture, odd: Texture) -> None:
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, scale: float, c1: Color, c2: Color) -> "CheckerTexture":
        """Return a checker pattern of two solid colours."""
        return cls(scale, SolidColor(c1), SolidColor(c2))

    def value(self, u: float, v: float, p: Vec3) -> Color:
        total = sum(int(math.floor(self.inv_scale * coord)) for coord in p)
        chosen = self.even if total % 2 == 0 else self.odd
        return chosen.value(u, v, p)


class ImageTexture(Texture):
    """A texture read from an image file; solid cyan when the image cannot be loaded."""

    def __init__(self, filename: str) -> None:
        self.image = RtwImage(filename)

    def value(self, u: float, v: float, p: Vec3) -> Color:
        if self.image.height() <= 0:
            return Vec3(0.0, 1.0, 1.0)

        u = _UNIT_INTERVAL.clamp(u)
        v = 1.0 - _UNIT_INTERVAL.clamp(v)  # image rows run top to bottom

        i = int(u * self.image.width())
        j = int(v * self.image.height())
        r, g, b = self.image.pixel_data(i, j)

        color_scale = 1.0 / 255.0
        return Vec3(color_scale * r, color_scale * g, color_scale * b)


class NoiseTexture(Texture):
    """A marble-like pattern from Perlin turbulence."""

    def __init__(self, scale: float) -> None:
        self.noise = Perlin()
        self.scale = scale

    def value(self, u: float, v: float, p: Vec3) -> Color:
        return Vec3(0.5, 0.5, 0.5) * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7)))