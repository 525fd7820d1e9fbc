"""Probability density functions over directions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .hittable import Hittable
from .vec3 import PI, Vec3, random_double, random_unit_vector


class PDF(ABC):
    """A distribution of directions that can be evaluated and sampled."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Return the density for ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Return a random direction drawn from the distribution."""


class SpherePDF(PDF):
    """Uniform density over the unit sphere."""

    def value(self, direction: Vec3) -> float:
        return 1 / (4 * PI)

    def generate(self) -> Vec3:
        return random_unit_vector()


class HittablePDF(PDF):
    """Directions from ``origin`` towards a hittable object."""

    def __init__(self, objects: Hittable, origin: Vec3) -> None:
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.objects.random(self.origin)


class MixturePDF(PDF):
    """An even mixture of two distributions."""

    def __init__(self, p0: PDF, p1: PDF) -> None:
        self.p = (p0, p1)

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self) -> Vec3:
        if random_double() < 0.5:
            return self.p[0].generate()
        return self.p[1].generate()