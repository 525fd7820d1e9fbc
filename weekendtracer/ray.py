"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + t * self.direction