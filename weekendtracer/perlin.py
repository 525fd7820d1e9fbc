"""Perlin gradient noise and turbulence."""

from __future__ import annotations

import math

from .vec3 import Vec3, dot, random_int, unit_vector

_POINT_COUNT = 256


def _generate_perm() -> list[int]:
    """Return a random permutation of the lattice indices."""
    p = list(range(_POINT_COUNT))
    for i in range(_POINT_COUNT - 1, 0, -1):
        target = random_int(0, i)
        p[i], p[target] = p[target], p[i]
    return p


def _interpolate(c: list[list[list[Vec3]]], u: float, v: float, w: float) -> float:
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for i, plane in enumerate(c):
        for j, row in enumerate(plane):
            for k, gradient in enumerate(row):
                weight_v = Vec3(u - i, v - j, w - k)
                accum += (
                    (i * uu + (1 - i) * (1 - uu))
                    * (j * vv + (1 - j) * (1 - vv))
                    * (k * ww + (1 - k) * (1 - ww))
                    * dot(gradient, weight_v)
                )
    return accum


class Perlin:
    """Gradient noise on a randomly permuted lattice that repeats every 256 units."""

    def __init__(self) -> None:
        self._randvec = [unit_vector(Vec3.random(-1, 1)) for _ in range(_POINT_COUNT)]
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Vec3) -> float:
        """Return the smoothed noise value at point ``p``."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        c = [
            [
                [
                    self._randvec[
                        self._perm_x[(i + di) & 255]
                        ^ self._perm_y[(j + dj) & 255]
                        ^ self._perm_z[(k + dk) & 255]
                    ]
                    for dk in (0, 1)
                ]
                for dj in (0, 1)
            ]
            for di in (0, 1)
        ]
        return _interpolate(c, u, v, w)

    def turb(self, p: Vec3, depth: int = 7) -> float:
        """Return the absolute sum of ``depth`` octaves of noise at ``p``."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)