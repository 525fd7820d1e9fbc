"""A small path tracer with BVH acceleration, textures, Perlin noise and Monte Carlo sampling."""

__version__ = "0.1.0"