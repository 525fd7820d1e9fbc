# weekendtracer

A compact path tracer written in plain Python. It intersects rays with
spheres (stationary or moving), quads, and translated or rotated instances of
them, speeds this up with a bounding volume hierarchy, provides solid,
checker, image and Perlin-noise textures, and writes rendered images as
plain-text PPM (P3).

## Installation

```
pip install .
```

Image textures are loaded with Pillow, which is installed as a dependency.

## Building blocks

- `weekendtracer.vec3` — `Vec3` (also used for points and colours), `dot`,
  `cross`, `unit_vector`, `reflect`, `refract`, `degrees_to_radians`, and
  random helpers: `random_double`, `random_int`, `Vec3.random`,
  `random_unit_vector`, `random_on_hemisphere`, `random_in_unit_disk`.
- `weekendtracer.interval` — `Interval` with `size`, `contains`, `surrounds`,
  `clamp`, `expand` and `Interval.enclosing`; `EMPTY` and `UNIVERSE`.
- `weekendtracer.ray` — `Ray` with an origin, a direction and a time, and `Ray.at`.
- `weekendtracer.aabb` — `AABB` bounding boxes (`from_points`, `surrounding`,
  `hit`, `longest_axis`); sides narrower than 0.0001 are padded.
- `weekendtracer.hittable` — `HitRecord`, the abstract `Material` and
  `Hittable` classes, and the instance transforms `Translate` and `RotateY`
  (angle in degrees).
- `weekendtracer.sphere` — `Sphere`, `Sphere.moving` for motion blur, and
  `sphere_uv`.
- `weekendtracer.quad` — `Quad` parallelograms given by a corner and two edges.
- `weekendtracer.bvh` — `BVHNode`, built from any non-empty iterable of
  hittables (an empty one raises `ValueError`).
- `weekendtracer.texture` — `SolidColor`, `CheckerTexture` (and
  `CheckerTexture.from_colors`), `ImageTexture`, `NoiseTexture`.
- `weekendtracer.perlin` — `Perlin` noise and turbulence.
- `weekendtracer.image` — `RtwImage`, which looks for an image file in the
  `RTW_IMAGES` directory, the current directory and the `images/` directories
  of up to six parent levels, and stores it as linear 8-bit RGB. An
  `ImageTexture` whose file cannot be loaded shows solid cyan.
- `weekendtracer.pdf` — `SpherePDF`, `HittablePDF` and `MixturePDF`.
- `weekendtracer.onb` — `ONB`, an orthonormal basis built around a vector.
- `weekendtracer.camera` — `Camera`, which renders a world to a text stream.
- `weekendtracer.color` — `linear_to_gamma`, `color_to_bytes` and `write_color`.

## Rendering a scene

The package defines the `Material` interface but no concrete materials, so a
scene supplies its own. `scatter` returns `(attenuation, scattered_ray)`, or
`None` when the ray is absorbed; `emitted` returns black unless overridden.

```python
import sys

from weekendtracer.bvh import BVHNode
from weekendtracer.camera import Camera
from weekendtracer.hittable import Material
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.texture import CheckerTexture
from weekendtracer.vec3 import Vec3, random_unit_vector


class Diffuse(Material):
    def __init__(self, texture):
        self.texture = texture

    def scatter(self, r_in, rec):
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return self.texture.value(rec.u, rec.v, rec.p), Ray(rec.p, direction, r_in.time)


checker = CheckerTexture.from_colors(0.32, Vec3(0.2, 0.3, 0.1), Vec3(0.9, 0.9, 0.9))
world = BVHNode([
    Sphere(Vec3(0, -1000, 0), 1000, Diffuse(checker)),
    Sphere(Vec3(0, 1, 0), 1, Diffuse(checker)),
])

camera = Camera(image_width=64, samples_per_pixel=4, background=Vec3(0.7, 0.8, 1.0))
camera.lookfrom = Vec3(13, 2, 3)
camera.lookat = Vec3(0, 0, 0)
camera.vfov = 20
camera.render(world, sys.stdout)
```

`render` writes the PPM to the given stream (standard output by default) and
progress to standard error. Each pixel is the average of its samples; rays
that hit nothing take the camera's background colour. The average is gamma
corrected (gamma 2), NaN components become zero, and the pixel is written as
three integers from 0 to 255 on one line.

## Monte Carlo estimate

A small command integrates cos³θ over the hemisphere with uniform sampling
and prints the estimate next to π/2:

```
weekendtracer-cos-cubed
weekendtracer-cos-cubed --samples 10000
```

The default is 1,000,000 samples; the count must be positive.

## What the package does not do

- It ships no concrete materials (diffuse, metal, glass, light); scenes
  provide their own `Material` subclasses.
- It has no object-list or participating-medium hittable; group objects with
  `BVHNode`.
- It has no command that renders scenes; rendering is done from Python with
  `Camera.render`.
- `Hittable.pdf_value` and `Hittable.random` are only the base defaults (0 and
  the x axis); no object overrides them, and there is no cosine-weighted PDF.

## Running the tests

```
pip install .[test]
pytest
```