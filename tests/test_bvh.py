import math
import random

import pytest

from weekendtracer.bvh import BVHNode
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

WIDE = Interval(0.001, math.inf)


def _nearest(objects, r, ray_t):
    hits = [rec for rec in (o.hit(r, ray_t) for o in objects) if rec is not None]
    return min(hits, key=lambda rec: rec.t) if hits else None


@pytest.fixture
def spheres():
    rng = random.Random(42)
    return [
        Sphere(Vec3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10)),
               rng.uniform(0.3, 1.5), None)
        for _ in range(40)
    ]


def test_empty_list_raises():
    with pytest.raises(ValueError):
        BVHNode([])


def test_bounding_box_encloses_every_object(spheres):
    box = BVHNode(spheres).bounding_box()
    for s in spheres:
        sb = s.bounding_box()
        for axis in range(3):
            assert box.axis_interval(axis).min <= sb.axis_interval(axis).min
            assert box.axis_interval(axis).max >= sb.axis_interval(axis).max


def test_hits_match_linear_search(spheres):
    node = BVHNode(spheres)
    rng = random.Random(5)
    for _ in range(200):
        origin = Vec3(rng.uniform(-20, 20), rng.uniform(-20, 20), rng.uniform(-20, 20))
        target = Vec3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        r = Ray(origin, target - origin)
        expected = _nearest(spheres, r, WIDE)
        got = node.hit(r, WIDE)
        if expected is None:
            assert got is None
        else:
            assert got is not None
            assert got.t == pytest.approx(expected.t)


def test_single_object_behaves_like_the_object():
    s = Sphere(Vec3(0, 0, -5), 1.0, None)
    node = BVHNode([s])
    r = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert node.hit(r, WIDE).t == pytest.approx(s.hit(r, WIDE).t)
    assert node.bounding_box() == s.bounding_box()


def test_two_objects_returns_nearer():
    near = Sphere(Vec3(0, 0, -3), 1.0, "near")
    far = Sphere(Vec3(0, 0, -10), 1.0, "far")
    r = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert BVHNode([far, near]).hit(r, WIDE).mat == "near"
    assert BVHNode([near, far]).hit(r, WIDE).mat == "near"


def test_ray_missing_bounding_box_misses(spheres):
    node = BVHNode(spheres)
    r = Ray(Vec3(100, 100, 100), Vec3(1, 0, 0))
    assert node.hit(r, WIDE) is None


def test_interval_limits_hits():
    s = Sphere(Vec3(0, 0, -5), 1.0, None)
    node = BVHNode([s, Sphere(Vec3(0, 0, -20), 1.0, None)])
    r = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert node.hit(r, Interval(0.001, 2.0)) is None


def test_does_not_modify_input_list(spheres):
    before = list(spheres)
    BVHNode(spheres)
    assert spheres == before