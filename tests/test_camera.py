import io
import random

import pytest

from weekendtracer.aabb import AABB
from weekendtracer.camera import Camera
from weekendtracer.hittable import HitRecord, Hittable, Material
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Vec3


class EmptyWorld(Hittable):
    def hit(self, r, ray_t):
        return None

    def bounding_box(self):
        return AABB()


class Glow(Material):
    def __init__(self, light):
        self.light = light

    def emitted(self, u, v, p):
        return self.light


class GlowingMirror(Glow):
    def __init__(self, light, attenuation):
        super().__init__(light)
        self.attenuation = attenuation

    def scatter(self, r_in, rec):
        return self.attenuation, Ray(rec.p, r_in.direction)


class Everywhere(Hittable):
    def __init__(self, mat):
        self.mat = mat

    def hit(self, r, ray_t):
        return HitRecord(p=r.at(1.0), t=1.0, mat=self.mat)

    def bounding_box(self):
        return AABB()


def test_render_header_and_pixel_count():
    cam = Camera(image_width=4, aspect_ratio=2.0, samples_per_pixel=2, max_depth=3)
    out = io.StringIO()
    cam.render(EmptyWorld(), out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "P3"
    assert lines[1] == f"4 {cam.image_height}"
    assert lines[2] == "255"
    assert len(lines) == 3 + 4 * cam.image_height


def test_render_background_white():
    cam = Camera(image_width=3, samples_per_pixel=2, background=Vec3(1, 1, 1))
    out = io.StringIO()
    cam.render(EmptyWorld(), out)
    pixels = out.getvalue().splitlines()[3:]
    assert pixels and all(line == "255 255 255" for line in pixels)


def test_render_background_black():
    cam = Camera(image_width=2, samples_per_pixel=1)
    out = io.StringIO()
    cam.render(EmptyWorld(), out)
    pixels = out.getvalue().splitlines()[3:]
    assert pixels == ["0 0 0"] * (2 * cam.image_height)


def test_render_reports_progress(capsys):
    cam = Camera(image_width=2, samples_per_pixel=1)
    cam.render(EmptyWorld(), io.StringIO())
    assert "Done." in capsys.readouterr().err


def test_image_height_is_at_least_one():
    cam = Camera(image_width=1, aspect_ratio=16.0 / 9.0)
    cam.initialize()
    assert cam.image_height == 1


def test_square_image_height_matches_width():
    cam = Camera(image_width=100, aspect_ratio=1.0)
    cam.initialize()
    assert cam.image_height == cam.image_width


def test_get_ray_starts_at_lookfrom_and_reaches_focus_plane():
    random.seed(7)
    cam = Camera(image_width=10)
    cam.initialize()
    for i, j in [(0, 0), (5, 5), (9, 9)]:
        r = cam.get_ray(i, j)
        assert r.origin == cam.lookfrom
        assert r.direction.z == pytest.approx(-cam.focus_dist)
        assert 0.0 <= r.time < 1.0


def test_get_ray_left_pixel_points_left_of_right_pixel():
    random.seed(3)
    cam = Camera(image_width=10)
    cam.initialize()
    assert cam.get_ray(0, 5).direction.x < cam.get_ray(9, 5).direction.x
    assert cam.get_ray(5, 0).direction.y > cam.get_ray(5, 9).direction.y


def test_defocus_origin_stays_in_lens_plane():
    random.seed(11)
    cam = Camera(image_width=10, defocus_angle=10.0)
    cam.initialize()
    origins = [cam.get_ray(3, 4).origin for _ in range(20)]
    assert all(o.z == pytest.approx(cam.lookfrom.z) for o in origins)
    assert any(o != cam.lookfrom for o in origins)


def test_ray_color_depth_zero_is_black():
    cam = Camera()
    cam.initialize()
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 0, EmptyWorld()) == Vec3(0, 0, 0)


def test_ray_color_miss_returns_background():
    cam = Camera(background=Vec3(0.2, 0.3, 0.4))
    cam.initialize()
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, EmptyWorld()) == Vec3(0.2, 0.3, 0.4)


def test_ray_color_absorbing_material_returns_emission():
    cam = Camera()
    cam.initialize()
    world = Everywhere(Glow(Vec3(4, 4, 4)))
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world) == Vec3(4, 4, 4)


def test_ray_color_scatter_adds_attenuated_bounce():
    cam = Camera()
    cam.initialize()
    light = Vec3(1, 2, 3)
    att = Vec3(0.5, 0.5, 0.5)
    world = Everywhere(GlowingMirror(light, att))
    r = Ray(Vec3(), Vec3(0, 0, -1))
    one = cam.ray_color(r, 1, world)
    two = cam.ray_color(r, 2, world)
    assert one == light
    expected = light + att * one
    assert (two.x, two.y, two.z) == pytest.approx((expected.x, expected.y, expected.z))