import math

import pytest

from raytracer import config
from raytracer.core.colour import Colour
from raytracer.core.errors import GeometryError
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry import Cuboid, Geometry, Plane, Sphere, ViewPlane, World
from raytracer.lights import Ambient
from raytracer.materials import Matte
from raytracer.sampling import Regular

MATERIAL = Matte(0.25, 0.65, Colour.white())


def make_world(*objects):
    world = World(ViewPlane(4, 4, 1.0, Regular(1)), Ambient(1.0))
    for obj in objects:
        world.add_object(obj)
    return world


class TestPlane:

    def test_head_on_hit(self):
        plane = Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, -1.0))
        assert plane.hit(ray) == 100.0

    @pytest.mark.parametrize("origin, direction", [
        ((0.0, 10.0, 5.0), (0.3, -1.0, 0.2)),
        ((-4.0, 5.0, 1.0), (1.0, -0.5, -0.25)),
        ((3.0, 7.5, -2.0), (-0.1, -0.9, 0.4)),
    ])
    def test_hit_point_lies_on_plane(self, origin, direction):
        point = Vector3(1.0, 2.0, 3.0)
        normal = Vector3(0.0, 1.0, 0.0)
        plane = Plane(point, normal, MATERIAL)
        ray = Ray(Vector3(*origin), Vector3(*direction).normalize())

        t = plane.hit(ray)
        assert t is not None
        assert (ray.at(t) - point).dot(normal) == pytest.approx(0.0, abs=1e-9)

    def test_parallel_ray_misses(self):
        plane = Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), MATERIAL)
        assert plane.hit(Ray(Vector3(0.0, 1.0, 0.0), Vector3(1.0, 0.0, 0.0))) is None

    def test_plane_behind_ray_misses(self):
        plane = Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), MATERIAL)
        assert plane.hit(Ray(Vector3(0.0, 0.0, 10.0), Vector3(0.0, 0.0, 1.0))) is None

    def test_ray_starting_on_plane_misses(self):
        plane = Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), MATERIAL)
        assert plane.hit(Ray(Vector3(5.0, 0.0, 5.0), Vector3(0.0, 1.0, 0.0))) is None

    def test_normal_is_constant_and_unit(self):
        plane = Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 2.0, 0.0), MATERIAL)
        assert plane.normal(Vector3(123.0, 0.0, -9.0)) == Vector3(0.0, 1.0, 0.0)


class TestSphere:

    def test_head_on_hit(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 50.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray) == 50.0

    def test_ray_from_inside_uses_far_root(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 50.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray) == 50.0

    def test_near_root_at_epsilon_falls_back_to_far_root(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 50.0, MATERIAL)
        # starts on the surface, heading through the centre
        ray = Ray(Vector3(0.0, 0.0, 50.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray) == pytest.approx(100.0)

    def test_miss(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 50.0, MATERIAL)
        assert sphere.hit(Ray(Vector3(0.0, 60.0, 100.0), Vector3(0.0, 0.0, -1.0))) is None

    def test_sphere_behind_ray_misses(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 50.0, MATERIAL)
        assert sphere.hit(Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, 1.0))) is None

    @pytest.mark.parametrize("direction", [
        (0.0, 0.0, -1.0), (0.1, 0.2, -1.0), (-0.3, 0.1, -1.0), (0.25, -0.25, -1.0),
    ])
    def test_normal_at_hit_point_is_unit(self, direction):
        sphere = Sphere(Vector3(1.0, -2.0, 0.0), 50.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 100.0), Vector3(*direction).normalize())
        t = sphere.hit(ray)
        assert t is not None
        assert sphere.normal(ray.at(t)).length() == pytest.approx(1.0)


class TestCuboid:

    def box(self):
        return Cuboid(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0), MATERIAL)

    def test_axis_parallel_hit(self):
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert self.box().hit(ray) == 4.0

    def test_oblique_hit(self):
        ray = Ray(Vector3(5.0, 5.0, 5.0), Vector3(-1.0, -1.0, -1.0).normalize())
        t = self.box().hit(ray)
        assert t == pytest.approx(4.0 * math.sqrt(3.0))

    def test_origin_inside_returns_exit(self):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert self.box().hit(ray) == 1.0

    def test_parallel_ray_outside_slab_misses(self):
        ray = Ray(Vector3(5.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert self.box().hit(ray) is None

    def test_box_behind_ray_misses(self):
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 1.0))
        assert self.box().hit(ray) is None

    def test_swapped_corners(self):
        box = Cuboid(Vector3(1.0, 1.0, 1.0), Vector3(-1.0, -1.0, -1.0), MATERIAL)
        assert box.hit(Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))) == 4.0

    def test_with_size(self):
        box = Cuboid.with_size(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 3.0, 4.0), MATERIAL)
        assert box.maximum == Vector3(2.0, 3.0, 4.0)

    @pytest.mark.parametrize("point, expected", [
        ((0.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
        ((0.0, 0.0, -1.0), (0.0, 0.0, -1.0)),
        ((1.0, 0.3, -0.2), (1.0, 0.0, 0.0)),
        ((-0.5, -1.0, 0.9), (0.0, -1.0, 0.0)),
        ((0.99, 1.0, 0.0), (0.0, 1.0, 0.0)),
    ])
    def test_face_normals(self, point, expected):
        assert self.box().normal(Vector3(*point)) == Vector3(*expected)

    def test_normal_at_hit_point_is_unit(self):
        box = Cuboid(Vector3(-2.0, 0.0, -3.0), Vector3(4.0, 1.0, 5.0), MATERIAL)
        ray = Ray(Vector3(0.3, 10.0, 0.7), Vector3(0.05, -1.0, 0.1).normalize())
        t = box.hit(ray)
        assert t is not None
        normal = box.normal(ray.at(t))
        assert normal.length() == pytest.approx(1.0)
        assert normal == Vector3(0.0, 1.0, 0.0)


class TestWorld:

    def test_nearest_object_wins(self):
        near = Sphere(Vector3(0.0, 0.0, 0.0), 10.0, Matte(1.0, 0.0, Colour.red()))
        far = Sphere(Vector3(0.0, 0.0, -100.0), 10.0, Matte(1.0, 0.0, Colour.blue()))
        world = make_world(far, near)

        hit = world.hit_objects(Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, -1.0)))
        assert hit.t == 90.0
        assert hit.material is near.material
        assert hit.hit_point == Vector3(0.0, 0.0, 10.0)
        assert hit.normal == Vector3(0.0, 0.0, 1.0)
        assert hit.depth == 0

    def test_exact_tie_goes_to_first_object(self):
        first = Sphere(Vector3(0.0, 0.0, 0.0), 10.0, Matte(1.0, 0.0, Colour.red()))
        second = Sphere(Vector3(0.0, 0.0, 0.0), 10.0, Matte(1.0, 0.0, Colour.blue()))
        world = make_world(first, second)

        hit = world.hit_objects(Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, -1.0)))
        assert hit.material is first.material

    def test_miss_returns_none(self):
        world = make_world(Sphere(Vector3(0.0, 0.0, 0.0), 10.0, MATERIAL))
        assert world.hit_objects(Ray(Vector3(0.0, 50.0, 100.0), Vector3(0.0, 0.0, -1.0))) is None

    def test_empty_world_misses(self):
        assert make_world().hit_objects(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))) is None

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_distance_is_fatal(self, bad):
        class Broken(Geometry):
            material = MATERIAL

            def hit(self, ray):
                return bad

            def normal(self, point):
                return Vector3(0.0, 0.0, 1.0)

        world = make_world(Sphere(Vector3(0.0, 0.0, 0.0), 10.0, MATERIAL), Broken())
        with pytest.raises(GeometryError):
            world.hit_objects(Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, -1.0)))


def test_epsilon_is_read_at_call_time(monkeypatch):
    sphere = Sphere(Vector3(0.0, 0.0, 0.0), 50.0, MATERIAL)
    ray = Ray(Vector3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, -1.0))
    monkeypatch.setattr(config, "EPSILON", 60.0)
    # near root (50) is now inside the epsilon band
    assert sphere.hit(ray) == 150.0
