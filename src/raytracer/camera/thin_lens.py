# raytracer/camera/thin_lens.py
from typing import List

from raytracer.camera.camera import Camera, Location
from raytracer.core.errors import ConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector2, Vector3
from raytracer.sampling.generators import Generator
from raytracer.sampling.sample_sets import SampleSets


class ThinLens(Camera):
    """
    Camera with depth of field.

    Rays start from random points on a lens of radius ``lens_radius`` and
    converge on the focal plane ``focal_len`` in front of the eye, so only
    objects near that plane are sharp. The lens sampler must produce as many
    samples per set as the world's antialiasing sampler.
    """

    def __init__(self, location: Location, view_len: float, focal_len: float,
                 lens_radius: float, zoom: float, sampler: Generator,
                 exposure: float = 1.0):
        super().__init__(location, zoom, exposure)
        if not view_len > 0:
            raise ConfigurationError(f"view distance must be positive, got {view_len!r}")
        if not focal_len > 0:
            raise ConfigurationError(f"focal distance must be positive, got {focal_len!r}")
        if lens_radius < 0:
            raise ConfigurationError(f"lens radius must not be negative, got {lens_radius!r}")
        self.view_len = view_len
        self.focal_len = focal_len
        self.lens_radius = lens_radius
        self.sampler = sampler

    def validate(self, world):
        antialias = world.view.sampler.num_samples
        if antialias != self.sampler.num_samples:
            raise ConfigurationError(
                f"lens sampler has {self.sampler.num_samples} samples per set but the "
                f"antialiasing sampler has {antialias}"
            )

    def sample_sets(self, world) -> List[SampleSets]:
        self.validate(world)
        return [world.view.sampler.gen_square_samples(), self.sampler.gen_disc_samples()]

    def ray_origin(self, lens_point: Vector2) -> Vector3:
        u, v, _ = self.basis
        return self.eye + u * lens_point.x + v * lens_point.y

    def ray_direction(self, pixel_point: Vector2, lens_point: Vector2) -> Vector3:
        # where the pinhole ray through pixel_point meets the focal plane
        focus = pixel_point * (self.focal_len / self.view_len)
        offset = focus - lens_point
        u, v, w = self.basis
        return (u * offset.x + v * offset.y - w * self.focal_len).normalize()

    def get_ray(self, world, point: Vector2, *extra) -> Ray:
        (disc_point,) = extra
        lens_point = disc_point * self.lens_radius
        return Ray(self.ray_origin(lens_point), self.ray_direction(point, lens_point))

    def __repr__(self) -> str:
        return (f"ThinLens({self.location!r}, view_len={self.view_len}, "
                f"focal_len={self.focal_len}, lens_radius={self.lens_radius})")
