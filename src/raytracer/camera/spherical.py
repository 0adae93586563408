# raytracer/camera/spherical.py
import math

from raytracer.camera.camera import Camera, Location
from raytracer.camera.fisheye import normalised_device_point
from raytracer.core.errors import ConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector2, Vector3


class Spherical(Camera):
    """
    Latitude/longitude panorama. The image's x axis maps linearly to azimuth
    in [-lambda_max, lambda_max] and its y axis to elevation in
    [-psi_max, psi_max], both in degrees. Every pixel gets a ray.
    """

    def __init__(self, location: Location, lambda_max: float, psi_max: float,
                 exposure: float = 1.0):
        super().__init__(location, 1.0, exposure)
        if not 0 < lambda_max <= 180:
            raise ConfigurationError(f"lambda_max must be in (0, 180] degrees, got {lambda_max!r}")
        if not 0 < psi_max <= 90:
            raise ConfigurationError(f"psi_max must be in (0, 90] degrees, got {psi_max!r}")
        self.lambda_max = lambda_max
        self.psi_max = psi_max

    def ray_direction(self, world, point: Vector2) -> Vector3:
        pn = normalised_device_point(world, point)
        azimuth = math.radians(pn.x * self.lambda_max)
        elevation = math.radians(pn.y * self.psi_max)

        phi = math.pi - azimuth
        theta = 0.5 * math.pi - elevation
        sin_theta = math.sin(theta)

        u, v, w = self.basis
        return u * (sin_theta * math.sin(phi)) + v * math.cos(theta) + w * (sin_theta * math.cos(phi))

    def get_ray(self, world, point: Vector2, *extra) -> Ray:
        return Ray(self.eye, self.ray_direction(world, point))

    def __repr__(self) -> str:
        return f"Spherical({self.location!r}, lambda_max={self.lambda_max}, psi_max={self.psi_max})"
