# raytracer/camera/fisheye.py
import math
from typing import Optional

from raytracer.camera.camera import Camera, Location
from raytracer.core.errors import ConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector2, Vector3


def normalised_device_point(world, point: Vector2) -> Vector2:
    """Scales a view-plane point so the image spans [-1, 1] on both axes."""
    view = world.view
    return Vector2(2.0 * point.x / (view.s * view.hres), 2.0 * point.y / (view.s * view.vres))


class Fisheye(Camera):
    """
    Radial fisheye projection covering up to ``psi_max`` degrees from the
    view axis (so a field of view of twice that). The image circle is
    inscribed in the frame; pixels outside it get no rays.
    """

    def __init__(self, location: Location, psi_max: float, exposure: float = 1.0):
        super().__init__(location, 1.0, exposure)
        if not 0 < psi_max <= 180:
            raise ConfigurationError(f"psi_max must be in (0, 180] degrees, got {psi_max!r}")
        self.psi_max = psi_max

    def ray_direction(self, world, point: Vector2) -> Optional[Vector3]:
        pn = normalised_device_point(world, point)
        r_squared = pn.dot(pn)
        if r_squared > 1.0:
            return None

        r = math.sqrt(r_squared)
        psi = math.radians(r * self.psi_max)
        sin_psi = math.sin(psi)
        cos_psi = math.cos(psi)
        if r > 0.0:
            sin_alpha = pn.y / r
            cos_alpha = pn.x / r
        else:
            sin_alpha = 0.0
            cos_alpha = 1.0

        u, v, w = self.basis
        return u * (sin_psi * cos_alpha) + v * (sin_psi * sin_alpha) - w * cos_psi

    def get_ray(self, world, point: Vector2, *extra) -> Optional[Ray]:
        direction = self.ray_direction(world, point)
        if direction is None:
            return None
        return Ray(self.eye, direction)

    def __repr__(self) -> str:
        return f"Fisheye({self.location!r}, psi_max={self.psi_max})"
