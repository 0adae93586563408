# raytracer/geometry/sphere.py
import math
from typing import Optional

from raytracer import config
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Geometry


class Sphere(Geometry):
    """
    Represents a sphere defined by its centre, radius, and material.
    """

    def __init__(self, centre: Vector3, radius: float, material):
        self.centre = centre
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray) -> Optional[float]:
        offset = ray.origin - self.centre

        # quadratic equation for "a t^2 + b t + c = 0"
        a = ray.direction.dot(ray.direction)
        b = 2.0 * offset.dot(ray.direction)
        c = offset.dot(offset) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return None

        e = math.sqrt(discriminant)
        denominator = 2.0 * a

        # nearest root first, then the far one for rays starting inside
        t = (-b - e) / denominator
        if t > config.EPSILON:
            return t

        t = (-b + e) / denominator
        if t > config.EPSILON:
            return t

        return None

    def normal(self, point: Vector3) -> Vector3:
        return (point - self.centre) / self.radius

    def __repr__(self) -> str:
        return f"Sphere({self.centre!r}, {self.radius})"
