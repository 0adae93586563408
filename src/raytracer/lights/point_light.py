# raytracer/lights/point_light.py
from raytracer.core.colour import Colour
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Intersection
from raytracer.lights.light import Light


class PointLight(Light):
    """
    A light emitting from an infinitely small point.

    There is no distance attenuation: the radiance is the same everywhere.
    """

    def __init__(self, scale: float, location: Vector3, colour: Colour = None):
        self.scale = scale
        self.location = location
        self.colour = colour if colour is not None else Colour.white()

    def direction(self, hit: Intersection) -> Vector3:
        return (self.location - hit.hit_point).normalize()

    def radiance(self, hit: Intersection) -> Colour:
        return self.colour * self.scale

    def in_shadow(self, ray: Ray, world) -> bool:
        # compare squared distances to avoid a square root per object
        offset = self.location - ray.origin
        distance_squared = offset.dot(offset)

        for obj in world.objects:
            t = obj.hit(ray)
            if t is not None and t * t < distance_squared:
                return True
        return False

    def __repr__(self) -> str:
        return f"PointLight({self.scale}, {self.location!r}, {self.colour!r})"
