# raytracer/lights/ambient.py
from raytracer.core.colour import Colour
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Intersection
from raytracer.lights.light import Light


class Ambient(Light):
    """
    Flat fill light that reaches every point equally and casts no shadows.
    """

    def __init__(self, scale: float, colour: Colour = None):
        self.scale = scale
        self.colour = colour if colour is not None else Colour.white()

    def direction(self, hit: Intersection) -> Vector3:
        # unused, in theory
        return Vector3(0.0, 0.0, 0.0)

    def radiance(self, hit: Intersection) -> Colour:
        return self.colour * self.scale

    def in_shadow(self, ray: Ray, world) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Ambient({self.scale}, {self.colour!r})"
