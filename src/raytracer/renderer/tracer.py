# raytracer/renderer/tracer.py
"""
Strategies for turning a ray into a colour.
"""
from raytracer.core.colour import Colour
from raytracer.core.ray import Ray


class Tracer:
    """
    Abstract ray tracer.
    """

    def trace_ray(self, world, ray: Ray) -> Colour:
        """Returns the colour seen along ``ray``."""
        raise NotImplementedError("trace_ray() must be implemented by subclasses.")


class SimpleTracer(Tracer):
    """
    Red where the ray hits the first object in the world, black elsewhere.
    Handy for checking camera set-up.
    """

    def trace_ray(self, world, ray: Ray) -> Colour:
        if world.objects and world.objects[0].hit(ray) is not None:
            return Colour.red()
        return Colour.black()


class MultipleObjectTracer(Tracer):
    """
    Shades the nearest object along the ray with its material, falling back
    to the world's background colour on a miss.
    """

    def trace_ray(self, world, ray: Ray) -> Colour:
        hit = world.hit_objects(ray)
        if hit is None:
            return world.background
        return hit.material.shade(hit, world)
