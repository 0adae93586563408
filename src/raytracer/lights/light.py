# raytracer/lights/light.py
from raytracer.core.colour import Colour
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Intersection


class Light:
    """
    Abstract light source. Lights hold no per-render state: every query is
    answered from the intersection (and, for shadows, the world) alone.
    """

    def direction(self, hit: Intersection) -> Vector3:
        """Unit vector from the hit point towards the light."""
        raise NotImplementedError("direction() must be implemented by subclasses.")

    def radiance(self, hit: Intersection) -> Colour:
        """Light arriving at the hit point."""
        raise NotImplementedError("radiance() must be implemented by subclasses.")

    def in_shadow(self, ray: Ray, world) -> bool:
        """Whether something in ``world`` blocks ``ray`` before it reaches the light."""
        raise NotImplementedError("in_shadow() must be implemented by subclasses.")
