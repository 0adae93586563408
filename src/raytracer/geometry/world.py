# raytracer/geometry/world.py
import math
from typing import List, Optional

from raytracer.core.colour import Colour
from raytracer.core.errors import ConfigurationError, GeometryError
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Geometry, Intersection


class ViewPlane:
    """
    General information about the view: output resolution, the size of one
    pixel on the view plane, and the sampler used for antialiasing.

    ``gamma`` is kept with the view but not applied to the image (currently
    unused).
    """

    def __init__(self, hres: int, vres: int, s: float, sampler, gamma: float = 1.0):
        for name, value in (("hres", hres), ("vres", vres)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not s > 0:
            raise ConfigurationError(f"pixel size must be positive, got {s!r}")
        self.hres = hres
        self.vres = vres
        self.s = s
        self.gamma = gamma
        self.sampler = sampler

    def __repr__(self) -> str:
        return f"ViewPlane({self.hres}x{self.vres}, s={self.s}, sampler={self.sampler!r})"


class World:
    """
    Everything that gets rendered: geometry, lights, the ambient light, the
    background colour and the view plane.

    A world is filled in once and then only read while rendering.
    """

    def __init__(self, view: ViewPlane, ambient, background: Colour = None,
                 objects: Optional[List[Geometry]] = None, lights: Optional[list] = None):
        self.view = view
        self.ambient = ambient
        self.background = background if background is not None else Colour.black()
        self.objects: List[Geometry] = list(objects) if objects else []
        self.lights = list(lights) if lights else []

    def add_object(self, obj: Geometry):
        self.objects.append(obj)

    def add_light(self, light):
        self.lights.append(light)

    def hit_objects(self, ray: Ray) -> Optional[Intersection]:
        """
        Returns the intersection with the first object hit by ``ray``, or
        None if it escapes the scene.

        On an exact tie between two distances the earlier object wins.
        """
        nearest_t = math.inf
        nearest = None
        for obj in self.objects:
            t = obj.hit(ray)
            if t is None:
                continue
            if not math.isfinite(t):
                raise GeometryError(f"{obj!r} returned a non-finite hit distance {t}")
            if t < nearest_t:
                nearest_t = t
                nearest = obj

        if nearest is None:
            return None

        hit_point = ray.at(nearest_t)
        return Intersection(
            ray=ray,
            t=nearest_t,
            hit_point=hit_point,
            normal=nearest.normal(hit_point),
            material=nearest.material,
        )
