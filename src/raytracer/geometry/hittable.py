# raytracer/geometry/hittable.py
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3


class Intersection:
    """
    Records details of a ray-object intersection.

    Built once per nearest-hit query and consumed by the material that shades
    it. The world is not stored here; shading code receives it explicitly.
    """
    __slots__ = ("ray", "t", "hit_point", "normal", "depth", "material")

    def __init__(self, ray: Ray, t: float, hit_point: Vector3, normal: Vector3,
                 material, depth: int = 0):
        self.ray = ray              # Ray that produced the hit
        self.t = t                  # Ray parameter at intersection
        self.hit_point = hit_point  # Intersection point
        self.normal = normal        # Surface normal at intersection
        self.depth = depth          # Recursion depth; 0 for camera rays
        self.material = material

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, hit_point={self.hit_point!r}, normal={self.normal!r})"


class Geometry:
    """
    Abstract class for objects that can be hit by a ray.

    Geometries are built once with the scene and never change afterwards.
    """
    material = None

    def hit(self, ray: Ray) -> Optional[float]:
        """
        Returns the smallest ray parameter beyond ``config.EPSILON`` at which
        ``ray`` meets the surface, or None if it never does.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def normal(self, point: Vector3) -> Vector3:
        """
        Returns the unit surface normal at ``point``, which is assumed to lie
        (approximately) on the surface.
        """
        raise NotImplementedError("normal() must be implemented by subclasses.")
