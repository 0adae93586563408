# raytracer/geometry/__init__.py
from raytracer.geometry.hittable import Geometry, Intersection
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.cuboid import Cuboid
from raytracer.geometry.world import ViewPlane, World

__all__ = ["Geometry", "Intersection", "Plane", "Sphere", "Cuboid", "ViewPlane", "World"]
