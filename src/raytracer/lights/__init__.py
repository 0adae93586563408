# raytracer/lights/__init__.py
from raytracer.lights.light import Light
from raytracer.lights.ambient import Ambient
from raytracer.lights.point_light import PointLight

__all__ = ["Light", "Ambient", "PointLight"]
