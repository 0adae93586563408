# raytracer/materials/brdf.py
"""
Bidirectional reflectance distribution functions.

Materials combine these to decide how much of the light arriving from
``in_dir`` leaves the surface towards ``out_dir``. Both directions point away
from the surface.
"""
import math

from raytracer.core.colour import Colour
from raytracer.core.utils import reflect
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Intersection


class BRDF:
    """
    Abstract BRDF.
    """

    def call(self, hit: Intersection, in_dir: Vector3, out_dir: Vector3) -> Colour:
        """
        Returns the reflected radiance contribution from ``in_dir`` into ``out_dir``.
        """
        raise NotImplementedError("call() must be implemented by subclasses.")

    def rho(self, hit: Intersection, out_dir: Vector3) -> Colour:
        """
        Returns the bihemispherical reflectance for ``out_dir``.
        """
        raise NotImplementedError("rho() must be implemented by subclasses.")


class Lambertian(BRDF):
    """
    Perfect diffuse reflection, a good fit for dull surfaces like paper.
    """

    def __init__(self, reflectance: float, colour: Colour):
        self.rho_colour = colour * reflectance

    def call(self, hit: Intersection, in_dir: Vector3, out_dir: Vector3) -> Colour:
        # Multiply by 1/pi to normalise the Lambertian BRDF.
        return self.rho_colour * (1.0 / math.pi)

    def rho(self, hit: Intersection, out_dir: Vector3) -> Colour:
        return self.rho_colour


class GlossySpecular(BRDF):
    """
    Phong-style specular highlight. Higher ``shininess`` gives a tighter spot.
    """

    def __init__(self, reflectance: float, shininess: float, colour: Colour):
        self.rho_colour = colour * reflectance
        self.shininess = shininess

    def call(self, hit: Intersection, in_dir: Vector3, out_dir: Vector3) -> Colour:
        # mirror direction of the incoming light
        r = -reflect(in_dir, hit.normal)
        r_dot_out = r.dot(out_dir)
        if r_dot_out > 0.0:
            return self.rho_colour * (r_dot_out ** self.shininess)
        return Colour.black()

    def rho(self, hit: Intersection, out_dir: Vector3) -> Colour:
        # no ambient specular contribution
        return Colour.black()
