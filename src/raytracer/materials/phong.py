# raytracer/materials/phong.py
from raytracer.core.colour import Colour
from raytracer.materials.brdf import GlossySpecular, Lambertian
from raytracer.materials.material import Material


class Phong(Material):
    """
    Phong reflection: Lambertian ambient and diffuse terms plus a glossy
    specular highlight, for shiny objects like plastic or metal.
    """

    def __init__(self, ka: float, kd: float, ks: float, shininess: float, colour: Colour):
        self.ambient_brdf = Lambertian(ka, colour)
        self.diffuse_brdf = Lambertian(kd, colour)
        self.specular_brdf = GlossySpecular(ks, shininess, colour)

    def __repr__(self) -> str:
        return (f"Phong(diffuse={self.diffuse_brdf.rho_colour!r}, "
                f"shininess={self.specular_brdf.shininess})")
