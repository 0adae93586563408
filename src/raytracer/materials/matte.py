# raytracer/materials/matte.py
from raytracer.core.colour import Colour
from raytracer.materials.brdf import Lambertian
from raytracer.materials.material import Material


class Matte(Material):
    """
    Matte material using perfectly diffuse (Lambertian) reflection; suitable
    for things like paper or chalk.

    - ``ka`` is the ambient reflectance, the brightness coefficient of
      ambient light on the object
    - ``kd`` is the same for diffuse light
    - ``colour`` is the base hue of the material
    """

    def __init__(self, ka: float, kd: float, colour: Colour):
        self.ambient_brdf = Lambertian(ka, colour)
        self.diffuse_brdf = Lambertian(kd, colour)

    def __repr__(self) -> str:
        return f"Matte(ambient={self.ambient_brdf.rho_colour!r}, diffuse={self.diffuse_brdf.rho_colour!r})"
