# raytracer/materials/__init__.py
from raytracer.materials.brdf import BRDF, GlossySpecular, Lambertian
from raytracer.materials.material import Material
from raytracer.materials.matte import Matte
from raytracer.materials.phong import Phong

__all__ = ["BRDF", "GlossySpecular", "Lambertian", "Material", "Matte", "Phong"]
