# raytracer/materials/material.py
from raytracer.core.colour import Colour
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Intersection


class Material:
    """
    Abstract material class. Subclasses provide an ambient and a diffuse BRDF
    and may add a specular one; ``shade`` runs the direct-lighting loop over
    them.
    """
    ambient_brdf = None
    diffuse_brdf = None
    specular_brdf = None

    def shade(self, hit: Intersection, world) -> Colour:
        """
        Returns the colour leaving the surface at ``hit`` towards the viewer.

        Ambient light is always added; each light then contributes its
        diffuse (and specular) term unless it sits behind the surface or a
        shadow ray towards it is blocked.
        """
        out_dir = -hit.ray.direction
        colour = self.ambient_brdf.rho(hit, out_dir) * world.ambient.radiance(hit)

        for light in world.lights:
            in_dir = light.direction(hit)
            angle = hit.normal.dot(in_dir)
            if angle <= 0.0:
                continue

            shadow_ray = Ray(hit.hit_point, in_dir)
            if light.in_shadow(shadow_ray, world):
                continue

            reflected = self.diffuse_brdf.call(hit, in_dir, out_dir)
            if self.specular_brdf is not None:
                reflected = reflected + self.specular_brdf.call(hit, in_dir, out_dir)
            colour = colour + reflected * light.radiance(hit) * angle

        return colour
