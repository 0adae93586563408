# raytracer/camera/camera.py
from typing import Callable, List, Optional, Tuple

import numpy as np

from raytracer.core.colour import Colour
from raytracer.core.errors import ConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector2, Vector3
from raytracer.renderer.tone_mapping import to_rgb8
from raytracer.sampling.sample_sets import SampleSets

# Below this length a basis vector is treated as degenerate.
_DEGENERATE_LENGTH = 1e-12


class Location:
    """
    Where the camera is (``eye``), what it looks at (``centre``) and which
    way is up for it (``up``).
    """

    def __init__(self, eye: Vector3, centre: Vector3, up: Vector3):
        self.eye = eye
        self.centre = centre
        self.up = up

    def __repr__(self) -> str:
        return f"Location(eye={self.eye!r}, centre={self.centre!r}, up={self.up!r})"


def compute_basis_vectors(location: Location) -> Tuple[Vector3, Vector3, Vector3]:
    """
    Computes the camera's orthonormal basis (u, v, w).

    ``w`` points from the look-at point back to the eye, ``u`` to the right
    of the image and ``v`` up. Raises ConfigurationError when ``up`` is
    parallel to the view direction or the eye sits on the look-at point.
    """
    view = location.eye - location.centre
    if view.length() < _DEGENERATE_LENGTH:
        raise ConfigurationError(f"camera eye and look-at point coincide at {location.eye!r}")
    w = view.normalize()

    side = location.up.cross(w)
    if side.length() < _DEGENERATE_LENGTH:
        raise ConfigurationError(
            f"camera up vector {location.up!r} is parallel to the view direction {w!r}"
        )
    u = side.normalize()
    v = w.cross(u)
    return u, v, w


class Camera:
    """
    Base class for cameras.

    A camera walks the view plane column by column, draws one antialiasing
    sample set per pixel, turns each sample into a ray with ``get_ray`` and
    averages what the tracer returns. Subclasses decide the projection.
    """

    def __init__(self, location: Location, zoom: float = 1.0, exposure: float = 1.0):
        if not zoom > 0:
            raise ConfigurationError(f"zoom must be positive, got {zoom!r}")
        self.location = location
        self.eye = location.eye
        self.basis = compute_basis_vectors(location)
        self.zoom = zoom
        self.exposure = exposure

    def sample_sets(self, world) -> List[SampleSets]:
        """
        Fresh sample cursors for one render. Every cursor must yield sets of
        the same size; the samples of each set are zipped together per ray.
        """
        return [world.view.sampler.gen_square_samples()]

    def validate(self, world):
        """Checks that this camera can render ``world``."""
        pass

    def get_ray(self, world, point: Vector2, *extra) -> Optional[Ray]:
        """
        Returns the ray through view-plane ``point``, or None if the point
        lies outside the camera's field of view.
        """
        raise NotImplementedError("get_ray() must be implemented by subclasses.")

    def view_point(self, world, pixel: Vector2, sample: Vector2) -> Vector2:
        """
        Maps a unit-square sample inside ``pixel`` to a point on the view plane.
        """
        scale = world.view.s / self.zoom
        return Vector2(pixel.x + sample.x - 0.5, pixel.y + sample.y - 0.5) * scale

    def render_colour(self, world, tracer,
                      progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Renders ``world`` into a linear float framebuffer of shape
        (vres, hres, 3). ``progress`` is called with each finished column.
        """
        view = world.view
        samplers = self.sample_sets(world)
        num_samples = samplers[0].num_samples
        if any(s.num_samples != num_samples for s in samplers):
            raise ConfigurationError(
                f"{type(self).__name__} needs equally sized sample sets, got "
                f"{[s.num_samples for s in samplers]}"
            )

        framebuffer = np.zeros((view.vres, view.hres, 3), dtype=np.float64)
        half_width = 0.5 * (view.hres - 1)
        half_height = 0.5 * (view.vres - 1)

        for col in range(view.hres):
            for row in range(view.vres):
                # rows grow downward, v grows upward
                pixel = Vector2(col - half_width, half_height - row)
                draws = [s.get_next() for s in samplers]

                colour = Colour.black()
                for sample, *extra in zip(*draws):
                    ray = self.get_ray(world, self.view_point(world, pixel, sample), *extra)
                    if ray is not None:
                        colour = colour + tracer.trace_ray(world, ray)

                colour = colour * (self.exposure / num_samples)
                framebuffer[row, col] = colour.to_tuple()

            if progress is not None:
                progress(col)

        return framebuffer

    def render_scene(self, world, tracer,
                     progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Renders ``world`` and returns the 8-bit RGB image, shape (vres, hres, 3).
        """
        return to_rgb8(self.render_colour(world, tracer, progress))


class Pinhole(Camera):
    """
    A perspective camera with an infinitely small aperture: every ray leaves
    from the eye and passes through the view plane ``view_len`` in front of it.
    """

    def __init__(self, location: Location, view_len: float, zoom: float = 1.0,
                 exposure: float = 1.0):
        super().__init__(location, zoom, exposure)
        if not view_len > 0:
            raise ConfigurationError(f"view distance must be positive, got {view_len!r}")
        self.view_len = view_len

    def ray_direction(self, point: Vector2) -> Vector3:
        u, v, w = self.basis
        return (u * point.x + v * point.y - w * self.view_len).normalize()

    def get_ray(self, world, point: Vector2, *extra) -> Ray:
        return Ray(self.eye, self.ray_direction(point))

    def __repr__(self) -> str:
        return f"Pinhole({self.location!r}, view_len={self.view_len}, zoom={self.zoom})"
