# raytracer/core/errors.py


class RaytracerError(Exception):
    """Base class for all renderer errors."""


class ConfigurationError(RaytracerError, ValueError):
    """
    Raised while building a scene when its description cannot produce a
    correct image: bad sample counts, a degenerate camera basis, mismatched
    lens and antialiasing samplers, unknown kinds and the like.
    """


class GeometryError(RaytracerError, ArithmeticError):
    """Raised when a geometry reports a non-finite hit distance."""


class ImageWriteError(RaytracerError, OSError):
    """Raised when a rendered image cannot be written to disk."""
