# raytracer/core/utils.py
from raytracer.core.vector import Vector3


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
