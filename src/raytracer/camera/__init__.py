# raytracer/camera/__init__.py
from raytracer.camera.camera import Camera, Location, Pinhole, compute_basis_vectors
from raytracer.camera.thin_lens import ThinLens
from raytracer.camera.fisheye import Fisheye
from raytracer.camera.spherical import Spherical

__all__ = ["Camera", "Location", "Pinhole", "ThinLens", "Fisheye", "Spherical", "compute_basis_vectors"]
