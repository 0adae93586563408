"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without an install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from raytracer.core.colour import Colour  # noqa: E402
from raytracer.core.vector import Vector3  # noqa: E402
from raytracer.geometry import Plane, Sphere, ViewPlane, World  # noqa: E402
from raytracer.lights import Ambient  # noqa: E402
from raytracer.materials import Matte  # noqa: E402
from raytracer.sampling import Regular  # noqa: E402


@pytest.fixture
def red_matte():
    """Fully ambient-reflective red, so ambient light of 1.0 gives pure red."""
    return Matte(1.0, 0.0, Colour.red())


@pytest.fixture
def single_sample_view():
    """A 20x20 view plane, 10 units per pixel, one sample at each pixel centre."""
    return ViewPlane(20, 20, 10.0, Regular(1))


@pytest.fixture
def sphere_world(single_sample_view, red_matte):
    """A red sphere of radius 50 at the origin under pure ambient light."""
    world = World(single_sample_view, Ambient(1.0), background=Colour(0.0, 0.0, 1.0))
    world.add_object(Sphere(Vector3(0.0, 0.0, 0.0), 50.0, red_matte))
    return world


@pytest.fixture
def shadow_world(single_sample_view):
    """A floor plane at y=0 with a sphere hovering above the origin."""
    world = World(single_sample_view, Ambient(0.5))
    world.add_object(Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Matte(0.25, 0.65, Colour.white())))
    world.add_object(Sphere(Vector3(0.0, 50.0, 0.0), 10.0, Matte(0.25, 0.65, Colour.green())))
    return world
