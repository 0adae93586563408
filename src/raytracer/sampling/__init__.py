# raytracer/sampling/__init__.py
from raytracer.sampling.generators import (
    Generator,
    Random,
    Regular,
    Jittered,
    NRooks,
    MultiJittered,
    Hammersley,
    make_generator,
)
from raytracer.sampling.sample_sets import SampleSets

# The sampler to use when nothing more specific is asked for.
Default = MultiJittered

__all__ = [
    "Generator",
    "Random",
    "Regular",
    "Jittered",
    "NRooks",
    "MultiJittered",
    "Hammersley",
    "Default",
    "SampleSets",
    "make_generator",
]
