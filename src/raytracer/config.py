# raytracer/config.py
"""
Renderer-wide constants.

Modules read these through the module (``config.EPSILON``) at call time, so
overriding one here affects every later intersection or sampler.
"""

# Used to ignore rounding errors and keep secondary rays off their own surface.
EPSILON = 1e-4

# Number of sample sets a randomised generator precomputes.
NUM_SETS = 83

DEFAULT_SAMPLER = "multi_jittered"
DEFAULT_OUTPUT = "demo.png"
