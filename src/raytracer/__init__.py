# raytracer/__init__.py
"""
An offline ray tracer with direct lighting and shadow rays.
"""

__version__ = "0.1.0"
