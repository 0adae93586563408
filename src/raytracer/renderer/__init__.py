# raytracer/renderer/__init__.py
from raytracer.renderer.tracer import MultipleObjectTracer, SimpleTracer, Tracer
from raytracer.renderer.tone_mapping import to_rgb8
from raytracer.renderer.image_writer import save_image

__all__ = ["Tracer", "SimpleTracer", "MultipleObjectTracer", "to_rgb8", "save_image"]
