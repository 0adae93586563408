# raytracer/scene_builder.py
"""
Builds a renderable world and camera from a plain description.

A description is a ``dict`` (for example loaded from JSON) shaped like::

    {
        "view": {"hres": 400, "vres": 300, "pixel_size": 0.05,
                 "sampler": "multi_jittered", "samples": 16, "seed": 7},
        "camera": {"kind": "pinhole", "eye": [0, 0, 100], "look_at": [0, 0, 0],
                   "up": [0, 1, 0], "view_distance": 100.0, "zoom": 1.0},
        "background": [0, 0, 0],
        "ambient": {"scale": 1.0, "colour": [1, 1, 1]},
        "lights": [{"kind": "point", "scale": 3.0, "location": [100, 50, 150]}],
        "objects": [{"kind": "sphere", "centre": [0, 0, 0], "radius": 50,
                     "material": {"kind": "matte", "ka": 0.25, "kd": 0.65,
                                  "colour": [1, 0, 0]}}],
    }

Anything that would render a wrong image is rejected with a
ConfigurationError before any ray is traced.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from raytracer import config
from raytracer.camera import Camera, Fisheye, Location, Pinhole, Spherical, ThinLens
from raytracer.core.colour import Colour
from raytracer.core.errors import ConfigurationError
from raytracer.core.vector import Vector3
from raytracer.geometry import Cuboid, Geometry, Plane, Sphere, ViewPlane, World
from raytracer.lights import Ambient, Light, PointLight
from raytracer.materials import Material, Matte, Phong
from raytracer.sampling import make_generator


def _section(value, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{where}: expected a mapping, got {value!r}")
    return value


def _list(value, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise ConfigurationError(f"{where}: expected a list, got {value!r}")
    return value


def _require(section: Mapping[str, Any], key: str, where: str):
    try:
        return section[key]
    except KeyError:
        raise ConfigurationError(f"{where}: missing required key {key!r}") from None


def _number(value, where: str) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{where}: expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{where}: expected a number, got {value!r}") from None


def _seed(value, where: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{where}: expected an integer seed, got {value!r}")
    return value


def _vector(value, where: str) -> Vector3:
    try:
        x, y, z = value
    except (TypeError, ValueError):
        raise ConfigurationError(f"{where}: expected three numbers, got {value!r}") from None
    return Vector3(_number(x, where), _number(y, where), _number(z, where))


def _colour(value, where: str) -> Colour:
    try:
        r, g, b = value
    except (TypeError, ValueError):
        raise ConfigurationError(f"{where}: expected an RGB triple, got {value!r}") from None
    return Colour(_number(r, where), _number(g, where), _number(b, where))


def build_material(desc: Mapping[str, Any]) -> Material:
    desc = _section(desc, "material")
    kind = _require(desc, "kind", "material")
    colour = _colour(desc.get("colour", (1.0, 1.0, 1.0)), "material.colour")
    if kind == "matte":
        return Matte(
            _number(desc.get("ka", 0.25), "material.ka"),
            _number(desc.get("kd", 0.65), "material.kd"),
            colour,
        )
    if kind == "phong":
        return Phong(
            _number(desc.get("ka", 0.25), "material.ka"),
            _number(desc.get("kd", 0.6), "material.kd"),
            _number(desc.get("ks", 0.2), "material.ks"),
            _number(desc.get("shininess", 20.0), "material.shininess"),
            colour,
        )
    raise ConfigurationError(f"unknown material kind {kind!r}")


def _cuboid(desc: Mapping[str, Any], material: Material) -> Cuboid:
    if "size" in desc:
        cuboid = Cuboid.with_size(
            _vector(_require(desc, "origin", "cuboid"), "cuboid.origin"),
            _vector(desc["size"], "cuboid.size"),
            material,
        )
    else:
        cuboid = Cuboid(
            _vector(_require(desc, "min", "cuboid"), "cuboid.min"),
            _vector(_require(desc, "max", "cuboid"), "cuboid.max"),
            material,
        )
    # a flat box has no well-defined face normal
    for axis in ("x", "y", "z"):
        if getattr(cuboid.minimum, axis) == getattr(cuboid.maximum, axis):
            raise ConfigurationError(f"cuboid has zero extent along {axis}: {cuboid!r}")
    return cuboid


def build_geometry(desc: Mapping[str, Any]) -> Geometry:
    desc = _section(desc, "object")
    kind = _require(desc, "kind", "object")
    material = build_material(_require(desc, "material", f"{kind} object"))
    if kind == "sphere":
        radius = _number(_require(desc, "radius", "sphere"), "sphere.radius")
        if not radius > 0:
            raise ConfigurationError(f"sphere radius must be positive, got {radius}")
        return Sphere(_vector(_require(desc, "centre", "sphere"), "sphere.centre"), radius, material)
    if kind == "plane":
        normal = _vector(_require(desc, "normal", "plane"), "plane.normal")
        if normal.length() == 0.0:
            raise ConfigurationError("plane normal must not be the zero vector")
        return Plane(_vector(_require(desc, "point", "plane"), "plane.point"), normal, material)
    if kind == "cuboid":
        return _cuboid(desc, material)
    raise ConfigurationError(f"unknown geometry kind {kind!r}")


def build_light(desc: Mapping[str, Any]) -> Light:
    desc = _section(desc, "light")
    kind = _require(desc, "kind", "light")
    scale = _number(desc.get("scale", 1.0), f"{kind} light scale")
    colour = _colour(desc.get("colour", (1.0, 1.0, 1.0)), f"{kind} light colour")
    if kind == "point":
        return PointLight(scale, _vector(_require(desc, "location", "point light"), "light.location"), colour)
    if kind == "ambient":
        return Ambient(scale, colour)
    raise ConfigurationError(f"unknown light kind {kind!r}")


def build_view(desc: Mapping[str, Any]) -> ViewPlane:
    desc = _section(desc, "view")
    sampler = make_generator(
        desc.get("sampler", config.DEFAULT_SAMPLER),
        desc.get("samples", 1),
        seed=_seed(desc.get("seed"), "view.seed"),
    )
    return ViewPlane(
        _require(desc, "hres", "view"),
        _require(desc, "vres", "view"),
        _number(desc.get("pixel_size", 1.0), "view.pixel_size"),
        sampler,
    )


def build_camera(desc: Mapping[str, Any], view_desc: Mapping[str, Any]) -> Camera:
    desc = _section(desc, "camera")
    kind = desc.get("kind", "pinhole")
    location = Location(
        _vector(_require(desc, "eye", "camera"), "camera.eye"),
        _vector(desc.get("look_at", (0.0, 0.0, 0.0)), "camera.look_at"),
        _vector(desc.get("up", (0.0, 1.0, 0.0)), "camera.up"),
    )
    exposure = _number(desc.get("exposure", 1.0), "camera.exposure")

    if kind == "pinhole":
        return Pinhole(
            location,
            _number(_require(desc, "view_distance", "pinhole camera"), "camera.view_distance"),
            _number(desc.get("zoom", 1.0), "camera.zoom"),
            exposure,
        )
    if kind == "thin_lens":
        lens_seed = _seed(view_desc.get("seed"), "view.seed")
        lens_sampler = make_generator(
            desc.get("lens_sampler", config.DEFAULT_SAMPLER),
            desc.get("lens_samples", view_desc.get("samples", 1)),
            seed=None if lens_seed is None else lens_seed + 1,
        )
        return ThinLens(
            location,
            _number(_require(desc, "view_distance", "thin lens camera"), "camera.view_distance"),
            _number(_require(desc, "focal_distance", "thin lens camera"), "camera.focal_distance"),
            _number(_require(desc, "lens_radius", "thin lens camera"), "camera.lens_radius"),
            _number(desc.get("zoom", 1.0), "camera.zoom"),
            lens_sampler,
            exposure,
        )
    if kind == "fisheye":
        return Fisheye(location, _number(desc.get("psi_max", 90.0), "camera.psi_max"), exposure)
    if kind == "spherical":
        return Spherical(
            location,
            _number(desc.get("lambda_max", 180.0), "camera.lambda_max"),
            _number(desc.get("psi_max", 90.0), "camera.psi_max"),
            exposure,
        )
    raise ConfigurationError(f"unknown camera kind {kind!r}")


def build_scene(description: Dict[str, Any]) -> Tuple[World, Camera]:
    """
    Turns a scene description into a ``(world, camera)`` pair.

    Raises:
        ConfigurationError: If the description is incomplete or inconsistent
    """
    description = _section(description, "scene")
    view_desc = _section(_require(description, "view", "scene"), "view")
    view = build_view(view_desc)

    ambient_desc = _section(description.get("ambient", {}), "ambient")
    ambient = Ambient(
        _number(ambient_desc.get("scale", 1.0), "ambient.scale"),
        _colour(ambient_desc.get("colour", (1.0, 1.0, 1.0)), "ambient.colour"),
    )

    world = World(
        view,
        ambient,
        background=_colour(description.get("background", (0.0, 0.0, 0.0)), "background"),
    )
    for light_desc in _list(description.get("lights", []), "lights"):
        world.add_light(build_light(light_desc))
    for object_desc in _list(description.get("objects", []), "objects"):
        world.add_object(build_geometry(object_desc))

    camera = build_camera(_require(description, "camera", "scene"), view_desc)
    camera.validate(world)
    return world, camera
