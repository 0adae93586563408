# raytracer/main.py
import argparse
import json
import sys
import time
from typing import List, Optional, Tuple

from tqdm import tqdm

from raytracer import config
from raytracer.camera import Camera, Location, Pinhole
from raytracer.core.colour import Colour
from raytracer.core.errors import ConfigurationError, ImageWriteError
from raytracer.core.vector import Vector3
from raytracer.geometry import Cuboid, Plane, Sphere, ViewPlane, World
from raytracer.lights import Ambient, PointLight
from raytracer.materials.presets import ColourPresets, MaterialPresets
from raytracer.renderer import MultipleObjectTracer, save_image
from raytracer.sampling import Default as Sampler
from raytracer.scene_builder import build_scene


def create_demo_world(samples: int = 16, seed: Optional[int] = None) -> Tuple[World, Camera]:
    """
    A row of white spheres receding over a ground plane, lit by a white and
    a yellow point light, with a box off to the side.
    """
    view = ViewPlane(400, 300, 0.05, Sampler(samples, seed=seed))
    camera = Pinhole(
        Location(
            eye=Vector3(-10.0, 5.0, 50.0),
            centre=Vector3(0.0, 5.0, 0.0),
            up=Vector3(0.0, 1.0, 0.0),
        ),
        view_len=40.0,
        zoom=0.8,
    )

    world = World(view, Ambient(0.5), background=ColourPresets.SKY)
    world.add_light(PointLight(4.0, Vector3(-50.0, 50.0, 0.0)))
    world.add_light(PointLight(3.0, Vector3(50.0, 20.0, -30.0), ColourPresets.YELLOW))

    for i in range(4):
        world.add_object(Sphere(
            Vector3(7.0 - 7.0 * i, 4.0, 3.0 - 27.0 * i), 4.0,
            MaterialPresets.chalk()
        ))
    world.add_object(Plane(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), MaterialPresets.floor()))
    world.add_object(Cuboid(
        Vector3(40.0, 0.0, -130.0), Vector3(10.0, 15.0, -80.0),
        MaterialPresets.chalk()
    ))
    return world, camera


def create_spheres_world(samples: int = 16, seed: Optional[int] = None) -> Tuple[World, Camera]:
    """
    Two spheres, one matte and one glossy, under a single point light.
    """
    view = ViewPlane(400, 400, 1.0, Sampler(samples, seed=seed))
    camera = Pinhole(
        Location(
            eye=Vector3(0.0, 0.0, 500.0),
            centre=Vector3(-5.0, 0.0, 0.0),
            up=Vector3(0.0, 1.0, 0.0),
        ),
        view_len=850.0,
        zoom=2.0,
    )

    world = World(view, Ambient(1.0), background=Colour.black())
    world.add_light(PointLight(3.0, Vector3(100.0, 50.0, 150.0)))
    world.add_object(Sphere(Vector3(10.0, -5.0, 0.0), 27.0, MaterialPresets.chalk(ColourPresets.YELLOW)))
    world.add_object(Sphere(Vector3(-20.0, 10.0, -50.0), 27.0, MaterialPresets.plastic(ColourPresets.ORANGE)))
    return world, camera


DEMO_SCENES = {
    "demo": create_demo_world,
    "spheres": create_spheres_world,
}


def load_scene(name: str, samples: Optional[int], seed: Optional[int]) -> Tuple[World, Camera]:
    if name in DEMO_SCENES:
        if samples is None:
            return DEMO_SCENES[name](seed=seed)
        return DEMO_SCENES[name](samples, seed=seed)

    with open(name, "r", encoding="utf-8") as f:
        description = json.load(f)
    if not isinstance(description, dict):
        raise ConfigurationError(f"{name}: expected a JSON object at the top level")
    view = description.get("view")
    if isinstance(view, dict):
        if samples is not None:
            view["samples"] = samples
        if seed is not None:
            view["seed"] = seed
    return build_scene(description)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a scene to an image file.")
    parser.add_argument("filename", nargs="?", default=config.DEFAULT_OUTPUT,
                        help=f"output image (default: {config.DEFAULT_OUTPUT})")
    parser.add_argument("--scene", default="demo",
                        help=f"built-in scene ({', '.join(DEMO_SCENES)}) or a JSON scene description")
    parser.add_argument("--samples", type=int, default=None, help="antialiasing samples per pixel")
    parser.add_argument("--seed", type=int, default=None, help="seed for the sample generators")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        world, camera = load_scene(args.scene, args.samples, args.seed)
    except (ConfigurationError, OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f"Could not load scene {args.scene!r}: {e}")
        return 1

    print("\n=== Rendering ===")
    print(f"Resolution: {world.view.hres}x{world.view.vres}")
    print(f"Samples per pixel: {world.view.sampler.num_samples}")
    print(f"Objects: {len(world.objects)}, lights: {len(world.lights)}")

    start = time.perf_counter()
    if args.no_progress:
        image = camera.render_scene(world, MultipleObjectTracer())
    else:
        with tqdm(total=world.view.hres, desc="Rendering", unit="col") as bar:
            image = camera.render_scene(world, MultipleObjectTracer(), progress=lambda col: bar.update(1))
    elapsed = time.perf_counter() - start
    print(f"Rendered in {elapsed:.3f} seconds.")

    try:
        save_image(image, args.filename)
    except ImageWriteError as e:
        print(f"Failed to write to \"{args.filename}\": {e}")
        return 1
    print(f"Saved to \"{args.filename}\".")
    return 0


if __name__ == "__main__":
    sys.exit(main())
