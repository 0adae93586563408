# raytracer/materials/presets.py
from raytracer.core.colour import Colour
from raytracer.materials.matte import Matte
from raytracer.materials.phong import Phong


class ColourPresets:
    """Common colour presets for materials."""

    # Warm colours
    RED = Colour(0.9, 0.2, 0.2)
    ORANGE = Colour(1.0, 0.5, 0.0)
    YELLOW = Colour(1.0, 1.0, 0.0)

    # Cool colours
    BLUE = Colour(0.2, 0.3, 0.9)
    GREEN = Colour(0.2, 0.8, 0.2)
    SKY = Colour(0.7, 0.7, 1.0)

    # Neutral colours
    WHITE = Colour(1.0, 1.0, 1.0)
    GREY = Colour(0.5, 0.5, 0.5)
    BLACK = Colour(0.0, 0.0, 0.0)


class MaterialPresets:
    """Predefined materials with sensible reflectance coefficients."""

    @staticmethod
    def chalk(colour: Colour = ColourPresets.WHITE) -> Matte:
        return Matte(0.25, 0.65, colour)

    @staticmethod
    def floor(colour: Colour = ColourPresets.WHITE) -> Matte:
        # bright ambient so the ground never goes fully dark in shadow
        return Matte(0.8, 0.4, colour)

    @staticmethod
    def plastic(colour: Colour) -> Phong:
        return Phong(0.25, 0.6, 0.2, 20.0, colour)

    @staticmethod
    def polished(colour: Colour) -> Phong:
        return Phong(0.2, 0.5, 0.4, 100.0, colour)
