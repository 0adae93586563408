# raytracer/core/colour.py
from typing import Tuple


class Colour:
    """
    A point in the RGB colour cube.

    Channels are unbounded floats while light is being accumulated; only the
    final conversion to 8-bit clamps them.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @staticmethod
    def black() -> "Colour":
        return Colour(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Colour":
        return Colour(1.0, 1.0, 1.0)

    @staticmethod
    def grey() -> "Colour":
        return Colour(0.5, 0.5, 0.5)

    @staticmethod
    def red() -> "Colour":
        return Colour(1.0, 0.0, 0.0)

    @staticmethod
    def green() -> "Colour":
        return Colour(0.0, 1.0, 0.0)

    @staticmethod
    def blue() -> "Colour":
        return Colour(0.0, 0.0, 1.0)

    def __add__(self, other: "Colour") -> "Colour":
        return Colour(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Colour") -> "Colour":
        return Colour(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Colour(self.r * other, self.g * other, self.b * other)
        return Colour(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Colour":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Colour(self.r / other, self.g / other, self.b / other)
        return Colour(self.r / other.r, self.g / other.g, self.b / other.b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def powf(self, n: float) -> "Colour":
        """Component-wise power."""
        return Colour(self.r ** n, self.g ** n, self.b ** n)

    def max_channel(self) -> float:
        return max(self.r, self.g, self.b)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_rgb8(self) -> Tuple[int, int, int]:
        """
        Maps the colour to an 8-bit RGB triple.

        Out-of-gamut colours are divided by their largest channel so the hue
        survives, then each channel is clamped to [0, 255].
        """
        c = self
        peak = c.max_channel()
        if peak > 1.0:
            c = c / peak
        return tuple(int(min(255.0, max(0.0, ch * 255.0))) for ch in c.to_tuple())

    def __repr__(self) -> str:
        return f"Colour({self.r}, {self.g}, {self.b})"
