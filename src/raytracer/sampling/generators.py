# raytracer/sampling/generators.py
"""
Sample generators for antialiasing and lens sampling.

Every generator produces sets of ``num_samples`` points on the unit square;
those sets can be warped onto the unit disc or a hemisphere. All randomness
comes from one ``numpy.random.Generator`` so a seeded generator renders the
same image every time.
"""
import math
from typing import Dict, List, Optional, Type

import numpy as np

from raytracer import config
from raytracer.core.errors import ConfigurationError
from raytracer.core.vector import Vector2, Vector3
from raytracer.sampling.mapping import map_square_to_hemisphere, map_square_to_unit_disk
from raytracer.sampling.sample_sets import SampleSets


def _grid_size(num_samples: int) -> int:
    n = math.isqrt(num_samples)
    if n * n != num_samples:
        raise ConfigurationError(f"num_samples must be a perfect square, got {num_samples}")
    return n


def radical_inverse(index: int, base: int) -> float:
    """
    Reflects the base-``base`` digits of ``index`` about the radix point.
    """
    f = 1.0
    r = 0.0
    while index > 0:
        f /= base
        r += f * (index % base)
        index //= base
    return r


class Generator:
    """
    Abstract sample generator.

    Subclasses implement ``new_square_set``; the ``gen_*`` methods build the
    full collection of sets, wrapped in a :class:`SampleSets` cursor. With a
    ``seed`` every ``gen_*`` call starts again from that seed, so each render
    sees the same sets.
    """

    def __init__(self, num_samples: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        if isinstance(num_samples, bool) or not isinstance(num_samples, int) or num_samples < 1:
            raise ConfigurationError(f"num_samples must be a positive integer, got {num_samples!r}")
        self.num_samples = num_samples
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def num_sets(self) -> int:
        """The number of sets generated."""
        return config.NUM_SETS

    def _restart(self):
        # a seeded generator hands out the same sets on every gen_* call
        if self.seed is not None:
            self.rng = np.random.default_rng(self.seed)

    def new_square_set(self) -> List[Vector2]:
        """
        Generate a single set of samples on the unit square.

        Prefer ``gen_square_samples``.
        """
        raise NotImplementedError("new_square_set() must be implemented by subclasses.")

    def gen_square_samples(self) -> SampleSets[Vector2]:
        """Samples between (0, 0) and (1, 1)."""
        self._restart()
        sets = [self.new_square_set() for _ in range(self.num_sets())]
        return SampleSets(self.num_samples, sets, self.rng)

    def gen_disc_samples(self) -> SampleSets[Vector2]:
        """Samples on the disc with centre (0, 0) and radius 1."""
        self._restart()
        sets = [map_square_to_unit_disk(self.new_square_set()) for _ in range(self.num_sets())]
        return SampleSets(self.num_samples, sets, self.rng)

    def gen_hemisphere_samples(self, e: float) -> SampleSets[Vector3]:
        """
        Samples on the unit hemisphere with z >= 0, cosine-distributed with
        exponent e (e >= 0; higher values crowd samples toward the pole).
        """
        self._restart()
        sets = [map_square_to_hemisphere(self.new_square_set(), e) for _ in range(self.num_sets())]
        return SampleSets(self.num_samples, sets, self.rng)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.num_samples})"


class Random(Generator):
    """
    Picks every sample uniformly at random. No stratification at all.
    """

    def new_square_set(self) -> List[Vector2]:
        points = self.rng.random((self.num_samples, 2))
        return [Vector2(x, y) for x, y in points]


class Regular(Generator):
    """
    Splits the unit square into an n×n grid and puts one sample at the
    centre of every cell. num_samples must be a perfect square.
    """

    def __init__(self, num_samples: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        super().__init__(num_samples, seed, rng)
        self.n = _grid_size(num_samples)

    def num_sets(self) -> int:
        # only one kind of regular
        return 1

    def new_square_set(self) -> List[Vector2]:
        n = self.n
        return [Vector2((i + 0.5) / n, (j + 0.5) / n) for i in range(n) for j in range(n)]


class Jittered(Generator):
    """
    Like :class:`Regular`, but every sample lands at a random position
    inside its grid cell. num_samples must be a perfect square.
    """

    def __init__(self, num_samples: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        super().__init__(num_samples, seed, rng)
        self.n = _grid_size(num_samples)

    def new_square_set(self) -> List[Vector2]:
        n = self.n
        jitter = self.rng.random((n, n, 2))
        return [
            Vector2((i + jitter[i, j, 0]) / n, (j + jitter[i, j, 1]) / n)
            for i in range(n)
            for j in range(n)
        ]


class NRooks(Generator):
    """
    Places N samples on an N×N grid with exactly one sample in every row and
    every column, like rooks on a chessboard.
    """

    def new_square_set(self) -> List[Vector2]:
        n = self.num_samples
        xs = self.rng.permutation(n)
        ys = self.rng.permutation(n)
        jitter = self.rng.random((n, 2))
        return [
            Vector2((x + jx) / n, (y + jy) / n)
            for x, y, (jx, jy) in zip(xs, ys, jitter)
        ]


class MultiJittered(Generator):
    """
    Combines :class:`NRooks` and :class:`Jittered` sampling: samples sit in a
    two-level grid, satisfying the n-rooks condition on the fine grid while
    staying jittered on the coarse one. num_samples must be a perfect square.
    """

    def __init__(self, num_samples: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        super().__init__(num_samples, seed, rng)
        self.n = _grid_size(num_samples)

    def new_square_set(self) -> List[Vector2]:
        n = self.n
        subcell_size = 1.0 / self.num_samples
        rng = self.rng

        # initial jittered n-rooks pattern
        xs = [0.0] * self.num_samples
        ys = [0.0] * self.num_samples
        for i in range(n):
            for j in range(n):
                xs[i * n + j] = (i * n + j) * subcell_size + rng.uniform(0.0, subcell_size)
                ys[i * n + j] = (j * n + i) * subcell_size + rng.uniform(0.0, subcell_size)

        # shuffle x-coordinates within each row
        for row in range(n):
            for col in range(n - 1):
                k = int(rng.integers(col, n))
                xs[row * n + col], xs[row * n + k] = xs[row * n + k], xs[row * n + col]

        # shuffle y-coordinates within each column
        for col in range(n):
            for row in range(n - 1):
                k = int(rng.integers(row, n))
                ys[row * n + col], ys[k * n + col] = ys[k * n + col], ys[row * n + col]

        points = [Vector2(x, y) for x, y in zip(xs, ys)]
        order = rng.permutation(len(points))
        return [points[i] for i in order]


class Hammersley(Generator):
    """
    Deterministic low-discrepancy samples: ``(i / N, radical_inverse(i, 2))``.
    """

    def num_sets(self) -> int:
        return 1

    def new_square_set(self) -> List[Vector2]:
        n = self.num_samples
        return [Vector2(i / n, radical_inverse(i, 2)) for i in range(n)]


GENERATORS: Dict[str, Type[Generator]] = {
    "random": Random,
    "regular": Regular,
    "jittered": Jittered,
    "n_rooks": NRooks,
    "multi_jittered": MultiJittered,
    "hammersley": Hammersley,
}


def make_generator(name: str, num_samples: int, seed: Optional[int] = None) -> Generator:
    """
    Build a generator from its registry name, e.g. ``"multi_jittered"``.
    """
    try:
        cls = GENERATORS[name]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"unknown sampler {name!r}; expected one of {sorted(GENERATORS)}"
        ) from None
    return cls(num_samples, seed=seed)
