# raytracer/sampling/sample_sets.py
from typing import Generic, List, Optional, TypeVar

import numpy as np

T = TypeVar("T")


class SampleSets(Generic[T]):
    """
    A never-ending supply of precomputed sample sets.

    Sets are handed out round-robin in a shuffled order. The cursor moves
    before every draw, so the first call to ``get_next`` returns the set at
    position 1 of the current order. Once the cursor has walked through all
    sets it wraps to 0 and the order is reshuffled with ``rng``; with a seeded
    rng the whole sequence of sets is reproducible. A single set is simply
    returned over and over.

    Each render owns its own instance: the cursor is the only mutable state.
    """

    def __init__(self, num_samples: int, samples: List[List[T]],
                 rng: Optional[np.random.Generator] = None):
        if not samples or len(samples[0]) != num_samples:
            raise ValueError("sample sets must hold exactly num_samples samples each")
        self.num_samples = num_samples
        self.samples = samples
        self.rng = rng if rng is not None else np.random.default_rng()
        self.count = 0
        self.indices = list(range(len(samples)))

    def num_sets(self) -> int:
        return len(self.samples)

    def get_next(self) -> List[T]:
        """
        Get the next sample set. This never runs out.
        """
        if len(self.indices) > 1:
            self.count += 1
            if self.count == len(self.indices):
                self.count = 0
                self.rng.shuffle(self.indices)
        return self.samples[self.indices[self.count]]
