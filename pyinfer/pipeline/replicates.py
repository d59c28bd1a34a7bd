"""
Replicates: bootstrap resamples of a specified response, as indices.

Only the (reps, n) index matrix is stored; replicate samples are
materialized on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pyinfer.bootstrap._resample import SeedLike
from pyinfer.pipeline.design import Specification


@dataclass(frozen=True)
class Replicates:
    """
    Bootstrap replicates of a Specification.

    Attributes:
        spec: The specification that was resampled.
        indices: Read-only (reps, n) index matrix into spec.sample.
        seed: Seed the indices were drawn from.
    """
    spec: Specification
    indices: NDArray[np.intp]
    seed: SeedLike = None

    @property
    def reps(self) -> int:
        return self.indices.shape[0]

    @property
    def n(self) -> int:
        return self.indices.shape[1]

    def replicate(self, b: int) -> NDArray:
        """Observations of replicate b (0-based)."""
        return self.spec.sample[self.indices[b]]

    def __len__(self) -> int:
        return self.reps

    def __iter__(self) -> Iterator[NDArray]:
        for b in range(self.reps):
            yield self.replicate(b)

    def to_frame(self) -> pd.DataFrame:
        """
        Long format, one row per resampled observation.

        Columns: 'replicate' (1-based) and the response name.
        """
        return pd.DataFrame({
            'replicate': np.repeat(np.arange(1, self.reps + 1), self.n),
            self.spec.response: self.spec.sample[self.indices.ravel()],
        })

    def __repr__(self) -> str:
        return (
            f"Replicates(response={self.spec.response!r}, "
            f"reps={self.reps}, n={self.n})"
        )
