"""
Common data structures for the bootstrap.

BootParams is the parameter payload wrapped by Result[P] and exposed
through BootstrapSolution. ConfidenceInterval is the terminal output of
one estimation request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for bootstrap results.

    - t0: statistic on the original sample
    - t: bootstrap distribution, one statistic per replicate
    - bias: mean(t) - t0
    - se: sd(t), NaN when there is a single replicate
    """
    t0: float
    t: NDArray[np.floating[Any]]               # shape (reps,)
    reps: int
    bias: float
    se: float
    statistic: str
    success: Any = None


def format_level(level: float) -> str:
    """0.95 -> '95%', 0.975 -> '97.5%'."""
    return f"{level * 100:g}%"


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    A two-sided interval estimate and the level it was built at.

    The bounds are only meaningful together with `level`: at level L,
    L*100% of intervals built this way from repeated samples would cover
    the true parameter. The interval says nothing about the probability
    that the (fixed) parameter lies inside this particular interval.

    Attributes:
        lower: Lower bound, always <= upper
        upper: Upper bound
        level: Confidence level in (0, 1)
        method: 'percentile', 'se' or 'bias-corrected'
        point_estimate: Observed statistic, if known
    """
    lower: float
    upper: float
    level: float
    method: str = 'percentile'
    point_estimate: float | None = None

    @property
    def alpha(self) -> float:
        """Total tail probability, 1 - level."""
        return 1.0 - self.level

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        """True if value lies within the closed interval."""
        return self.lower <= value <= self.upper

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    def __iter__(self) -> Iterator[float]:
        # lower, upper = ci
        return iter(self.as_tuple())

    @property
    def label(self) -> str:
        """e.g. '95% percentile interval'."""
        return f"{format_level(self.level)} {self.method} interval"

    def interpretation(self) -> str:
        """Plain-language reading of the interval."""
        pct = format_level(self.level)
        lines = [
            f"{pct} of intervals constructed this way, over repeated "
            f"sampling, contain the true population parameter."
        ]
        if self.method == 'percentile':
            lines.append(
                f"{pct} of the bootstrap statistics fall within "
                f"[{self.lower:.6g}, {self.upper:.6g}]."
            )
        return " ".join(lines)

    def summary(self) -> str:
        lines = [f"{self.label}: ({self.lower:.5f}, {self.upper:.5f})"]
        if self.point_estimate is not None:
            lines.append(f"point estimate: {self.point_estimate:.5f}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"{self.label}: ({self.lower:.6g}, {self.upper:.6g})"
