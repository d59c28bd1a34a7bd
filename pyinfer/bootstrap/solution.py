"""
Solution wrapper for bootstrap results.

BootstrapSolution wraps Result[BootParams] and provides convenient
accessors, interval construction and R-style summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pyinfer.core.defaults import DEFAULT_CI_TYPE, DEFAULT_LEVEL
from pyinfer.core.result import Result
from pyinfer.bootstrap._common import BootParams, ConfidenceInterval

if TYPE_CHECKING:
    from pyinfer.bootstrap.design import BootstrapDesign


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap distribution.

    Holds one statistic per replicate (`stats`), the statistic on the
    original sample (`t0`), and the bias and standard error derived from
    them. summary() produces R's print.boot format.
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Distribution ---

    @property
    def stats(self) -> NDArray[np.floating[Any]]:
        """Bootstrap distribution, shape (reps,), in replicate order."""
        return self._result.params.t

    @property
    def t0(self) -> float:
        """Statistic on the original sample."""
        return self._result.params.t0

    @property
    def point_estimate(self) -> float:
        """Alias of t0."""
        return self._result.params.t0

    @property
    def reps(self) -> int:
        """Number of bootstrap replicates."""
        return self._result.params.reps

    @property
    def bias(self) -> float:
        """Bootstrap bias estimate: mean(stats) - t0."""
        return self._result.params.bias

    @property
    def se(self) -> float:
        """Bootstrap standard error: sd(stats)."""
        return self._result.params.se

    @property
    def statistic(self) -> str:
        return self._result.params.statistic

    @property
    def success(self) -> Any:
        return self._result.params.success

    # --- Metadata ---

    @property
    def sample(self) -> NDArray:
        """Original sample."""
        return self._design.sample

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def seed(self) -> Any:
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Intervals ---

    def get_ci(
        self,
        level: float = DEFAULT_LEVEL,
        *,
        type: str = DEFAULT_CI_TYPE,
    ) -> ConfidenceInterval:
        """Confidence interval from this distribution; see solvers.get_ci."""
        from pyinfer.bootstrap.solvers import _interval
        return _interval(self, level, type, None, stacklevel=3)

    # --- Display ---

    def to_frame(self) -> pd.DataFrame:
        """One row per replicate: columns 'replicate' (1-based) and 'stat'."""
        return pd.DataFrame({
            'replicate': np.arange(1, self.reps + 1),
            'stat': self.stats,
        })

    def summary(self) -> str:
        """
        R-style print.boot output.

        Produces:
            ORDINARY NONPARAMETRIC BOOTSTRAP

            Call: bootstrap(sample, statistic="mean", reps=10000)

            Bootstrap Statistics :
                         original           bias     std. error
                mean   2638.00000       -0.41355      171.28212
        """
        lines = ["\nORDINARY NONPARAMETRIC BOOTSTRAP\n"]

        call = f"Call: bootstrap(sample, statistic=\"{self.statistic}\""
        if self.success is not None:
            call += f", success={self.success!r}"
        call += f", reps={self.reps})"
        lines.append(call)
        lines.append("")

        lines.append("Bootstrap Statistics :")
        header = f"{'':>12s} {'original':>14s} {'bias':>14s} {'std. error':>14s}"
        lines.append(header)
        lines.append(
            f"{self.statistic:>12s} {self.t0:14.5f} {self.bias:14.5f} "
            f"{self.se:14.5f}"
        )

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapSolution(statistic={self.statistic!r}, "
            f"reps={self.reps}, n={self.n}, backend={self.backend_name!r})"
        )
