"""
CPU backend for the bootstrap.

CPUBootstrapBackend: builds the bootstrap distribution of one statistic,
either sequentially from one generator or across worker threads, each
owning a child generator spawned from the parent.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pyinfer.core.defaults import MIN_RECOMMENDED_REPS
from pyinfer.core.result import Result
from pyinfer.core.compute.timing import Timer
from pyinfer.bootstrap._common import BootParams
from pyinfer.bootstrap._resample import as_generator, resample_indices
from pyinfer.bootstrap._statistics import statistic_function
from pyinfer.bootstrap.design import BootstrapDesign


class CPUBootstrapBackend:
    """
    CPU backend for bootstrap resampling.

    Replicates are independent, so they can be split across workers. With
    n_workers > 1 the parent generator spawns one child per worker and
    worker w fills the w-th contiguous block of replicates; the result is
    reproducible for a fixed (seed, n_workers) pair, but differs from the
    sequential draw for the same seed.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        sample = design.sample
        R = design.reps
        n = design.n
        stat_fn = statistic_function(design.statistic, design.success)

        with timer.section('observed_statistic'):
            t0 = stat_fn(sample)

        t = np.empty(R, dtype=np.float64)

        with timer.section('bootstrap_replicates'):
            if design.indices is not None:
                self._precomputed(sample, stat_fn, design.indices, t)
                n_workers = 1
            elif design.n_workers == 1:
                rng = as_generator(design.seed)
                self._sequential(sample, stat_fn, rng, t)
                n_workers = 1
            else:
                rng = as_generator(design.seed)
                n_workers = min(design.n_workers, R)
                self._partitioned(sample, stat_fn, rng, n_workers, t)

        with timer.section('summary_statistics'):
            bias = float(np.mean(t) - t0)
            se = float(np.std(t, ddof=1)) if R > 1 else float('nan')

        warnings_list: list[str] = []
        if R < MIN_RECOMMENDED_REPS:
            warnings_list.append(
                f"only {R} replicates; at least {MIN_RECOMMENDED_REPS} "
                f"are recommended for stable interval bounds"
            )
        if R > 1 and np.all(t == t[0]):
            warnings_list.append(
                f"degenerate bootstrap distribution: all {R} replicates "
                f"equal {t[0]:.6g}"
            )

        timer.stop()

        params = BootParams(
            t0=t0,
            t=t,
            reps=R,
            bias=bias,
            se=se,
            statistic=design.statistic,
            success=design.success,
        )

        return Result(
            params=params,
            info={
                'statistic': design.statistic,
                'n': n,
                'reps': R,
                'n_workers': n_workers,
                'precomputed_indices': design.indices is not None,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _sequential(
        self,
        sample: NDArray,
        stat_fn: Callable[[NDArray], float],
        rng: np.random.Generator,
        t: NDArray,
    ) -> None:
        """Ordinary nonparametric bootstrap from one generator."""
        n = sample.shape[0]
        for b in range(t.shape[0]):
            t[b] = stat_fn(sample[resample_indices(n, rng)])

    def _precomputed(
        self,
        sample: NDArray,
        stat_fn: Callable[[NDArray], float],
        indices: NDArray,
        t: NDArray,
    ) -> None:
        """Evaluate replicates whose indices were drawn beforehand."""
        for b in range(t.shape[0]):
            t[b] = stat_fn(sample[indices[b]])

    def _partitioned(
        self,
        sample: NDArray,
        stat_fn: Callable[[NDArray], float],
        rng: np.random.Generator,
        n_workers: int,
        t: NDArray,
    ) -> None:
        """
        Split replicates into n_workers contiguous blocks.

        Each block is filled by its own thread with its own child
        generator; blocks write disjoint slices of t.
        """
        children = rng.spawn(n_workers)
        blocks = np.array_split(np.arange(t.shape[0]), n_workers)

        with ThreadPoolExecutor(max_workers=n_workers) as executor:
            futures = [
                executor.submit(self._fill_block, sample, stat_fn, child, block, t)
                for child, block in zip(children, blocks)
            ]
            for future in futures:
                future.result()

    @staticmethod
    def _fill_block(
        sample: NDArray,
        stat_fn: Callable[[NDArray], float],
        rng: np.random.Generator,
        block: NDArray,
        t: NDArray,
    ) -> None:
        n = sample.shape[0]
        for b in block:
            t[b] = stat_fn(sample[resample_indices(n, rng)])
