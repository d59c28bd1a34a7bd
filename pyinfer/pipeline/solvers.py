"""
Pipeline verbs.

    spec = specify(df, response="rent")
    point = calculate(spec, stat="mean")
    dist = calculate(generate(spec, reps=10000, seed=1), stat="mean")
    ci = get_ci(dist, level=0.95)

generate() draws replicate indices with the same routine the bootstrap
backend uses, so for a given seed generate() followed by calculate()
gives exactly the distribution bootstrap() gives.
"""

from __future__ import annotations

from typing import Any

from pyinfer.core.defaults import DEFAULT_REPS
from pyinfer.core.exceptions import ValidationError
from pyinfer.core.validation import check_min_samples, check_reps
from pyinfer.bootstrap._resample import SeedLike, as_generator, draw_index_matrix
from pyinfer.bootstrap._statistics import (
    check_success,
    compute_statistic,
    resolve_statistic,
)
from pyinfer.bootstrap.backends.cpu import CPUBootstrapBackend
from pyinfer.bootstrap.design import BootstrapDesign
from pyinfer.bootstrap.solution import BootstrapSolution
from pyinfer.pipeline.design import Specification
from pyinfer.pipeline.replicates import Replicates

GENERATE_TYPES = ('bootstrap',)


def specify(
    data: Any,
    response: str,
    *,
    success: Any = None,
) -> Specification:
    """
    Select the response variable of interest.

    Parameters
    ----------
    data : DataSource, pandas DataFrame or mapping of columns
        The table.
    response : str
        Column holding the variable of interest.
    success : optional
        Category counted as a success when a proportion is calculated.

    Returns
    -------
    Specification
    """
    return Specification.for_response(data, response, success=success)


def generate(
    spec: Specification,
    reps: int = DEFAULT_REPS,
    *,
    type: str = 'bootstrap',
    seed: SeedLike = None,
) -> Replicates:
    """
    Draw bootstrap replicates of the specified response.

    Each replicate has the size of the response and is drawn with
    replacement.

    Parameters
    ----------
    spec : Specification
    reps : int
        Number of replicates.
    type : str
        Only 'bootstrap' is supported.
    seed : int, numpy Generator or None

    Returns
    -------
    Replicates
    """
    if not isinstance(spec, Specification):
        raise ValidationError(
            f"generate() needs the result of specify(), got {spec!r}"
        )
    if type not in GENERATE_TYPES:
        raise ValidationError(
            f"Unknown generate type: {type!r}. "
            f"Must be one of {', '.join(GENERATE_TYPES)}."
        )
    reps = check_reps(reps, 'reps')
    rng = as_generator(seed)

    indices = draw_index_matrix(spec.n, reps, rng)
    indices.setflags(write=False)

    return Replicates(spec=spec, indices=indices, seed=seed)


def calculate(
    x: Specification | Replicates,
    stat: str,
    *,
    success: Any = None,
) -> float | BootstrapSolution:
    """
    Compute a statistic on the observed data or on every replicate.

    Parameters
    ----------
    x : Specification or Replicates
        A Specification gives the observed point estimate; Replicates give
        the bootstrap distribution.
    stat : str
        'mean', 'median', 'proportion' (or 'prop'), 'sum', 'sd'.
    success : optional
        Success category; defaults to the one given to specify().

    Returns
    -------
    float for a Specification, BootstrapSolution for Replicates.
    """
    kind = resolve_statistic(stat)

    if isinstance(x, Replicates):
        spec = x.spec
    elif isinstance(x, Specification):
        spec = x
    else:
        raise ValidationError(
            f"calculate() needs a Specification or Replicates, got {x!r}"
        )

    if kind == 'proportion':
        if success is None:
            success = spec.success
        check_success(spec.sample, success)
    else:
        success = None

    if isinstance(x, Specification):
        if kind == 'sd':
            check_min_samples(spec.sample, 2, spec.response)
        return compute_statistic(spec.sample, kind, success)

    design = BootstrapDesign.for_bootstrap(
        spec.sample,
        kind,
        x.reps,
        success=success,
        seed=x.seed,
        indices=x.indices,
    )
    result = CPUBootstrapBackend().solve(design)
    return BootstrapSolution(_result=result, _design=design)
