"""
Result envelope returned by every backend.

The payload type P belongs to the domain (BootParams for the bootstrap);
the envelope adds what every run reports: run metadata, phase timings,
which backend ran, and non-fatal warnings.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen output of Backend.solve().

    Attributes:
        params: Domain payload, e.g. BootParams with t0 and the replicates
        info: Run metadata such as statistic, n, reps, n_workers
        timing: Output of Timer.result(), or None when not measured
        backend_name: Backend.name of the producer
        warnings: Human-readable notes on questionable runs
            (too few replicates, a degenerate distribution)
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        return any(substring in w for w in self.warnings)
