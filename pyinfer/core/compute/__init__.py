"""
Compute helpers shared by backends.

Domain backends live in {domain}/backends/; this package only holds
infrastructure they share.
"""

from pyinfer.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
