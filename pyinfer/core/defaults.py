"""
Default settings shared by the bootstrap solvers and the pipeline verbs.

There is no configuration file: every setting is a keyword argument whose
default lives here, so the solvers and the pipeline cannot drift apart.
"""

# Replicates drawn when the caller does not say otherwise
DEFAULT_REPS = 1000

# Confidence level used by get_ci() when none is given
DEFAULT_LEVEL = 0.95

# Interval construction method used by get_ci() when none is given
DEFAULT_CI_TYPE = 'percentile'

# Below this many replicates the tails of the distribution are too coarse
# for stable interval bounds; solvers flag it but still compute.
MIN_RECOMMENDED_REPS = 100

__all__ = [
    'DEFAULT_REPS',
    'DEFAULT_LEVEL',
    'DEFAULT_CI_TYPE',
    'MIN_RECOMMENDED_REPS',
]
