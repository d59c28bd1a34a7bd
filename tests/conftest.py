"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np
import pandas as pd


# Twenty monthly apartment rents, mean 2638
RENTS = [
    2548.0, 2728.0, 2408.0, 2868.0, 2268.0, 3008.0, 2138.0, 3138.0,
    1998.0, 3278.0, 1858.0, 3418.0, 1738.0, 3538.0, 1638.0, 3638.0,
    1548.0, 3728.0, 1458.0, 3818.0,
]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def rents():
    """Reference rent sample (n=20, mean 2638)."""
    return np.array(RENTS)


@pytest.fixture
def rent_table(rents):
    """Rents with a second, categorical column."""
    return pd.DataFrame({
        'rent': rents,
        'bedrooms': ['one' if i % 2 else 'two' for i in range(len(rents))],
    })


@pytest.fixture
def mouse_outcomes():
    """Mouse survival outcomes: 193 of 261 survived (p-hat ~ 0.74)."""
    return np.array(['survived'] * 193 + ['died'] * 68, dtype=object)


@pytest.fixture
def mouse_table(mouse_outcomes, rng):
    """Mouse survival outcomes in shuffled order, one row per mouse."""
    return pd.DataFrame({
        'mouse': np.arange(1, len(mouse_outcomes) + 1),
        'outcome': rng.permutation(mouse_outcomes),
    })
