import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from stepfunctions import StepFunction


def reference_value(breakpoints, values, x):
    """Value of the raw (uncompacted) data at x, by linear scan."""
    value = values[0]
    for k, b in enumerate(breakpoints):
        if b <= x:
            value = values[k + 1]
    return value


def random_raw(rng, n=8, high=10, levels=3):
    breakpoints = np.sort(rng.integers(0, high, size=n))
    values = [int(y) for y in rng.integers(0, levels, size=n + 1)]
    return breakpoints, values


def random_function(rng, n=8, high=10, levels=3, offset=0):
    breakpoints, values = random_raw(rng, n, high, levels)
    return StepFunction(breakpoints, [y + offset for y in values])


@pytest.fixture
def rng():
    return np.random.default_rng(20230613)


@pytest.fixture
def grid():
    return np.arange(-1.0, 11.0, 0.25)
