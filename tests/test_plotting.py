"""
Tests for the matplotlib rendering of step functions.
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from stepfunctions import StepFunction, InvalidInterval
from stepfunctions.plotting import gapped_series, plot


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_gapped_series():
    xs, ys = gapped_series([0, 1, 1, 2, 2, 3], [0, 0, 1, 1, 2, 2])
    np.testing.assert_array_equal(xs, [0, 1, np.nan, 1, 2, np.nan, 2, 3, np.nan])
    np.testing.assert_array_equal(ys, [0, 0, np.nan, 1, 1, np.nan, 2, 2, np.nan])


def test_plot_gapped():
    f = StepFunction([1, 2], [0, 1, 2])
    ax = plot(f, 0, 3)
    lines = ax.get_lines()
    assert len(lines) == 1
    assert len(lines[0].get_xdata()) == 9


def test_plot_connected_on_given_axes():
    f = StepFunction([1, 2], [0, 1, 2])
    fig, ax = plt.subplots()
    result = f.plot(0, 3, ax=ax, connect_vertical=True, color='k')
    assert result is ax
    xs = ax.get_lines()[0].get_xdata()
    np.testing.assert_array_equal(xs, [0, 1, 1, 2, 2, 3])


def test_plot_fractions():
    f = StepFunction([1], [1, 2]).exact_div(3)
    ax = plot(f, 0, 2)
    ys = ax.get_lines()[0].get_ydata()
    assert ys[0] == pytest.approx(1 / 3)


def test_plot_invalid_interval():
    f = StepFunction([1], [0, 1])
    figures = plt.get_fignums()
    with pytest.raises(InvalidInterval):
        plot(f, 2, 2)
    assert plt.get_fignums() == figures
