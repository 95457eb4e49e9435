#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Jun 15 11:05:52 2023

@author: raphael
"""

import numpy as np
import matplotlib.pyplot as plt

from .algebra import line_series

__all__ = ['gapped_series', 'plot']


def gapped_series(xs, ys):
    '''
    Insert a NaN after every horizontal segment of a staircase so that
    matplotlib does not draw the vertical risers between them.
    '''
    n = len(xs) // 2
    gap = np.full((n, 1), np.nan)
    xs = np.hstack((np.asarray(xs, dtype = float).reshape(n, 2), gap)).ravel()
    ys = np.hstack((np.asarray(ys, dtype = float).reshape(n, 2), gap)).ravel()
    return xs, ys


def plot(f, a, b, ax = None, connect_vertical = False, *args, **kwargs):
    '''
    Plot a step function over [a, b].

    Parameters
    ----------
    f : StepFunction
        Function to plot, with real values.
    a, b : float
        Plotting window, a < b.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if None.
    connect_vertical : bool, optional
        Draw the vertical risers at the breakpoints. The default is False.
    *args, **kwargs
        Passed on to ax.plot.

    Returns
    -------
    ax : matplotlib.axes.Axes

    '''
    xs, ys = line_series(f, a, b)
    if not connect_vertical:
        xs, ys = gapped_series(xs, ys)
    if ax is None:
        plt.figure()
        ax = plt.axes()
    ax.plot(xs, ys, *args, **kwargs)
    return ax
