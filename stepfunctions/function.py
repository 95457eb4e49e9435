#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat May 13 10:03:35 2023

@author: raphael
"""

import logging
import operator
from fractions import Fraction

import numpy as np

from . import algebra
from . import plotting
from .errors import InvalidShape, Unsorted, InfiniteBreakpoint, InvalidInterval
from .iterators import ValueSweep

logger = logging.getLogger(__name__)


def _equal(a, b):
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return np.array_equal(a, b)
    return bool(a == b)


def _hashable(y):
    if isinstance(y, np.ndarray):
        return (y.shape, tuple(y.ravel().tolist()))
    return y


def _compact(breakpoints, initial_value, values):
    '''
    Indices of the breakpoints kept in the canonical form: only the last of
    a run of equal breakpoints, and only if its value differs from the value
    of the previous segment.
    '''
    n = len(breakpoints)
    keep = []
    previous = initial_value
    for i in range(n):
        if i + 1 < n and breakpoints[i + 1] == breakpoints[i]:
            continue
        if _equal(values[i], previous):
            continue
        keep.append(i)
        previous = values[i]
    return keep


class StepFunction(object):
    '''
    Right-continuous piecewise constant function.

    f(x) = initial_value              if x < breakpoints[0]
    f(x) = values[i]                  if breakpoints[i] <= x < breakpoints[i+1]
    f(x) = values[-1]                 if x >= breakpoints[-1]

    The representation is canonical: breakpoints are strictly increasing and
    two consecutive segments never carry the same value. Instances are
    immutable.

    The constructor takes the breakpoints and len(breakpoints) + 1 values, the
    first one being the initial value. Use from_parts to pass the initial
    value separately.
    '''
    # let numpy defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, breakpoints, values):
        if len(values) != np.size(breakpoints) + 1:
            raise InvalidShape("Expected %d values for %d breakpoints, got %d."
                               % (np.size(breakpoints) + 1,
                                  np.size(breakpoints), len(values)))
        self._build(breakpoints, values[0], values[1:])

    @classmethod
    def from_parts(cls, breakpoints, initial_value, values):
        f = cls.__new__(cls)
        f._build(breakpoints, initial_value, values)
        return f

    @classmethod
    def indicator(cls, a, b):
        '''
        Indicator function of [a, b), equal to 1 on [a, b) and 0 elsewhere.
        b may be inf.
        '''
        if not a < b:
            raise InvalidInterval("Empty interval [%s, %s)." % (a, b))
        if b == np.inf:
            return cls([a], [0, 1])
        return cls([a, b], [0, 1, 0])

    def _build(self, breakpoints, initial_value, values):
        breakpoints = np.asarray(breakpoints)
        values = list(values)
        if breakpoints.ndim != 1:
            raise InvalidShape("Breakpoints should be a one-dimensional sequence.")
        if len(values) != len(breakpoints):
            raise InvalidShape("Expected %d values, got %d."
                               % (len(breakpoints), len(values)))
        if len(breakpoints) > 0:
            if np.any(breakpoints != breakpoints):
                raise Unsorted("Breakpoints contain NaN.")
            if not np.all(breakpoints[1:] >= breakpoints[:-1]):
                raise Unsorted("Breakpoints should be sorted.")
            if breakpoints[-1] == np.inf:
                raise InfiniteBreakpoint("Breakpoints should not contain inf.")
        keep = _compact(breakpoints, initial_value, values)
        if len(keep) < len(breakpoints):
            logger.debug("compaction dropped %d of %d breakpoints",
                         len(breakpoints) - len(keep), len(breakpoints))
        self._breakpoints = breakpoints[np.asarray(keep, dtype = int)]
        self._breakpoints.flags.writeable = False
        self._initial_value = initial_value
        self._values = tuple(values[i] for i in keep)

    @property
    def breakpoints(self):
        return self._breakpoints

    @property
    def initial_value(self):
        return self._initial_value

    @property
    def values(self):
        return self._values

    def evaluate(self, x):
        i = np.searchsorted(self._breakpoints, x, side = 'right')
        if i == 0:
            return self._initial_value
        return self._values[i - 1]

    def __call__(self, x):
        if np.ndim(x) == 0:
            return self.evaluate(x)
        x = np.ravel(x)
        if np.all(x[1:] >= x[:-1]):
            return list(ValueSweep(self, x))
        return [self.evaluate(xi) for xi in x]

    def __eq__(self, g):
        if not isinstance(g, StepFunction):
            return NotImplemented
        return (len(self._breakpoints) == len(g._breakpoints)
                and bool(np.all(self._breakpoints == g._breakpoints))
                and _equal(self._initial_value, g._initial_value)
                and all(_equal(y, z) for y, z in zip(self._values, g._values)))

    def __hash__(self):
        return hash((tuple(self._breakpoints.tolist()),
                     _hashable(self._initial_value),
                     tuple(_hashable(y) for y in self._values)))

    def __repr__(self):
        return "StepFunction.from_parts(%s, %r, %r)" % (
            self._breakpoints.tolist(), self._initial_value, list(self._values))

    def __add__(self, g):
        if isinstance(g, StepFunction):
            return algebra.add(self, g)
        return algebra.map_values(lambda y: y + g, self)

    def __radd__(self, c):
        return algebra.map_values(lambda y: c + y, self)

    def __neg__(self):
        return algebra.map_values(operator.neg, self)

    def __sub__(self, g):
        if isinstance(g, StepFunction):
            return algebra.sub(self, g)
        return algebra.map_values(lambda y: y - g, self)

    def __rsub__(self, c):
        return algebra.map_values(lambda y: c - y, self)

    def __mul__(self, g):
        if isinstance(g, StepFunction):
            return algebra.mul(self, g)
        return algebra.map_values(lambda y: y * g, self)

    def __rmul__(self, c):
        return algebra.scale(c, self)

    def __truediv__(self, g):
        if isinstance(g, StepFunction):
            return algebra.div(self, g)
        return algebra.map_values(lambda y: y / g, self)

    def __rtruediv__(self, c):
        return algebra.map_values(lambda y: c / y, self)

    def __pow__(self, g):
        if isinstance(g, StepFunction):
            return algebra.power(self, g)
        return algebra.map_values(lambda y: y ** g, self)

    def __rpow__(self, c):
        return algebra.map_values(lambda y: c ** y, self)

    def exact_div(self, g):
        if isinstance(g, StepFunction):
            return algebra.exact_div(self, g)
        return algebra.map_values(lambda y: Fraction(y) / Fraction(g), self)

    def restrict(self, a, b):
        return algebra.restrict(self, a, b)

    def line_series(self, a, b):
        return algebra.line_series(self, a, b)

    def plot(self, a, b, ax = None, connect_vertical = False, *args, **kwargs):
        return plotting.plot(self, a, b, ax, connect_vertical, *args, **kwargs)
