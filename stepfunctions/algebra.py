#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Jun 14 16:48:21 2023

@author: raphael

Pointwise operations on step functions.

Every operation merges the breakpoints of its operands, evaluates each operand
on the merged breakpoints with a ValueSweep and feeds the combined values back
into the canonicalizing constructor of the first operand's class.
"""

import logging
import operator
from fractions import Fraction
from functools import reduce

import numpy as np

from .errors import InvalidInterval
from .iterators import DomainMerge, ValueSweep

__all__ = ['combine', 'combine2', 'map_values', 'add', 'sub', 'mul', 'div',
           'power', 'exact_div', 'scale', 'restrict', 'line_series']

logger = logging.getLogger(__name__)


def combine(op, *functions):
    '''
    Combine any number of step functions with a binary operator, folded from
    left to right.

    Parameters
    ----------
    op : callable
        Binary operator acting on the values, e.g. operator.add.
    *functions : StepFunction
        Operands, at least one.

    Returns
    -------
    f : StepFunction
        Canonical step function equal to op(...op(f_1(x), f_2(x))..., f_k(x))
        at every x.

    '''
    if len(functions) == 0:
        raise TypeError("combine() needs at least one step function.")
    breakpoints = DomainMerge([f.breakpoints for f in functions]).materialize()
    logger.debug("combining %d step functions on %d breakpoints",
                 len(functions), len(breakpoints))
    sweeps = [ValueSweep(f, breakpoints) for f in functions]
    values = [reduce(op, ys) for ys in zip(*sweeps)]
    initial_value = reduce(op, [f.initial_value for f in functions])
    return type(functions[0]).from_parts(breakpoints, initial_value, values)


def combine2(op, f, g):
    breakpoints = DomainMerge([f.breakpoints, g.breakpoints]).materialize()
    logger.debug("combining 2 step functions on %d breakpoints",
                 len(breakpoints))
    values = [op(y, z) for y, z in zip(ValueSweep(f, breakpoints),
                                       ValueSweep(g, breakpoints))]
    return type(f).from_parts(breakpoints, op(f.initial_value, g.initial_value),
                              values)


def map_values(op, f):
    # no merge needed, but the result may still need compacting
    return type(f).from_parts(f.breakpoints, op(f.initial_value),
                              [op(y) for y in f.values])


def add(*functions):
    return combine(operator.add, *functions)


def mul(*functions):
    return combine(operator.mul, *functions)


def sub(f, g):
    return combine2(operator.sub, f, g)


def div(f, g):
    return combine2(operator.truediv, f, g)


def power(f, g):
    return combine2(operator.pow, f, g)


def _exact_quotient(a, b):
    return Fraction(a) / Fraction(b)


def exact_div(f, g):
    '''
    Pointwise division returning fractions.Fraction values. Integer and float
    values are converted exactly before dividing.
    '''
    return combine2(_exact_quotient, f, g)


def scale(a, f):
    return map_values(lambda y: a * y, f)


def restrict(f, a, b):
    '''
    Restriction of f to [a, b): the product of f with the indicator function
    of [a, b). Outside of the interval the result is f's zero (0 * value).
    '''
    if not a < b:
        raise InvalidInterval("Empty interval [%s, %s)." % (a, b))
    return mul(f, type(f).indicator(a, b))


def line_series(f, a, b):
    '''
    Coordinates of the graph of f over [a, b], drawn as a staircase.

    Parameters
    ----------
    f : StepFunction
    a, b : float
        Bounds of the plotting window, a < b.

    Returns
    -------
    xs, ys : numpy.ndarray
        Arrays of the same length. Each pair (xs[2k], xs[2k+1]) is a
        horizontal segment, and each breakpoint of f inside (a, b) appears
        twice, once at the height of the old value and once at the height of
        the new one.

    '''
    if not a < b:
        raise InvalidInterval("Empty interval [%s, %s]." % (a, b))
    breakpoints = f.breakpoints
    inner = breakpoints[(breakpoints > a) & (breakpoints < b)]
    points = np.hstack(([a], inner))
    heights = list(ValueSweep(f, points))
    xs = np.repeat(np.hstack((points, [b])), 2)[1:-1]
    ys = np.asarray([y for y in heights for _ in range(2)])
    return xs, ys
