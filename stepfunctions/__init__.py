#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Jun 13 09:05:17 2023

@author: raphael
"""

__all__ = ['function', 'iterators', 'algebra', 'plotting', 'errors',
           'StepFunction', 'DomainMerge', 'ValueSweep', 'SegmentIterator',
           'promote_types', 'combine', 'combine2', 'map_values', 'add', 'sub',
           'mul', 'div', 'power', 'exact_div', 'scale', 'restrict',
           'line_series', 'StepFunctionError', 'InvalidShape', 'Unsorted',
           'InfiniteBreakpoint', 'InvalidInterval']


from .function import StepFunction
from .iterators import DomainMerge, ValueSweep, SegmentIterator, promote_types
from .algebra import (combine, combine2, map_values, add, sub, mul, div, power,
                      exact_div, scale, restrict, line_series)
from .errors import (StepFunctionError, InvalidShape, Unsorted,
                     InfiniteBreakpoint, InvalidInterval)
from . import plotting
