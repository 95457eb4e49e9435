#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Jun 13 09:12:40 2023

@author: raphael
"""

class StepFunctionError(ValueError):
    pass

class InvalidShape(StepFunctionError):
    '''
    Raised when the number of values does not match the number of breakpoints.
    '''
    pass

class Unsorted(StepFunctionError):
    '''
    Raised when the breakpoints are not in non-decreasing order.
    '''
    pass

class InfiniteBreakpoint(StepFunctionError):
    pass

class InvalidInterval(StepFunctionError):
    '''
    Raised when an interval (a, b) with a >= b is passed to a restriction or
    to line_series.
    '''
    pass
