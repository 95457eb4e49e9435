#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Jun 13 10:27:03 2023

@author: raphael

Cursor-based iterators used to co-iterate several step functions.

Both iterators follow the same contract: start() gives the initial state and
step(state) returns either (element, new_state) or None once the sequence is
exhausted. States are plain tuples, so a traversal can be restarted from
start() at any time. Iterating over the object simply runs start/step.
"""

import numpy as np

__all__ = ['promote_types', 'DomainMerge', 'ValueSweep', 'SegmentIterator']


def promote_types(sources):
    '''
    Common numpy dtype of a collection of breakpoint arrays.

    Empty sources do not take part in the promotion (an empty float array
    should not turn integer breakpoints into floats), unless all sources are
    empty.

    Parameters
    ----------
    sources : list of array_like
        Breakpoint sequences.

    Returns
    -------
    dtype : numpy.dtype
        e.g. int64 and float64 promote to float64.

    '''
    arrays = [np.asarray(s) for s in sources]
    dtypes = [a.dtype for a in arrays if np.size(a) > 0]
    if len(dtypes) == 0:
        dtypes = [a.dtype for a in arrays]
    if len(dtypes) == 0:
        return np.dtype(float)
    return np.result_type(*dtypes)


class CursorIterator(object):
    def start(self):
        raise NotImplementedError

    def step(self, state):
        raise NotImplementedError

    def __iter__(self):
        state = self.start()
        while True:
            result = self.step(state)
            if result is None:
                return
            element, state = result
            yield element


class DomainMerge(CursorIterator):
    '''
    Sorted union of several sorted sequences, without duplicates.

    The state holds one cursor per source, pointing at the last element of
    that source which has already been emitted (-1 before the first one).
    At each step every source whose next element equals the smallest
    candidate is advanced, so that a breakpoint shared by several sources is
    emitted only once.
    '''
    def __init__(self, sources):
        self.sources = [np.asarray(s) for s in sources]
        self.dtype = promote_types(self.sources)
        if self.dtype.kind == 'O':
            self._cast = lambda x: x
        else:
            self._cast = self.dtype.type

    @property
    def max_length(self):
        return sum(len(s) for s in self.sources)

    def __length_hint__(self):
        return self.max_length

    def start(self):
        return (-1,) * len(self.sources)

    def step(self, state):
        candidates = []
        for source, k in zip(self.sources, state):
            if k + 1 < len(source):
                candidates.append(source[k + 1])
            else:
                candidates.append(None)
        live = [c for c in candidates if c is not None]
        if len(live) == 0:
            return None
        x = min(live)
        new_state = []
        for source, k, c in zip(self.sources, state, candidates):
            if c is not None and c == x:
                # skip the whole run of x in this source
                k += 1
                while k + 1 < len(source) and source[k + 1] == x:
                    k += 1
            new_state.append(k)
        return self._cast(x), tuple(new_state)

    def materialize(self):
        return np.array(list(self), dtype = self.dtype)


class ValueSweep(CursorIterator):
    '''
    Values of a step function along a non-decreasing sequence of points.

    The state is (q, i) where q is the position in the query sequence and i
    the current segment of the function: i == 0 before the first breakpoint,
    i == k > 0 on [breakpoints[k-1], breakpoints[k]). i never decreases, so a
    full sweep costs O(n + m) for n breakpoints and m query points.

    The queries must be sorted; this is not checked and an unsorted sequence
    gives wrong values.
    '''
    def __init__(self, function, queries):
        if not hasattr(queries, '__len__'):
            queries = list(queries)
        self.function = function
        self.queries = queries

    def __len__(self):
        return len(self.queries)

    def start(self):
        return (0, 0)

    def step(self, state):
        q, i = state
        if q >= len(self.queries):
            return None
        x = self.queries[q]
        breakpoints = self.function.breakpoints
        n = len(breakpoints)
        while i < n and breakpoints[i] <= x:
            i += 1
        if i == 0:
            y = self.function.initial_value
        else:
            y = self.function.values[i - 1]
        return y, (q + 1, i)


class SegmentIterator(object):
    '''
    Joint iteration over the segments of several step functions.

    Yields (-inf, initial values) first, then (x, values) for each breakpoint
    x of the merged domain, where values holds the value of every function on
    [x, next breakpoint).
    '''
    def __init__(self, functions):
        self.functions = list(functions)

    def __length_hint__(self):
        return 1 + sum(len(f.breakpoints) for f in self.functions)

    def __iter__(self):
        yield -np.inf, tuple(f.initial_value for f in self.functions)
        xs = DomainMerge([f.breakpoints for f in self.functions]).materialize()
        sweeps = [ValueSweep(f, xs) for f in self.functions]
        for x, ys in zip(xs, zip(*sweeps)):
            yield x, ys
