# The MIT License (MIT)
# 
# Copyright (c) 2025 Samuel Bear Powell
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Composition of the positioning and refraction algorithms

solar_position() is the main entry point: it takes an Observer, one or many
instants, a positioning algorithm and a refraction model and returns a SolPos,
ApparentSolPos or SPASolPos record. For many instants the record fields are
numpy arrays with the shape of the input.
"""

import warnings
import numpy as np
import pandas as pd

from . import timeutils
from .positioning import PSA, SolPos, ApparentSolPos, SPASolPos
from .refraction import NoRefraction

_SPA_REFRACTION_WARNING = ('SPA algorithm has its own refraction correction, '
                           'the {} refraction model is ignored')

def _as_type(x):
    return x if isinstance(x, type) else type(x)

def result_type(algorithm, refraction=NoRefraction()):
    """The record type produced by combining algorithm with refraction

    Algorithms with their own refraction correction (SPA) always produce their
    own record; otherwise NoRefraction gives SolPos and any other model
    ApparentSolPos. Accepts instances or classes.
    """
    own = _as_type(algorithm).result_type
    if own is not SolPos:
        return own
    if issubclass(_as_type(refraction), NoRefraction):
        return SolPos
    return ApparentSolPos

def _check_refraction(algorithm, refraction):
    rtype = result_type(algorithm, refraction)
    if rtype is not SolPos and rtype is not ApparentSolPos and not isinstance(refraction, NoRefraction):
        warnings.warn(_SPA_REFRACTION_WARNING.format(type(refraction).__name__), stacklevel=3)
    return rtype

def _position(observer, t, algorithm, refraction, rtype):
    pos = algorithm.position(observer, t)
    if rtype is not ApparentSolPos:
        return pos
    apparent = pos.elevation + refraction.correction(pos.elevation)
    return ApparentSolPos(pos.azimuth, pos.elevation, pos.zenith, apparent, 90 - apparent)

def _fill(columns, observer, t_flat, algorithm, refraction, rtype):
    '''compute positions for flat timestamps into flat preallocated columns, one scalar call per instant'''
    for i, t in enumerate(t_flat):
        for col, v in zip(columns, _position(observer, t, algorithm, refraction, rtype)):
            col[i] = v

def solar_position(observer, t, algorithm=PSA(), refraction=NoRefraction()):
    """Compute the sun's position seen by observer

    Parameters
    ----------
    observer : Observer
        location of the observer
    t : array_like
        instant(s) as datetime.datetime, numpy.datetime64, ISO8601 strings, or
        POSIX timestamps. Naive datetimes and strings without an offset are UTC.
    algorithm : SolarAlgorithm, optional
        positioning algorithm, defaults to PSA()
    refraction : RefractionAlgorithm, optional
        refraction model, defaults to NoRefraction()

    Returns
    -------
    position : SolPos, ApparentSolPos or SPASolPos
        floats for a single instant, otherwise numpy arrays shaped like t.
        See result_type().
    """
    rtype = _check_refraction(algorithm, refraction)
    t = timeutils.to_timestamp(t)
    if np.ndim(t) == 0:
        return _position(observer, t, algorithm, refraction, rtype)
    t = np.asarray(t)
    columns = [np.empty(t.size) for _ in rtype._fields]
    _fill(columns, observer, t.flat, algorithm, refraction, rtype)
    return rtype(*(c.reshape(t.shape) for c in columns))

def solar_position_into(out, observer, t, algorithm=PSA(), refraction=NoRefraction()):
    """Compute the sun's position into preallocated arrays

    Parameters
    ----------
    out : SolPos, ApparentSolPos or SPASolPos
        record of 1-D float arrays, one per field, each as long as t. Its type
        must match result_type(algorithm, refraction).
    observer, t, algorithm, refraction :
        as for solar_position()

    Returns
    -------
    out : the record passed in, with its arrays filled
    """
    rtype = _check_refraction(algorithm, refraction)
    if type(out) is not rtype:
        raise ValueError(f'out must be a {rtype.__name__} for {type(algorithm).__name__} '
                         f'with {type(refraction).__name__}, got {type(out).__name__}')
    t = np.atleast_1d(timeutils.to_timestamp(t)).ravel()
    for name, col in zip(out._fields, out):
        if len(col) != len(t):
            raise ValueError(f'out.{name} has length {len(col)}, expected {len(t)}')
    _fill(out, observer, t, algorithm, refraction, rtype)
    return out

def solar_position_table(df, observer, algorithm=PSA(), refraction=NoRefraction(), time_column='datetime', inplace=False):
    """Append sun position columns to a pandas.DataFrame

    Adds one column per field of result_type(algorithm, refraction):
    azimuth, elevation, zenith, and where applicable apparent_elevation,
    apparent_zenith and equation_of_time. Existing columns of the same name are
    overwritten, other columns are untouched.

    Parameters
    ----------
    df : pandas.DataFrame
        table with a column of instants
    observer : Observer
    algorithm, refraction :
        as for solar_position()
    time_column : str
        name of the column holding the instants, "datetime" by default
    inplace : bool
        modify df instead of a copy

    Returns
    -------
    df : pandas.DataFrame
        the augmented table (df itself when inplace is True)
    """
    if time_column not in df.columns:
        raise ValueError(f'DataFrame has no {time_column!r} column')
    rtype = _check_refraction(algorithm, refraction)
    if not inplace:
        df = df.copy()
    t = timeutils.to_timestamp(df[time_column].to_numpy())
    columns = [np.empty(len(t)) for _ in rtype._fields]
    _fill(columns, observer, t, algorithm, refraction, rtype)
    for name, col in zip(rtype._fields, columns):
        df[name] = col
    return df
