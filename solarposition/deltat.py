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

"""Estimate of Delta T = TT - UT, the offset between terrestrial time and universal time

The piecewise polynomials are the NASA GSFC fits by Espenak & Meeus, based on
Morrison and Stephenson (2004):
    http://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.html
"""

import warnings
import numpy as np

from . import timeutils

def _long_term(y):
    return -20 + 32 * ((y - 1820) / 100)**2

#(start year, end year, polynomial in the effective fractional year)
# ranges are half-open [start, end) and together cover the whole real line
DELTAT_TABLE = (
    (-np.inf, -500, _long_term),
    (-500, 500, lambda y: np.polyval(
        [0.0090316521, 0.022174192, -0.1798452, -5.952053, 33.78311, -1014.41, 10583.6], y / 100)),
    (500, 1600, lambda y: np.polyval(
        [0.0083572073, -0.005050998, -0.8503463, 0.319781, 71.23472, -556.01, 1574.2], (y - 1000) / 100)),
    (1600, 1700, lambda y: np.polyval([1/7129, -0.01532, -0.9808, 120], y - 1600)),
    (1700, 1800, lambda y: np.polyval([-1/1174000, 0.00013336, -0.0059285, 0.1603, 8.83], y - 1700)),
    (1800, 1860, lambda y: np.polyval(
        [0.000000000875, -0.0000001699, 0.0000121272, -0.00037436, 0.0041116, 0.0068612, -0.332447, 13.72], y - 1800)),
    (1860, 1900, lambda y: np.polyval([1/233174, -0.0004473624, 0.01680668, -0.251754, 0.5737, 7.62], y - 1860)),
    (1900, 1920, lambda y: np.polyval([-0.000197, 0.0061966, -0.0598939, 1.494119, -2.79], y - 1900)),
    (1920, 1941, lambda y: np.polyval([0.0020936, -0.076100, 0.84493, 21.20], y - 1920)),
    (1941, 1961, lambda y: np.polyval([1/2547, -1/233, 0.407, 29.07], y - 1950)),
    (1961, 1986, lambda y: np.polyval([-1/718, -1/260, 1.067, 45.45], y - 1975)),
    (1986, 2005, lambda y: np.polyval(
        [0.00002373599, 0.000651814, 0.0017275, -0.060374, 0.3345, 63.86], y - 2000)),
    (2005, 2050, lambda y: np.polyval([0.005589, 0.32217, 62.92], y - 2000)),
    (2050, 2150, lambda y: _long_term(y) - 0.5628 * (2150 - y)),
    (2150, np.inf, _long_term),
)

# years where the polynomials are supported by observations or careful extrapolation
DELTAT_VALID_RANGE = (-1999, 3000)

def calculate_deltat(year, month):
    """Compute Delta T, the difference between terrestrial time (TT) and universal time (UT)

    Parameters
    ----------
    year : float
        Calendar year. Values outside [-1999, 3000] are extrapolated with a warning.
    month : float
        Month as a real number (1-12), fractional values interpolate within the month.

    Returns
    -------
    delta_t : float
        TT - UT in seconds
    """
    if year < DELTAT_VALID_RANGE[0] or year > DELTAT_VALID_RANGE[1]:
        warnings.warn('ΔT is undefined for years before -1999 or after 3000.', stacklevel=2)

    y = year + (month - 0.5) / 12

    for start, end, f in DELTAT_TABLE:
        if start <= year < end:
            return float(f(y))
    raise ValueError(f'No ΔT function defined for year = {year}')

def deltat_from_timestamp(t):
    '''Delta T for a single UTC POSIX timestamp, with the month interpolated by day of month'''
    year, month, day = timeutils.posix_to_date(t)
    frac_month = month + (int(day) - 1) / timeutils.days_in_month(year, month)
    return calculate_deltat(year, frac_month)

def deltat(t):
    """Delta T for the given instant(s)

    The month is interpolated by day of month, so Delta T changes smoothly
    within a month rather than stepping at month boundaries.

    Parameters
    ----------
    t : array_like of datetime.datetime, numpy.datetime64, ISO8601 strings, or POSIX timestamps
        timezone-aware instants are converted to UTC first

    Returns
    -------
    delta_t : float or ndarray
        TT - UT in seconds
    """
    ts = timeutils.to_timestamp(t)
    if np.ndim(ts) == 0:
        return deltat_from_timestamp(ts)
    return np.vectorize(deltat_from_timestamp, otypes=[float])(ts)
