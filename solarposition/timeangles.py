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

"""Low precision time angles: solar declination and the equation of time

These closed-form approximations do not need an observer and are handy for
quick estimates and plots. Use solar_position() for accurate values.
"""

import numbers
import numpy as np

from . import timeutils

def _is_numeric(t):
    if isinstance(t, (numbers.Real, np.number)) and not isinstance(t, bool):
        return True
    if isinstance(t, (list, tuple, np.ndarray)):
        return np.issubdtype(np.asarray(t).dtype, np.number)
    return False

def _day_of_year_fraction(t):
    '''days elapsed since the start of the (UTC) year, starting at 0'''
    year = timeutils.posix_to_date(t)[0]
    return t/86400 - timeutils.date_to_rd(year, 1, 1)

def declination(d):
    """Approximate solar declination, in degrees

    delta = -23.45 cos(360/365 (d + 10)) from https://www.pveducation.org/pvcdrom/properties-of-sunlight/declination-angle

    Parameters
    ----------
    d : float, array_like, or instant(s)
        day of the year in [0, 365], or instants (datetime.datetime,
        numpy.datetime64, ISO8601 strings) which are converted to the
        fractional day of the year

    Returns
    -------
    declination : float or ndarray
    """
    if _is_numeric(d):
        d = np.asarray(d, dtype=float)
        if np.any((d < 0) | (d > 365)):
            raise ValueError('day of the year must be in the range [0, 365]')
    else:
        t = timeutils.to_timestamp(d)
        d = np.vectorize(_day_of_year_fraction, otypes=[float])(t)
    return (-23.45*np.cos(np.deg2rad((360/365)*(d + 10))))[()]

def equation_of_time(jd):
    """Approximate equation of time, in degrees (multiply by 4 for minutes)

    The difference between apparent and mean solar time, after
    Vallado, D. A. "Fundamentals of Astrodynamics and Applications", 4th ed. (2013), pp. 178, 277-279

    Parameters
    ----------
    jd : float, array_like, or instant(s)
        Julian Day, or instants (datetime.datetime, numpy.datetime64, ISO8601
        strings) which are converted to Julian Days

    Returns
    -------
    eot : float or ndarray
    """
    if _is_numeric(jd):
        jd = np.asarray(jd, dtype=float)
    else:
        jd = np.asarray(timeutils.julian_day(jd))
    t_ut1 = (jd - timeutils.JD_J2000)/36525
    mean_long = (280.460 + 36000.771*t_ut1) % 360
    Ms = np.deg2rad((357.5291092 + 35999.05034*t_ut1) % 360)
    sin_Ms, sin_2Ms = np.sin(Ms), np.sin(2*Ms)
    ecliptic_long = np.deg2rad((mean_long + 1.914666471*sin_Ms + 0.019994643*sin_2Ms) % 360)
    eot = -1.914666471*sin_Ms - 0.019994643*sin_2Ms + 2.466*np.sin(2*ecliptic_long) - 0.0053*np.sin(4*ecliptic_long)
    return eot[()]
