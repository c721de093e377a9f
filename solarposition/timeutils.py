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

"""Conversion of the supported instant formats to UTC POSIX timestamps, and calendar helpers

Dates and times
---------------
The algorithms need the Julian Day, calendar fields (year, month, day, day of
year) and the fractional UTC hour of an instant. Python's datetime only covers
years 1 to 9999 and numpy.datetime64 can't carry a timezone, so internally every
instant is a float POSIX timestamp (seconds since 1970-01-01T00:00:00Z) and the
calendar fields are derived from rata die day numbers using the algorithms in
"Euclidean affine functions and their application to calendar algorithms"
C. Neri, L. Schneider (2022) https://doi.org/10.1002/spe.3172

Accepted instants:
 - datetime.datetime (naive values are taken to be UTC)
 - numpy.datetime64 (always UTC)
 - ISO 8601 strings (UTC unless an offset is given), "now", or a numeric string
 - int/float POSIX timestamps
"""

import re
import time
import datetime
import numpy as np

# rata die shift constants from Neri & Schneider
_S = 82
_K = 719468 + 146097 * _S
_L = 400 * _S

# Julian Day of the POSIX epoch
JD_UNIX_EPOCH = 2440587.5
# Julian Day of J2000.0
JD_J2000 = 2451545.0

def date_to_rd(year, month, day):
    '''Convert a proleptic Gregorian (year, month, day) to rata die (days since 1970-01-01)
    day may be fractional, the fractional part is added to the return value
    '''
    Y_G, M_G = int(year), int(month)
    D_G = int(day)
    tod = day - D_G #split fractional part

    J = 1 if M_G <= 2 else 0
    Y = Y_G + _L - J
    M = M_G + 12 if J else M_G
    D = D_G - 1
    C = Y // 100

    y_star = 1461 * Y // 4 - C + C // 4
    m_star = (979 * M - 2919) // 32
    N = y_star + m_star + D
    return N - _K + tod

def rd_to_date(rd):
    '''Convert rata die (days since 1970-01-01) to (year, month, day)
    the fractional part of rd is carried into the returned day
    '''
    N_U = int(np.floor(rd))
    tod = rd - N_U

    N = N_U + _K
    # century
    N_1 = 4 * N + 3
    C = N_1 // 146097
    N_C = N_1 % 146097 // 4
    # year
    N_2 = 4 * N_C + 3
    P_2 = 2939745 * N_2
    Z = P_2 // 4294967296
    N_Y = P_2 % 4294967296 // 2939745 // 4
    Y = 100 * C + Z
    # month and day
    N_3 = 2141 * N_Y + 197913
    M = N_3 // 65536
    D = N_3 % 65536 // 2141

    J = 1 if N_Y >= 306 else 0
    Y_G = Y - _L + J
    M_G = M - 12 if J else M
    D_G = D + 1
    return (Y_G, M_G, D_G + tod)

def posix_to_date(t):
    '''POSIX timestamp to (year, month, fractional day)'''
    return rd_to_date(t/86400)

def days_in_month(year, month):
    '''Number of days in the given month of the proleptic Gregorian calendar'''
    if month == 12:
        return int(date_to_rd(year + 1, 1, 1) - date_to_rd(year, 12, 1))
    return int(date_to_rd(year, month + 1, 1) - date_to_rd(year, month, 1))

def day_of_year(t):
    '''Day of year (1-366) of a POSIX timestamp'''
    year, month, day = posix_to_date(t)
    return int(date_to_rd(year, month, int(day)) - date_to_rd(year, 1, 1)) + 1

def fractional_hour(t):
    '''Hours elapsed since the previous UTC midnight, in [0, 24)'''
    return ((t / 86400) % 1) * 24

def midnight(t):
    '''POSIX timestamp of the previous UTC midnight'''
    return np.floor(t / 86400) * 86400

def julian_day_from_timestamp(t):
    """Calculate the Julian Day from posix timestamp (seconds since epoch)"""
    return t / 86400 + JD_UNIX_EPOCH

_iso8601_re = re.compile(r'([+-]?\d{1,4})-?([01]\d)-?([0-3]\d)[T ]([012]\d):?([0-6]\d)(?::?([0-6]\d(?:\.\d+)?))?(?:Z|(?:([+-]\d{2})(?::?(\d{2}))?))?$')
def string_to_posix_time(s):
    '''parse timestamp string to posix time, assumes UTC if timezone is not specified
    strings may be:
     - "now" -- which gets the current time
     - POSIX timestamp string
     - ISO 8601 formatted string (including negative years)
    '''
    s = s.strip()
    if s == 'now':
        return time.time()
    try:
        return float(s)
    except ValueError:
        pass
    m = _iso8601_re.match(s)
    if not m:
        raise ValueError(f'Could not parse timestamp string {s!r} (must be "now" or float or ISO8601)')
    year,month,day,hour,minute,second,tz_hour,tz_minute = m.groups()
    if second is None: second = 0
    if tz_hour is None: tz_hour = 0
    if tz_minute is None: tz_minute = 0
    year, month, day = int(year),int(month),int(day)
    hour,minute,second = int(hour), int(minute), float(second)
    if hour > 23 or minute > 59 or second >= 60:
        raise ValueError('Invalid time')
    tod = (hour + (minute + second/60)/60)/24 # time of day, in days
    tz_hour, tz_minute = int(tz_hour), int(tz_minute)
    if tz_minute > 59:
        raise ValueError('Invalid timezone')
    if tz_hour < 0 or m.group(7) == '-00':
        tz = tz_hour - tz_minute/60 # timezone offset, in hours
    else:
        tz = tz_hour + tz_minute/60 # timezone offset, in hours
    if month < 1 or month > 12 or day < 1:
        raise ValueError('Invalid date')
    rd = date_to_rd(year, month, day)
    #validate the date using a rd_to_date(date_to_rd()) round trip
    if rd_to_date(rd) != (year, month, day):
        raise ValueError('Invalid date')
    # UTC offsets vary from -12:00 (US Minor Outlying Islands) to +14:00 (Kiribati)
    if tz < -12 or tz > 14:
        raise ValueError('Invalid timezone')
    #apply tod and tz to rd & multiply by seconds per day
    return 86400*(rd + tod - tz/24)

def datetime_to_posix_time(dt):
    '''POSIX timestamp of a datetime.datetime, naive datetimes are taken to be UTC'''
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    #timedelta arithmetic keeps microsecond precision and works for years before 1970
    return (dt - _UNIX_EPOCH) / datetime.timedelta(seconds=1)

_UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

def _to_timestamp_scalar(t):
    if isinstance(t, str):
        return string_to_posix_time(t)
    if isinstance(t, datetime.datetime):
        return datetime_to_posix_time(t)
    if isinstance(t, datetime.date):
        return datetime_to_posix_time(datetime.datetime(t.year, t.month, t.day))
    if isinstance(t, np.datetime64):
        return t.astype('datetime64[us]').astype(np.int64)/1e6
    return float(t)

def to_timestamp(t):
    '''Convert various date/time formats to UTC POSIX timestamps

    Parameters
    ----------
    t : array_like of datetime.datetime, numpy.datetime64, ISO8601 strings, or float
        date/times to convert to POSIX timestamps.

    Returns
    -------
    t : float or ndarray of float
        seconds since 1970-01-01T00:00:00Z. Scalars in, scalars out.
    '''
    if isinstance(t, (str, datetime.date, np.datetime64)) or np.isscalar(t):
        return _to_timestamp_scalar(t)
    a = np.asarray(t)
    if np.issubdtype(a.dtype, np.datetime64):
        return a.astype('datetime64[us]').astype(np.int64)/1e6
    if np.issubdtype(a.dtype, np.number):
        return a.astype(float)
    out = np.empty(a.shape, dtype=float)
    for i, v in enumerate(a.flat):
        out.flat[i] = _to_timestamp_scalar(v)
    return out

def julian_day(t):
    """Convert timestamps from various formats to Julian days

    Parameters
    ----------
    t : array_like
        datetime.datetime, numpy.datetime64, ISO8601 strings, or POSIX timestamps (float or int)

    Returns
    -------
    jd : float or ndarray
        datetimes converted to fractional Julian days
    """
    return julian_day_from_timestamp(to_timestamp(t))

def time_to_iso8601(t):
    '''Format an instant as ISO8601 with millisecond precision'''
    #we need our own because datetime.datetime.fromtimestamp() doesn't support dates before year 1
    t = to_timestamp(t)
    year, month, fday = posix_to_date(t)
    day = int(fday)
    ms = round((fday - day)*86400000) #milliseconds into the day
    if ms >= 86400000:
        # rounding carried into the next day
        return time_to_iso8601(86400*date_to_rd(year, month, day + 1))
    hour, ms = divmod(ms, 3600000) #hour, ms into the hour
    minute, ms = divmod(ms, 60000) #minute, ms into the minute
    sec, ms = divmod(ms, 1000) #second, millisecond
    if year < 0:
        return f'-{-year:04}-{month:02}-{day:02}T{hour:02}:{minute:02}:{sec:02}.{ms:03}Z'
    return f'{year:04}-{month:02}-{day:02}T{hour:02}:{minute:02}:{sec:02}.{ms:03}Z'
