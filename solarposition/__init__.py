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

"""Solar position algorithms

Compute the azimuth, elevation and zenith of the sun for an observer on the
Earth with one of several published algorithms (PSA, NOAA, Walraven, USNO and
the NREL SPA), optionally corrected for atmospheric refraction.

    >>> from solarposition import Observer, solar_position, SPA
    >>> obs = Observer(45.0, 10.0)
    >>> pos = solar_position(obs, '2020-10-17T12:30Z', SPA())
"""

VERSION = '0.1.0'

from .observer import Observer
from .deltat import calculate_deltat, deltat
from .timeutils import julian_day, to_timestamp
from .positioning import (SolPos, ApparentSolPos, SPASolPos, SolarAlgorithm,
                          PSA, NOAA, Walraven, USNO, SPA)
from .refraction import (RefractionAlgorithm, NoRefraction, refraction,
                         HUGHES, ARCHER, BENNETT, MICHALSKY, SG2, SPARefraction)
from .core import result_type, solar_position, solar_position_into, solar_position_table
from .timeangles import declination, equation_of_time

__all__ = [
    'VERSION', 'Observer', 'calculate_deltat', 'deltat', 'julian_day', 'to_timestamp',
    'SolPos', 'ApparentSolPos', 'SPASolPos', 'SolarAlgorithm',
    'PSA', 'NOAA', 'Walraven', 'USNO', 'SPA',
    'RefractionAlgorithm', 'NoRefraction', 'refraction',
    'HUGHES', 'ARCHER', 'BENNETT', 'MICHALSKY', 'SG2', 'SPARefraction',
    'result_type', 'solar_position', 'solar_position_into', 'solar_position_table',
    'declination', 'equation_of_time',
]
