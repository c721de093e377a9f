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

"""Result records and the common base of the positioning algorithms"""

from typing import NamedTuple

from ..deltat import deltat_from_timestamp

class SolPos(NamedTuple):
    """Geometric sun position, all angles in degrees

    azimuth is measured clockwise from north, elevation up from the horizon,
    and zenith = 90 - elevation.
    """
    azimuth: float
    elevation: float
    zenith: float

class ApparentSolPos(NamedTuple):
    """Sun position with an atmospheric refraction correction applied"""
    azimuth: float
    elevation: float
    zenith: float
    apparent_elevation: float
    apparent_zenith: float

class SPASolPos(NamedTuple):
    """Output of the SPA algorithm, which carries its own refraction correction
    and the equation of time (in minutes)
    """
    azimuth: float
    elevation: float
    zenith: float
    apparent_elevation: float
    apparent_zenith: float
    equation_of_time: float

class SolarAlgorithm:
    """Base class of the solar positioning algorithms

    Subclasses are immutable parameter bundles implementing
    ``position(observer, t)``, where t is a UTC POSIX timestamp in seconds.
    """
    #record type returned by position()
    result_type = SolPos

    def position(self, observer, t):
        raise NotImplementedError(f'{type(self).__name__} does not implement position()')

def resolve_delta_t(delta_t, t):
    '''delta_t in seconds, or the estimate for timestamp t when delta_t is None'''
    if delta_t is None:
        return deltat_from_timestamp(t)
    return delta_t
