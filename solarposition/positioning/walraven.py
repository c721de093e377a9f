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

"""Walraven's solar position algorithm

Walraven, R. "Calculating the position of the sun", Solar Energy 20(5), 1978,
with the corrections of the 1979 erratum and the azimuth quadrant assignment of
Spencer, J. W. "Comments on The Astronomical Almanac's algorithm for
approximate solar position (1950-2050)", Solar Energy 42(4), 1989.

The day count from 1980 and the westward-positive longitude are kept from the
original publication.
"""

from dataclasses import dataclass
import numpy as np

from .base import SolarAlgorithm, SolPos
from .. import timeutils

TWO_PI = 2*np.pi

@dataclass(frozen=True)
class Walraven(SolarAlgorithm):
    """Walraven (1978) algorithm, nominally accurate to 0.01 degrees for 1980-2050"""

    def position(self, observer, t):
        #Walraven measures longitude positive to the west
        longitude = -observer.longitude
        year = timeutils.posix_to_date(t)[0]
        doy = timeutils.day_of_year(t)
        frac_hour = timeutils.fractional_hour(t)

        delta = year - 1980
        leap = int(delta / 4) #rounds toward zero
        time = delta*365 + leap + doy - 1 + frac_hour/24
        if delta == leap*4:
            time -= 1
        if delta < 0 and delta != leap*4:
            time -= 1

        #angular position in orbit, mean anomaly and longitude of the sun, in radians
        theta = TWO_PI*time/365.25
        g = -0.031271 - 4.53963e-7*time + theta
        L = (4.900968 + 3.67474e-7*time + (0.033434 - 2.3e-9*time)*np.sin(g)
             + 0.000349*np.sin(2*g) + theta)
        epsilon = np.deg2rad(23.4420) - np.deg2rad(3.56e-7)*time

        SEL = np.sin(L)
        RA = np.arctan2(SEL*np.cos(epsilon), np.cos(L))
        if RA < 0:
            RA += TWO_PI
        DECL = np.arcsin(SEL*np.sin(epsilon))

        #sidereal time
        ST = 1.759335 + TWO_PI*(time/365.25 - delta) + 3.694e-7*time
        if ST >= TWO_PI:
            ST -= TWO_PI
        S = ST - np.deg2rad(longitude) + np.deg2rad(frac_hour*15)
        if S >= TWO_PI:
            S -= TWO_PI

        H = RA - S
        PHI = observer.latitude_rad
        E = np.arcsin(np.sin(PHI)*np.sin(DECL) + np.cos(PHI)*np.cos(DECL)*np.cos(H))
        A = np.rad2deg(np.arcsin(np.cos(DECL)*np.sin(H)/np.cos(E)))

        #quadrant assignment
        cos_az = np.sin(DECL) - np.sin(E)*np.sin(PHI)
        if cos_az >= 0 and np.sin(np.deg2rad(A)) < 0:
            A = 360 + A
        if cos_az < 0:
            A = 180 - A

        elevation = float(np.rad2deg(E))
        return SolPos(float(A), elevation, 90 - elevation)
