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

"""U.S. Naval Observatory approximate solar coordinates

Astronomical Applications Department, USNO, "Approximate Solar Coordinates" and
"Computing Greenwich Apparent Sidereal Time", accurate to about 1 arcminute
within two centuries of 2000.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np

from .base import SolarAlgorithm, SolPos, resolve_delta_t
from .. import timeutils
from ..utils import sind, cosd, tand, asind, atan2d

GMST_OPTIONS = (1, 2)

@dataclass(frozen=True)
class USNO(SolarAlgorithm):
    """USNO algorithm

    delta_t is TT - UT in seconds (None selects the estimate from deltat()).
    gmst_option selects the Greenwich mean sidereal time formula: 1 includes the
    secular century term, 2 folds it into the daily rate.
    """
    delta_t: Optional[float] = 67.0
    gmst_option: int = 1

    def __post_init__(self):
        if self.gmst_option not in GMST_OPTIONS:
            raise ValueError(f'gmst_option must be either 1 or 2, got {self.gmst_option!r}')

    def position(self, observer, t):
        delta_t = resolve_delta_t(self.delta_t, t)
        jd = timeutils.julian_day_from_timestamp(t)
        D = jd - timeutils.JD_J2000

        #mean anomaly and mean longitude of the sun, in degrees
        g = (357.529 + 0.98560028*D) % 360
        q = (280.459 + 0.98564736*D) % 360
        #geocentric apparent ecliptic longitude, adjusted for aberration
        L = (q + 1.915*sind(g) + 0.020*sind(2*g)) % 360
        eps = 23.439 - 0.00000036*D

        ra = (atan2d(cosd(eps)*sind(L), cosd(L)) / 15) % 24 #hours
        decl = asind(sind(eps)*sind(L))

        #UT1 hours since the previous midnight
        jd_0 = timeutils.julian_day_from_timestamp(timeutils.midnight(t))
        H = (jd - jd_0)*24
        day_ut = jd_0 - timeutils.JD_J2000
        D_tt = jd + delta_t/86400 - timeutils.JD_J2000
        T = D_tt/36525

        if self.gmst_option == 1:
            gmst = 6.697375 + 0.065707485828*day_ut + 1.0027379*H + 0.0854103*T + 0.0000258*T**2
        else:
            gmst = 6.697375 + 0.065709824279*day_ut + 1.0027379*H + 0.0000258*T**2
        gmst = gmst % 24

        #equation of the equinoxes
        omega = 125.04 - 0.052954*D_tt
        L_s = 280.47 + 0.98565*D_tt
        delta_psi = -0.000319*sind(omega) - 0.000024*sind(2*L_s)
        epsilon = 23.4393 - 0.0000004*D_tt
        gast = gmst + delta_psi*cosd(epsilon)

        #local hour angle, in degrees
        ha = (gast - ra)*15 + observer.longitude

        elevation = float(asind(cosd(ha)*cosd(decl)*observer.cos_lat + sind(decl)*observer.sin_lat))
        azimuth = atan2d(-sind(ha), tand(decl)*observer.cos_lat - observer.sin_lat*cosd(ha)) % 360
        return SolPos(float(azimuth), elevation, 90 - elevation)
