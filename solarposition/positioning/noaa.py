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

"""NOAA solar calculator algorithm

The equations of the NOAA Global Monitoring Laboratory solar calculator
spreadsheets, which are based on Meeus, "Astronomical Algorithms" (1991):
    https://gml.noaa.gov/grad/solcalc/calcdetails.html
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np

from .base import SolarAlgorithm, SolPos
from .. import timeutils

@dataclass(frozen=True)
class NOAA(SolarAlgorithm):
    """NOAA algorithm

    delta_t is TT - UT in seconds, None selects the estimate from deltat().
    The spreadsheet evaluates its Julian century on the UT Julian Day, so
    delta_t is carried for a uniform interface but does not enter the result.
    """
    delta_t: Optional[float] = 67.0

    def position(self, observer, t):
        jd = timeutils.julian_day_from_timestamp(t)
        jc = (jd - timeutils.JD_J2000) / 36525

        #geometric mean longitude and anomaly of the sun, in degrees
        mean_long = (280.46646 + jc*(36000.76983 + jc*0.0003032)) % 360
        mean_anom = 357.52911 + jc*(35999.05029 - 0.0001537*jc)
        eccent = 0.016708634 - jc*(0.000042037 + 0.0000001267*jc)
        M = np.deg2rad(mean_anom)

        eq_ctr = (np.sin(M)*(1.914602 - jc*(0.004817 + 0.000014*jc))
                  + np.sin(2*M)*(0.019993 - 0.000101*jc)
                  + np.sin(3*M)*0.000289)
        true_long = mean_long + eq_ctr
        omega = np.deg2rad(125.04 - 1934.136*jc)
        app_long = true_long - 0.00569 - 0.00478*np.sin(omega)

        mean_obliq = 23 + (26 + (21.448 - jc*(46.815 + jc*(0.00059 - jc*0.001813)))/60)/60
        obliq_corr = np.deg2rad(mean_obliq + 0.00256*np.cos(omega))

        declination = np.arcsin(np.sin(obliq_corr)*np.sin(np.deg2rad(app_long)))

        #equation of time, in minutes
        var_y = np.tan(obliq_corr/2)**2
        L0 = np.deg2rad(mean_long)
        eot = 4*np.rad2deg(var_y*np.sin(2*L0)
                           - 2*eccent*np.sin(M)
                           + 4*eccent*var_y*np.sin(M)*np.cos(2*L0)
                           - 0.5*var_y**2*np.sin(4*L0)
                           - 1.25*eccent**2*np.sin(2*M))

        #true solar time in minutes and hour angle in degrees
        minutes = timeutils.fractional_hour(t) * 60
        true_solar_time = (minutes + eot + 4*observer.longitude) % 1440
        hour_angle = true_solar_time/4 - 180

        zenith = np.arccos(observer.sin_lat*np.sin(declination)
                           + observer.cos_lat*np.cos(declination)*np.cos(np.deg2rad(hour_angle)))
        cos_az = ((observer.sin_lat*np.cos(zenith) - np.sin(declination))
                  / (observer.cos_lat*np.sin(zenith)))
        az = np.rad2deg(np.arccos(np.clip(cos_az, -1, 1)))
        if hour_angle > 0:
            azimuth = (az + 180) % 360
        else:
            azimuth = (540 - az) % 360

        zenith = float(np.rad2deg(zenith))
        return SolPos(float(azimuth), 90 - zenith, zenith)
