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

"""NREL Solar Position Algorithm (SPA)

Reda, I. and Andreas, A., "Solar position algorithm for solar radiation
applications", Solar Energy 76(5), 2004, pp. 577-589, with the 2007 corrigendum.
Also available as NREL/TP-560-34302 (revised 2008).

Claimed uncertainty is +/-0.0003 degrees for the years -2000 to 6000.
"""

import functools
from dataclasses import dataclass
from typing import Optional
import numpy as np

from .base import SolarAlgorithm, SPASolPos, resolve_delta_t
from ._spa_tables import (EARTH_LONGITUDE_TERMS, EARTH_LATITUDE_TERMS, EARTH_RADIUS_TERMS,
                          NUTATION_ARGUMENTS, NUTATION_LONGITUDE, NUTATION_OBLIQUITY)
from .. import timeutils

# angular radius of the sun, in degrees
SUN_RADIUS = 0.26667

@dataclass(frozen=True)
class SPA(SolarAlgorithm):
    """NREL SPA with its built-in refraction correction

    Parameters
    ----------
    delta_t : float or None
        TT - UT in seconds, None selects the estimate from deltat()
    pressure : float
        annual average air pressure, in Pa
    temperature : float
        annual average air temperature, in degrees C
    atmos_refract : float
        atmospheric refraction at sunrise and sunset, in degrees. The refraction
        correction is only applied above -(SUN_RADIUS + atmos_refract).
    """
    delta_t: Optional[float] = 67.0
    pressure: float = 101325.0
    temperature: float = 12.0
    atmos_refract: float = 0.5667

    result_type = SPASolPos

    def position(self, observer, t):
        delta_t = resolve_delta_t(self.delta_t, t)
        return _spa(observer, t, delta_t, self.pressure, self.temperature, self.atmos_refract)

@functools.lru_cache(maxsize=64)
def parallax_terms(observer):
    """Observer dependent terms of the topocentric parallax correction

    Returns (u, x, y): the reduced latitude in radians and rho*cos(phi'),
    rho*sin(phi') of the observer, in earth equatorial radii.
    """
    #the 0.99664719 ratio of polar to equatorial radius is a rounded WGS-84 b/a
    u = np.arctan(0.99664719*np.tan(observer.latitude_rad))
    x = np.cos(u) + observer.altitude/6378140*observer.cos_lat
    y = 0.99664719*np.sin(u) + observer.altitude/6378140*observer.sin_lat
    return float(u), float(x), float(y)

def _cos_sum(x, coeffs):
    return np.array([np.sum(abc[:,0]*np.cos(abc[:,1] + abc[:,2]*x)) for abc in coeffs])

def heliocentric_position(jme):
    """Earth heliocentric longitude L and latitude B (degrees) and radius R (AU)
    given the Julian Ephemeris Millennium
    """
    L = np.rad2deg(np.polyval(_cos_sum(jme, EARTH_LONGITUDE_TERMS), jme) / 1e8) % 360
    B = np.rad2deg(np.polyval(_cos_sum(jme, EARTH_LATITUDE_TERMS), jme) / 1e8)
    R = np.polyval(_cos_sum(jme, EARTH_RADIUS_TERMS), jme) / 1e8
    return L, B, R

def nutation(jce):
    """Nutation in longitude and obliquity (delta_psi, delta_epsilon), in degrees
    given the Julian Ephemeris Century
    """
    x = np.deg2rad([
        #mean elongation of the moon from the sun
        np.polyval([1/189474, -0.0019142, 445267.111480, 297.85036], jce),
        #mean anomaly of the sun (earth)
        np.polyval([-1/3e5, -0.0001603, 35999.050340, 357.52772], jce),
        #mean anomaly of the moon
        np.polyval([1/56250, 0.0086972, 477198.867398, 134.96298], jce),
        #moon's argument of latitude
        np.polyval([1/327270, -0.0036825, 483202.017538, 93.27191], jce),
        #longitude of the ascending node of the moon's mean orbit
        np.polyval([1/45e4, 0.0020708, -1934.136261, 125.04452], jce),
    ])
    arg = np.dot(NUTATION_ARGUMENTS, x)
    a, b = NUTATION_LONGITUDE.T
    c, d = NUTATION_OBLIQUITY.T
    delta_psi = np.sum((a + b*jce)*np.sin(arg))/36e6
    delta_epsilon = np.sum((c + d*jce)*np.cos(arg))/36e6
    return delta_psi, delta_epsilon

def mean_obliquity(jme):
    """Mean obliquity of the ecliptic, in arcseconds"""
    u = jme/10
    return np.polyval([2.45, 5.79, 27.87, 7.12, -39.05, -249.67, -51.38, 1999.25, -1.55, -4680.93, 84381.448], u)

def equation_of_time(jme, alpha, delta_psi, epsilon):
    """Equation of time, in minutes, limited to +/-20 minutes"""
    M = np.polyval([-1/2e6, -1/15300, 1/49931, 0.03032028, 360007.6982779, 280.4664567], jme)
    E = ((M - 0.0057183 - alpha + delta_psi*np.cos(np.deg2rad(epsilon))) % 360) * 4
    if E > 20:
        E -= 1440
    elif E < -20:
        E += 1440
    return E

def refraction_correction(e0, pressure, temperature, atmos_refract):
    """SPA atmospheric refraction correction, in degrees

    e0 is the topocentric elevation without refraction, pressure is in Pa
    """
    if e0 < -(SUN_RADIUS + atmos_refract):
        return 0.0
    P = pressure/100 #hPa
    return (P/1010)*(283/(273 + temperature))*1.02/(60*np.tan(np.deg2rad(e0 + 10.3/(e0 + 5.11))))

def _spa(observer, t, delta_t, pressure, temperature, atmos_refract):
    jd = timeutils.julian_day_from_timestamp(t)
    jde = jd + delta_t/86400
    jc = (jd - timeutils.JD_J2000)/36525
    jce = (jde - timeutils.JD_J2000)/36525
    jme = jce/10

    L, B, R = heliocentric_position(jme)
    #geocentric longitude and latitude
    theta = (L + 180) % 360
    beta = -B

    delta_psi, delta_epsilon = nutation(jce)
    epsilon = mean_obliquity(jme)/3600 + delta_epsilon
    #apparent sun longitude, corrected for aberration
    llambda = theta + delta_psi - 20.4898/(3600*R)

    #apparent sidereal time at Greenwich
    v0 = (280.46061837 + 360.98564736629*(jd - timeutils.JD_J2000)
          + 0.000387933*jc**2 - jc**3/38710000) % 360
    v = v0 + delta_psi*np.cos(np.deg2rad(epsilon))

    #geocentric right ascension and declination
    l, e, b = np.deg2rad(llambda), np.deg2rad(epsilon), np.deg2rad(beta)
    alpha = np.rad2deg(np.arctan2(np.sin(l)*np.cos(e) - np.tan(b)*np.sin(e), np.cos(l))) % 360
    delta = np.rad2deg(np.arcsin(np.sin(b)*np.cos(e) + np.cos(b)*np.sin(e)*np.sin(l)))

    eot = equation_of_time(jme, alpha, delta_psi, epsilon)

    #local hour angle
    H = (v + observer.longitude - alpha) % 360

    #topocentric parallax
    u, x, y = parallax_terms(observer)
    xi = np.deg2rad(8.794/(3600*R)) #equatorial horizontal parallax
    Hr, dr = np.deg2rad(H), np.deg2rad(delta)
    dar = np.arctan2(-x*np.sin(xi)*np.sin(Hr), np.cos(dr) - x*np.sin(xi)*np.cos(Hr))
    delta_prime = np.arctan2((np.sin(dr) - y*np.sin(xi))*np.cos(dar), np.cos(dr) - x*np.sin(xi)*np.cos(Hr))
    H_prime = np.deg2rad((H - np.rad2deg(dar)) % 360)

    phi = observer.latitude_rad
    e0 = float(np.rad2deg(np.arcsin(np.sin(phi)*np.sin(delta_prime)
                                    + np.cos(phi)*np.cos(delta_prime)*np.cos(H_prime))))
    e_app = e0 + float(refraction_correction(e0, pressure, temperature, atmos_refract))

    gamma = np.rad2deg(np.arctan2(np.sin(H_prime), np.cos(H_prime)*np.sin(phi) - np.tan(delta_prime)*np.cos(phi)))
    azimuth = float((gamma + 180) % 360)
    return SPASolPos(azimuth, e0, 90 - e0, e_app, 90 - e_app, float(eot))
