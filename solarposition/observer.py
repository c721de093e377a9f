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

"""Observer location on the Earth"""

import warnings
from typing import NamedTuple
import numpy as np

# latitude offset applied at the poles, where the azimuth is undefined
POLE_OFFSET = 1e-6

class _ObserverFields(NamedTuple):
    latitude: float
    longitude: float
    altitude: float
    latitude_rad: float
    longitude_rad: float
    sin_lat: float
    cos_lat: float

class Observer(_ObserverFields):
    """Geographic location of an observer

    Parameters
    ----------
    latitude : float
        geodetic latitude in degrees, positive for north. Exactly +/-90 is moved
        1e-6 degrees toward the equator (with a warning).
    longitude : float
        longitude in degrees, positive for east
    altitude : float, optional
        height above mean sea level in meters, defaults to 0

    The trigonometric terms of the latitude are computed once, so the same
    Observer can be reused for many instants.
    """
    __slots__ = ()

    def __new__(cls, latitude, longitude, altitude=0.0):
        latitude, longitude, altitude = float(latitude), float(longitude), float(altitude)
        if not (np.isfinite(latitude) and np.isfinite(longitude) and np.isfinite(altitude)):
            raise ValueError(f'Observer coordinates must be finite, got ({latitude}, {longitude}, {altitude})')
        if abs(latitude) > 90:
            raise ValueError(f'Latitude must be in [-90, 90] degrees, got {latitude}')
        if latitude == 90.0:
            latitude -= POLE_OFFSET
            warnings.warn(f'Latitude was 90°. Adjusted to {latitude}° to avoid singularities.', stacklevel=2)
        elif latitude == -90.0:
            latitude += POLE_OFFSET
            warnings.warn(f'Latitude was -90°. Adjusted to {latitude}° to avoid singularities.', stacklevel=2)
        lat_rad = np.deg2rad(latitude)
        lon_rad = np.deg2rad(longitude)
        return super().__new__(cls, latitude, longitude, altitude,
                               float(lat_rad), float(lon_rad), float(np.sin(lat_rad)), float(np.cos(lat_rad)))

    def __repr__(self):
        return f'Observer(latitude={self.latitude!r}, longitude={self.longitude!r}, altitude={self.altitude!r})'

    def __getnewargs__(self):
        return (self.latitude, self.longitude, self.altitude)
