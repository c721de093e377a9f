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

"""Hughes refraction model

Hughes, D. W., "Sun, moon and stars", as used by the SUNAEP program of the
Sandia Labs solar position code (Lamm 1981) and pvlib's ephemeris function.
"""

from dataclasses import dataclass
import numpy as np

from .base import RefractionAlgorithm

@dataclass(frozen=True)
class HUGHES(RefractionAlgorithm):
    """Hughes model, three regimes split at 5 and -0.575 degrees elevation

    pressure is in Pa, temperature in degrees C
    """
    pressure: float = 101325.0
    temperature: float = 12.0

    def correction(self, elevation):
        tan_el = np.tan(np.deg2rad(elevation))
        if elevation > 5:
            r = 58.1/tan_el - 0.07/tan_el**3 + 0.000086/tan_el**5
        elif elevation > -0.575:
            r = 1735 + elevation*(-518.2 + elevation*(103.4 + elevation*(-12.79 + elevation*0.711)))
        else:
            r = -20.774/tan_el
        #arcseconds to degrees, scaled to the local atmosphere
        return float(r*(283/(273 + self.temperature))*(self.pressure/101325)/3600)
