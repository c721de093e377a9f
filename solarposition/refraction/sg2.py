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

"""SG2 refraction model

Blanc, P. and Wald, L., "The SG2 algorithm for a fast and accurate computation
of the position of the sun for multi-decadal time period", Solar Energy 86(10),
2012, with the low elevation term of Cornwall et al. (2011).
"""

from dataclasses import dataclass
import numpy as np

from .base import RefractionAlgorithm

@dataclass(frozen=True)
class SG2(RefractionAlgorithm):
    """SG2 model, pressure in Pa and temperature in degrees C"""
    pressure: float = 101325.0
    temperature: float = 12.0

    def correction(self, elevation):
        P = self.pressure/100 #hPa
        el = np.deg2rad(elevation)
        if el > -0.01:
            r = 2.96706e-4/np.tan(el + 0.0031376/(el + 0.089186))
        else:
            r = -1.005516e-4/np.tan(el)
        return float(np.rad2deg(P/1010*283/(273 + self.temperature)*r))
