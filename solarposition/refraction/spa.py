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

"""Refraction correction of the NREL SPA, usable with any positioning algorithm"""

from dataclasses import dataclass

from .base import RefractionAlgorithm
from ..positioning.spa import SUN_RADIUS
from ..utils import tand

@dataclass(frozen=True)
class SPARefraction(RefractionAlgorithm):
    """SPA refraction model

    pressure is in Pa, temperature in degrees C. No correction is applied below
    refraction_limit - SUN_RADIUS degrees, where the sun is below the horizon.
    """
    pressure: float = 101325.0
    temperature: float = 12.0
    refraction_limit: float = -0.5667

    def correction(self, elevation):
        if elevation < -SUN_RADIUS + self.refraction_limit:
            return 0.0
        P = self.pressure/100 #hPa
        return float((P/1010)*(283/(273 + self.temperature))*1.02/(60*tand(elevation + 10.3/(elevation + 5.11))))
