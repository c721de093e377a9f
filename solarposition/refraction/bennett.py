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

"""Bennett refraction model

Bennett, G. G., "The calculation of astronomical refraction in marine
navigation", Journal of Navigation 35(2), 1982.
"""

from dataclasses import dataclass
import numpy as np

from .base import RefractionAlgorithm
from ..utils import tand

@dataclass(frozen=True)
class BENNETT(RefractionAlgorithm):
    """Bennett model, pressure in Pa and temperature in degrees C"""
    pressure: float = 101325.0
    temperature: float = 12.0

    def correction(self, elevation):
        P = self.pressure/100 #hPa
        el = np.float64(elevation)
        with np.errstate(divide='ignore', invalid='ignore'):
            r = 0.016667/tand(el + 7.31/(el + 4.4))
        if not np.isfinite(r):
            #7.31/(el + 4.4) has a pole at -4.4 degrees, far below the horizon
            return 0.0
        return float(r*(0.28*P/(self.temperature + 273)))
