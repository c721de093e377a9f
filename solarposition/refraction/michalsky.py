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

"""Michalsky refraction model

Michalsky, J. J., "The Astronomical Almanac's algorithm for approximate solar
position (1950-2050)", Solar Energy 40(3), 1988.
"""

from dataclasses import dataclass

from .base import RefractionAlgorithm

# the correction is held at this value below -0.56 degrees elevation
MICHALSKY_LIMIT = 0.56

@dataclass(frozen=True)
class MICHALSKY(RefractionAlgorithm):
    """Michalsky model for standard conditions (3.51561 = 1013.2 mb / 288.2 K)"""

    def correction(self, elevation):
        if elevation < -0.56:
            return MICHALSKY_LIMIT
        el = elevation
        return float(3.51561*(0.1594 + 0.0196*el + 0.00002*el**2)/(1 + 0.505*el + 0.0845*el**2))
