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

"""Archer refraction model

Archer, P. K., "Solar position algorithm", NASA Contractor Report 3248 (1980),
originally paired with the Walraven positioning algorithm.
"""

from dataclasses import dataclass

from .base import RefractionAlgorithm
from ..utils import cosd, acosd

@dataclass(frozen=True)
class ARCHER(RefractionAlgorithm):
    """Archer model, works on the zenith angle and has no parameters"""

    def correction(self, elevation):
        zenith = 90 - elevation
        C1 = cosd(zenith)
        D = 1/(0.955 + 20.267*C1) - 0.047121
        C = C1 + 0.0083*D
        #apparent zenith is acos(C); may be slightly negative near the zenith
        return float(zenith - acosd(C))
