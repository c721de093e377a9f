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

"""Solar positioning algorithms

Every algorithm is an immutable parameter bundle with a ``position(observer, t)``
method taking an Observer and a UTC POSIX timestamp.

========  ===============================================  ==============
name      reference                                        result
========  ===============================================  ==============
PSA       Blanco et al. (2001, 2020)                       SolPos
NOAA      NOAA solar calculator (Meeus 1991)               SolPos
Walraven  Walraven (1978), Spencer (1989)                  SolPos
USNO      USNO approximate solar coordinates               SolPos
SPA       Reda & Andreas (2004, 2008)                      SPASolPos
========  ===============================================  ==============
"""

from .base import SolPos, ApparentSolPos, SPASolPos, SolarAlgorithm
from .psa import PSA
from .noaa import NOAA
from .walraven import Walraven
from .usno import USNO
from .spa import SPA

__all__ = ['SolPos', 'ApparentSolPos', 'SPASolPos', 'SolarAlgorithm',
           'PSA', 'NOAA', 'Walraven', 'USNO', 'SPA']
