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

"""Atmospheric refraction models

``refraction(model, elevation)`` returns the correction in degrees to add to a
true solar elevation. Pressures are in Pa and temperatures in degrees C.
"""

from .base import RefractionAlgorithm, NoRefraction, refraction
from .hughes import HUGHES
from .archer import ARCHER
from .bennett import BENNETT
from .michalsky import MICHALSKY
from .sg2 import SG2
from .spa import SPARefraction

__all__ = ['RefractionAlgorithm', 'NoRefraction', 'refraction',
           'HUGHES', 'ARCHER', 'BENNETT', 'MICHALSKY', 'SG2', 'SPARefraction']
