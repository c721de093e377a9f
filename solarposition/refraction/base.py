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

"""Common base of the atmospheric refraction models"""

import numpy as np

class RefractionAlgorithm:
    """Base class of the refraction models

    Subclasses are immutable parameter bundles implementing
    ``correction(elevation)``, which maps a true (unrefracted) elevation in
    degrees to the correction in degrees to be added to it.
    """

    def correction(self, elevation):
        raise NotImplementedError(f'{type(self).__name__} does not implement correction()')

class NoRefraction(RefractionAlgorithm):
    """Marker for "no refraction correction", the positions are purely geometric"""

    def correction(self, elevation):
        return 0.0

    def __eq__(self, other):
        return type(other) is NoRefraction

    def __hash__(self):
        return hash(NoRefraction)

    def __repr__(self):
        return 'NoRefraction()'

def refraction(model, elevation):
    """Refraction correction for the given true elevation(s)

    Parameters
    ----------
    model : RefractionAlgorithm
        refraction model, e.g. HUGHES()
    elevation : float or array_like
        true solar elevation, in degrees

    Returns
    -------
    correction : float or ndarray
        correction in degrees, apparent elevation = elevation + correction
    """
    if np.ndim(elevation) == 0:
        return float(model.correction(float(elevation)))
    return np.vectorize(model.correction, otypes=[float])(elevation)
