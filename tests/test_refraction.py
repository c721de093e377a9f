import pytest
from solarposition import refraction, NoRefraction, HUGHES, ARCHER, BENNETT, MICHALSKY, SG2, SPARefraction
from solarposition.refraction.michalsky import MICHALSKY_LIMIT
import numpy as np
import warnings

_models = [HUGHES(), ARCHER(), BENNETT(), MICHALSKY(), SG2(), SPARefraction()]

# (elevation, expected correction) for the Hughes model at 101325 Pa, 12 C
_hughes_values = [
    (90.0, 0.0),
    (45.0, 0.016006),
    (10.0, 0.087503),
    (5.0, 0.158499),
    (0.0, 0.478562),
    (-0.5, 0.557613),
    (-1.0, 0.328278),
]

@pytest.mark.parametrize('elevation,expected', _hughes_values)
def test_hughes(elevation, expected):
    assert refraction(HUGHES(101325.0, 12.0), elevation) == pytest.approx(expected, abs=1e-4)

def test_hughes_atmosphere():
    '''the correction scales with pressure and inversely with absolute temperature'''
    base = HUGHES().correction(10.0)
    assert HUGHES(101325.0/2, 12.0).correction(10.0) == pytest.approx(base/2)
    assert HUGHES(101325.0, 10.0).correction(10.0) == pytest.approx(base*285/283)

def test_archer():
    r = ARCHER().correction(90.0)
    assert -0.01 < r < 0
    assert ARCHER().correction(10.0) == pytest.approx(0.09, abs=0.01)
    assert ARCHER().correction(0.0) > 0.3

def test_bennett():
    assert BENNETT().correction(0.0) == pytest.approx(0.572, abs=1e-3)
    assert BENNETT().correction(90.0) == pytest.approx(0.0, abs=1e-4)

def test_michalsky():
    assert MICHALSKY().correction(0.0) == pytest.approx(0.560388, abs=1e-6)
    assert MICHALSKY().correction(-1.0) == MICHALSKY_LIMIT
    assert MICHALSKY().correction(-10.0) == MICHALSKY_LIMIT
    assert MICHALSKY().correction(45.0) == pytest.approx(0.0195, abs=1e-3)

def test_sg2():
    assert SG2().correction(0.0) == pytest.approx(0.48118, abs=1e-3)
    #below the horizon the correction shrinks with the tangent
    assert 0 < SG2().correction(-5.0) < SG2().correction(0.0)

def test_spa_refraction():
    model = SPARefraction()
    assert model.correction(0.0) == pytest.approx(0.48117, abs=1e-3)
    #no correction once the whole disk is below the limit
    assert model.correction(-0.84) == 0.0
    assert model.correction(-0.8) > 0
    assert SPARefraction(refraction_limit=0.0).correction(-0.3) == 0.0

def test_no_refraction():
    assert refraction(NoRefraction(), 10.0) == 0.0
    assert NoRefraction() == NoRefraction()
    assert hash(NoRefraction()) == hash(NoRefraction())
    assert NoRefraction() != HUGHES()

@pytest.mark.parametrize('model', _models)
def test_refraction_decreases_with_elevation(model):
    el = np.array([1.0, 5.0, 10.0, 30.0, 60.0, 85.0])
    r = refraction(model, el)
    assert isinstance(r, np.ndarray)
    assert r.shape == el.shape
    assert np.all(np.diff(r) < 0)
    # about 34 arcminutes at the horizon, a fraction of a degree everywhere above
    assert np.all(r < 1.0)

@pytest.mark.parametrize('model', _models)
def test_refraction_scalar(model):
    r = refraction(model, 20.0)
    assert isinstance(r, float)
    assert r == model.correction(20.0)
    assert r == pytest.approx(0.045, abs=0.01)

def test_refraction_array_shape():
    el = np.linspace(-10, 90, 12).reshape(3, 4)
    r = refraction(HUGHES(), el)
    assert r.shape == (3, 4)
    assert r[0, 0] == HUGHES().correction(el[0, 0])

def test_models_are_parameter_bundles():
    assert HUGHES() == HUGHES(101325.0, 12.0)
    assert HUGHES() != HUGHES(100000.0)
    assert len({HUGHES(), HUGHES(), SG2(), BENNETT()}) == 3
    with pytest.raises(AttributeError):
        HUGHES().pressure = 0.0

@pytest.mark.parametrize('model,expected,tolerance', [
    (HUGHES(), 0.0, 0.01),
    (ARCHER(), 0.0, 0.01),
    (BENNETT(), 0.0, 0.01),
    #the Michalsky fit does not vanish at the zenith
    (MICHALSKY(), 0.010031, 1e-5),
    (SG2(), 0.0, 0.01),
    (SPARefraction(), 0.0, 0.01),
])
def test_correction_at_zenith(model, expected, tolerance):
    r = refraction(model, 90.0)
    assert np.isfinite(r)
    assert r == pytest.approx(expected, abs=tolerance)

@pytest.mark.parametrize('elevation', [-4.4, -4.4 + 1e-12, -4.4 - 1e-12, -10.0])
def test_bennett_below_horizon(elevation):
    '''the pole of the Bennett formula gives a number, not an exception'''
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        r = refraction(BENNETT(), elevation)
    assert isinstance(r, float)
    assert np.isfinite(r)
    assert BENNETT().correction(-4.4) == 0.0
