import pytest
from solarposition import Observer
from solarposition.observer import POLE_OFFSET
import numpy as np
import pickle
import warnings

def test_observer_fields():
    obs = Observer(45.0, 10.0, 100.0)
    assert (obs.latitude, obs.longitude, obs.altitude) == (45.0, 10.0, 100.0)
    assert obs.latitude_rad == pytest.approx(np.pi/4)
    assert obs.longitude_rad == pytest.approx(np.deg2rad(10.0))
    assert obs.sin_lat == pytest.approx(np.sqrt(0.5))
    assert obs.cos_lat == pytest.approx(np.sqrt(0.5))
    assert Observer(45, 10).altitude == 0.0
    assert isinstance(Observer(45, 10).latitude, float)

@pytest.mark.parametrize('lat,expected', [(90.0, 90.0 - POLE_OFFSET), (-90.0, -90.0 + POLE_OFFSET)])
def test_pole_adjustment(lat, expected):
    with pytest.warns(UserWarning, match='Adjusted to'):
        obs = Observer(lat, 10.0)
    assert obs.latitude == expected
    assert obs.cos_lat > 0

@pytest.mark.parametrize('lat', [89.999, 0.0, -89.999, 45.0])
def test_no_warning(lat):
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        obs = Observer(lat, 0.0)
    assert obs.latitude == lat

@pytest.mark.parametrize('lat,lon,alt', [
    (90.5, 0.0, 0.0),
    (-91.0, 0.0, 0.0),
    (np.nan, 0.0, 0.0),
    (0.0, np.inf, 0.0),
    (0.0, 0.0, np.nan),
])
def test_invalid(lat, lon, alt):
    with pytest.raises(ValueError):
        Observer(lat, lon, alt)

def test_immutable_and_hashable():
    obs = Observer(45.0, 10.0)
    assert obs == Observer(45.0, 10.0)
    assert hash(obs) == hash(Observer(45.0, 10.0))
    assert obs != Observer(45.0, 10.0, 1.0)
    with pytest.raises(AttributeError):
        obs.latitude = 0.0
    assert pickle.loads(pickle.dumps(obs)) == obs
    assert repr(obs) == 'Observer(latitude=45.0, longitude=10.0, altitude=0.0)'
