import pytest
from solarposition import timeutils
import numpy as np
import datetime
import typing
import warnings

class Instant(typing.NamedTuple):
    text : str #as written, with or without a UTC offset
    utc : str #the same instant in UTC, without offset, as numpy.datetime64 parses it

    @property
    def micros(self) -> int:
        '''exact POSIX time in integer microseconds'''
        return int(np.datetime64(self.utc, 'us').astype(np.int64))

    @property
    def year(self) -> int:
        return int(self.utc[:5]) if self.utc.startswith('-') else int(self.utc[:4])

_instants = [
    Instant('1970-01-01T00:00Z', '1970-01-01T00:00'), #epoch
    Instant('19700101T000000Z', '1970-01-01T00:00'), #no separators
    Instant('1970-01-01 01:00+01:00', '1970-01-01T00:00'), #space separator
    Instant('2000-02-29T00:00', '2000-02-29T00:00'), #leap day, no offset is UTC
    Instant('2020-10-17T12:30+02:00', '2020-10-17T10:30'),
    Instant('2020-10-17T12:30-02:00', '2020-10-17T14:30'),
    Instant('2020-10-17T12:30:10.25-02:30', '2020-10-17T15:00:10.250'),
    Instant('20201017T123010.25-0230', '2020-10-17T15:00:10.250'),
    Instant('2245-09-03T23:30+14:00', '2245-09-03T09:30'), #largest offset
    Instant('8367-07-06T11:15-09:00', '8367-07-06T20:15'),
    Instant('1225-05-14T21:32:56.326528+10:00', '1225-05-14T11:32:56.326528'),
    Instant('0001-01-01T00:00Z', '0001-01-01T00:00'), #first datetime.datetime
    Instant('9999-12-31T23:59:59.999Z', '9999-12-31T23:59:59.999'),
    Instant('0000-12-31T23:59:59.999999Z', '0000-12-31T23:59:59.999999'), #year 0 is 1 BCE
    Instant('-2000-01-01T00:00Z', '-2000-01-01T00:00'), #earliest year with a defined delta T
    Instant('-1960-11-01T07:50:11.020416-10:17', '-1960-11-01T18:07:11.020416'),
    Instant('-1143-07-27T20:33:51.428576+10:01', '-1143-07-27T10:32:51.428576'),
]

_invalid_strings = [
    '1900-02-29T00:00Z', #not a leap year
    '1985-00-06T10:34Z', #zero month
    '1985--5-06T10:34Z', #negative month
    '1985-13-06T10:34Z',
    '1985-10-00T10:34Z', #zero day
    '1985-04-31T10:34Z', #day > month length
    '1985-10-33T10:34Z',
    '1985-10-06T24:00Z', #hour > 23
    '1985-10-06T10:60Z',
    '1985-10-06T10:34:60Z', #no leap seconds
    '1985-10-06T10:34-13:00', #offsets range from -12:00 to +14:00
    '1985-10-06T10:34+15:00',
    '1985-10-06T10:34-12:05',
    '1985-10-06T10:34+14:01',
    '1985-10-06T10:34+05:60',
    '19851006T1034+00-10',
    '',
    'yesterday',
    '2020-10-17', #date only
    '2020-10-17T12',
    '2020-10-17T12:30Q',
]

@pytest.fixture(params=_instants, ids=[i.text for i in _instants])
def instant(request : pytest.FixtureRequest) -> Instant:
    return request.param

@pytest.fixture(params=_invalid_strings)
def invalid_string(request : pytest.FixtureRequest) -> str:
    return request.param

def _as_datetimes(instants):
    '''naive (UTC) and aware datetime.datetime versions of the instants in datetime's range'''
    out = []
    for i in instants:
        if i.year < 2 or i.year > 9998:
            continue
        naive = np.datetime64(i.utc, 'us').astype(datetime.datetime)
        aware = naive.replace(tzinfo=datetime.timezone.utc).astimezone(
            datetime.timezone(datetime.timedelta(hours=-3, minutes=-30)))
        out += [(naive, i.micros), (aware, i.micros)]
    return out

_strings = [(i.text, i.micros) for i in _instants]
_datetime64s = [(np.datetime64(i.utc), i.micros) for i in _instants]
_datetimes = _as_datetimes(_instants)

@pytest.fixture(params=_strings + _datetime64s + _datetimes)
def any_instant(request : pytest.FixtureRequest):
    '''(value : str|datetime64|datetime, expected POSIX microseconds)'''
    return request.param

@pytest.fixture(params=[_strings, _datetime64s, _datetimes], ids=['str', 'datetime64', 'datetime'])
def instant_list(request : pytest.FixtureRequest):
    '''([val0, val1, ...], [expected0, expected1, ...])'''
    return tuple(map(list, zip(*request.param)))

def test_to_timestamp(any_instant):
    '''to_timestamp with each supported input type'''
    t_test, t_expected = any_instant
    with warnings.catch_warnings():
        #none of these cases should emit warnings
        warnings.simplefilter('error')
        t = timeutils.to_timestamp(t_test)
    assert isinstance(t, float)
    # floats of about 3e11 seconds resolve to about 1e-4 s
    assert t == pytest.approx(t_expected/1e6, abs=1e-3)

def test_to_timestamp_list(instant_list):
    t_test, t_expected = instant_list
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        t = timeutils.to_timestamp(t_test)
    assert isinstance(t, np.ndarray)
    assert t.shape == (len(t_expected),)
    assert np.allclose(t, np.array(t_expected)/1e6, rtol=0, atol=1e-3)

def test_to_timestamp_invalid(invalid_string : str):
    with pytest.raises(ValueError):
        timeutils.to_timestamp(invalid_string)

def test_string_to_posix_time_special():
    assert timeutils.string_to_posix_time('0') == 0.0
    assert timeutils.string_to_posix_time(' 1602937800.5 ') == 1602937800.5
    assert timeutils.string_to_posix_time('1970-01-01T00:00Z') == 0.0
    assert timeutils.string_to_posix_time('1970-01-01 01:00+01:00') == 0.0
    before = datetime.datetime.now(datetime.timezone.utc).timestamp()
    now = timeutils.string_to_posix_time('now')
    after = datetime.datetime.now(datetime.timezone.utc).timestamp()
    assert before - 1 <= now <= after + 1

def test_naive_datetime_is_utc():
    naive = datetime.datetime(2020, 10, 17, 12, 30)
    aware = datetime.datetime(2020, 10, 17, 14, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
    assert timeutils.to_timestamp(naive) == timeutils.to_timestamp(aware)
    assert timeutils.to_timestamp(naive) == timeutils.to_timestamp('2020-10-17T12:30')
    assert timeutils.to_timestamp(datetime.date(2020, 10, 17)) == timeutils.to_timestamp('2020-10-17T00:00Z')

def test_to_timestamp_shape():
    t = timeutils.to_timestamp([['2020-01-01T00:00Z', '2020-01-02T00:00Z']]*3)
    assert t.shape == (3, 2)
    assert np.all(t[:, 1] - t[:, 0] == 86400)
    t64 = np.arange('2020-01-01', '2020-01-05', dtype='datetime64[D]')
    assert np.all(np.diff(timeutils.to_timestamp(t64)) == 86400)
    assert timeutils.to_timestamp(np.float32(10)) == 10.0

def test_time_to_iso8601(instant : Instant):
    t_iso_str = timeutils.time_to_iso8601(instant.text)
    assert t_iso_str.endswith('Z')
    #millisecond precision, floats resolve ancient dates to tens of microseconds
    assert timeutils.string_to_posix_time(t_iso_str) == pytest.approx(instant.micros/1e6, abs=1e-3)
    #datetime64 parses negative years, but not offsets
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        t64 = np.datetime64(t_iso_str[:-1], 'us')
    assert abs(int(t64.astype(np.int64)) - instant.micros) <= 600

def test_time_to_iso8601_format():
    assert timeutils.time_to_iso8601(0) == '1970-01-01T00:00:00.000Z'
    assert timeutils.time_to_iso8601('2020-10-17T12:30:10.25+02:00') == '2020-10-17T10:30:10.250Z'
    assert timeutils.time_to_iso8601('-0044-03-15T12:00Z') == '-0044-03-15T12:00:00.000Z'
    #rounding carries into the next day
    assert timeutils.time_to_iso8601('2020-12-31T23:59:59.9999Z') == '2021-01-01T00:00:00.000Z'

@pytest.mark.parametrize('year,month,day', [(1970, 1, 1), (2000, 2, 29), (1900, 3, 1), (-2000, 1, 1), (0, 12, 31), (9999, 12, 31)])
def test_rata_die(year, month, day):
    rd = timeutils.date_to_rd(year, month, day)
    assert timeutils.rd_to_date(rd) == (year, month, day)
    assert timeutils.rd_to_date(rd + 0.25) == (year, month, day + 0.25)
    if year >= 1:
        assert rd == (datetime.date(year, month, day) - datetime.date(1970, 1, 1)).days

def test_calendar_helpers():
    assert timeutils.date_to_rd(1970, 1, 1) == 0
    assert timeutils.days_in_month(2020, 2) == 29
    assert timeutils.days_in_month(2100, 2) == 28
    assert timeutils.days_in_month(2000, 2) == 29
    assert timeutils.days_in_month(2021, 12) == 31
    assert timeutils.days_in_month(2021, 4) == 30
    t = timeutils.string_to_posix_time('2020-12-31T12:00Z')
    assert timeutils.day_of_year(t) == 366
    assert timeutils.day_of_year(timeutils.string_to_posix_time('2021-01-01T23:59Z')) == 1
    assert timeutils.fractional_hour(t) == pytest.approx(12.0)
    assert timeutils.midnight(t) == t - 12*3600
    assert timeutils.midnight(-1.0) == -86400.0
    year, month, day = timeutils.posix_to_date(t)
    assert (year, month) == (2020, 12)
    assert day == pytest.approx(31.5)

def test_julian_day():
    assert timeutils.julian_day('2000-01-01T12:00Z') == timeutils.JD_J2000
    assert timeutils.julian_day(0) == timeutils.JD_UNIX_EPOCH
    assert timeutils.julian_day(np.datetime64('2000-01-01T12:00')) == 2451545.0
    #Meeus, Astronomical Algorithms, example 7.a
    assert timeutils.julian_day('1957-10-04T19:26:24Z') == pytest.approx(2436116.31, abs=1e-8)
    jd = timeutils.julian_day(['2000-01-01T12:00Z', '2000-01-02T12:00Z'])
    assert np.all(jd == [2451545.0, 2451546.0])
