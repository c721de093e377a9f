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

"""solarposition command-line tool"""

import sys
import argparse

from . import VERSION
from .observer import Observer
from .core import solar_position
from .positioning import PSA, NOAA, Walraven, USNO, SPA, SPASolPos, ApparentSolPos
from .refraction import NoRefraction, HUGHES, ARCHER, BENNETT, MICHALSKY, SG2, SPARefraction
from .timeutils import string_to_posix_time, time_to_iso8601

ALGORITHMS = ('psa', 'noaa', 'walraven', 'usno', 'spa')
REFRACTIONS = ('none', 'hughes', 'archer', 'bennett', 'michalsky', 'sg2', 'spa')

def _delta_t(s):
    if s == 'auto':
        return None
    try:
        return float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f'delta-t must be a number of seconds or "auto", got {s!r}')

_arg_parser = argparse.ArgumentParser(prog='solarposition',description='Compute the position of the sun given the time and location')
_arg_parser.add_argument('--version',action='version',version=f'%(prog)s {VERSION}')
_arg_parser.add_argument('--citation',action='store_true',help='Print citation information for the selected algorithm')
_arg_parser.add_argument('-t','--time',type=str,default='now',help='"now" or date and time in ISO8601 format or a (UTC) POSIX timestamp')
_arg_parser.add_argument('-lat','--latitude',type=float,default=51.48,help='observer latitude, in decimal degrees, positive for north')
_arg_parser.add_argument('-lon','--longitude',type=float,default=0.0,help='observer longitude, in decimal degrees, positive for east')
_arg_parser.add_argument('-e','--altitude',type=float,default=0.0,help='observer altitude above mean sea level, in meters')
_arg_parser.add_argument('-a','--algorithm',choices=ALGORITHMS,default='psa',help='solar positioning algorithm')
_arg_parser.add_argument('-r','--refraction',choices=REFRACTIONS,default='none',help='atmospheric refraction model')
_arg_parser.add_argument('-p','--pressure',type=float,default=101325.0,help='atmospheric pressure, in Pa')
_arg_parser.add_argument('-T','--temperature',type=float,default=12.0,help='temperature, in degrees celsius')
_arg_parser.add_argument('-dt','--delta-t',type=_delta_t,default=67.0,help='difference between terrestrial time (TT) and universal time (UT1) in seconds, or "auto"')
_arg_parser.add_argument('--gmst-option',type=int,choices=(1,2),default=1,help='Greenwich mean sidereal time formula of the USNO algorithm')
_arg_parser.add_argument('--coefficients',type=int,choices=(2001,2020),default=2020,help='coefficient set of the PSA algorithm')
_arg_parser.add_argument('--csv',action='store_true',help='Comma separated values (time,lat,lon,alt,algorithm,refraction,az,elev,zen[,app_elev,app_zen][,eot])')

CITATIONS = {
    'psa': ['Manuel Blanco, Kypros Milidonis, Aristides Bonanos, "Updating the PSA sun position algorithm",',
            '  Solar Energy, Volume 212, 2020, Pages 339-341, doi:10.1016/j.solener.2020.10.084'],
    'noaa': ['NOAA Global Monitoring Laboratory solar calculator, https://gml.noaa.gov/grad/solcalc/',
             '  after Jean Meeus, "Astronomical Algorithms", Willmann-Bell, 1991'],
    'walraven': ['Robert Walraven, "Calculating the position of the sun",',
                 '  Solar Energy, Volume 20, Issue 5, 1978, Pages 393-397, doi:10.1016/0038-092X(78)90155-X'],
    'usno': ['U.S. Naval Observatory, Astronomical Applications Department,',
             '  "Approximate Solar Coordinates", https://aa.usno.navy.mil/faq/sun_approx'],
    'spa': ['Ibrahim Reda, Afshin Andreas, "Solar position algorithm for solar radiation applications",',
            '  Solar Energy, Volume 76, Issue 5, 2004, Pages 577-589, ISSN 0038-092X,',
            '  doi:10.1016/j.solener.2003.12.003'],
}

def build_algorithm(args):
    """Positioning algorithm selected by parsed command-line arguments"""
    if args.algorithm == 'psa':
        return PSA(args.coefficients)
    if args.algorithm == 'noaa':
        return NOAA(args.delta_t)
    if args.algorithm == 'walraven':
        return Walraven()
    if args.algorithm == 'usno':
        return USNO(args.delta_t, args.gmst_option)
    if args.algorithm == 'spa':
        return SPA(args.delta_t, args.pressure, args.temperature)
    raise ValueError(f'Unknown algorithm {args.algorithm!r}')

def build_refraction(args):
    """Refraction model selected by parsed command-line arguments"""
    if args.refraction == 'none':
        return NoRefraction()
    if args.refraction == 'hughes':
        return HUGHES(args.pressure, args.temperature)
    if args.refraction == 'archer':
        return ARCHER()
    if args.refraction == 'bennett':
        return BENNETT(args.pressure, args.temperature)
    if args.refraction == 'michalsky':
        return MICHALSKY()
    if args.refraction == 'sg2':
        return SG2(args.pressure, args.temperature)
    if args.refraction == 'spa':
        return SPARefraction(args.pressure, args.temperature)
    raise ValueError(f'Unknown refraction model {args.refraction!r}')

def main(args=None, **kwargs):
    """Run the solarposition command-line tool.

    If run without arguments, uses sys.argv, otherwise arguments may be
    specified by a list of strings to be parsed, e.g.:
        main(['--time','now'])
    or as keyword arguments:
        main(time='now', algorithm='spa')
    or as an argparse.Namespace object (as produced by argparse.ArgumentParser)

    Parameters
    ----------
    args : list of str or argparse.Namespace, optional
        Command-line arguments. sys.argv is used if neither args nor kwargs are given.
    citation : bool
        If true, print citation information for the algorithm and quit
    time : str
        "now" or date and time in ISO8601 format or a UTC POSIX timestamp
    latitude, longitude : float
        observer coordinates in decimal degrees, positive for north and east
    altitude : float
        observer altitude in meters
    algorithm : str
        one of psa, noaa, walraven, usno, spa
    refraction : str
        one of none, hughes, archer, bennett, michalsky, sg2, spa
    pressure : float
        atmospheric pressure, in Pa
    temperature : float
        temperature, in degrees celsius
    delta_t : float or None
        TT - UT1 in seconds, None for the automatic estimate
    gmst_option : int
        USNO sidereal time formula, 1 or 2
    coefficients : int
        PSA coefficient set, 2001 or 2020
    csv : bool
        If True, output as comma separated values

    Returns
    -------
    status : int
        0 on success, 1 if the inputs are rejected
    """
    if args is None and not kwargs:
        args = _arg_parser.parse_args()
    elif args is None:
        args = _arg_parser.parse_args([])
    elif isinstance(args,(list,tuple)):
        args = _arg_parser.parse_args(args)

    for kw in kwargs:
        setattr(args,kw,kwargs[kw])

    if args.citation:
        print("Algorithm:")
        for line in CITATIONS[args.algorithm]:
            print("  " + line)
        return 0

    try:
        t = string_to_posix_time(args.time)
        observer = Observer(args.latitude, args.longitude, args.altitude)
        algorithm = build_algorithm(args)
        refraction = build_refraction(args)
    except ValueError as ex:
        print(f'ERROR: {ex}', file=sys.stderr)
        return 1

    pos = solar_position(observer, t, algorithm, refraction)
    lat, lon, alt = observer.latitude, observer.longitude, observer.altitude
    if args.csv:
        #machine readable
        values = ', '.join(f'{v:0.6f}' for v in pos)
        print(f'{t}, {lat}, {lon}, {alt}, {args.algorithm}, {args.refraction}, {values}')
    else:
        ts = time_to_iso8601(t)
        print(f"Computing sun position at T = {ts} with {type(algorithm).__name__}")
        print(f"Lat, Lon, Alt = {lat} deg, {lon} deg, {alt} m")
        if not isinstance(refraction, NoRefraction) or isinstance(pos, SPASolPos):
            print(f"T, P = {args.temperature} C, {args.pressure} Pa")
        print("Results:")
        print(f"Azimuth, elevation, zenith = {pos.azimuth:0.6f} deg, {pos.elevation:0.6f} deg, {pos.zenith:0.6f} deg")
        if isinstance(pos, (ApparentSolPos, SPASolPos)):
            print(f"Apparent elevation, zenith = {pos.apparent_elevation:0.6f} deg, {pos.apparent_zenith:0.6f} deg")
        if isinstance(pos, SPASolPos):
            print(f"Equation of time = {pos.equation_of_time:0.6f} min")
    return 0
