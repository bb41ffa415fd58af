"""
ephemeris.py  --  Low-precision analytical planetary model
==========================================================
Truncated periodic series (mean longitude + 1–3 equation-of-centre terms)
after Jean Meeus "Astronomical Algorithms" 2nd ed., Ch. 7 (Julian Day),
Ch. 25 (Sun) and Ch. 47 (Moon, leading terms only).

Accuracy:  arc-minute class for the Sun and Moon, a degree or worse for
           the planets (heliocentric series read as geocentric).  Good
           enough for sign/house/orb work on the annual chart; NOT a
           substitute for a full ephemeris.

All public longitudes are sidereal, normalised to [0, 360).  Time input is
a Julian Day (UT) or a naive ``datetime`` taken as UT.
"""

import math
from datetime import datetime, timedelta
from functools import partial
from typing import Callable, Dict

from ..errors import MissingBodyError
from .models import Planet

# ── Constants ──────────────────────────────────────────────────
J2000        = 2451545.0
JD_1900      = 2415020.0
DEG          = math.pi / 180.0
RAD          = 180.0 / math.pi

NAKSHATRA_SPAN = 13.333333
PADA_SPAN      = 3.333333

NAKSHATRAS = [
    "Ashwini","Bharani","Krittika","Rohini","Mrigashira","Ardra",
    "Punarvasu","Pushya","Ashlesha","Magha","Purva Phalguni","Uttara Phalguni",
    "Hasta","Chitra","Swati","Vishakha","Anuradha","Jyeshtha",
    "Mula","Purva Ashadha","Uttara Ashadha","Shravana","Dhanishtha",
    "Shatabhisha","Purva Bhadrapada","Uttara Bhadrapada","Revati"
]

# Mansion lords, cycle of 9 repeated three times
NAKSHATRA_LORDS = [
    Planet.KETU, Planet.VENUS, Planet.SUN, Planet.MOON, Planet.MARS,
    Planet.RAHU, Planet.JUPITER, Planet.SATURN, Planet.MERCURY,
] * 3

# Half-window of the finite-difference speed estimate
SPEED_HALF_WINDOW = timedelta(hours=12)


def normalize(x: float) -> float:
    """Normalize angle to [0, 360)."""
    r = x % 360.0
    # -1e-17 % 360.0 == 360.0 in floating point
    return 0.0 if r >= 360.0 else r

_n = normalize

def _r(x):
    """Degrees to radians."""
    return x * DEG


def signed_delta(frm: float, to: float) -> float:
    """Shortest signed arc from ``frm`` to ``to``, in (-180, 180]."""
    d = normalize(to - frm)
    return d - 360.0 if d > 180.0 else d


# ── Julian Day ─────────────────────────────────────────────────

def gregorian_to_jd(year: int, month: int, day: int, hour: float = 0.0) -> float:
    """Meeus Ch. 7."""
    if month <= 2:
        year -= 1; month += 12
    A = int(year / 100)
    B = 2 - A + int(A / 4)
    return int(365.25*(year+4716)) + int(30.6001*(month+1)) + day + B - 1524.5 + hour/24.0


def julian_day(dt: datetime) -> float:
    """Julian Day of a naive UT datetime."""
    hour = (dt.hour + dt.minute / 60.0 + dt.second / 3600.0
            + dt.microsecond / 3.6e9)
    return gregorian_to_jd(dt.year, dt.month, dt.day, hour)


def centuries(jd: float) -> float:
    return (jd - J2000) / 36525.0


def ayanamsa(jd: float) -> float:
    """Linear sidereal correction (degrees)."""
    return 23.85 + 0.0137 * (jd - JD_1900) / 365.25


# ── Tropical series ────────────────────────────────────────────

def sun_tropical(t: float) -> float:
    """Apparent solar longitude, Meeus Ch. 25 (low accuracy)."""
    L0 = 280.46646 + 36000.76983*t + 0.0003032*t*t
    M  = _r(357.52911 + 35999.05029*t - 0.0001537*t*t)
    C  = ((1.914602 - 0.004817*t - 0.000014*t*t)*math.sin(M)
          + (0.019993 - 0.000101*t)*math.sin(2*M)
          + 0.000289*math.sin(3*M))
    omega = 125.04 - 1934.136*t
    return _n(L0 + C - 0.00569 - 0.00478*math.sin(_r(omega)))


def moon_tropical(t: float) -> float:
    L  = 218.3164477 + 481267.88123421*t
    D  = _r(297.8501921 + 445267.1114034*t)
    M  = _r(357.5291092 + 35999.0502909*t)
    Mp = _r(134.9633964 + 477198.8675055*t)
    lon = (L
           + 6.288774*math.sin(Mp)
           + 1.274027*math.sin(2*D - Mp)
           + 0.658314*math.sin(2*D)
           + 0.213618*math.sin(2*Mp)
           - 0.185116*math.sin(M))
    return _n(lon)


# (L0, L1, M0, M1, c1, c2):  L = L0 + L1·t,  M = M0 + M1·t,
# λ = L + c1·sin M + c2·sin 2M
PLANET_SERIES = {
    Planet.MARS:    (355.433275, 19141.6964746, 19.373,   19140.0,     10.691,  0.623),
    Planet.MERCURY: (252.250906, 149474.0722491, 174.7948, 149472.5153, 23.4400, 2.9818),
    Planet.JUPITER: (34.351484,  3036.3027889,  20.020,   3034.9057,   5.555,   0.168),
    Planet.VENUS:   (181.979801, 58519.2130302, 50.4161,  58517.8039,  0.7758,  0.0033),
    Planet.SATURN:  (50.077471,  1223.5110141,  317.020,  1222.1138,   6.406,   0.257),
}


def _planet_tropical(planet: Planet, t: float) -> float:
    L0, L1, M0, M1, c1, c2 = PLANET_SERIES[planet]
    M = _r(M0 + M1*t)
    return _n(L0 + L1*t + c1*math.sin(M) + c2*math.sin(2*M))


def rahu_tropical(t: float) -> float:
    """Mean ascending node."""
    return _n(125.04452 - 1934.136261*t)


def ketu_tropical(t: float) -> float:
    return _n(rahu_tropical(t) + 180.0)


_TROPICAL: Dict[Planet, Callable[[float], float]] = {
    Planet.SUN:  sun_tropical,
    Planet.MOON: moon_tropical,
    Planet.RAHU: rahu_tropical,
    Planet.KETU: ketu_tropical,
}
for _p in PLANET_SERIES:
    _TROPICAL[_p] = partial(_planet_tropical, _p)


def tropical_longitude(planet: Planet, jd: float) -> float:
    try:
        fn = _TROPICAL[planet]
    except KeyError:
        raise MissingBodyError(planet) from None
    return fn(centuries(jd))


def sidereal_longitude(planet: Planet, jd: float) -> float:
    """Sidereal longitude of ``planet`` at Julian Day ``jd``."""
    return _n(tropical_longitude(planet, jd) - ayanamsa(jd))


def sun_sidereal(jd: float) -> float:
    return sidereal_longitude(Planet.SUN, jd)


def planet_longitude(planet: Planet, dt: datetime) -> float:
    return sidereal_longitude(planet, julian_day(dt))


# ── Speed & retrograde ─────────────────────────────────────────

def planet_speed(planet: Planet, dt: datetime) -> float:
    """Degrees/day from the wrapped difference across ±12 hours."""
    before = planet_longitude(planet, dt - SPEED_HALF_WINDOW)
    after  = planet_longitude(planet, dt + SPEED_HALF_WINDOW)
    return signed_delta(before, after)


# Fixed node convention: Rahu always retrograde, Ketu never
_FIXED_RETROGRADE = {
    Planet.SUN:  False,
    Planet.MOON: False,
    Planet.RAHU: True,
    Planet.KETU: False,
}


def is_retrograde(planet: Planet, speed: float) -> bool:
    fixed = _FIXED_RETROGRADE.get(planet)
    if fixed is not None:
        return fixed
    return speed < 0


# ── Lunar mansions ─────────────────────────────────────────────

def nakshatra_index(lon: float) -> int:
    return int(_n(lon) / NAKSHATRA_SPAN) % 27


def nakshatra_name(lon: float) -> str:
    return NAKSHATRAS[nakshatra_index(lon)]


def nakshatra_pada(lon: float) -> int:
    return int((_n(lon) % NAKSHATRA_SPAN) / PADA_SPAN) % 4 + 1
