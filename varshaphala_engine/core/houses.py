"""
houses.py
=========
Ascendant (Lagna) and equal-house projection for the annual chart.

Only the equal-house system is used.  Houses are contiguous 30° arcs
counted from a point 30° before the ascendant, so house 1 covers
[asc − 30, asc) and a body sitting exactly on the ascendant falls in
house 2.

Source: Meeus Ch. 12 (GMST), Ch. 13–14 (ascendant formula).
"""

import math

from .ephemeris import J2000, DEG, RAD, ayanamsa, centuries, normalize

# Poles make tan(φ) blow up; clamp just inside
MAX_LATITUDE = 89.9999


# ---------------------------------------------------------------------------
# Sidereal time
# ---------------------------------------------------------------------------

def greenwich_mean_sidereal_time(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time in degrees.
    Source: Meeus Ch. 12, Eq. 12.4 (cubic term dropped)
    """
    T = centuries(jd)
    theta = (280.46061837
             + 360.98564736629 * (jd - J2000)
             + 0.000387933 * T * T)
    return normalize(theta)


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    """
    Local Mean Sidereal Time (degrees).
    longitude_deg: geographic longitude, positive East
    """
    return normalize(greenwich_mean_sidereal_time(jd) + longitude_deg)


def mean_obliquity(jd: float) -> float:
    return 23.439291 - 0.0130042 * centuries(jd)


# ---------------------------------------------------------------------------
# Ascendant
# ---------------------------------------------------------------------------

def compute_ascendant(jd: float, latitude_deg: float, longitude_deg: float) -> float:
    """
    Sidereal ascendant longitude for a UT Julian Day and a place.

    atan2 keeps the eastern-horizon intersection in every quadrant; a
    vanishing numerator and denominator together resolve to 0° so nothing
    non-finite leaks out.
    """
    lst = local_sidereal_time(jd, longitude_deg) * DEG
    eps = mean_obliquity(jd) * DEG
    phi = max(-MAX_LATITUDE, min(MAX_LATITUDE, latitude_deg)) * DEG

    num = math.cos(lst)
    den = -math.sin(lst) * math.cos(eps) - math.tan(phi) * math.sin(eps)

    if abs(num) < 1e-12 and abs(den) < 1e-12:
        asc = 0.0
    else:
        asc = math.atan2(num, den) * RAD

    return normalize(asc - ayanamsa(jd))


# ---------------------------------------------------------------------------
# House projection
# ---------------------------------------------------------------------------

def house_of(longitude: float, ascendant: float) -> int:
    """Equal house (1–12) of ``longitude`` against ``ascendant``."""
    return int(normalize(longitude - ascendant + 30.0) / 30.0) % 12 + 1
