"""
solar_return.py
===============
Locates the annual Sun return and builds the chart cast for that moment.

The locator is a Newton step on the Sun's mean motion: the signed
arc still to go divided by ~0.9856°/day gives the time correction.  Two or
three steps are usually enough.
"""

import calendar
import logging
from datetime import datetime, timedelta
from typing import Optional

from .ephemeris import (
    julian_day, sidereal_longitude, sun_sidereal, planet_speed, is_retrograde,
    nakshatra_name, nakshatra_pada, signed_delta, normalize,
)
from .houses import compute_ascendant, house_of
from .models import (
    CHART_BODIES, NatalChart, Planet, PlanetPosition, Sign,
    SolarReturnChart, SolarReturnFix,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS        = 10
TOLERANCE_DEG         = 1e-4
SUN_MEAN_DAILY_MOTION = 0.9856      # degrees/day


def anniversary_noon(target_year: int, month: int, day: int) -> datetime:
    """Local noon on the birthday in ``target_year``; Feb 29 falls back to Feb 28."""
    if month == 2 and day == 29 and not calendar.isleap(target_year):
        day = 28
    return datetime(target_year, month, day, 12, 0)


def locate_solar_return(
    natal_sun: float,
    target_year: int,
    birth_month: int,
    birth_day: int,
    timezone_offset: float = 0.0,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE_DEG,
    motion: float = SUN_MEAN_DAILY_MOTION,
    start: Optional[datetime] = None,
) -> SolarReturnFix:
    """
    Find the local moment in ``target_year`` when the Sun is back at
    ``natal_sun`` (sidereal degrees).

    ``start`` overrides the anniversary-noon seed (local time).  The best
    estimate is always returned; ``converged`` tells the caller whether the
    residual got below ``tolerance`` within ``max_iterations`` corrections.
    """
    offset = timedelta(hours=timezone_offset)
    local = start or anniversary_noon(target_year, birth_month, birth_day)
    moment = local - offset            # work in UT

    steps = 0
    diff = signed_delta(sun_sidereal(julian_day(moment)), natal_sun)
    while abs(diff) >= tolerance and steps < max_iterations:
        # fractional minutes keep sub-minute corrections from rounding to zero
        moment += timedelta(minutes=diff / motion * 1440.0)
        steps += 1
        diff = signed_delta(sun_sidereal(julian_day(moment)), natal_sun)
        logger.debug("solar return step %d: %s UT, residual %.7f°", steps, moment, diff)

    converged = abs(diff) < tolerance
    if not converged:
        logger.warning(
            "Solar return for %d did not converge after %d steps (residual %.6f°); "
            "using best estimate", target_year, steps, abs(diff))

    return SolarReturnFix(
        moment=moment + offset,
        iterations=steps,
        residual=abs(diff),
        converged=converged,
    )


def place_body(planet: Planet, longitude: float, speed: float,
               ascendant: float) -> PlanetPosition:
    """One body of the annual chart, projected against ``ascendant``."""
    lon = normalize(longitude)
    return PlanetPosition(
        planet=planet,
        longitude=lon,
        sign=Sign.from_longitude(lon),
        house=house_of(lon, ascendant),
        degree=lon % 30.0,
        nakshatra=nakshatra_name(lon),
        nakshatra_pada=nakshatra_pada(lon),
        is_retrograde=is_retrograde(planet, speed),
        speed=speed,
    )


def assemble_solar_return_chart(natal: NatalChart, fix: SolarReturnFix) -> SolarReturnChart:
    """Cast the annual chart for ``fix.moment`` at the birth place."""
    ut = fix.moment - timedelta(hours=natal.timezone_offset)
    jd = julian_day(ut)
    asc = compute_ascendant(jd, natal.latitude, natal.longitude)

    positions = {}
    for planet in CHART_BODIES:
        positions[planet] = place_body(
            planet,
            sidereal_longitude(planet, jd),
            planet_speed(planet, ut),
            asc,
        )

    natal_sun = natal.position(Planet.SUN)
    moon = positions[Planet.MOON]

    return SolarReturnChart(
        solar_return_time=fix.moment,
        sun_longitude=natal_sun.longitude if natal_sun else 0.0,
        ascendant=Sign.from_longitude(asc),
        ascendant_degree=asc % 30.0,
        moon_sign=moon.sign,
        moon_nakshatra=moon.nakshatra,
        planet_positions=positions,
        iterations=fix.iterations,
        residual=fix.residual,
    )


def is_day_chart(chart: SolarReturnChart) -> bool:
    """Local return time falls in [06:00, 18:00)."""
    return 6 <= chart.solar_return_time.hour < 18
