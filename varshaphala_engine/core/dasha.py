"""
dasha.py  --  Mudda Dasha (annual planetary periods)
====================================================
The 360-day Varsha is split into nine periods in a fixed body order, the
sequence entered at the lord of the natal Moon's nakshatra.  Each period
is split again into nine antardashas starting from its own body.

Day table (sums to 360):
    Sun 110 · Moon 60 · Mars 32 · Mercury 40 · Jupiter 48
    Venus 56 · Saturn 4 · Rahu 5 · Ketu 5
"""

import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple

from .dignity import planet_strength, houses_ruled_by
from .ephemeris import NAKSHATRA_LORDS, nakshatra_index
from .models import (
    CHART_BODIES, MuddaAntardasha, MuddaDashaPeriod, NatalChart, Planet,
    SolarReturnChart,
)

logger = logging.getLogger(__name__)

DASHA_ORDER: Tuple[Planet, ...] = CHART_BODIES

MUDDA_DAYS = {
    Planet.SUN: 110, Planet.MOON: 60, Planet.MARS: 32,
    Planet.MERCURY: 40, Planet.JUPITER: 48, Planet.VENUS: 56,
    Planet.SATURN: 4, Planet.RAHU: 5, Planet.KETU: 5,
}
VARSHA_DAYS = 360

PLANET_NATURE = {
    Planet.SUN:     "vitality, authority, and self-expression",
    Planet.MOON:    "emotions, nurturing, and public connections",
    Planet.MARS:    "energy, initiative, and competitive drive",
    Planet.MERCURY: "communication, learning, and business",
    Planet.JUPITER: "wisdom, expansion, and good fortune",
    Planet.VENUS:   "relationships, creativity, and pleasures",
    Planet.SATURN:  "discipline, responsibility, and long-term goals",
    Planet.RAHU:    "ambition, innovation, and unconventional paths",
    Planet.KETU:    "spirituality, detachment, and past karma",
}

HOUSE_AREA = {
    1: "personal development", 2: "financial matters",
    3: "communication and siblings", 4: "home and property",
    5: "creativity and children", 6: "health and service",
    7: "partnerships", 8: "transformation",
    9: "fortune and learning", 10: "career",
    11: "gains and friends", 12: "spirituality",
}

STRENGTH_QUALITY = {
    "Exalted":     "This period promises exceptional results",
    "Strong":      "This period is well-supported for success",
    "Debilitated": "This period requires extra effort and patience",
}

PLANET_KEYWORDS = {
    Planet.SUN:     ("Leadership", "Vitality", "Father"),
    Planet.MOON:    ("Emotions", "Mother", "Public"),
    Planet.MARS:    ("Action", "Energy", "Courage"),
    Planet.MERCURY: ("Communication", "Learning", "Business"),
    Planet.JUPITER: ("Wisdom", "Growth", "Fortune"),
    Planet.VENUS:   ("Love", "Art", "Comfort"),
    Planet.SATURN:  ("Discipline", "Karma", "Delays"),
    Planet.RAHU:    ("Ambition", "Innovation", "Foreign"),
    Planet.KETU:    ("Spirituality", "Detachment", "Past"),
}

HOUSE_KEYWORDS = {
    1: ("Self", "Body"),            2: ("Wealth", "Speech"),
    3: ("Siblings", "Courage"),     4: ("Home", "Peace"),
    5: ("Children", "Romance"),     6: ("Health", "Service"),
    7: ("Marriage", "Business"),    8: ("Transformation", "Research"),
    9: ("Luck", "Travel"),          10: ("Career", "Status"),
    11: ("Gains", "Friends"),       12: ("Spirituality", "Losses"),
}


def starting_lord(natal: NatalChart, chart: SolarReturnChart) -> Planet:
    """Lord of the natal Moon's nakshatra (mod 9)."""
    moon = natal.position(Planet.MOON)
    if moon is not None:
        idx = moon.nakshatra if moon.nakshatra is not None else nakshatra_index(moon.longitude)
    else:
        logger.warning("Natal chart has no Moon; seeding Mudda Dasha from the annual Moon")
        ret_moon = chart.position(Planet.MOON)
        idx = nakshatra_index(ret_moon.longitude) if ret_moon else 0
    return NAKSHATRA_LORDS[idx % 9]


def _rotation(first: Planet) -> List[Planet]:
    i = DASHA_ORDER.index(first)
    return [DASHA_ORDER[(i + k) % len(DASHA_ORDER)] for k in range(len(DASHA_ORDER))]


def _antardashas(main: Planet, start: date, days: int) -> Tuple[MuddaAntardasha, ...]:
    """Nine sub-periods tiling ``days`` exactly; the last absorbs the remainder.

    Periods shorter than nine days give one day to each of the first
    ``days`` bodies in the cycle instead of emitting zero-length records.
    """
    order = _rotation(main)
    base = days // 9
    if base == 0:
        lengths = [1] * days
    else:
        lengths = [base] * 8 + [days - base * 8]

    subs = []
    current = start
    for planet, length in zip(order, lengths):
        end = current + timedelta(days=length - 1)
        subs.append(MuddaAntardasha(
            planet=planet,
            start_date=current,
            end_date=end,
            days=length,
            interpretation=f"{main.value}-{planet.value} period",
        ))
        current = end + timedelta(days=1)
    return tuple(subs)


def _progress(start: date, end: date, days: int, today: date) -> float:
    if today > end:
        return 1.0
    if today < start:
        return 0.0
    if days <= 0:
        return 1.0
    return min(1.0, max(0.0, (today - start).days / days))


def dasha_prediction(planet: Planet, house: int, strength: str) -> str:
    quality = STRENGTH_QUALITY.get(strength, "This period brings mixed but manageable influences")
    return (f"During this {planet.value} period, focus shifts to {PLANET_NATURE[planet]}, "
            f"particularly affecting {HOUSE_AREA.get(house, 'various life areas')}. "
            f"{quality} in the significations of {planet.value}.")


def dasha_keywords(planet: Planet, house: int) -> Tuple[str, ...]:
    return (PLANET_KEYWORDS[planet] + HOUSE_KEYWORDS.get(house, ()))[:5]


def compute_mudda_dasha(
    chart: SolarReturnChart,
    natal: NatalChart,
    start_date: date,
    today: Optional[date] = None,
) -> Tuple[MuddaDashaPeriod, ...]:
    """
    Lay the nine periods back to back from ``start_date`` (the return date).

    Exactly one period is current when ``today`` lies inside the 360-day
    span, none otherwise.
    """
    today = today or date.today()
    periods = []
    current = start_date

    for planet in _rotation(starting_lord(natal, chart)):
        days = MUDDA_DAYS[planet]
        end = current + timedelta(days=days - 1)
        house = chart.house_of_body(planet)
        strength = planet_strength(planet, chart)

        periods.append(MuddaDashaPeriod(
            planet=planet,
            start_date=current,
            end_date=end,
            days=days,
            sub_periods=_antardashas(planet, current, days),
            planet_strength=strength,
            houses_ruled=houses_ruled_by(planet, chart),
            prediction=dasha_prediction(planet, house, strength),
            keywords=dasha_keywords(planet, house),
            is_current=current <= today <= end,
            progress=_progress(current, end, days, today),
        ))
        current = end + timedelta(days=1)

    return tuple(periods)
