"""
bala.py  --  Pancha Vargiya Bala
================================
Five-fold strength of the seven classical bodies:

    uchcha        proximity to the exaltation point (0–5)
    hadda         ruler of the Hadda (term) segment
    dreshkana     ruler of the decanate
    navamsha      ruler of the ninth division
    dwadashamsha  ruler of the twelfth division

The four rulership parts score 4 own / 3 friend / 2 neutral / 1 other.
"""

import logging
from typing import List, Tuple

from .dignity import sign_lord
from .models import CLASSICAL_BODIES, PanchaVargiyaBala, Planet, Sign, SolarReturnChart

logger = logging.getLogger(__name__)

P = Planet

EXALTATION_POINT = {
    P.SUN: 10.0, P.MOON: 33.0, P.MARS: 298.0, P.MERCURY: 165.0,
    P.JUPITER: 95.0, P.VENUS: 357.0, P.SATURN: 200.0,
}

# Natural friendship; one-directional
FRIENDS = {
    P.SUN:     {P.MOON, P.MARS, P.JUPITER},
    P.MOON:    {P.SUN, P.MERCURY},
    P.MARS:    {P.SUN, P.MOON, P.JUPITER},
    P.MERCURY: {P.SUN, P.VENUS},
    P.JUPITER: {P.SUN, P.MOON, P.MARS},
    P.VENUS:   {P.MERCURY, P.SATURN},
    P.SATURN:  {P.MERCURY, P.VENUS},
}

NEUTRALS = {
    P.SUN:     {P.MERCURY},
    P.MOON:    {P.MARS, P.JUPITER, P.VENUS, P.SATURN},
    P.MARS:    {P.MERCURY, P.VENUS, P.SATURN},
    P.MERCURY: {P.MARS, P.JUPITER, P.SATURN},
    P.JUPITER: {P.MERCURY, P.SATURN},
    P.VENUS:   {P.MARS, P.JUPITER},
    P.SATURN:  {P.MARS, P.JUPITER},
}

# Hadda segments by sign index mod 4: (ruler, span in degrees)
HADDA = {
    0: ((P.JUPITER, 6), (P.VENUS, 6), (P.MERCURY, 8), (P.MARS, 5), (P.SATURN, 5)),
    1: ((P.VENUS, 8), (P.MERCURY, 6), (P.JUPITER, 8), (P.SATURN, 5), (P.MARS, 3)),
    2: ((P.MERCURY, 6), (P.JUPITER, 6), (P.VENUS, 5), (P.MARS, 7), (P.SATURN, 6)),
    3: ((P.MARS, 7), (P.VENUS, 6), (P.MERCURY, 4), (P.JUPITER, 7), (P.SATURN, 6)),
}

NAVAMSA_START = {0: 0, 1: 9, 2: 6, 3: 3}

CATEGORIES = (
    (15.0, "Excellent"),
    (12.0, "Good"),
    (8.0,  "Average"),
    (5.0,  "Below Average"),
)


def relation_score(planet: Planet, ruler: Planet) -> float:
    if ruler == planet:
        return 4.0
    if ruler in FRIENDS.get(planet, ()):
        return 3.0
    if ruler in NEUTRALS.get(planet, ()):
        return 2.0
    return 1.0


def uchcha_bala(planet: Planet, lon: float) -> float:
    point = EXALTATION_POINT.get(planet)
    if point is None:
        return 0.0
    dist = abs(lon - point) % 360.0
    if dist > 180.0:
        dist = 360.0 - dist
    return min(5.0, max(0.0, (180.0 - dist) / 180.0 * 5.0))


def hadda_ruler(lon: float):
    sign_idx = int(lon // 30) % 12
    deg = lon % 30.0
    edge = 0.0
    for ruler, span in HADDA[sign_idx % 4]:
        if edge <= deg < edge + span:
            return ruler
        edge += span
    return None


def hadda_bala(planet: Planet, lon: float) -> float:
    ruler = hadda_ruler(lon)
    return 2.0 if ruler is None else relation_score(planet, ruler)


def dreshkana_sign(lon: float) -> Sign:
    decan = min(2, int((lon % 30.0) // 10))
    return Sign.from_index(int(lon // 30) + 4 * decan)


def navamsha_sign(lon: float) -> Sign:
    sign_idx = int(lon // 30) % 12
    part = int((lon % 30.0) / 3.333333)
    return Sign.from_index(NAVAMSA_START[sign_idx % 4] + part)


def dwadashamsha_sign(lon: float) -> Sign:
    return Sign.from_index(int(lon // 30) + int((lon % 30.0) / 2.5))


def category(total: float) -> str:
    for threshold, label in CATEGORIES:
        if total >= threshold:
            return label
    return "Weak"


def bala_for(planet: Planet, lon: float) -> PanchaVargiyaBala:
    uchcha = uchcha_bala(planet, lon)
    hadda = hadda_bala(planet, lon)
    dresh = relation_score(planet, sign_lord(dreshkana_sign(lon)))
    nav = relation_score(planet, sign_lord(navamsha_sign(lon)))
    dwad = relation_score(planet, sign_lord(dwadashamsha_sign(lon)))
    total = uchcha + hadda + dresh + nav + dwad
    return PanchaVargiyaBala(
        planet=planet,
        uchcha=uchcha,
        hadda=hadda,
        dreshkana=dresh,
        navamsha=nav,
        dwadashamsha=dwad,
        total=total,
        category=category(total),
    )


def compute_pancha_vargiya_bala(chart: SolarReturnChart) -> Tuple[PanchaVargiyaBala, ...]:
    rows: List[PanchaVargiyaBala] = []
    for planet in CLASSICAL_BODIES:
        pos = chart.position(planet)
        if pos is None:
            logger.warning("Skipping Pancha Vargiya Bala for %s: no position", planet.value)
            continue
        rows.append(bala_for(planet, pos.longitude))
    return tuple(rows)
