"""
tajika.py
=========
Tajika aspects between the seven classical bodies of the annual chart.

Every (pair, angle) hit inside the orb produces one TajikaAspect, so a
pair can carry more than one record.  The 15-way type is decided by an
ordered rule table (first match wins); strength is a 0–1-ish score cut
into five tiers.

Yamaya, Tambira, Kuttha and Ikkabala need a third significator or a
later chart to decide, so no rule yields them; they stay in the enum and
the narrative tables for display only.

Orbs and angle bonuses are empirical and can be overridden per call
(EngineSettings carries the deployment values).
"""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from ..errors import MissingBodyError
from .dignity import ANGULAR_HOUSES, MALEFICS, sign_lord
from .ephemeris import normalize
from .models import (
    AspectStrength, CLASSICAL_BODIES, Planet, PlanetPosition,
    SolarReturnChart, TajikaAspect, TajikaAspectType as T,
)

logger = logging.getLogger(__name__)

ASPECT_ANGLES = (0, 60, 90, 120, 180)
ASPECT_ORBS = {0: 8.0, 60: 6.0, 90: 7.0, 120: 6.0, 180: 7.0}
ANGLE_BONUS = {0: 0.2, 60: 0.1, 90: -0.1, 120: 0.2, 180: -0.1}
APPLYING_BONUS = 0.1

STRENGTH_TIERS = (
    (0.9, AspectStrength.VERY_STRONG),
    (0.7, AspectStrength.STRONG),
    (0.5, AspectStrength.MODERATE),
    (0.3, AspectStrength.WEAK),
)


class AspectContext(NamedTuple):
    """Everything a type rule may look at for one (pair, angle) hit."""
    pos1: PlanetPosition
    pos2: PlanetPosition
    angle: int
    orb: float
    applying: bool
    reception: bool
    malefic_between: bool = False

    @property
    def angular1(self) -> bool:
        return self.pos1.house in ANGULAR_HOUSES

    @property
    def angular2(self) -> bool:
        return self.pos2.house in ANGULAR_HOUSES


# First match wins
TYPE_RULES: Tuple[Tuple[Callable[[AspectContext], bool], T], ...] = (
    (lambda c: c.applying and c.angle == 0 and c.orb < 3 and (c.angular1 or c.angular2), T.KAMBOOLA),
    (lambda c: c.applying and c.angle == 0 and c.orb < 3,                T.ITHASALA),
    (lambda c: c.applying and c.orb < 5 and c.reception,                 T.NAKTA),
    (lambda c: c.applying and c.orb < 5,                                 T.ITHASALA),
    (lambda c: not c.applying and c.orb < 5,                             T.EASARAPHA),
    (lambda c: c.pos1.is_retrograde and c.pos2.is_retrograde,            T.KHALASARA),
    (lambda c: c.pos1.is_retrograde or c.pos2.is_retrograde,             T.RADDA),
    (lambda c: c.applying and c.malefic_between,                         T.DUHPHALI_KUTTHA),
    (lambda c: c.pos1.speed < c.pos2.speed and c.applying,               T.MANAU),
    (lambda c: c.applying and c.reception,                               T.MUTHASHILA),
    (lambda c: c.angle in (90, 180),                                     T.DURAPHA),
    (lambda c: c.angular1 and c.angular2 and not c.applying,             T.GAIRI_KAMBOOLA),
    (lambda c: c.applying,                                               T.ITHASALA),
)


def classify(ctx: AspectContext) -> T:
    for predicate, aspect_type in TYPE_RULES:
        if predicate(ctx):
            return aspect_type
    return T.EASARAPHA


def is_applying(lon1: float, lon2: float, speed1: float, speed2: float) -> bool:
    """The body behind in the direction of motion is the faster one."""
    if normalize(lon2 - lon1) < 180.0:
        return speed1 > speed2
    return speed2 > speed1


def mutual_reception(p1: Planet, pos1: PlanetPosition, p2: Planet, pos2: PlanetPosition) -> bool:
    return sign_lord(pos1.sign) == p2 and sign_lord(pos2.sign) == p1


def malefic_intervenes(chart: SolarReturnChart, p1: Planet, p2: Planet) -> bool:
    """A malefic other than the pair sits on the shorter arc between them."""
    lo, hi = sorted((chart.require(p1).longitude, chart.require(p2).longitude))
    for planet in MALEFICS - {p1, p2}:
        pos = chart.position(planet)
        if pos is None:
            continue
        x = pos.longitude
        if hi - lo <= 180.0:
            if lo <= x <= hi:
                return True
        elif x >= hi or x <= lo:
            return True
    return False


def effective_orb(lon1: float, lon2: float, angle: int) -> float:
    diff = abs(normalize(lon1 - lon2))
    return min(abs(diff - angle), abs(diff - (360 - angle)))


def aspect_strength(orb: float, max_orb: float, angle: int, applying: bool,
                    angle_bonus: Optional[Dict[int, float]] = None,
                    applying_bonus: float = APPLYING_BONUS) -> AspectStrength:
    bonus = (angle_bonus if angle_bonus is not None else ANGLE_BONUS).get(angle, 0.0)
    score = 1.0 - orb / max_orb + bonus + (applying_bonus if applying else 0.0)
    for threshold, tier in STRENGTH_TIERS:
        if score >= threshold:
            return tier
    return AspectStrength.VERY_WEAK


# ── Narrative ──────────────────────────────────────────────────

_EFFECT = {
    T.EASARAPHA:       "The separating aspect suggests matters related to these planets are concluding or have already manifested",
    T.NAKTA:           "Light transmission with reception creates a favorable connection through an intermediary",
    T.YAMAYA:          "Translation of light brings matters together through a third-party influence",
    T.MANAU:           "Reverse application suggests outcomes through persistent effort",
    T.KAMBOOLA:        "Angular conjunction creates powerful and prominent results",
    T.GAIRI_KAMBOOLA:  "Modified Kamboola gives moderately strong angular influences",
    T.KHALASARA:       "Application is prevented, indicating obstacles to desired outcomes",
    T.RADDA:           "Retrograde motion interrupts the aspect, causing delays or reversals",
    T.DUHPHALI_KUTTHA: "Malefic intervention disrupts the yoga's positive effects",
    T.TAMBIRA:         "Indirect connection through intermediary brings gradual results",
    T.KUTTHA:          "Impediment to completion suggests partial or delayed outcomes",
    T.DURAPHA:         "Hard aspect creates challenges that strengthen through difficulty",
    T.MUTHASHILA:      "Mutual application ensures both parties actively contribute to outcomes",
    T.IKKABALA:        "Unity of strength between planets enhances both their significations",
}


def effect_description(aspect_type: T, p1: Planet, p2: Planet) -> str:
    if aspect_type is T.ITHASALA:
        return f"{p1.value} applying to {p2.value} promises fulfillment of matters related to both planets"
    return _EFFECT[aspect_type]


def aspect_prediction(aspect_type: T, p1: Planet, p2: Planet, houses: Tuple[int, ...]) -> str:
    h = " and ".join(f"House {n}" for n in houses)
    a, b = p1.value, p2.value
    if aspect_type is T.ITHASALA:
        return (f"The {a}-{b} Ithasala yoga is highly favorable for matters of {h}. "
                f"Expect positive developments and achievement of goals in these areas during the year.")
    if aspect_type is T.EASARAPHA:
        return (f"The Easarapha between {a} and {b} indicates that significant events related to "
                f"{h} may have already occurred or are in their final stages. "
                f"Focus on consolidation rather than new initiatives.")
    if aspect_type is T.KAMBOOLA:
        return (f"The powerful Kamboola yoga between {a} and {b} promises prominent success and "
                f"recognition in matters of {h}. This is one of the most auspicious configurations.")
    if aspect_type is T.RADDA:
        return (f"The Radda yoga suggests some delays or need to revisit matters related to {h}. "
                f"Patience and review of past approaches will be beneficial.")
    if aspect_type is T.DURAPHA:
        return (f"The challenging Durapha aspect between {a} and {b} indicates obstacles in {h} "
                f"matters that will ultimately strengthen your resolve and skills.")
    energy = "supportive" if aspect_type.is_positive else "challenging"
    return (f"The {aspect_type.display_name} yoga between {a} and {b} influences matters of "
            f"{h} with {energy} energy throughout the year.")


# ── Detection ──────────────────────────────────────────────────

def _pair_aspects(chart: SolarReturnChart, p1: Planet, p2: Planet,
                  orbs: Dict[int, float], angle_bonus: Dict[int, float],
                  applying_bonus: float) -> List[TajikaAspect]:
    pos1 = chart.require(p1)
    pos2 = chart.require(p2)
    found = []
    between = malefic_intervenes(chart, p1, p2)
    for angle in ASPECT_ANGLES:
        max_orb = orbs.get(angle)
        if not max_orb:
            continue
        orb = effective_orb(pos1.longitude, pos2.longitude, angle)
        if orb > max_orb:
            continue

        applying = is_applying(pos1.longitude, pos2.longitude, pos1.speed, pos2.speed)
        ctx = AspectContext(pos1, pos2, angle, orb, applying,
                            mutual_reception(p1, pos1, p2, pos2), between)
        aspect_type = classify(ctx)
        houses = tuple(dict.fromkeys((pos1.house, pos2.house)))

        found.append(TajikaAspect(
            type=aspect_type,
            planet1=p1,
            planet2=p2,
            planet1_longitude=pos1.longitude,
            planet2_longitude=pos2.longitude,
            orb=orb,
            aspect_angle=angle,
            is_applying=applying,
            effect_description=effect_description(aspect_type, p1, p2),
            strength=aspect_strength(orb, max_orb, angle, applying, angle_bonus, applying_bonus),
            related_houses=houses,
            prediction=aspect_prediction(aspect_type, p1, p2, houses),
        ))
    return found


def compute_tajika_aspects(
    chart: SolarReturnChart,
    orbs: Optional[Dict[int, float]] = None,
    angle_bonus: Optional[Dict[int, float]] = None,
    applying_bonus: Optional[float] = None,
) -> Tuple[TajikaAspect, ...]:
    """All aspect hits among the classical bodies, strongest first."""
    orbs = ASPECT_ORBS if orbs is None else orbs
    angle_bonus = ANGLE_BONUS if angle_bonus is None else angle_bonus
    applying_bonus = APPLYING_BONUS if applying_bonus is None else applying_bonus

    aspects = []
    bodies = CLASSICAL_BODIES
    for i, p1 in enumerate(bodies):
        for p2 in bodies[i + 1:]:
            try:
                aspects.extend(_pair_aspects(chart, p1, p2, orbs, angle_bonus, applying_bonus))
            except MissingBodyError as e:
                logger.warning("Skipping %s-%s aspects: %s", p1.value, p2.value, e)

    aspects.sort(key=lambda a: a.strength.weight, reverse=True)
    return tuple(aspects)
