"""
sahams.py
=========
Tajika Sahams (sensitive points) of the annual chart.

Each Saham is A + Asc − B for a day return and B + Asc − A for a night
return.  A definition that points at a body missing from the chart is
skipped on its own; the rest of the batch is still produced.
"""

import logging
from typing import Callable, List, NamedTuple, Tuple, Union

from ..errors import MissingBodyError
from .dignity import FAVORABLE_HOUSES, planet_strength, sign_lord
from .ephemeris import normalize
from .houses import house_of
from .models import Planet, Saham, Sign, SolarReturnChart
from .solar_return import is_day_chart

logger = logging.getLogger(__name__)

P = Planet

# Body reference: a fixed body, or one derived from the chart
BodyRef = Union[Planet, Callable[[SolarReturnChart], Planet]]


def ninth_lord(chart: SolarReturnChart) -> Planet:
    """Lord of the 9th sign from the annual ascendant."""
    return sign_lord(Sign.from_index(chart.ascendant.num + 8))


class SahamDefinition(NamedTuple):
    name: str
    sanskrit_name: str
    a: BodyRef
    b: BodyRef
    reversible: bool = True       # swap A/B for night returns


SAHAM_DEFINITIONS: Tuple[SahamDefinition, ...] = (
    SahamDefinition("Fortune",    "Punya Saham",       P.MOON,    P.SUN),
    SahamDefinition("Education",  "Vidya Saham",       P.MERCURY, P.SUN),
    SahamDefinition("Fame",       "Yashas Saham",      P.JUPITER, P.SUN),
    SahamDefinition("Friends",    "Mitra Saham",       P.MOON,    P.MERCURY),
    SahamDefinition("Wealth",     "Dhana Saham",       P.JUPITER, P.MOON),
    SahamDefinition("Career",     "Karma Saham",       P.SATURN,  P.SUN),
    SahamDefinition("Marriage",   "Vivaha Saham",      P.VENUS,   P.SATURN),
    SahamDefinition("Children",   "Putra Saham",       P.JUPITER, P.MOON),
    SahamDefinition("Father",     "Pitri Saham",       P.SATURN,  P.SUN),
    SahamDefinition("Mother",     "Matri Saham",       P.MOON,    P.VENUS),
    SahamDefinition("Capability", "Samartha Saham",    P.MARS,    P.SATURN),
    SahamDefinition("Hope",       "Asha Saham",        P.SATURN,  P.VENUS),
    SahamDefinition("Disease",    "Roga Saham",        P.SATURN,  P.MARS),
    SahamDefinition("Power",      "Raja Saham",        P.SUN,     P.SATURN),
    SahamDefinition("Foreign",    "Paradesa Saham",    P.SATURN,  ninth_lord, reversible=False),
    SahamDefinition("Longevity",  "Mrityu Saham",      P.SATURN,  P.MOON),
    SahamDefinition("Siblings",   "Bhratri Saham",     P.JUPITER, P.SATURN),
    SahamDefinition("Greatness",  "Mahatmya Saham",    P.JUPITER, P.MOON),
    SahamDefinition("Success",    "Karyasiddhi Saham", P.SATURN,  P.SUN),
)

SAHAM_AREAS = {
    "Fortune":    "overall luck and prosperity",
    "Education":  "learning, intellectual pursuits, and academic success",
    "Fame":       "recognition, reputation, and public image",
    "Friends":    "friendships, social networks, and alliances",
    "Wealth":     "financial prosperity and material gains",
    "Career":     "professional advancement and career success",
    "Marriage":   "matrimonial happiness and partnerships",
    "Children":   "progeny, creativity, and matters related to children",
    "Father":     "father's welfare and paternal relationships",
    "Mother":     "mother's welfare and maternal relationships",
    "Capability": "personal abilities, skills, and competence",
    "Hope":       "aspirations, wishes, and future plans",
    "Disease":    "health challenges and recovery",
    "Power":      "authority, influence, and leadership",
    "Foreign":    "overseas opportunities and travel",
    "Longevity":  "vitality and life force",
    "Siblings":   "relationships with brothers and sisters",
    "Greatness":  "spiritual growth and higher achievements",
    "Success":    "accomplishment of goals and endeavors",
}

_HOUSE_INFLUENCE = {
    1:  "The Saham's placement in the ascendant brings these matters to personal focus.",
    2:  "Financial dimensions of {area} are highlighted.",
    3:  "Communication and initiative play key roles in {area}.",
    4:  "Home environment and inner peace affect {area}.",
    5:  "Creativity and intelligence support {area}.",
    6:  "Some obstacles may need to be overcome regarding {area}.",
    7:  "Partnerships and relationships influence {area}.",
    8:  "Transformation and deep changes affect {area}.",
    9:  "Fortune and higher guidance support {area}.",
    10: "Career and public life connect with {area}.",
    11: "Gains and fulfillment of wishes enhance {area}.",
    12: "Spiritual dimensions and foreign connections relate to {area}.",
}

# Lord in 1/4/5/7/9/10/11 and direct
_WELL_PLACED = frozenset({1, 4, 5, 7, 9, 10, 11})


def _resolve(ref: BodyRef, chart: SolarReturnChart) -> float:
    planet = ref(chart) if callable(ref) else ref
    return chart.require(planet).longitude


def saham_longitude(defn: SahamDefinition, chart: SolarReturnChart, day: bool) -> float:
    a = _resolve(defn.a, chart)
    b = _resolve(defn.b, chart)
    if defn.reversible and not day:
        a, b = b, a
    return normalize(a + chart.ascendant_longitude - b)


def is_saham_active(lord: Planet, chart: SolarReturnChart) -> bool:
    pos = chart.position(lord)
    if pos is None:
        return False
    strong = planet_strength(lord, chart) in ("Exalted", "Strong", "Angular")
    return ((strong and pos.house in FAVORABLE_HOUSES)
            or (pos.house in _WELL_PLACED and not pos.is_retrograde))


def activation_periods(lord: Planet, chart: SolarReturnChart) -> Tuple[str, ...]:
    periods = [f"{lord.value} Mudda Dasha"]
    pos = chart.position(lord)
    if pos is not None:
        periods.append(f"Month {(pos.house + 3) % 12 + 1} (Transit)")
    return tuple(periods)


def saham_interpretation(name: str, sign: Sign, house: int, lord: Planet,
                         lord_house: int, lord_strength: str) -> str:
    area = SAHAM_AREAS.get(name, "various life matters")
    house_text = _HOUSE_INFLUENCE[house].format(area=area)
    if lord_strength in ("Exalted", "Strong"):
        lord_text = f"The Saham lord {lord.value} is well-placed in house {lord_house}, promising positive outcomes."
    elif lord_strength in ("Moderate", "Angular"):
        lord_text = f"The Saham lord {lord.value} in house {lord_house} provides reasonable support."
    elif lord_strength in ("Debilitated", "Weak"):
        lord_text = (f"The Saham lord {lord.value} requires attention as it faces some "
                     f"challenges in house {lord_house}.")
    else:
        lord_text = f"The Saham lord {lord.value} in house {lord_house} influences these matters variably."
    return (f"The {name} Saham in {sign.value} in house {house} relates to {area} this year. "
            f"{house_text} {lord_text}")


def _build(defn: SahamDefinition, chart: SolarReturnChart, day: bool) -> Saham:
    lon = saham_longitude(defn, chart, day)
    sign = Sign.from_longitude(lon)
    house = house_of(lon, chart.ascendant_longitude)
    lord = sign_lord(sign)
    lord_house = chart.house_of_body(lord)
    lord_strength = planet_strength(lord, chart)
    return Saham(
        name=defn.name,
        sanskrit_name=defn.sanskrit_name,
        formula=f"{defn.name} ({'Day' if day else 'Night'})",
        longitude=lon,
        sign=sign,
        house=house,
        degree=lon % 30.0,
        lord=lord,
        lord_house=lord_house,
        lord_strength=lord_strength,
        interpretation=saham_interpretation(defn.name, sign, house, lord, lord_house, lord_strength),
        is_active=is_saham_active(lord, chart),
        activation_periods=activation_periods(lord, chart),
    )


def compute_sahams(chart: SolarReturnChart) -> Tuple[Saham, ...]:
    """All computable Sahams, active ones first."""
    day = is_day_chart(chart)
    sahams: List[Saham] = []
    for defn in SAHAM_DEFINITIONS:
        try:
            sahams.append(_build(defn, chart, day))
        except MissingBodyError as e:
            logger.warning("Skipping %s Saham: %s", defn.name, e)
    sahams.sort(key=lambda s: not s.is_active)
    return tuple(sahams)
