"""
dignity.py
==========
Sign rulership, exaltation/debilitation and the short strength label
("Exalted", "Strong", …) every interpreter in the annual chart keys off.
"""

from typing import Callable, Optional, Tuple

from .models import Planet, PlanetPosition, Sign, SolarReturnChart

SIGN_LORDS = {
    Sign.ARIES: Planet.MARS,       Sign.TAURUS: Planet.VENUS,
    Sign.GEMINI: Planet.MERCURY,   Sign.CANCER: Planet.MOON,
    Sign.LEO: Planet.SUN,          Sign.VIRGO: Planet.MERCURY,
    Sign.LIBRA: Planet.VENUS,      Sign.SCORPIO: Planet.MARS,
    Sign.SAGITTARIUS: Planet.JUPITER, Sign.CAPRICORN: Planet.SATURN,
    Sign.AQUARIUS: Planet.SATURN,  Sign.PISCES: Planet.JUPITER,
}

EXALTATION_SIGN = {
    Planet.SUN: Sign.ARIES,      Planet.MOON: Sign.TAURUS,
    Planet.MARS: Sign.CAPRICORN, Planet.MERCURY: Sign.VIRGO,
    Planet.JUPITER: Sign.CANCER, Planet.VENUS: Sign.PISCES,
    Planet.SATURN: Sign.LIBRA,
}

# Debilitation is the sign opposite exaltation
DEBILITATION_SIGN = {p: Sign.from_index(s.num + 6) for p, s in EXALTATION_SIGN.items()}

OWN_SIGNS = {
    Planet.SUN:     (Sign.LEO,),
    Planet.MOON:    (Sign.CANCER,),
    Planet.MARS:    (Sign.ARIES, Sign.SCORPIO),
    Planet.MERCURY: (Sign.GEMINI, Sign.VIRGO),
    Planet.JUPITER: (Sign.SAGITTARIUS, Sign.PISCES),
    Planet.VENUS:   (Sign.TAURUS, Sign.LIBRA),
    Planet.SATURN:  (Sign.CAPRICORN, Sign.AQUARIUS),
}

ANGULAR_HOUSES    = frozenset({1, 4, 7, 10})
FAVORABLE_HOUSES  = frozenset({1, 2, 4, 5, 7, 9, 10, 11})
BENEFICS          = frozenset({Planet.JUPITER, Planet.VENUS, Planet.MOON})
MALEFICS          = frozenset({Planet.SATURN, Planet.MARS, Planet.RAHU, Planet.KETU})

UNKNOWN = "Unknown"


def sign_lord(sign: Sign) -> Planet:
    return SIGN_LORDS[Sign(sign)]


def house_sign(chart: SolarReturnChart, house: int) -> Sign:
    """Sign on the cusp of ``house``, counted whole-sign from the ascendant."""
    return Sign.from_index(chart.ascendant.num + house - 1)


def houses_ruled_by(planet: Planet, chart: SolarReturnChart) -> Tuple[int, ...]:
    return tuple(h for h in range(1, 13) if sign_lord(house_sign(chart, h)) == planet)


# ---------------------------------------------------------------------------
# Strength label
# ---------------------------------------------------------------------------

_Rule = Tuple[Callable[[Planet, PlanetPosition], bool], str]

# First match wins.  The nodes have no entry in the sign tables and fall
# through to the house/motion rules.
STRENGTH_RULES: Tuple[_Rule, ...] = (
    (lambda p, pos: EXALTATION_SIGN.get(p) == pos.sign,     "Exalted"),
    (lambda p, pos: DEBILITATION_SIGN.get(p) == pos.sign,   "Debilitated"),
    (lambda p, pos: pos.sign in OWN_SIGNS.get(p, ()),       "Strong"),
    (lambda p, pos: pos.house in ANGULAR_HOUSES,            "Angular"),
    (lambda p, pos: pos.is_retrograde,                      "Retrograde"),
)


def strength_of(planet: Planet, position: Optional[PlanetPosition]) -> str:
    if position is None:
        return UNKNOWN
    for predicate, label in STRENGTH_RULES:
        if predicate(planet, position):
            return label
    return "Moderate"


def planet_strength(planet: Planet, chart: SolarReturnChart) -> str:
    """Strength label of ``planet`` in the annual chart ("Unknown" if absent)."""
    return strength_of(planet, chart.position(planet))


# ---------------------------------------------------------------------------
# Year-lord dignity text
# ---------------------------------------------------------------------------

_HOUSE_PLACEMENT = {
    1:  "placed in the ascendant, giving prominence and personal focus",
    2:  "in the house of wealth, emphasizing financial matters and family",
    3:  "in the house of courage, bringing initiative and communication",
    4:  "in the house of home, highlighting domestic life and property",
    5:  "in the house of intelligence, favoring creativity and children",
    6:  "in the house of challenges, requiring effort to overcome obstacles",
    7:  "in the house of partnership, emphasizing relationships and alliances",
    8:  "in the house of transformation, bringing deep changes and research",
    9:  "in the house of fortune, bestowing luck and higher learning",
    10: "in the house of career, focusing on professional achievements",
    11: "in the house of gains, promising fulfillment of desires",
    12: "in the house of expenses, indicating spiritual growth and foreign connections",
}

_STRENGTH_SENTENCE = {
    "Exalted":     "The year lord is exalted, indicating excellent potential for success and achievement.",
    "Debilitated": "The year lord is debilitated, suggesting challenges that require careful navigation.",
    "Strong":      "The year lord is in its own sign, providing stability and self-reliance.",
    "Angular":     "The year lord in an angular position gives prominence to its significations.",
    "Retrograde":  "The retrograde year lord may bring revisiting of past matters and introspection.",
}


def year_lord_dignity(planet: Planet, chart: SolarReturnChart) -> str:
    pos = chart.position(planet)
    if pos is None:
        return "Year lord position unknown."
    strength = strength_of(planet, pos)
    sentence = _STRENGTH_SENTENCE.get(
        strength, "The year lord is in a moderate position, giving balanced results.")
    return (f"The year lord {planet.value} is {_HOUSE_PLACEMENT[pos.house]} "
            f"in {pos.sign.value}. {sentence}")


def ordinal(n: int) -> str:
    """Suffix only: 1 → 'st', 12 → 'th', 22 → 'nd'."""
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
