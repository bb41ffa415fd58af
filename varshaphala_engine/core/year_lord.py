"""
year_lord.py
============
Varsheshvara (year lord) and Muntha for the annual chart.

Year lord : weekday ruler of the birth day, advanced one body per year
            through the weekday order (Sun, Moon, Mars, …).
Muntha    : the natal ascendant sign advanced one sign per year, fixed at
            15° of that sign.
"""

from .dignity import sign_lord, planet_strength, ordinal
from .houses import house_of
from .models import (
    MunthaResult, NatalChart, Planet, Sign, SolarReturnChart, WEEKDAY_ORDER,
)


def compute_year_lord(natal: NatalChart, target_year: int) -> Planet:
    years = target_year - natal.birth_year
    # isoweekday: Monday=1 … Sunday=7, so Sunday maps to 0
    weekday = natal.birth_datetime.isoweekday() % 7
    return WEEKDAY_ORDER[(weekday + years) % 7]


# ── Muntha ─────────────────────────────────────────────────────

MUNTHA_THEMES = {
    1:  ("Personal Growth", "New Beginnings", "Health Focus"),
    2:  ("Financial Gains", "Family Matters", "Speech"),
    3:  ("Communication", "Short Travels", "Siblings"),
    4:  ("Home Affairs", "Property", "Inner Peace"),
    5:  ("Creativity", "Romance", "Children"),
    6:  ("Service", "Health Issues", "Competition"),
    7:  ("Partnerships", "Marriage", "Business"),
    8:  ("Transformation", "Research", "Inheritance"),
    9:  ("Fortune", "Long Travel", "Higher Learning"),
    10: ("Career Advancement", "Recognition", "Authority"),
    11: ("Gains", "Friends", "Fulfilled Wishes"),
    12: ("Spirituality", "Foreign Lands", "Expenses"),
}

MUNTHA_SIGNIFICANCE = {
    1:  "personal development and health",
    2:  "financial stability and family relationships",
    3:  "communication, courage, and siblings",
    4:  "home environment, property, and emotional well-being",
    5:  "creativity, children, and romantic pursuits",
    6:  "overcoming obstacles, health management, and service",
    7:  "partnerships, marriage, and public dealings",
    8:  "transformation, joint resources, and deep research",
    9:  "fortune, higher learning, and long-distance travel",
    10: "career advancement and public recognition",
    11: "fulfillment of desires and gains from various sources",
    12: "spiritual growth, foreign connections, and letting go",
}

_SUPPORT = {
    "Exalted": "excellent", "Strong": "excellent",
    "Moderate": "favorable", "Angular": "favorable",
    "Debilitated": "challenging but growth-oriented",
}


def _muntha_interpretation(sign: Sign, house: int, lord: Planet,
                           lord_house: int, lord_strength: str) -> str:
    significance = MUNTHA_SIGNIFICANCE[house]
    support = _SUPPORT.get(lord_strength, "variable")
    return (
        f"Muntha in {sign.value} in the {house}{ordinal(house)} house focuses the "
        f"year's energy on {significance}. The Muntha lord {lord.value} in house "
        f"{lord_house} provides {support} support for these matters. This placement "
        f"suggests that attention to {significance.split(' and ')[0]} will be "
        f"particularly rewarding this year."
    )


def compute_muntha(natal: NatalChart, target_year: int,
                   chart: SolarReturnChart) -> MunthaResult:
    years = target_year - natal.birth_year
    natal_asc_sign = Sign.from_longitude(natal.ascendant)
    sign = Sign.from_index(natal_asc_sign.num + years)

    house = house_of(sign.num * 30.0 + 15.0, chart.ascendant_longitude)

    lord = sign_lord(sign)
    lord_house = chart.house_of_body(lord)
    lord_strength = planet_strength(lord, chart)

    return MunthaResult(
        sign=sign,
        house=house,
        degree=15.0,
        lord=lord,
        lord_house=lord_house,
        lord_strength=lord_strength,
        interpretation=_muntha_interpretation(sign, house, lord, lord_house, lord_strength),
        themes=MUNTHA_THEMES[house],
    )
