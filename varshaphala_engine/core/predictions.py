"""
predictions.py
==============
House-by-house reading of the annual chart and the year-level summaries
built on it: house strength/rating, year rating, major themes, favourable
and challenging months, key dates and the overall narrative.

Ratings are additive scores around a neutral 3.0, always clamped to
[1.0, 5.0].
"""

import calendar
from datetime import date
from typing import Iterable, List, Sequence, Tuple

from .dignity import (
    ANGULAR_HOUSES, BENEFICS, FAVORABLE_HOUSES, MALEFICS,
    house_sign, ordinal, planet_strength, sign_lord,
)
from .models import (
    AspectStrength, CHART_BODIES, HousePrediction, KeyDate, KeyDateType,
    MuddaDashaPeriod, MunthaResult, Planet, SolarReturnChart, TajikaAspect,
)

P = Planet

MIN_RATING = 1.0
MAX_RATING = 5.0


def clamp_rating(x: float) -> float:
    return min(MAX_RATING, max(MIN_RATING, x))


def occupants(chart: SolarReturnChart, house: int) -> Tuple[Planet, ...]:
    return tuple(p for p in CHART_BODIES
                 if p in chart.planet_positions and chart.planet_positions[p].house == house)


# ---------------------------------------------------------------------------
# House tables
# ---------------------------------------------------------------------------

HOUSE_KEYWORDS = {
    1:  ("Self", "Personality", "Health", "Appearance", "New Beginnings"),
    2:  ("Wealth", "Family", "Speech", "Values", "Food"),
    3:  ("Siblings", "Courage", "Communication", "Short Travel", "Skills"),
    4:  ("Home", "Mother", "Property", "Vehicles", "Inner Peace"),
    5:  ("Children", "Intelligence", "Romance", "Creativity", "Investments"),
    6:  ("Enemies", "Health Issues", "Service", "Debts", "Competition"),
    7:  ("Marriage", "Partnership", "Business", "Public Dealings", "Contracts"),
    8:  ("Longevity", "Transformation", "Research", "Inheritance", "Hidden Matters"),
    9:  ("Fortune", "Father", "Religion", "Higher Education", "Long Travel"),
    10: ("Career", "Status", "Authority", "Government", "Fame"),
    11: ("Gains", "Income", "Friends", "Elder Siblings", "Aspirations"),
    12: ("Losses", "Expenses", "Spirituality", "Foreign Lands", "Liberation"),
}

HOUSE_AREAS = {
    1:  "personal development, health, and new initiatives",
    2:  "finances, family relationships, and speech",
    3:  "communication, courage, and short journeys",
    4:  "home environment, property matters, and inner peace",
    5:  "creativity, children, romance, and investments",
    6:  "health management, overcoming obstacles, and service",
    7:  "partnerships, marriage, and business relationships",
    8:  "transformation, research, and handling of joint resources",
    9:  "fortune, spiritual growth, and higher learning",
    10: "career advancement, public recognition, and authority",
    11: "gains, friendships, and fulfillment of desires",
    12: "spiritual development, foreign connections, and liberation",
}

LORD_ANALYSIS = {
    "Exalted":     "is excellently placed, promising outstanding results.",
    "Strong":      "is well-positioned for positive outcomes.",
    "Moderate":    "provides moderate support for house matters.",
    "Debilitated": "faces challenges requiring extra attention.",
}

# house -> (events when the lord is Exalted/Strong, ((occupant, event), ...))
SPECIFIC_EVENTS = {
    1:  (("Increased vitality and personal confidence", "Favorable for starting new ventures"),
         ((P.JUPITER, "Spiritual growth and wisdom enhancement"),
          (P.MARS, "Increased energy but watch for accidents"))),
    2:  (("Financial gains and wealth accumulation", "Improvement in family relationships"),
         ((P.VENUS, "Acquisition of luxury items"),
          (P.SATURN, "Need for careful financial planning"))),
    3:  (("Success in communication and writing", "Favorable short journeys"),
         ((P.MERCURY, "Intellectual achievements"),)),
    4:  (("Property gains or home improvement", "Happiness from mother"),
         ((P.MOON, "Emotional contentment at home"),
          (P.SATURN, "Possible property repairs or delays"))),
    5:  (("Creative success and recognition", "Favorable for children's matters"),
         ((P.JUPITER, "Possible childbirth or academic success"),
          (P.VENUS, "Romantic happiness"))),
    6:  (("Victory over enemies and competitors", "Improvement in health issues"),
         ((P.MARS, "Success in competition but watch health"),)),
    7:  (("Strengthening of partnerships", "Favorable for marriage or business"),
         ((P.VENUS, "Romantic fulfillment in marriage"),
          (P.SATURN, "Need for patience in relationships"))),
    8:  (("Possible inheritance or insurance gains", "Deep transformation and research success"),
         ((P.JUPITER, "Protection from sudden troubles"),)),
    9:  (("Long-distance travel opportunities", "Fortune and luck in endeavors"),
         ((P.JUPITER, "Spiritual advancement and guru's blessings"),)),
    10: (("Career advancement or promotion", "Recognition from authorities"),
         ((P.SUN, "Government favor or leadership role"),
          (P.SATURN, "Hard work leading to eventual success"))),
    11: (("Fulfillment of desires and wishes", "Gains from multiple sources"),
         ((P.JUPITER, "Expansion of social network"),)),
    12: (("Spiritual progress and meditation success", "Favorable for foreign travel"),
         ((P.KETU, "Deepening spiritual practices"),
          (P.SATURN, "Need to manage expenses carefully"))),
}

# Integer house score -> label, first match wins
HOUSE_LABELS = ((5, "Excellent"), (3, "Strong"), (1, "Moderate"), (-1, "Weak"))

_SCORE_DIGNITY  = {"Exalted": 3, "Strong": 2, "Angular": 1, "Debilitated": -2}
_RATING_DIGNITY = {"Exalted": 1.0, "Strong": 0.7, "Angular": 0.3, "Debilitated": -0.8}
_RATING_OCCUPANT = {
    P.JUPITER: 0.5, P.VENUS: 0.4, P.MOON: 0.2, P.MERCURY: 0.1, P.SUN: 0.1,
    P.SATURN: -0.3, P.MARS: -0.2, P.RAHU: -0.2, P.KETU: -0.3,
}


# ---------------------------------------------------------------------------
# Per-house
# ---------------------------------------------------------------------------

def house_score(house: int, lord_house: int, lord_strength: str,
                planets: Iterable[Planet], muntha_house: int, lord_is_year_lord: bool) -> int:
    score = 2 if lord_house in FAVORABLE_HOUSES else 0
    score += _SCORE_DIGNITY.get(lord_strength, 0)
    for p in planets:
        if p in BENEFICS:
            score += 1
        elif p in MALEFICS:
            score -= 1
    if muntha_house == house:
        score += 2
    if lord_is_year_lord:
        score += 1
    return score


def house_label(score: int) -> str:
    for threshold, label in HOUSE_LABELS:
        if score >= threshold:
            return label
    return "Challenged"


def house_rating(house: int, lord_house: int, lord_strength: str,
                 planets: Iterable[Planet], muntha_house: int, lord_is_year_lord: bool) -> float:
    rating = 3.0
    if lord_house in FAVORABLE_HOUSES:
        rating += 0.5
    rating += _RATING_DIGNITY.get(lord_strength, 0.0)
    for p in planets:
        rating += _RATING_OCCUPANT.get(p, 0.0)
    if muntha_house == house:
        rating += 0.5
    if lord_is_year_lord:
        rating += 0.3
    return clamp_rating(rating)


def _planetary_influence(planets: Sequence[Planet]) -> str:
    if not planets:
        return "No planets occupy this house, so results depend primarily on the lord's position."
    benefics = [p for p in planets if p in BENEFICS]
    malefics = [p for p in planets if p in MALEFICS]
    if benefics and not malefics:
        return f"Benefic {', '.join(p.value for p in benefics)} in this house enhances positive outcomes."
    if malefics and not benefics:
        return f"{', '.join(p.value for p in malefics)} in this house may bring challenges requiring patience."
    if benefics and malefics:
        return f"Mixed influences from {', '.join(p.value for p in planets)} create a dynamic situation."
    return ""


def house_prediction_text(house: int, chart: SolarReturnChart, lord: Planet, lord_house: int,
                          lord_strength: str, planets: Sequence[Planet],
                          muntha_house: int, year_lord: Planet) -> str:
    sign = house_sign(chart, house)
    lord_text = (f"The lord {lord.value} in house {lord_house} "
                 + LORD_ANALYSIS.get(lord_strength, "influences results variably."))
    special = ""
    if muntha_house == house:
        special += "Muntha's presence here emphasizes these matters strongly this year. "
    if year_lord == lord:
        special += "As the Year Lord rules this house, its significations are particularly prominent. "
    return (f"House {house} in {sign.value} governs {HOUSE_AREAS[house]}. {lord_text} "
            f"{_planetary_influence(planets)} {special}").strip()


def specific_events(house: int, lord_strength: str, planets: Sequence[Planet]) -> Tuple[str, ...]:
    strong_events, occupant_events = SPECIFIC_EVENTS[house]
    events: List[str] = []
    if lord_strength in ("Exalted", "Strong"):
        events.extend(strong_events)
    events.extend(text for p, text in occupant_events if p in planets)
    return tuple(events[:4])


def compute_house_predictions(chart: SolarReturnChart, muntha: MunthaResult,
                              year_lord: Planet) -> Tuple[HousePrediction, ...]:
    predictions = []
    for house in range(1, 13):
        sign = house_sign(chart, house)
        lord = sign_lord(sign)
        lord_house = chart.house_of_body(lord)
        lord_strength = planet_strength(lord, chart)
        planets = occupants(chart, house)
        args = (house, lord_house, lord_strength, planets, muntha.house, lord == year_lord)

        predictions.append(HousePrediction(
            house=house,
            sign_on_cusp=sign,
            house_lord=lord,
            lord_position=lord_house,
            planets_in_house=planets,
            strength=house_label(house_score(*args)),
            keywords=HOUSE_KEYWORDS[house],
            prediction=house_prediction_text(house, chart, lord, lord_house, lord_strength,
                                             planets, muntha.house, year_lord),
            rating=house_rating(*args),
            specific_events=specific_events(house, lord_strength, planets),
        ))
    return tuple(predictions)


# ---------------------------------------------------------------------------
# Year rating
# ---------------------------------------------------------------------------

_YEAR_LORD_TERM   = {"Exalted": 0.8, "Strong": 0.5, "Angular": 0.3, "Debilitated": -0.5}
_MUNTHA_LORD_TERM = {"Exalted": 0.3, "Strong": 0.3, "Moderate": 0.1, "Debilitated": -0.3}
_GOOD_MUNTHA_HOUSES = frozenset({1, 2, 4, 5, 9, 10, 11})


def compute_year_rating(chart: SolarReturnChart, year_lord: Planet, muntha: MunthaResult,
                        aspects: Sequence[TajikaAspect],
                        houses: Sequence[HousePrediction]) -> float:
    rating = 3.0
    rating += _YEAR_LORD_TERM.get(planet_strength(year_lord, chart), 0.0)
    rating += _MUNTHA_LORD_TERM.get(muntha.lord_strength, 0.0)
    if muntha.house in _GOOD_MUNTHA_HOUSES:
        rating += 0.2

    weighty = [a for a in aspects if a.strength.weight >= 0.6]
    positive = sum(1 for a in weighty if a.type.is_positive)
    negative = len(weighty) - positive
    rating += max(-0.5, min(0.5, 0.1 * (positive - negative)))

    if houses:
        average = sum(h.rating for h in houses) / len(houses)
        rating += (average - 3.0) * 0.3

    for planet, pos in chart.planet_positions.items():
        if pos.house not in ANGULAR_HOUSES:
            continue
        if planet in (P.JUPITER, P.VENUS):
            rating += 0.15
        elif planet in (P.SATURN, P.MARS, P.RAHU):
            rating -= 0.1

    return clamp_rating(rating)


# ---------------------------------------------------------------------------
# Major themes
# ---------------------------------------------------------------------------

_LORD_NATURE = {
    P.SUN:     "leadership, authority, and self-expression",
    P.MOON:    "emotional wellbeing, public connections, and nurturing",
    P.MARS:    "energy, courage, and competitive endeavors",
    P.MERCURY: "communication, learning, and business activities",
    P.JUPITER: "wisdom, expansion, and spiritual growth",
    P.VENUS:   "relationships, creativity, and material comforts",
    P.SATURN:  "discipline, responsibility, and long-term achievements",
}

_LORD_HOUSE_INFLUENCE = {
    1:  "with personal focus and self-development",
    2:  "connected to financial and family matters",
    3:  "emphasizing communication and courage",
    4:  "centered on home and emotional security",
    5:  "highlighting creativity and children",
    6:  "requiring attention to health and service",
    7:  "focused on partnerships and relationships",
    8:  "involving transformation and deep changes",
    9:  "blessed with fortune and higher learning",
    10: "driving career and public achievements",
    11: "promising gains and fulfilled desires",
    12: "emphasizing spiritual growth and foreign matters",
}

_LORD_STRENGTH_STATEMENT = {
    "Exalted":     "The exalted year lord promises exceptional results",
    "Strong":      "The strong year lord supports positive outcomes",
    "Debilitated": "The challenged year lord requires extra effort",
}

_MUNTHA_THEME_AREA = {
    1:  "personal development and new beginnings",
    2:  "financial growth and family harmony",
    3:  "communication, siblings, and short travels",
    4:  "home, property, and inner peace",
    5:  "creativity, children, and romance",
    6:  "overcoming obstacles and health improvement",
    7:  "partnerships and relationship developments",
    8:  "transformation and handling of shared resources",
    9:  "fortune, travel, and higher wisdom",
    10: "career advancement and public recognition",
    11: "gains, friendships, and wish fulfillment",
    12: "spirituality, foreign lands, and inner growth",
}

_WELL_PLACED = frozenset({1, 4, 5, 7, 9, 10, 11})


def year_lord_theme(year_lord: Planet, chart: SolarReturnChart) -> str:
    house = chart.house_of_body(year_lord)
    statement = _LORD_STRENGTH_STATEMENT.get(
        planet_strength(year_lord, chart), "The year lord provides moderate support")
    return (f"Year Lord {year_lord.value} emphasizes "
            f"{_LORD_NATURE.get(year_lord, 'various life aspects')} "
            f"{_LORD_HOUSE_INFLUENCE[house]}. {statement}.")


def muntha_theme(muntha: MunthaResult) -> str:
    return (f"Muntha in {muntha.sign.value} (House {muntha.house}) directs annual focus toward "
            f"{_MUNTHA_THEME_AREA[muntha.house]} with {muntha.lord.value}'s influence.")


def compute_major_themes(chart: SolarReturnChart, year_lord: Planet, muntha: MunthaResult,
                         aspects: Sequence[TajikaAspect]) -> Tuple[str, ...]:
    themes = [year_lord_theme(year_lord, chart), muntha_theme(muntha)]

    strong = [a for a in aspects
              if a.strength in (AspectStrength.VERY_STRONG, AspectStrength.STRONG)]
    if strong:
        positive = sum(1 for a in strong if a.type.is_positive)
        negative = len(strong) - positive
        if positive > negative * 2:
            themes.append("Strong positive Tajika yogas indicate excellent potential for "
                          "success and fulfillment of goals")
        elif negative > positive * 2:
            themes.append("Challenging planetary configurations require patience and "
                          "strategic approach to overcome obstacles")
        else:
            themes.append("Mixed Tajika aspects suggest a year of both opportunities and "
                          "challenges requiring balanced approach")

    angular = [p.value for p in CHART_BODIES
               if p in chart.planet_positions and chart.planet_positions[p].house in ANGULAR_HOUSES]
    if angular:
        themes.append(f"Angular placement of {', '.join(angular)} brings prominence and activity "
                      f"in career, relationships, and personal development")

    if any(p in chart.planet_positions and chart.planet_positions[p].house in (1, 5, 9)
           for p in (P.JUPITER, P.VENUS)):
        themes.append("Benefic planets in trinal houses promise spiritual growth, good fortune, "
                      "and creative expression")

    asc_lord = sign_lord(chart.ascendant)
    asc_pos = chart.position(asc_lord)
    if asc_pos is not None and asc_pos.house in _WELL_PLACED:
        themes.append(f"Well-placed ascendant lord {asc_lord.value} supports overall success "
                      f"and personal wellbeing")

    return tuple(themes[:6])


# ---------------------------------------------------------------------------
# Months
# ---------------------------------------------------------------------------

def _shifted(house: int, offset: int) -> int:
    return (house + offset - 1) % 12 + 1


def _in_kendra(chart: SolarReturnChart, bodies: Iterable[Planet], offset: int) -> bool:
    return any(p in chart.planet_positions
               and _shifted(chart.planet_positions[p].house, offset) in ANGULAR_HOUSES
               for p in bodies)


def compute_monthly_influences(chart: SolarReturnChart) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """(favourable, challenging) calendar months, at most 4 and 3."""
    lord_house = chart.house_of_body(sign_lord(chart.ascendant))
    start_month = chart.solar_return_time.month
    favorable: List[int] = []
    challenging: List[int] = []

    for offset in range(12):
        month = (start_month - 1 + offset) % 12 + 1
        good = (lord_house + offset) % 12 + 1 in FAVORABLE_HOUSES

        if good and _in_kendra(chart, (P.JUPITER, P.VENUS), offset):
            favorable.append(month)
        elif not good and _in_kendra(chart, (P.SATURN, P.MARS, P.RAHU), offset):
            challenging.append(month)
        elif good:
            if len(favorable) < 4:
                favorable.append(month)
        elif len(challenging) < 3:
            challenging.append(month)

    return tuple(favorable[:4]), tuple(challenging[:3])


# ---------------------------------------------------------------------------
# Key dates
# ---------------------------------------------------------------------------

MAX_KEY_DATES = 15


def add_months(d: date, months: int) -> date:
    """Calendar month arithmetic, clamping the day to the month's end."""
    idx = d.month - 1 + months
    year, month = d.year + idx // 12, idx % 12 + 1
    return date(year, month, min(d.day, calendar.monthrange(year, month)[1]))


# (months after the return, event, type, description)
TRANSIT_DATES = (
    (2, "Jupiter Transit",      KeyDateType.FAVORABLE,   "Jupiter transit activates fortune sector"),
    (6, "Jupiter Transit",      KeyDateType.FAVORABLE,   "Jupiter aspects career house"),
    (4, "Saturn Transit",       KeyDateType.CHALLENGING, "Saturn aspects requiring patience"),
    (9, "Saturn Transit",       KeyDateType.CHALLENGING, "Saturn transit emphasizes discipline"),
    (3, "Lunar Eclipse Period", KeyDateType.IMPORTANT,   "Time for introspection and release"),
    (9, "Solar Eclipse Period", KeyDateType.IMPORTANT,   "Potential for new beginnings"),
)


def compute_key_dates(chart: SolarReturnChart,
                      dasha: Sequence[MuddaDashaPeriod]) -> Tuple[KeyDate, ...]:
    start = chart.solar_return_time.date()
    dates = [KeyDate(
        date=start,
        event="Solar Return",
        type=KeyDateType.IMPORTANT,
        description="Beginning of the annual horoscope year - Sun returns to natal position",
    )]

    for period in dasha:
        dates.append(KeyDate(
            date=period.start_date,
            event=f"{period.planet.value} Dasha Begins",
            type=(KeyDateType.FAVORABLE if period.planet_strength in ("Exalted", "Strong")
                  else KeyDateType.IMPORTANT),
            description=f"Start of {period.planet.value} period lasting {period.days} days",
        ))

    for months, event, kind, description in TRANSIT_DATES:
        dates.append(KeyDate(add_months(start, months), event, kind, description))

    dates.sort(key=lambda k: k.date)
    return tuple(dates[:MAX_KEY_DATES])


# ---------------------------------------------------------------------------
# Overall narrative
# ---------------------------------------------------------------------------

_YEAR_LORD_INFLUENCE = {
    P.SUN: ("Year Lord Sun brings focus on leadership, authority, and personal expression. "
            "This is a year to shine and take charge of important matters."),
    P.MOON: ("Year Lord Moon emphasizes emotional wellbeing, public connections, and intuitive "
             "decision-making. Nurturing relationships and home life are highlighted."),
    P.MARS: ("Year Lord Mars energizes initiatives, competitive endeavors, and courage. "
             "This is a year for action, but patience in conflicts is advised."),
    P.MERCURY: ("Year Lord Mercury enhances communication, learning, and business activities. "
                "Intellectual pursuits and networking bring rewards."),
    P.JUPITER: ("Year Lord Jupiter bestows wisdom, expansion, and good fortune. "
                "This is an auspicious year for growth in all areas."),
    P.VENUS: ("Year Lord Venus brings harmony to relationships, enhances creativity, and attracts "
              "material comforts. Artistic and romantic pursuits flourish."),
    P.SATURN: ("Year Lord Saturn teaches discipline, responsibility, and patience. "
               "Hard work this year lays foundation for lasting achievements."),
}

_MUNTHA_FOCUS = {
    1:  "self-development, health, and personal initiatives",
    2:  "wealth accumulation, family matters, and speech",
    3:  "communication, courage, siblings, and short travels",
    4:  "home environment, property, mother, and inner peace",
    5:  "creativity, children, romance, and investments",
    6:  "health management, service, and overcoming obstacles",
    7:  "marriage, partnerships, and business relationships",
    8:  "transformation, inheritance, and deep research",
    9:  "fortune, higher learning, spirituality, and long journeys",
    10: "career advancement, public recognition, and authority",
    11: "gains from various sources, friendships, and wish fulfillment",
    12: "spiritual growth, foreign connections, and liberation",
}

_FOCUS_AREAS = (
    (1, "personal development"), (2, "financial growth"), (4, "home and property"),
    (5, "creativity and children"), (7, "partnerships"), (10, "career advancement"),
    (11, "gains and achievements"),
)

_CAUTION_AREAS = {
    1: "health", 2: "finances", 3: "siblings, courage", 4: "home, mother",
    5: "children, intelligence", 6: "health issues", 7: "marriage, partnership",
    8: "sudden changes", 9: "fortune, father", 10: "career, status",
    11: "gains, friends", 12: "expenses",
}


def _tone(year_lord_strength: str, strong: int, weak: int) -> str:
    lord_good = year_lord_strength in ("Exalted", "Strong")
    if lord_good and strong >= 6:
        return "excellent"
    if lord_good and strong >= 4:
        return "favorable"
    if strong > weak:
        return "positive"
    if weak > strong:
        return "challenging but growth-oriented"
    return "balanced"


def compute_overall_prediction(chart: SolarReturnChart, year_lord: Planet, muntha: MunthaResult,
                               aspects: Sequence[TajikaAspect],
                               houses: Sequence[HousePrediction]) -> str:
    strong = [h for h in houses if h.strength in ("Excellent", "Strong")]
    weak = [h for h in houses if h.strength in ("Weak", "Challenged")]
    positive = sum(1 for a in aspects if a.type.is_positive)
    challenging = len(aspects) - positive

    tone = _tone(planet_strength(year_lord, chart), len(strong), len(weak))
    lord_influence = _YEAR_LORD_INFLUENCE.get(
        year_lord, "The Year Lord influences various aspects of life with balanced energy.")

    well = muntha.lord_strength in ("Strong", "Exalted")
    muntha_text = (
        f"Muntha in the {muntha.house}{ordinal(muntha.house)} house in {muntha.sign.value} "
        f"directs special attention to {_MUNTHA_FOCUS[muntha.house]}. "
        f"With its lord {muntha.lord.value} {'well-placed' if well else 'requiring attention'}, "
        f"these areas {'promise positive developments' if well else 'need careful cultivation'}."
    )

    if positive > challenging * 2:
        aspect_text = (f"The Tajika aspects are predominantly favorable, with {positive} positive "
                       f"yogas supporting success and achievement.")
    elif challenging > positive * 2:
        aspect_text = (f"The challenging Tajika aspects ({challenging}) indicate areas requiring "
                       f"patience and strategic effort.")
    else:
        aspect_text = (f"The balanced mix of Tajika aspects ({positive} favorable, {challenging} "
                       f"challenging) suggests a dynamic year with varied experiences.")

    strong_houses = {h.house for h in strong}
    areas = [text for h, text in _FOCUS_AREAS if h in strong_houses]
    focus = "Key focus areas include: " + (", ".join(areas) or "balanced development across all areas") + "."

    caution = ""
    if weak:
        cautions = list(dict.fromkeys(_CAUTION_AREAS[h.house] for h in weak[:3]))
        caution = f"Areas requiring attention include {', '.join(cautions)}. "

    return (f"This Varshaphala year presents an overall {tone} outlook. "
            f"{lord_influence} {muntha_text} {aspect_text} {focus} {caution}"
            "By understanding these planetary influences and working with them consciously, "
            "the year's potential can be maximized while navigating challenges with wisdom.")
