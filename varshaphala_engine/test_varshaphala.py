"""
test_varshaphala.py
===================
Canonical test suite for the Varshaphala Engine.

Covers:
  - Solar return location (convergence, anniversary window, re-location)
  - Year lord weekday rotation and Muntha progression
  - Mudda Dasha sequence, tiling and current-period flag
  - Ascendant on the eastern horizon
  - Tajika aspect detection, rule cascade and strength tiers
  - Saham skipping and activity
  - Full pipeline determinism and target-year validation

Run with: python -m pytest varshaphala_engine/ -v
Or:        python varshaphala_engine/test_varshaphala.py
"""

import math
import sys
from dataclasses import replace
from datetime import date, datetime, timedelta

import pytest

from varshaphala_engine import generate_varshaphala
from varshaphala_engine.errors import InvalidNatalChartError, InvalidTargetYearError
from varshaphala_engine.core.models import (
    AspectStrength, CHART_BODIES, NatalChart, NatalPlanet, Planet, Sign,
    SolarReturnChart, TajikaAspectType,
)
from varshaphala_engine.core.ephemeris import (
    ayanamsa, normalize, planet_longitude, signed_delta, sun_sidereal, julian_day,
)
from varshaphala_engine.core.houses import (
    compute_ascendant, house_of, local_sidereal_time, mean_obliquity,
)
from varshaphala_engine.core.solar_return import (
    locate_solar_return, place_body, anniversary_noon,
)
from varshaphala_engine.core.year_lord import compute_year_lord, compute_muntha
from varshaphala_engine.core.dasha import compute_mudda_dasha, VARSHA_DAYS, _antardashas
from varshaphala_engine.core.tajika import compute_tajika_aspects, malefic_intervenes
from varshaphala_engine.core.sahams import compute_sahams, is_saham_active, SAHAM_DEFINITIONS
from varshaphala_engine.core.predictions import add_months
from varshaphala_engine.tools.cache import ResultCache


# ---------------------------------------------------------------------------
# Tolerances
# ---------------------------------------------------------------------------
RESIDUAL_TOLERANCE_DEG = 1e-3
RETURN_WINDOW = timedelta(days=1)


# ---------------------------------------------------------------------------
# Test Vectors
# ---------------------------------------------------------------------------
# Natal positions are taken from the engine's own ephemeris at the birth
# moment, so the return is checked for self-consistency.

TEST_VECTORS = [
    {
        "id": "VP-01",
        "description": "Delhi birth, IST, mid-career year",
        "input": {
            "birth": datetime(1990, 6, 15, 10, 30), "timezone_offset": 5.5,
            "latitude": 28.6139, "longitude": 77.2090, "ascendant": 125.4,
            "target_year": 2025,
        },
    },
    {
        "id": "VP-02",
        "description": "New York birth, EST, winter",
        "input": {
            "birth": datetime(1985, 1, 22, 8, 45), "timezone_offset": -5.0,
            "latitude": 40.7128, "longitude": -74.0060, "ascendant": 290.0,
            "target_year": 2025,
        },
    },
    {
        "id": "VP-03",
        "description": "Leap-day birth, Mumbai, non-leap target year",
        "input": {
            "birth": datetime(2000, 2, 29, 12, 0), "timezone_offset": 5.5,
            "latitude": 19.0760, "longitude": 72.8777, "ascendant": 60.0,
            "target_year": 2021,
        },
    },
    {
        "id": "VP-04",
        "description": "High latitude birth, Tromsø",
        "input": {
            "birth": datetime(1978, 11, 3, 23, 15), "timezone_offset": 1.0,
            "latitude": 69.6492, "longitude": 18.9553, "ascendant": 170.0,
            "target_year": 2026,
        },
    },
    {
        "id": "VP-05",
        "description": "Southern hemisphere, Sydney, first return",
        "input": {
            "birth": datetime(2010, 9, 1, 6, 5), "timezone_offset": 10.0,
            "latitude": -33.8688, "longitude": 151.2093, "ascendant": 340.0,
            "target_year": 2011,
        },
    },
]


def build_natal(birth: datetime, timezone_offset: float, latitude: float,
                longitude: float, ascendant: float, **_) -> NatalChart:
    ut = birth - timedelta(hours=timezone_offset)
    planets = tuple(NatalPlanet.at(p, planet_longitude(p, ut)) for p in CHART_BODIES)
    return NatalChart(
        birth_datetime=birth,
        latitude=latitude,
        longitude=longitude,
        ascendant=ascendant,
        planets=planets,
        timezone_offset=timezone_offset,
    )


def synthetic_chart(longitudes: dict, ascendant: float = 0.0,
                    speeds: dict = None, when: datetime = datetime(2025, 6, 15, 12, 0)) -> SolarReturnChart:
    """Annual chart with hand-placed bodies."""
    speeds = speeds or {}
    positions = {
        p: place_body(p, lon, speeds.get(p, 1.0), ascendant)
        for p, lon in longitudes.items()
    }
    moon = positions.get(Planet.MOON)
    return SolarReturnChart(
        solar_return_time=when,
        sun_longitude=longitudes.get(Planet.SUN, 0.0),
        ascendant=Sign.from_longitude(ascendant),
        ascendant_degree=ascendant % 30.0,
        moon_sign=moon.sign if moon else Sign.ARIES,
        moon_nakshatra=moon.nakshatra if moon else "Ashwini",
        planet_positions=positions,
    )


SPREAD = {
    Planet.SUN: 10.0, Planet.MOON: 45.0, Planet.MARS: 80.0, Planet.MERCURY: 100.0,
    Planet.JUPITER: 100.5, Planet.VENUS: 200.0, Planet.SATURN: 250.0,
    Planet.RAHU: 300.0, Planet.KETU: 120.0,
}


# ---------------------------------------------------------------------------
# TestResult
# ---------------------------------------------------------------------------

class TestResult:
    __test__ = False

    def __init__(self, test_id, description):
        self.test_id = test_id
        self.description = description
        self.passed = []
        self.failed = []

    def assert_equal(self, label, actual, expected):
        if actual == expected:
            self.passed.append(f"✓ {label}: {actual}")
        else:
            self.failed.append(f"✗ {label}: got {actual!r}, expected {expected!r}")

    def assert_in(self, label, actual, options):
        if actual in options:
            self.passed.append(f"✓ {label}: {actual} (in allowed set)")
        else:
            self.failed.append(f"✗ {label}: got {actual!r}, not in {options}")

    def assert_numeric_close(self, label, actual, expected, tolerance):
        diff = abs(actual - expected)
        if diff <= tolerance:
            self.passed.append(f"✓ {label}: {actual:.6f} (Δ={diff:.6f})")
        else:
            self.failed.append(f"✗ {label}: {actual:.6f} vs expected {expected:.6f} (Δ={diff:.6f} > tol {tolerance})")

    def assert_true(self, label, condition, details=""):
        if condition:
            self.passed.append(f"✓ {label}{': ' + details if details else ''}")
        else:
            self.failed.append(f"✗ {label}{': ' + details if details else ''}")

    @property
    def ok(self):
        return len(self.failed) == 0

    def summary(self):
        status = "PASS" if self.ok else "FAIL"
        lines = [f"\n[{status}] {self.test_id}: {self.description}"]
        for p in self.passed:
            lines.append(f"       {p}")
        for f in self.failed:
            lines.append(f"       {f}")
        return "\n".join(lines)


_RESULTS = []


def _finish(result: TestResult):
    _RESULTS.append(result)
    assert result.ok, result.summary()


# ---------------------------------------------------------------------------
# Test vectors through the full pipeline
# ---------------------------------------------------------------------------

@pytest.mark.slow
@pytest.mark.parametrize("tv", TEST_VECTORS, ids=[tv["id"] for tv in TEST_VECTORS])
def test_vector(tv):
    result = TestResult(tv["id"], tv["description"])
    inp = tv["input"]
    natal = build_natal(**inp)
    today = date(inp["target_year"], 12, 1)
    vp = generate_varshaphala(natal, inp["target_year"], today=today)
    chart = vp.solar_return_chart

    result.assert_equal("year", vp.year, inp["target_year"])
    result.assert_equal("age", vp.age, inp["target_year"] - inp["birth"].year)
    result.assert_true("residual", chart.residual < RESIDUAL_TOLERANCE_DEG, f"{chart.residual:.2e}°")
    anniversary = anniversary_noon(inp["target_year"], inp["birth"].month, inp["birth"].day).replace(
        hour=inp["birth"].hour, minute=inp["birth"].minute)
    result.assert_true("return near birthday",
                       abs(chart.solar_return_time - anniversary) <= RETURN_WINDOW,
                       chart.solar_return_time.isoformat())
    result.assert_equal("bodies placed", set(chart.planet_positions), set(CHART_BODIES))
    result.assert_true("houses in range",
                       all(1 <= p.house <= 12 for p in chart.planet_positions.values()))

    result.assert_equal("dasha periods", len(vp.mudda_dasha), 9)
    result.assert_equal("dasha span", sum(p.days for p in vp.mudda_dasha), VARSHA_DAYS)
    result.assert_equal("house predictions", [h.house for h in vp.house_predictions], list(range(1, 13)))
    result.assert_true("rating range", 1.0 <= vp.year_rating <= 5.0, f"{vp.year_rating}")
    result.assert_true("themes <= 6", len(vp.major_themes) <= 6)
    result.assert_true("favorable <= 4", len(vp.favorable_months) <= 4)
    result.assert_true("challenging <= 3", len(vp.challenging_months) <= 3)
    result.assert_true("months disjoint", not set(vp.favorable_months) & set(vp.challenging_months))
    result.assert_true("key dates <= 15", len(vp.key_dates) <= 15)
    result.assert_equal("key dates sorted", list(vp.key_dates), sorted(vp.key_dates, key=lambda k: k.date))
    result.assert_equal("sahams", len(vp.sahams), len(SAHAM_DEFINITIONS))
    result.assert_equal("bala rows", len(vp.pancha_vargiya_bala), 7)
    result.assert_true("bala totals",
                       all(0.0 <= b.total <= 21.0 for b in vp.pancha_vargiya_bala))
    result.assert_equal("tri-pataki sectors", len(vp.tri_pataki_chakra.sectors), 3)
    weights = [a.strength.weight for a in vp.tajika_aspects]
    result.assert_equal("aspects strongest first", weights, sorted(weights, reverse=True))
    _finish(result)


# ---------------------------------------------------------------------------
# Solar return
# ---------------------------------------------------------------------------

def test_solar_return_converges():
    result = TestResult("SR-01", "Natal Sun 280° located in the following January")
    fix = locate_solar_return(280.0, 1991, 1, 24, timezone_offset=0.0)
    located = sun_sidereal(julian_day(fix.moment))

    result.assert_true("converged", fix.converged)
    result.assert_true("residual", fix.residual < RESIDUAL_TOLERANCE_DEG, f"{fix.residual:.2e}°")
    result.assert_numeric_close("Sun at return", abs(signed_delta(located, 280.0)), 0.0, RESIDUAL_TOLERANCE_DEG)
    result.assert_true("within window",
                       abs(fix.moment - datetime(1991, 1, 24, 12, 0)) <= RETURN_WINDOW,
                       fix.moment.isoformat())
    result.assert_true("iteration budget", 0 <= fix.iterations <= 10)
    _finish(result)


def test_solar_return_relocation_is_stable():
    result = TestResult("SR-02", "Re-locating from a found return needs at most one step")
    natal = build_natal(**TEST_VECTORS[0]["input"])
    sun = natal.position(Planet.SUN).longitude
    fix = locate_solar_return(sun, 2025, 6, 15, timezone_offset=5.5)
    again = locate_solar_return(sun, 2025, 6, 15, timezone_offset=5.5, start=fix.moment)

    result.assert_true("first converged", fix.converged)
    result.assert_true("second iterations", again.iterations <= 1, str(again.iterations))
    result.assert_true("same moment", abs(again.moment - fix.moment) < timedelta(minutes=1))
    _finish(result)


def test_solar_return_non_convergence_returns_estimate():
    result = TestResult("SR-03", "Zero iteration budget still yields a best estimate")
    fix = locate_solar_return(280.0, 1991, 1, 1, max_iterations=0)
    result.assert_equal("iterations", fix.iterations, 0)
    result.assert_true("not converged", not fix.converged)
    result.assert_equal("seed moment", fix.moment, datetime(1991, 1, 1, 12, 0))
    _finish(result)


def test_leap_day_anniversary():
    result = TestResult("SR-04", "Feb 29 birthday seeds on Feb 28 in common years")
    result.assert_equal("2023", anniversary_noon(2023, 2, 29), datetime(2023, 2, 28, 12, 0))
    result.assert_equal("2024", anniversary_noon(2024, 2, 29), datetime(2024, 2, 29, 12, 0))
    _finish(result)


# ---------------------------------------------------------------------------
# Houses
# ---------------------------------------------------------------------------

def test_house_projection():
    result = TestResult("HS-01", "Equal-house projection against the ascendant")
    result.assert_equal("just before ascendant", house_of(99.0, 100.0), 1)
    result.assert_equal("on ascendant", house_of(100.0, 100.0), 2)
    result.assert_equal("30° behind", house_of(70.0, 100.0), 1)
    result.assert_equal("opposite", house_of(280.0, 100.0), 8)
    result.assert_equal("wraps past 360", house_of(5.0, 350.0), 2)
    counts = [house_of(float(lon), 0.0) for lon in range(0, 360, 30)]
    result.assert_equal("one sign per house", sorted(counts), list(range(1, 13)))
    _finish(result)


def test_ascendant_rises_in_the_east():
    result = TestResult("HS-02", "Ascendant sits on the eastern horizon through a whole day")
    lat, lon = 28.6139, 77.2090
    phi = math.radians(lat)
    for hour in range(24):
        jd = julian_day(datetime(2025, 6, 15, hour, 0))
        asc = compute_ascendant(jd, lat, lon)
        lst = math.radians(local_sidereal_time(jd, lon))
        eps = math.radians(mean_obliquity(jd))

        reference = normalize(math.degrees(math.atan2(
            math.cos(lst), -(math.sin(lst) * math.cos(eps) + math.tan(phi) * math.sin(eps))))
            - ayanamsa(jd))
        result.assert_numeric_close(f"{hour:02d}h reference", signed_delta(reference, asc), 0.0, 1e-9)

        lam = math.radians(asc + ayanamsa(jd))
        dec = math.asin(math.sin(eps) * math.sin(lam))
        ra = math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam))
        ha = lst - ra
        alt = math.degrees(math.asin(math.sin(phi) * math.sin(dec)
                                     + math.cos(phi) * math.cos(dec) * math.cos(ha)))
        result.assert_numeric_close(f"{hour:02d}h altitude", alt, 0.0, 0.01)
        result.assert_true(f"{hour:02d}h eastern", math.sin(ha) < 0.0, f"sin H = {math.sin(ha):.3f}")
    _finish(result)


# ---------------------------------------------------------------------------
# Year lord and Muntha
# ---------------------------------------------------------------------------

def test_year_lord_rotation():
    result = TestResult("YL-01", "Year lord advances one weekday per year")
    natal = build_natal(**TEST_VECTORS[0]["input"])      # born on a Friday
    result.assert_equal("birth year", compute_year_lord(natal, 1990), Planet.VENUS)
    result.assert_equal("+1", compute_year_lord(natal, 1991), Planet.SATURN)
    result.assert_equal("+2", compute_year_lord(natal, 1992), Planet.SUN)
    result.assert_equal("+7", compute_year_lord(natal, 1997), Planet.VENUS)
    _finish(result)


def test_muntha_progression():
    result = TestResult("MU-01", "Muntha advances one sign per year from the natal ascendant")
    natal = build_natal(**TEST_VECTORS[0]["input"])       # ascendant 125.4° = Leo
    chart = synthetic_chart(SPREAD, ascendant=125.4)
    m0 = compute_muntha(natal, 1990, chart)
    m3 = compute_muntha(natal, 1993, chart)
    m12 = compute_muntha(natal, 2002, chart)

    result.assert_equal("year 0 sign", m0.sign, Sign.LEO)
    result.assert_equal("year 3 sign", m3.sign, Sign.SCORPIO)
    result.assert_equal("year 12 sign", m12.sign, Sign.LEO)
    result.assert_equal("9.6° past the annual ascendant", m0.house, 2)
    result.assert_equal("degree", m0.degree, 15.0)
    result.assert_equal("lord", m3.lord, Planet.MARS)
    result.assert_equal("themes", len(m3.themes), 3)
    _finish(result)


def test_muntha_uses_exact_ascendant():
    result = TestResult("MU-02", "Muntha is housed against the exact annual ascendant degree")
    natal = replace(build_natal(**TEST_VECTORS[0]["input"]), ascendant=10.0)   # Aries
    chart = synthetic_chart({**SPREAD, Planet.SUN: 15.0}, ascendant=20.0)
    muntha = compute_muntha(natal, natal.birth_year, chart)

    result.assert_equal("sign", muntha.sign, Sign.ARIES)
    result.assert_equal("house", muntha.house, 1)
    result.assert_equal("same house as a body at 15° Aries", muntha.house, chart.house_of_body(Planet.SUN))
    _finish(result)


# ---------------------------------------------------------------------------
# Mudda Dasha
# ---------------------------------------------------------------------------

def test_mudda_dasha_from_ashwini_moon():
    result = TestResult("MD-01", "Moon in Ashwini starts the sequence at Ketu")
    natal = replace(build_natal(**TEST_VECTORS[0]["input"]),
                    planets=(NatalPlanet.at(Planet.SUN, 60.0), NatalPlanet.at(Planet.MOON, 5.0)))
    chart = synthetic_chart(SPREAD)
    start = date(2025, 6, 15)
    periods = compute_mudda_dasha(chart, natal, start, today=start + timedelta(days=100))

    result.assert_equal("first lord", periods[0].planet, Planet.KETU)
    result.assert_equal("second lord", periods[1].planet, Planet.SUN)
    result.assert_equal("starts on return date", periods[0].start_date, start)
    result.assert_equal("total days", sum(p.days for p in periods), VARSHA_DAYS)
    for prev, nxt in zip(periods, periods[1:]):
        result.assert_equal(f"{nxt.planet.value} contiguous", nxt.start_date, prev.end_date + timedelta(days=1))
    result.assert_equal("current count", sum(1 for p in periods if p.is_current), 1)
    for p in periods:
        result.assert_equal(f"{p.planet.value} sub-periods tile", sum(s.days for s in p.sub_periods), p.days)
        result.assert_equal(f"{p.planet.value} first sub-lord", p.sub_periods[0].planet, p.planet)
        result.assert_true(f"{p.planet.value} progress", 0.0 <= p.progress <= 1.0)
    _finish(result)


def test_mudda_dasha_outside_year_has_no_current():
    result = TestResult("MD-02", "No current period when today is outside the year")
    natal = build_natal(**TEST_VECTORS[0]["input"])
    chart = synthetic_chart(SPREAD)
    start = date(2025, 6, 15)
    before = compute_mudda_dasha(chart, natal, start, today=start - timedelta(days=1))
    after = compute_mudda_dasha(chart, natal, start, today=start + timedelta(days=400))
    result.assert_equal("before", sum(p.is_current for p in before), 0)
    result.assert_equal("after", sum(p.is_current for p in after), 0)
    result.assert_true("after progress", all(p.progress == 1.0 for p in after))
    _finish(result)


def test_short_period_sub_division():
    result = TestResult("MD-03", "Periods under nine days use one-day sub-periods")
    subs = _antardashas(Planet.SATURN, date(2025, 1, 1), 4)
    result.assert_equal("count", len(subs), 4)
    result.assert_equal("lengths", [s.days for s in subs], [1, 1, 1, 1])
    result.assert_equal("last ends", subs[-1].end_date, date(2025, 1, 4))
    long_subs = _antardashas(Planet.SUN, date(2025, 1, 1), 110)
    result.assert_equal("long count", len(long_subs), 9)
    result.assert_equal("remainder to last", long_subs[-1].days, 110 - 12 * 8)
    _finish(result)


def test_mudda_dasha_starts_on_return_date():
    result = TestResult("MD-04", "Full run: Ashwini Moon opens at Ketu on the return date")
    natal = build_natal(**TEST_VECTORS[0]["input"])
    natal = replace(natal, planets=tuple(
        NatalPlanet.at(Planet.MOON, 5.0) if p.planet is Planet.MOON else p for p in natal.planets))
    vp = generate_varshaphala(natal, 2025, today=date(2025, 12, 1))
    chart = vp.solar_return_chart
    anniversary = datetime(2025, 6, 15, 10, 30)

    result.assert_true("return within a day of the birthday",
                       abs(chart.solar_return_time - anniversary) <= RETURN_WINDOW,
                       chart.solar_return_time.isoformat())
    result.assert_equal("first lord", vp.mudda_dasha[0].planet, Planet.KETU)
    result.assert_equal("starts on return date", vp.mudda_dasha[0].start_date,
                        chart.solar_return_time.date())
    result.assert_equal("first sub-period starts with it", vp.mudda_dasha[0].sub_periods[0].start_date,
                        chart.solar_return_time.date())
    _finish(result)


# ---------------------------------------------------------------------------
# Tajika
# ---------------------------------------------------------------------------

def test_close_applying_conjunction():
    result = TestResult("TJ-01", "0.5° applying conjunction is a strong Ithasala-family aspect")
    chart = synthetic_chart(SPREAD, speeds={Planet.MERCURY: 1.5, Planet.JUPITER: 0.1})
    aspects = compute_tajika_aspects(chart)
    hits = [a for a in aspects
            if {a.planet1, a.planet2} == {Planet.MERCURY, Planet.JUPITER} and a.aspect_angle == 0]

    result.assert_equal("one conjunction", len(hits), 1)
    if hits:
        hit = hits[0]
        result.assert_numeric_close("orb", hit.orb, 0.5, 1e-9)
        result.assert_true("applying", hit.is_applying)
        result.assert_in("type", hit.type, (TajikaAspectType.ITHASALA, TajikaAspectType.KAMBOOLA))
        result.assert_in("strength", hit.strength, (AspectStrength.VERY_STRONG, AspectStrength.STRONG))
    result.assert_true("orbs respected", all(a.orb <= 8.0 for a in aspects))
    result.assert_true("no nodes", all(a.planet1 not in (Planet.RAHU, Planet.KETU)
                                       and a.planet2 not in (Planet.RAHU, Planet.KETU) for a in aspects))
    _finish(result)


def test_aspects_skip_missing_body():
    result = TestResult("TJ-02", "Pairs involving a missing body are skipped")
    partial = {p: lon for p, lon in SPREAD.items() if p is not Planet.JUPITER}
    aspects = compute_tajika_aspects(synthetic_chart(partial))
    result.assert_true("no Jupiter", all(Planet.JUPITER not in (a.planet1, a.planet2) for a in aspects))
    _finish(result)


# Mercury and Venus 6.5° apart in Libra with Mars on the arc between them
INTERVENED = {
    Planet.SUN: 10.0, Planet.MOON: 45.0, Planet.MARS: 196.0, Planet.MERCURY: 193.5,
    Planet.JUPITER: 300.0, Planet.VENUS: 200.0, Planet.SATURN: 250.0,
    Planet.RAHU: 60.0, Planet.KETU: 240.0,
}


def _mercury_venus(chart):
    return [a for a in compute_tajika_aspects(chart)
            if {a.planet1, a.planet2} == {Planet.MERCURY, Planet.VENUS}]


def test_malefic_intervention_breaks_application():
    result = TestResult("TJ-03", "Mars between an applying Mercury-Venus pair gives Duhphali-Kuttha")
    chart = synthetic_chart(INTERVENED, speeds={Planet.MERCURY: 1.5, Planet.VENUS: 1.0})
    hits = _mercury_venus(chart)

    result.assert_true("Mars intervenes", malefic_intervenes(chart, Planet.MERCURY, Planet.VENUS))
    result.assert_true("nothing between Sun and Moon", not malefic_intervenes(chart, Planet.SUN, Planet.MOON))
    result.assert_equal("one conjunction", len(hits), 1)
    if hits:
        result.assert_true("applying", hits[0].is_applying)
        result.assert_equal("type", hits[0].type, TajikaAspectType.DUHPHALI_KUTTHA)

    clear = synthetic_chart({**INTERVENED, Planet.MARS: 80.0},
                            speeds={Planet.MERCURY: 1.5, Planet.VENUS: 1.0})
    result.assert_true("Mars moved away", not malefic_intervenes(clear, Planet.MERCURY, Planet.VENUS))
    result.assert_true("no Duhphali without Mars",
                       all(a.type is not TajikaAspectType.DUHPHALI_KUTTHA for a in _mercury_venus(clear)))
    _finish(result)


def test_both_retrograde_is_khalasara():
    result = TestResult("TJ-04", "Two retrograde bodies frustrate the aspect (Khalasara)")
    both = synthetic_chart(INTERVENED, speeds={Planet.MERCURY: -0.5, Planet.VENUS: -0.3})
    one = synthetic_chart(INTERVENED, speeds={Planet.MERCURY: -0.5, Planet.VENUS: 1.0})
    both_hits = _mercury_venus(both)
    one_hits = _mercury_venus(one)

    result.assert_equal("both retrograde", [a.type for a in both_hits], [TajikaAspectType.KHALASARA])
    result.assert_equal("one retrograde", [a.type for a in one_hits], [TajikaAspectType.RADDA])
    _finish(result)


# ---------------------------------------------------------------------------
# Sahams
# ---------------------------------------------------------------------------

def test_sahams_skip_without_saturn():
    result = TestResult("SA-01", "Sahams needing Saturn are skipped, the rest survive")
    partial = {p: lon for p, lon in SPREAD.items() if p is not Planet.SATURN}
    sahams = compute_sahams(synthetic_chart(partial))
    names = {s.name for s in sahams}

    result.assert_equal("survivors", names, {
        "Fortune", "Education", "Fame", "Friends", "Wealth", "Children", "Mother", "Greatness",
    })
    result.assert_true("active first",
                       [s.is_active for s in sahams] == sorted((s.is_active for s in sahams), reverse=True))
    result.assert_true("longitudes", all(0.0 <= s.longitude < 360.0 for s in sahams))
    _finish(result)


def test_fortune_saham_day_formula():
    result = TestResult("SA-02", "Fortune Saham = Moon - Sun + Ascendant by day")
    chart = synthetic_chart(SPREAD, ascendant=30.0)
    fortune = next(s for s in compute_sahams(chart) if s.name == "Fortune")
    result.assert_numeric_close("longitude", fortune.longitude, (45.0 - 10.0 + 30.0) % 360.0, 1e-9)
    result.assert_equal("sign", fortune.sign, Sign.GEMINI)
    _finish(result)


def test_saham_activity_follows_lord_house():
    result = TestResult("SA-03", "Saham activity reads the lord's own house")
    retro = {Planet.SATURN: -0.05}
    # exalted Saturn at 190° Libra
    in_second = synthetic_chart({**SPREAD, Planet.SATURN: 190.0}, ascendant=175.0, speeds=retro)
    in_eighth = synthetic_chart({**SPREAD, Planet.SATURN: 190.0}, ascendant=0.0)
    plain_fifth = synthetic_chart({**SPREAD, Planet.SATURN: 100.0}, ascendant=0.0)

    result.assert_equal("lord in house 2", in_second.house_of_body(Planet.SATURN), 2)
    result.assert_true("strong lord in house 2 is active", is_saham_active(Planet.SATURN, in_second))
    result.assert_equal("lord in house 8", in_eighth.house_of_body(Planet.SATURN), 8)
    result.assert_true("strong lord in house 8 is inactive", not is_saham_active(Planet.SATURN, in_eighth))
    result.assert_true("direct lord in house 5 is active", is_saham_active(Planet.SATURN, plain_fifth))
    _finish(result)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def test_pipeline_is_deterministic():
    result = TestResult("PL-01", "Same inputs give identical results")
    natal = build_natal(**TEST_VECTORS[0]["input"])
    today = date(2025, 9, 1)
    first = generate_varshaphala(natal, 2025, today=today)
    second = generate_varshaphala(natal, 2025, today=today)
    result.assert_equal("to_dict", first.to_dict(), second.to_dict())
    result.assert_true("one current period", sum(p.is_current for p in first.mudda_dasha) <= 1)
    _finish(result)


def test_target_year_before_birth_rejected():
    natal = build_natal(**TEST_VECTORS[0]["input"])
    with pytest.raises(InvalidTargetYearError) as exc:
        generate_varshaphala(natal, 1989)
    assert exc.value.target_year == 1989
    assert isinstance(exc.value, ValueError)


def test_invalid_natal_chart_rejected():
    natal = replace(build_natal(**TEST_VECTORS[0]["input"]), latitude=123.0)
    with pytest.raises(InvalidNatalChartError):
        generate_varshaphala(natal, 2025)


def test_add_months_clamps_day():
    result = TestResult("KD-01", "Month arithmetic clamps to month end")
    result.assert_equal("Jan 31 + 1", add_months(date(2025, 1, 31), 1), date(2025, 2, 28))
    result.assert_equal("Jan 31 + 1 leap", add_months(date(2024, 1, 31), 1), date(2024, 2, 29))
    result.assert_equal("Nov 15 + 3", add_months(date(2025, 11, 15), 3), date(2026, 2, 15))
    result.assert_equal("Aug 31 + 13", add_months(date(2025, 8, 31), 13), date(2026, 9, 30))
    _finish(result)


def test_result_cache_reuses_and_evicts():
    result = TestResult("CA-01", "Result cache hits, evicts LRU and does not keep failures")
    cache = ResultCache(capacity=2)
    calls = []

    def compute(v):
        def run():
            calls.append(v)
            return v * 10
        return run

    result.assert_equal("a", cache.get_or_compute("a", compute(1)), 10)
    result.assert_equal("a again", cache.get_or_compute("a", compute(1)), 10)
    cache.get_or_compute("b", compute(2))
    cache.get_or_compute("c", compute(3))
    result.assert_equal("a evicted", cache.get("a"), None)
    result.assert_equal("computations", calls, [1, 2, 3])

    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        cache.get_or_compute("d", boom)
    result.assert_equal("failure not cached", cache.get("d"), None)
    result.assert_equal("nothing in flight", cache.stats()["in_flight"], 0)
    _finish(result)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def generate_test_report(results: list) -> str:
    total = len(results)
    passed = sum(1 for r in results if r.ok)
    failed = total - passed

    lines = [
        "=" * 70,
        "VARSHAPHALA ENGINE -- TEST VERIFICATION REPORT",
        f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        f"Total: {total}  |  Passed: {passed}  |  Failed: {failed}",
        "=" * 70,
    ]
    for r in results:
        lines.append(r.summary())
    lines.append("\n" + "=" * 70)
    lines.append(f"RESULT: {'ALL TESTS PASSED ✓' if failed == 0 else f'{failed} TEST(S) FAILED ✗'}")
    lines.append("=" * 70)
    return "\n".join(lines)


def main():
    print("Running Varshaphala Engine Test Suite...")
    checks = [lambda tv=tv: test_vector(tv) for tv in TEST_VECTORS] + [
        test_solar_return_converges,
        test_solar_return_relocation_is_stable,
        test_solar_return_non_convergence_returns_estimate,
        test_leap_day_anniversary,
        test_house_projection,
        test_ascendant_rises_in_the_east,
        test_year_lord_rotation,
        test_muntha_progression,
        test_muntha_uses_exact_ascendant,
        test_mudda_dasha_from_ashwini_moon,
        test_mudda_dasha_outside_year_has_no_current,
        test_short_period_sub_division,
        test_mudda_dasha_starts_on_return_date,
        test_close_applying_conjunction,
        test_aspects_skip_missing_body,
        test_malefic_intervention_breaks_application,
        test_both_retrograde_is_khalasara,
        test_sahams_skip_without_saturn,
        test_fortune_saham_day_formula,
        test_saham_activity_follows_lord_house,
        test_pipeline_is_deterministic,
        test_add_months_clamps_day,
        test_result_cache_reuses_and_evicts,
    ]
    for check in checks:
        try:
            check()
        except AssertionError:
            pass

    print(generate_test_report(_RESULTS))
    return 0 if all(r.ok for r in _RESULTS) else 1


if __name__ == "__main__":
    sys.exit(main())
