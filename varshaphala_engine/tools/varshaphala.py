"""
varshaphala.py  --  Annual horoscope orchestrator
==================================================
One call builds the whole ExtendedVarshaphalaResult from a natal chart and
a target year:

    1. Locate the solar return and cast the annual chart
    2. Year lord, Muntha, Mudda Dasha
    3. Tajika aspects, Sahams, Pancha Vargiya Bala, Tri-Pataki
    4. House predictions, themes, months, key dates, narrative, rating

The result depends only on (natal, target_year, today), so callers may
memoize it (see tools.cache.ResultCache).
"""

import logging
import time
from datetime import date
from typing import Optional

from ..config import EngineSettings, get_settings
from ..errors import InvalidTargetYearError
from ..core.models import ExtendedVarshaphalaResult, NatalChart, Planet
from ..core.solar_return import locate_solar_return, assemble_solar_return_chart
from ..core.dignity import planet_strength, year_lord_dignity
from ..core.year_lord import compute_year_lord, compute_muntha
from ..core.dasha import compute_mudda_dasha
from ..core.tajika import compute_tajika_aspects
from ..core.sahams import compute_sahams
from ..core.bala import compute_pancha_vargiya_bala
from ..core.tripataki import compute_tri_pataki
from ..core.predictions import (
    compute_house_predictions, compute_year_rating, compute_major_themes,
    compute_monthly_influences, compute_key_dates, compute_overall_prediction,
)

logger = logging.getLogger(__name__)


def generate_varshaphala(
    natal: NatalChart,
    target_year: int,
    today: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> ExtendedVarshaphalaResult:
    """
    Generate the complete annual horoscope for ``target_year``.

    Raises InvalidTargetYearError when target_year precedes the birth year
    and InvalidNatalChartError when the chart breaks a range invariant.
    Everything else degrades per item (skipped Saham, best-effort return
    moment) instead of raising.
    """
    if target_year < natal.birth_year:
        raise InvalidTargetYearError(target_year, natal.birth_year)
    natal.validate()

    settings = settings or get_settings()
    today = today or date.today()
    started = time.perf_counter()
    logger.info("Varshaphala %d for chart born %s", target_year, natal.birth_datetime.isoformat())

    # Step 1: Solar return
    sun = natal.position(Planet.SUN)
    if sun is None:
        logger.warning("Natal chart has no Sun; locating against 0°")
    fix = locate_solar_return(
        natal_sun=sun.longitude if sun else 0.0,
        target_year=target_year,
        birth_month=natal.birth_datetime.month,
        birth_day=natal.birth_datetime.day,
        timezone_offset=natal.timezone_offset,
        max_iterations=settings.solar_return_max_iterations,
        tolerance=settings.solar_return_tolerance_deg,
        motion=settings.sun_mean_daily_motion,
    )
    chart = assemble_solar_return_chart(natal, fix)

    # Step 2: Year lord, Muntha, Mudda Dasha
    year_lord = compute_year_lord(natal, target_year)
    muntha = compute_muntha(natal, target_year, chart)
    dasha = compute_mudda_dasha(chart, natal, chart.solar_return_time.date(), today)

    # Step 3: Tajika
    aspects = compute_tajika_aspects(
        chart,
        orbs=settings.aspect_orbs,
        angle_bonus=settings.aspect_angle_bonus,
        applying_bonus=settings.aspect_applying_bonus,
    )
    sahams = compute_sahams(chart)
    bala = compute_pancha_vargiya_bala(chart)
    tri_pataki = compute_tri_pataki(chart)

    # Step 4: Interpretation
    houses = compute_house_predictions(chart, muntha, year_lord)
    favorable, challenging = compute_monthly_influences(chart)

    result = ExtendedVarshaphalaResult(
        year=target_year,
        age=target_year - natal.birth_year,
        solar_return_chart=chart,
        year_lord=year_lord,
        year_lord_strength=planet_strength(year_lord, chart),
        year_lord_house=chart.house_of_body(year_lord),
        year_lord_dignity=year_lord_dignity(year_lord, chart),
        muntha=muntha,
        mudda_dasha=dasha,
        tajika_aspects=aspects,
        sahams=sahams,
        pancha_vargiya_bala=bala,
        tri_pataki_chakra=tri_pataki,
        house_predictions=houses,
        major_themes=compute_major_themes(chart, year_lord, muntha, aspects),
        favorable_months=favorable,
        challenging_months=challenging,
        overall_prediction=compute_overall_prediction(chart, year_lord, muntha, aspects, houses),
        year_rating=compute_year_rating(chart, year_lord, muntha, aspects, houses),
        key_dates=compute_key_dates(chart, dasha),
    )

    logger.info("Varshaphala %d done in %.1f ms (return %s, %d aspects, %d sahams)",
                target_year, (time.perf_counter() - started) * 1000.0,
                chart.solar_return_time.isoformat(), len(aspects), len(sahams))
    return result
