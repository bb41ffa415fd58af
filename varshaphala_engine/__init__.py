"""
Varshaphala Engine
==================
Annual (solar-return) horoscope from a previously computed natal chart.

Quick start:
    from datetime import datetime
    from varshaphala_engine import generate_varshaphala
    from varshaphala_engine.core.models import NatalChart, NatalPlanet, Planet

    natal = NatalChart(
        birth_datetime=datetime(1990, 6, 15, 10, 30),
        latitude=28.6139, longitude=77.2090,
        ascendant=125.4,
        planets=(NatalPlanet.at(Planet.SUN, 60.2), NatalPlanet.at(Planet.MOON, 211.8)),
        timezone_offset=5.5,
    )
    result = generate_varshaphala(natal, target_year=2025)
"""

from .tools.varshaphala import generate_varshaphala

__version__ = "1.0.0"
__all__ = ["generate_varshaphala"]
