# Varshaphala Engine - Core modules
from .ephemeris import normalize, signed_delta, julian_day, ayanamsa, planet_longitude
from .houses import compute_ascendant, house_of
from .solar_return import locate_solar_return, assemble_solar_return_chart
from .dignity import planet_strength, sign_lord
from .year_lord import compute_year_lord, compute_muntha
from .dasha import compute_mudda_dasha
from .tajika import compute_tajika_aspects
from .sahams import compute_sahams
from .bala import compute_pancha_vargiya_bala
from .tripataki import compute_tri_pataki
from .predictions import compute_house_predictions, compute_year_rating

__all__ = [
    "normalize", "signed_delta", "julian_day", "ayanamsa", "planet_longitude",
    "compute_ascendant", "house_of",
    "locate_solar_return", "assemble_solar_return_chart",
    "planet_strength", "sign_lord",
    "compute_year_lord", "compute_muntha",
    "compute_mudda_dasha",
    "compute_tajika_aspects",
    "compute_sahams",
    "compute_pancha_vargiya_bala",
    "compute_tri_pataki",
    "compute_house_predictions", "compute_year_rating",
]
