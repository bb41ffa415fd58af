"""
tripataki.py
============
Tri-Pataki Chakra: the three trine "flags" counted from the annual
ascendant sign, with the bodies that occupy each.
"""

from typing import Sequence

from .models import CHART_BODIES, Planet, SolarReturnChart, Sign, TriPatakiChakra, TriPatakiSector

# (name, sign offsets from the ascendant sign, interpretation template)
SECTORS = (
    ("Dharma (1, 5, 9)", (0, 4, 8),
     "The Dharma trikona is activated with {n} planet(s), bringing focus to "
     "righteousness, fortune, and higher learning."),
    ("Artha (2, 6, 10)", (1, 5, 9),
     "The Artha trikona with {n} planet(s) emphasizes wealth accumulation, "
     "career progress, and practical achievements."),
    ("Kama (3, 7, 11)", (2, 6, 10),
     "The Kama trikona holding {n} planet(s) highlights relationships, "
     "desires, and social connections."),
)

DOMINANT_INFLUENCE = {
    "Dharma": "Spiritual growth and righteous pursuits dominate the year",
    "Artha":  "Material prosperity and career advancement are emphasized",
    "Kama":   "Relationships and desires take center stage",
}
BALANCED = "Balanced influences across all life areas"

SECTOR_BENEFICS = (Planet.JUPITER, Planet.VENUS, Planet.MOON, Planet.MERCURY)
SECTOR_MALEFICS = (Planet.SATURN, Planet.MARS, Planet.RAHU, Planet.KETU)


def sector_influence(planets: Sequence[Planet]) -> str:
    if not planets:
        return "No planets occupy this sector, indicating a quieter year for these matters."
    benefics = [p for p in planets if p in SECTOR_BENEFICS]
    malefics = [p for p in planets if p in SECTOR_MALEFICS]
    if len(benefics) > len(malefics):
        names = ", ".join(p.value for p in benefics)
        return f"Benefic planets {names} bring favorable influences to this sector."
    if len(malefics) > len(benefics):
        names = ", ".join(p.value for p in malefics)
        return f"Malefic planets {names} bring challenges requiring effort in this sector."
    return "Mixed planetary influences in this sector suggest variable results."


def compute_tri_pataki(chart: SolarReturnChart) -> TriPatakiChakra:
    asc = chart.ascendant.num
    sectors = []
    parts = []
    for name, offsets, template in SECTORS:
        signs = tuple(Sign.from_index(asc + o) for o in offsets)
        planets = tuple(p for p in CHART_BODIES
                        if p in chart.planet_positions and chart.planet_positions[p].sign in signs)
        sectors.append(TriPatakiSector(
            name=name,
            signs=signs,
            planets=planets,
            influence=sector_influence(planets),
        ))
        if planets:
            parts.append(template.format(n=len(planets)))

    # max() keeps the first sector on ties
    dominant = max(sectors, key=lambda s: len(s.planets))
    if dominant.planets:
        influence = DOMINANT_INFLUENCE[dominant.name.split(" ")[0]]
    else:
        influence = BALANCED

    interpretation = " ".join(parts) or (
        "The Tri-Pataki Chakra shows a balanced distribution of planetary "
        "energies across all life sectors.")

    return TriPatakiChakra(
        rising_sign=chart.ascendant,
        sectors=tuple(sectors),
        dominant_influence=influence,
        interpretation=interpretation,
    )
