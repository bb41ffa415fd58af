"""
models.py  --  Records of the annual (solar-return) horoscope
=============================================================
Closed sets (bodies, signs, aspect types, strength tiers) are enums with
their display metadata attached; every derived record is a frozen
dataclass so a finished ExtendedVarshaphalaResult can be shared and
cached freely.

``to_dict()`` on any record flattens it to JSON-ready primitives
(enums → display names, dates → ISO strings).
"""

import math
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Dict, Optional, Tuple

from ..errors import InvalidNatalChartError, MissingBodyError


# ── Closed sets ────────────────────────────────────────────────

class Planet(str, Enum):
    SUN     = "Sun"
    MOON    = "Moon"
    MARS    = "Mars"
    MERCURY = "Mercury"
    JUPITER = "Jupiter"
    VENUS   = "Venus"
    SATURN  = "Saturn"
    RAHU    = "Rahu"
    KETU    = "Ketu"

    @property
    def display_name(self) -> str:
        return self.value


class Sign(str, Enum):
    ARIES       = "Aries"
    TAURUS      = "Taurus"
    GEMINI      = "Gemini"
    CANCER      = "Cancer"
    LEO         = "Leo"
    VIRGO       = "Virgo"
    LIBRA       = "Libra"
    SCORPIO     = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN   = "Capricorn"
    AQUARIUS    = "Aquarius"
    PISCES      = "Pisces"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def num(self) -> int:
        return SIGNS.index(self)

    @classmethod
    def from_index(cls, idx: int) -> "Sign":
        return SIGNS[idx % 12]

    @classmethod
    def from_longitude(cls, lon: float) -> "Sign":
        return SIGNS[int((lon % 360.0) // 30.0) % 12]


SIGNS: Tuple[Sign, ...] = tuple(Sign)

# Chart/map order used everywhere a full body list is iterated
CHART_BODIES: Tuple[Planet, ...] = tuple(Planet)

# Weekday rotation: Sunday first
WEEKDAY_ORDER: Tuple[Planet, ...] = (
    Planet.SUN, Planet.MOON, Planet.MARS, Planet.MERCURY,
    Planet.JUPITER, Planet.VENUS, Planet.SATURN,
)
CLASSICAL_BODIES = WEEKDAY_ORDER


class TajikaAspectType(Enum):
    ITHASALA        = ("Ithasala", "Applying conjunction/aspect - promises fulfillment", True)
    EASARAPHA       = ("Easarapha", "Separating aspect - event has passed or is fading", False)
    NAKTA           = ("Nakta", "Transmission of light with reception", True)
    YAMAYA          = ("Yamaya", "Translation of light between significators", True)
    MANAU           = ("Manau", "Reverse application - slower applies to faster", False)
    KAMBOOLA        = ("Kamboola", "Powerful Ithasala with angular placement", True)
    GAIRI_KAMBOOLA  = ("Gairi-Kamboola", "Weaker form of Kamboola", True)
    KHALASARA       = ("Khalasara", "Frustration - application prevented", False)
    RADDA           = ("Radda", "Refranation - retrograde breaks aspect", False)
    DUHPHALI_KUTTHA = ("Duhphali-Kuttha", "Malefic intervention breaks yoga", False)
    TAMBIRA         = ("Tambira", "Indirect aspect through intermediary", True)
    KUTTHA          = ("Kuttha", "Impediment to aspect completion", False)
    DURAPHA         = ("Durapha", "Hard aspect causing difficulties", False)
    MUTHASHILA      = ("Muthashila", "Mutual application between planets", True)
    IKKABALA        = ("Ikkabala", "Unity of strength between planets", True)

    def __init__(self, display_name: str, description: str, is_positive: bool):
        self.display_name = display_name
        self.description = description
        self.is_positive = is_positive


class AspectStrength(Enum):
    VERY_STRONG = ("Very Strong", 1.0)
    STRONG      = ("Strong", 0.8)
    MODERATE    = ("Moderate", 0.6)
    WEAK        = ("Weak", 0.4)
    VERY_WEAK   = ("Very Weak", 0.2)

    def __init__(self, display_name: str, weight: float):
        self.display_name = display_name
        self.weight = weight


class KeyDateType(str, Enum):
    FAVORABLE   = "FAVORABLE"
    CHALLENGING = "CHALLENGING"
    IMPORTANT   = "IMPORTANT"
    TRANSIT     = "TRANSIT"


# ── Serialisation ──────────────────────────────────────────────

def _plain(value):
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return getattr(value, "display_name", value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(_plain(k)): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class _Record:
    def to_dict(self) -> dict:
        return _plain(self)


# ── Natal chart (input) ────────────────────────────────────────

@dataclass(frozen=True)
class NatalPlanet(_Record):
    planet:         Planet
    longitude:      float
    speed:          float = 0.0
    is_retrograde:  bool = False
    sign:           Optional[Sign] = None
    degree:         int = 0
    minute:         int = 0
    second:         int = 0
    nakshatra:      Optional[int] = None     # 0-based mansion index
    nakshatra_pada: int = 1
    house:          int = 1
    latitude:       float = 0.0
    distance:       float = 1.0

    @classmethod
    def at(cls, planet: Planet, longitude: float, speed: float = 0.0,
           house: int = 1, is_retrograde: Optional[bool] = None) -> "NatalPlanet":
        """Build a natal position, deriving sign, DMS and mansion from longitude."""
        lon = longitude % 360.0
        deg_in_sign = lon % 30.0
        d = int(deg_in_sign)
        m = int((deg_in_sign - d) * 60)
        s = int(round(((deg_in_sign - d) * 60 - m) * 60)) % 60
        span = 360.0 / 27.0
        return cls(
            planet=Planet(planet),
            longitude=lon,
            speed=speed,
            is_retrograde=speed < 0 if is_retrograde is None else is_retrograde,
            sign=Sign.from_longitude(lon),
            degree=d, minute=m, second=s,
            nakshatra=int(lon / span) % 27,
            nakshatra_pada=int((lon % span) / (span / 4)) % 4 + 1,
            house=house,
        )


@dataclass(frozen=True)
class NatalChart(_Record):
    """Previously computed birth chart; all longitudes sidereal."""
    birth_datetime:  datetime                 # local civil time
    latitude:        float
    longitude:       float                    # east positive
    ascendant:       float
    planets:         Tuple[NatalPlanet, ...]
    ayanamsa:        float = 0.0
    timezone_offset: float = 0.0              # hours east of UTC

    @property
    def birth_year(self) -> int:
        return self.birth_datetime.year

    @property
    def birth_utc(self) -> datetime:
        return self.birth_datetime - timedelta(hours=self.timezone_offset)

    def position(self, planet: Planet) -> Optional[NatalPlanet]:
        for p in self.planets:
            if p.planet == planet:
                return p
        return None

    def validate(self) -> "NatalChart":
        """Check the range invariants; raise InvalidNatalChartError on breach."""
        if not (0.0 <= self.ascendant < 360.0) or math.isnan(self.ascendant):
            raise InvalidNatalChartError(f"ascendant {self.ascendant} outside [0, 360)")
        if not (-90.0 <= self.latitude <= 90.0):
            raise InvalidNatalChartError(f"latitude {self.latitude} outside [-90, 90]")
        for p in self.planets:
            if not (0.0 <= p.longitude < 360.0):
                raise InvalidNatalChartError(
                    f"{p.planet.value} longitude {p.longitude} outside [0, 360)")
            if not (1 <= p.house <= 12):
                raise InvalidNatalChartError(f"{p.planet.value} house {p.house} outside [1, 12]")
            if not (1 <= p.nakshatra_pada <= 4):
                raise InvalidNatalChartError(
                    f"{p.planet.value} pada {p.nakshatra_pada} outside [1, 4]")
            if p.nakshatra is not None and not (0 <= p.nakshatra < 27):
                raise InvalidNatalChartError(
                    f"{p.planet.value} nakshatra {p.nakshatra} outside [0, 27)")
        return self


# ── Solar return chart ─────────────────────────────────────────

@dataclass(frozen=True)
class PlanetPosition(_Record):
    planet:         Planet
    longitude:      float
    sign:           Sign
    house:          int
    degree:         float
    nakshatra:      str
    nakshatra_pada: int
    is_retrograde:  bool
    speed:          float

    def degree_formatted(self) -> str:
        d = int(self.degree)
        m = int((self.degree - d) * 60)
        return f"{d}°{m:02d}'"


@dataclass(frozen=True)
class SolarReturnFix(_Record):
    """Result of the locator: best estimate plus convergence diagnostics."""
    moment:     datetime        # local civil time
    iterations: int
    residual:   float           # |natal − located| Sun longitude, degrees
    converged:  bool


@dataclass(frozen=True)
class SolarReturnChart(_Record):
    solar_return_time: datetime
    sun_longitude:     float
    ascendant:         Sign
    ascendant_degree:  float
    moon_sign:         Sign
    moon_nakshatra:    str
    planet_positions:  Dict[Planet, PlanetPosition]
    iterations:        int = 0
    residual:          float = 0.0

    @property
    def ascendant_longitude(self) -> float:
        return self.ascendant.num * 30.0 + self.ascendant_degree

    def position(self, planet: Planet) -> Optional[PlanetPosition]:
        return self.planet_positions.get(planet)

    def require(self, planet: Planet) -> PlanetPosition:
        pos = self.planet_positions.get(planet)
        if pos is None:
            raise MissingBodyError(planet)
        return pos

    def house_of_body(self, planet: Planet) -> int:
        pos = self.planet_positions.get(planet)
        return pos.house if pos is not None else 1


# ── Derived records ────────────────────────────────────────────

@dataclass(frozen=True)
class MunthaResult(_Record):
    sign:           Sign
    house:          int
    degree:         float
    lord:           Planet
    lord_house:     int
    lord_strength:  str
    interpretation: str
    themes:         Tuple[str, ...]


@dataclass(frozen=True)
class MuddaAntardasha(_Record):
    planet:         Planet
    start_date:     date
    end_date:       date
    days:           int
    interpretation: str


@dataclass(frozen=True)
class MuddaDashaPeriod(_Record):
    planet:          Planet
    start_date:      date
    end_date:        date
    days:            int
    sub_periods:     Tuple[MuddaAntardasha, ...]
    planet_strength: str
    houses_ruled:    Tuple[int, ...]
    prediction:      str
    keywords:        Tuple[str, ...]
    is_current:      bool
    progress:        float


@dataclass(frozen=True)
class TajikaAspect(_Record):
    type:               TajikaAspectType
    planet1:            Planet
    planet2:            Planet
    planet1_longitude:  float
    planet2_longitude:  float
    orb:                float
    aspect_angle:       int
    is_applying:        bool
    effect_description: str
    strength:           AspectStrength
    related_houses:     Tuple[int, ...]
    prediction:         str


@dataclass(frozen=True)
class Saham(_Record):
    name:               str
    sanskrit_name:      str
    formula:            str
    longitude:          float
    sign:               Sign
    house:              int
    degree:             float
    lord:               Planet
    lord_house:         int
    lord_strength:      str
    interpretation:     str
    is_active:          bool
    activation_periods: Tuple[str, ...]


@dataclass(frozen=True)
class PanchaVargiyaBala(_Record):
    planet:       Planet
    uchcha:       float
    hadda:        float
    dreshkana:    float
    navamsha:     float
    dwadashamsha: float
    total:        float
    category:     str


@dataclass(frozen=True)
class TriPatakiSector(_Record):
    name:      str
    signs:     Tuple[Sign, ...]
    planets:   Tuple[Planet, ...]
    influence: str


@dataclass(frozen=True)
class TriPatakiChakra(_Record):
    rising_sign:        Sign
    sectors:            Tuple[TriPatakiSector, ...]
    dominant_influence: str
    interpretation:     str


@dataclass(frozen=True)
class HousePrediction(_Record):
    house:            int
    sign_on_cusp:     Sign
    house_lord:       Planet
    lord_position:    int
    planets_in_house: Tuple[Planet, ...]
    strength:         str
    keywords:         Tuple[str, ...]
    prediction:       str
    rating:           float
    specific_events:  Tuple[str, ...]


@dataclass(frozen=True)
class KeyDate(_Record):
    date:        date
    event:       str
    type:        KeyDateType
    description: str


@dataclass(frozen=True)
class ExtendedVarshaphalaResult(_Record):
    year:                int
    age:                 int
    solar_return_chart:  SolarReturnChart
    year_lord:           Planet
    year_lord_strength:  str
    year_lord_house:     int
    year_lord_dignity:   str
    muntha:              MunthaResult
    mudda_dasha:         Tuple[MuddaDashaPeriod, ...]
    tajika_aspects:      Tuple[TajikaAspect, ...]
    sahams:              Tuple[Saham, ...]
    pancha_vargiya_bala: Tuple[PanchaVargiyaBala, ...]
    tri_pataki_chakra:   TriPatakiChakra
    house_predictions:   Tuple[HousePrediction, ...]
    major_themes:        Tuple[str, ...]
    favorable_months:    Tuple[int, ...]
    challenging_months:  Tuple[int, ...]
    overall_prediction:  str
    year_rating:         float
    key_dates:           Tuple[KeyDate, ...] = field(default_factory=tuple)

    def current_period(self) -> Optional[MuddaDashaPeriod]:
        for p in self.mudda_dasha:
            if p.is_current:
                return p
        return None
