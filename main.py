"""
Varshaphala Annual Horoscope API -- FastAPI Backend v1.0
========================================================
Endpoints:
  POST /api/varshaphala  -- Annual Solar Return (Varshaphala / Tajika)
  GET  /api/health       -- Health check

Run with:
  uvicorn main:app --reload --port 8000
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from varshaphala_engine import __version__, generate_varshaphala
from varshaphala_engine.config import get_settings
from varshaphala_engine.core.models import NatalChart, NatalPlanet, Planet
from varshaphala_engine.tools.cache import ResultCache

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Varshaphala API",
    version=__version__,
    description="Annual solar-return horoscope: Tajika aspects, Sahams, Mudda Dasha, predictions",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

results = ResultCache(capacity=settings.cache_capacity)


# ── Request Models ─────────────────────────────────────────────

class NatalPlanetModel(BaseModel):
    planet:         Planet
    longitude:      float         = Field(..., ge=0,   lt=360)
    speed:          float         = 0.0
    is_retrograde:  Optional[bool] = None
    house:          int           = Field(1,    ge=1,   le=12)


class NatalChartModel(BaseModel):
    birth_datetime:  datetime
    latitude:        float = Field(..., ge=-90,  le=90)
    longitude:       float = Field(..., ge=-180, le=180)
    ascendant:       float = Field(..., ge=0,    lt=360)
    planets:         List[NatalPlanetModel]
    ayanamsa:        float = 0.0
    timezone_offset: float = Field(0.0, ge=-12,  le=14)

    def to_natal(self) -> NatalChart:
        return NatalChart(
            birth_datetime=self.birth_datetime,
            latitude=self.latitude,
            longitude=self.longitude,
            ascendant=self.ascendant,
            planets=tuple(
                NatalPlanet.at(p.planet, p.longitude, speed=p.speed,
                               house=p.house, is_retrograde=p.is_retrograde)
                for p in self.planets
            ),
            ayanamsa=self.ayanamsa,
            timezone_offset=self.timezone_offset,
        )


class VarshaphalaRequest(BaseModel):
    natal_chart: NatalChartModel
    target_year: int           = Field(..., ge=1800, le=2200)
    today_date:  Optional[date] = Field(None,
                                        description="Date for 'current period' analysis YYYY-MM-DD")


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": "Varshaphala API",
        "version": __version__,
        "cache": results.stats(),
        "endpoints": [
            "POST /api/varshaphala",
        ],
    }


@app.post("/api/varshaphala")
def varshaphala_endpoint(data: VarshaphalaRequest):
    """
    Generate a complete Varshaphala (annual solar-return horoscope).

    Returns:
    • Solar return moment and the annual chart, all 9 bodies housed
    • Year lord with strength, house and dignity
    • Muntha with lord and themes
    • Mudda Dasha: 9 periods with sub-periods, current period flagged
    • Tajika aspects, Sahams, Pancha Vargiya Bala, Tri-Pataki Chakra
    • 12 house predictions, themes, months, key dates, overall narrative
    """
    today = data.today_date or date.today()
    try:
        natal = data.natal_chart.to_natal()
        key = (natal, data.target_year, today)
        result = results.get_or_compute(
            key, lambda: generate_varshaphala(natal, data.target_year, today=today))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Varshaphala %d failed", data.target_year)
        raise HTTPException(status_code=500, detail=f"Varshaphala error: {e}")

    return {
        "success": True,
        "varshaphala": result.to_dict(),
    }
