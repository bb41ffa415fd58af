"""
API tests for the Varshaphala FastAPI backend.
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from main import app, results
from varshaphala_engine.core.ephemeris import planet_longitude
from varshaphala_engine.core.models import CHART_BODIES

BIRTH = datetime(1990, 6, 15, 10, 30)
TZ = 5.5


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


@pytest.fixture
def payload():
    ut = BIRTH - timedelta(hours=TZ)
    return {
        "natal_chart": {
            "birth_datetime": BIRTH.isoformat(),
            "latitude": 28.6139,
            "longitude": 77.2090,
            "ascendant": 125.4,
            "timezone_offset": TZ,
            "planets": [
                {"planet": p.value, "longitude": planet_longitude(p, ut)}
                for p in CHART_BODIES
            ],
        },
        "target_year": 2025,
        "today_date": "2025-09-01",
    }


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert "POST /api/varshaphala" in body["endpoints"]


def test_varshaphala_ok(client, payload):
    r = client.post("/api/varshaphala", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    vp = body["varshaphala"]
    assert vp["year"] == 2025
    assert vp["age"] == 35
    assert len(vp["mudda_dasha"]) == 9
    assert len(vp["house_predictions"]) == 12
    assert set(vp["solar_return_chart"]["planet_positions"]) == {p.value for p in CHART_BODIES}
    assert 1.0 <= vp["year_rating"] <= 5.0


def test_varshaphala_is_cached(client, payload):
    client.post("/api/varshaphala", json=payload)
    hits = results.stats()["hits"]
    client.post("/api/varshaphala", json=payload)
    assert results.stats()["hits"] == hits + 1


def test_target_year_before_birth_is_400(client, payload):
    payload["target_year"] = 1985
    r = client.post("/api/varshaphala", json=payload)
    assert r.status_code == 400
    assert "1985" in r.json()["detail"]


def test_out_of_range_longitude_is_422(client, payload):
    payload["natal_chart"]["planets"][0]["longitude"] = 400.0
    r = client.post("/api/varshaphala", json=payload)
    assert r.status_code == 422
