"""
API Integration Tests — Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - Route registration issues
  - Request validation regressions
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="module")
def client():
    """Create a test client for the SwearCounter API."""
    from api.main import app
    with TestClient(app) as c:
        yield c


# ============================================================
# HEALTH & META
# ============================================================

class TestHealth:

    def test_health_returns_200(self, client):
        r = client.get("/health")
        assert r.status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["apology_patterns"] == 6
        assert data["vocabulary_size"] > 0
        assert "engine_version" in data

    def test_version_headers(self, client):
        r = client.get("/health")
        assert "X-SwearCounter-Version" in r.headers
        assert "X-Engine-Version" in r.headers


# ============================================================
# SCAN
# ============================================================

class TestScan:

    def test_user_scan(self, client):
        r = client.post("/scan", json={"text": "This is bullsh*t", "role": "user"})
        assert r.status_code == 200
        data = r.json()
        assert data["assistant"] is None
        assert data["user"]["total_swears"] == 0
        labels = {m["label"] for m in data["user"]["fuzzy_matches"]}
        assert "bullshit" in labels

    def test_indirect_swearing(self, client):
        r = client.post("/scan", json={"text": "This makes no sense!!!"})
        user = r.json()["user"]
        assert user["has_indirect_swearing"] is True
        assert user["frustration_intensity"] == pytest.approx(0.65)
        assert user["indirect_matches"][0]["category"] == "frustration"

    def test_threshold_override(self, client):
        r = client.post("/scan", json={
            "text": "This makes no sense!!!",
            "semantic_threshold": 0.9,
        })
        assert r.json()["user"]["has_indirect_swearing"] is False

    def test_assistant_scan(self, client):
        r = client.post("/scan", json={
            "text": "My apologies! Great catch.",
            "role": "assistant",
        })
        data = r.json()
        assert data["user"] is None
        assert data["assistant"]["apologies"] == {"my apologies": 1}
        assert data["assistant"]["sycophancy"] == {"Great catch": 1}

    def test_both_roles(self, client):
        r = client.post("/scan", json={"text": "Sorry for the stupid bug", "role": "both"})
        data = r.json()
        assert data["user"]["swears"] == {"stupid": 1}
        assert data["assistant"]["apologies"] == {"sorry for": 1}

    def test_empty_text_rejected(self, client):
        r = client.post("/scan", json={"text": ""})
        assert r.status_code == 422

    def test_bad_role_rejected(self, client):
        r = client.post("/scan", json={"text": "hi", "role": "system"})
        assert r.status_code == 422

    def test_text_limit_follows_settings(self, client):
        from swearcounter.config import settings

        at_limit = client.post("/scan", json={"text": "a" * settings.MAX_TEXT_LENGTH})
        over_limit = client.post("/scan", json={"text": "a" * (settings.MAX_TEXT_LENGTH + 1)})
        assert at_limit.status_code == 200
        assert over_limit.status_code == 422

    def test_scan_runs_off_the_event_loop(self, client, monkeypatch):
        import asyncio

        calls = []
        real_to_thread = asyncio.to_thread

        async def recording_to_thread(func, *args, **kwargs):
            calls.append(func.__name__)
            return await real_to_thread(func, *args, **kwargs)

        monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)
        r = client.post("/scan", json={"text": "fuck this"})
        assert r.status_code == 200
        assert calls == ["_scan"]


class TestScanBatch:

    def test_batch(self, client):
        r = client.post("/scan/batch", json={"items": [
            {"text": "fuck this"},
            {"text": "Happy to help!", "role": "assistant"},
        ]})
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 2
        assert data["results"][0]["user"]["swears"] == {"fuck": 1}
        assert data["results"][1]["assistant"]["sycophancy"] == {"Happy to help": 1}

    def test_empty_batch_rejected(self, client):
        r = client.post("/scan/batch", json={"items": []})
        assert r.status_code == 422


# ============================================================
# PATTERNS & VOCABULARY
# ============================================================

class TestPatterns:

    def test_single_catalog(self, client):
        data = client.get("/patterns", params={"catalog": "apology"}).json()
        assert data["total"] == 6
        assert {p["catalog"] for p in data["patterns"]} == {"apology"}

    def test_all_catalogs(self, client):
        data = client.get("/patterns").json()
        assert {p["catalog"] for p in data["patterns"]} == {
            "swear", "apology", "sycophancy",
        }

    def test_unknown_catalog_rejected(self, client):
        r = client.get("/patterns", params={"catalog": "insults"})
        assert r.status_code == 422

    def test_vocabulary(self, client):
        data = client.get("/vocabulary").json()
        assert "bullshit" in data["vocabulary"]
        assert data["obfuscation_bases"] == [
            "fuck", "shit", "ass", "damn", "hell", "bitch",
        ]
