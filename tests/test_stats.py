from __future__ import annotations

import re

from fastapi.testclient import TestClient

import core.catalog as catalog_mod
import features.stats as stats_feature
from core.app import create_app


def test_stats_reports_working_set(monkeypatch) -> None:
    monkeypatch.delenv("QUOTE_FEATURE_STATS", raising=False)
    client = TestClient(create_app())

    resp = client.get("/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert list(body.keys()) == ["processInfo"]
    assert re.fullmatch(r"[1-9][0-9]* MB", body["processInfo"]["workingSet"])


def test_stats_is_measured_per_call(monkeypatch) -> None:
    monkeypatch.delenv("QUOTE_FEATURE_STATS", raising=False)
    client = TestClient(create_app())
    readings = iter([10 * 1024 * 1024, 25 * 1024 * 1024])
    monkeypatch.setattr(catalog_mod, "working_set_bytes", lambda: next(readings))

    assert client.get("/stats").json() == {"processInfo": {"workingSet": "10 MB"}}
    assert client.get("/stats").json() == {"processInfo": {"workingSet": "25 MB"}}


def test_stats_selftest_flags_bad_reading(monkeypatch) -> None:
    assert stats_feature.selftests()["ok"] is True

    monkeypatch.setattr(catalog_mod, "working_set_bytes", lambda: 0)
    out = stats_feature.selftests()
    assert out["ok"] is False
    assert "0 MB" in out["message"]
