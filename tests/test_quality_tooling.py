from __future__ import annotations

import importlib.util
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from core.app import create_app
from core.quality import run_regression
from core.registry import FeatureSpec, enabled_features, set_enabled


ROOT = Path(__file__).resolve().parent.parent


def _load_registry_check():
    spec = importlib.util.spec_from_file_location(
        "feature_registry_check", ROOT / "scripts" / "feature_registry_check.py"
    )
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_run_regression_script_invocation_has_stable_import_path(tmp_path) -> None:
    report_path = tmp_path / "report.json"
    env = os.environ.copy()
    env.pop("PYTHONPATH", None)
    env["QUOTE_FEATURE_QUOTES"] = "1"
    env["QUOTE_FEATURE_STATS"] = "1"
    env["QUOTE_QUALITY_REPORT_PATH"] = str(report_path)
    proc = subprocess.run(
        [sys.executable, "scripts/run_regression.py"],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0, proc.stderr
    assert '"status": "ok"' in proc.stdout
    written = json.loads(report_path.read_text(encoding="utf-8"))
    assert written["enabled_features"] == ["quotes", "stats"]


def test_run_regression_passes_for_enabled_features(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("QUOTE_QUALITY_REPORT_PATH", str(tmp_path / "out" / "latest.json"))
    monkeypatch.delenv("QUOTE_FEATURE_QUOTES", raising=False)
    monkeypatch.delenv("QUOTE_FEATURE_STATS", raising=False)
    create_app()

    out = run_regression()

    assert out["status"] == "ok"
    assert {r["feature"] for r in out["results"]} == set(enabled_features())
    assert (tmp_path / "out" / "latest.json").exists()


def test_run_regression_records_selftest_exception_in_message(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("QUOTE_QUALITY_REPORT_PATH", str(tmp_path / "report.json"))

    def _boom() -> dict:
        raise RuntimeError("boom")

    spec = FeatureSpec(
        key="boom_feature",
        enabled_env="QUOTE_FEATURE_BOOM",
        router=object(),
        selftests=_boom,
    )
    set_enabled({"boom_feature": spec})
    try:
        out = run_regression()
    finally:
        set_enabled({})

    assert out["status"] == "fail"
    result = out["results"][0]
    assert result["feature"] == "boom_feature"
    assert result["ok"] is False
    assert result["message"] == "RuntimeError: boom"


def test_feature_registry_check_accepts_shipped_features(capsys) -> None:
    check = _load_registry_check()
    check.main()
    assert "FEATURE_CHECK_OK" in capsys.readouterr().out


def test_feature_registry_check_rejects_cross_feature_import(tmp_path) -> None:
    check = _load_registry_check()
    bad = tmp_path / "bad.py"
    bad.write_text(
        "from features.quotes import router\n"
        'FEATURE = {"key": "bad", "router": router, "enabled_env": "QUOTE_FEATURE_BAD", "selftests": None}\n',
        encoding="utf-8",
    )
    with pytest.raises(SystemExit):
        check.main(tmp_path)
