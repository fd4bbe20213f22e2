"""QUOTE API FILE PURPOSE
Purpose: discover and mount one-file feature modules from `features/`.
Hot path: no (startup only).
Feature flags: QUOTE_FEATURE_* (unset => enabled).
Failure mode: invalid feature => skipped (warning only when QUOTE_API_DEBUG=1).
"""

from __future__ import annotations

import importlib
import pkgutil
import re
from typing import Any

from fastapi import APIRouter, FastAPI

from core.config import env_flag, is_debug
from core.logging import logger
from core.registry import FeatureSpec, set_enabled

_ENV_RE = re.compile(r"^QUOTE_FEATURE_[A-Z0-9_]+$")

REQUIRED_KEYS = frozenset({"key", "router", "enabled_env", "selftests"})


def _validate(feature: Any) -> dict[str, Any] | None:
    if not isinstance(feature, dict):
        return None
    if not REQUIRED_KEYS.issubset(feature.keys()):
        return None
    if not isinstance(feature.get("key"), str) or not feature["key"]:
        return None
    env = feature.get("enabled_env")
    if not isinstance(env, str) or not _ENV_RE.match(env):
        return None
    if not isinstance(feature.get("router"), APIRouter) or not callable(feature.get("selftests")):
        return None
    return feature


def load_features(app: FastAPI) -> None:
    import features  # package

    enabled: dict[str, FeatureSpec] = {}

    for mod in pkgutil.iter_modules(features.__path__):
        if mod.ispkg or mod.name.startswith("_"):
            continue
        m = importlib.import_module(f"features.{mod.name}")
        d = _validate(getattr(m, "FEATURE", None))
        if d is None:
            if is_debug():
                logger.warning("FEATURE_INVALID module=%s", mod.name)
            continue

        spec = FeatureSpec(
            key=d["key"],
            enabled_env=d["enabled_env"],
            router=d["router"],
            selftests=d["selftests"],
        )
        if env_flag(spec.enabled_env, "1"):
            app.include_router(spec.router)
            enabled[spec.key] = spec

    set_enabled(enabled)

    if is_debug():
        logger.info("FEATURES_ENABLED keys=%s", sorted(enabled.keys()))
