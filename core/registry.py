"""QUOTE API FILE PURPOSE
Purpose: registry of mounted features (read by the regression runner).
Hot path: low (read-only lookups).
Feature flags: QUOTE_FEATURE_*.
Failure mode: registry empty => app has only the root route.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class FeatureSpec:
    key: str
    enabled_env: str
    router: Any
    selftests: Callable[[], Any]


_ENABLED: dict[str, FeatureSpec] = {}


def set_enabled(specs: dict[str, FeatureSpec]) -> None:
    global _ENABLED
    _ENABLED = dict(specs)


def enabled_features() -> dict[str, FeatureSpec]:
    return dict(_ENABLED)
