"""QUOTE API FILE PURPOSE
Purpose: environment configuration helpers (safe defaults).
Hot path: yes (read-only env lookups; lightweight).
Feature flags: QUOTE_API_DEBUG, QUOTE_FEATURE_*.
Failure mode: safe defaults when unset or malformed.
"""

from __future__ import annotations

import os


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def env_str(name: str, default: str = "") -> str:
    v = (os.getenv(name) or "").strip()
    return v or default


def env_int(name: str, default: int | None = None) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def is_debug() -> bool:
    return env_flag("QUOTE_API_DEBUG", "0")
