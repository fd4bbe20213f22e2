"""QUOTE API FILE PURPOSE
Purpose: process stats endpoint (current working-set memory).
Hot path: no.
Feature flags: QUOTE_FEATURE_STATS (default ON).
Failure mode: best-effort snapshot; no consistency across calls.
"""

from __future__ import annotations

import re
from typing import Any

from fastapi import APIRouter

from core.catalog import get_catalog

router = APIRouter(tags=["stats"])

_WORKING_SET_RE = re.compile(r"^[1-9][0-9]* MB$")


@router.get("/stats")
async def stats() -> dict[str, Any]:
    return {"processInfo": {"workingSet": get_catalog().stats()}}


def selftests() -> dict[str, Any]:
    reading = get_catalog().stats()
    if not _WORKING_SET_RE.match(reading):
        return {"ok": False, "message": f"unexpected working set format: {reading!r}"}
    return {"ok": True, "message": f"working set {reading}"}


FEATURE = {
    "key": "stats",
    "router": router,
    "enabled_env": "QUOTE_FEATURE_STATS",
    "selftests": selftests,
}
