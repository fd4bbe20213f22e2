"""QUOTE API FILE PURPOSE
Purpose: read-only quote routes (random pick, tag filter, full listing).
Hot path: yes (bounded in-memory scan; no I/O).
Feature flags: QUOTE_FEATURE_QUOTES (default ON).
Failure mode: tag with no matches => 404 {"error": ...}; everything else is served.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.catalog import Quote, TagNotFound, build_catalog, get_catalog
from core.config import is_debug
from core.logging import logger

router = APIRouter(tags=["quotes"])


@router.get("/quote/random", response_model=Quote)
async def random_quote() -> Any:
    return get_catalog().random_quote()


@router.get(
    "/quotes/tag/{tag}",
    response_model=list[Quote],
    responses={404: {"description": "No quotes found with tag"}},
)
async def quotes_by_tag(tag: str) -> Any:
    try:
        return list(get_catalog().quotes_by_tag(tag))
    except TagNotFound as e:
        if is_debug():
            logger.info("QUOTES_TAG_MISS tag=%s", tag)
        return JSONResponse(status_code=404, content={"error": str(e)})


@router.get("/quotes", response_model=list[Quote])
async def all_quotes() -> Any:
    return list(get_catalog().all_quotes())


def selftests() -> dict[str, Any]:
    # deterministic; fresh seeded catalog, never the shared one
    catalog = build_catalog(seed=0)
    if len(catalog.all_quotes()) != 10:
        return {"ok": False, "message": f"expected 10 seed quotes, got {len(catalog)}"}
    if catalog.random_quote() not in catalog.all_quotes():
        return {"ok": False, "message": "random quote not in catalog"}
    if catalog.quotes_by_tag("PROGRAMMING") != catalog.quotes_by_tag("programming"):
        return {"ok": False, "message": "tag lookup is case-sensitive"}
    try:
        catalog.quotes_by_tag("nonexistent-tag-xyz")
        return {"ok": False, "message": "unknown tag did not raise TagNotFound"}
    except TagNotFound:
        pass
    return {"ok": True, "message": "quotes selftests ok"}


FEATURE = {
    "key": "quotes",
    "router": router,
    "enabled_env": "QUOTE_FEATURE_QUOTES",
    "selftests": selftests,
}
