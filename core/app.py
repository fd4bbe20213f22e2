"""QUOTE API FILE PURPOSE
Purpose: create FastAPI app, serve root metadata, and mount enabled features.
Hot path: no (startup only; `/` is static).
Feature flags: QUOTE_FEATURE_*.
Failure mode: start with the root route even if no features enabled; bad seed data fails fast.
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import FastAPI

from core.catalog import get_catalog
from core.feature_loader import load_features
from core.logging import startup_logger

ENDPOINTS = {
    "randomQuote": "/quote/random",
    "quotesByTag": "/quotes/tag/{tag}",
    "allQuotes": "/quotes",
    "stats": "/stats",
}


def create_app() -> FastAPI:
    t0 = time.perf_counter()
    app = FastAPI(title="Quote API")

    @app.get("/")
    async def root() -> dict[str, Any]:
        return {"message": "Quote API", "endpoints": dict(ENDPOINTS)}

    load_features(app)
    get_catalog()

    startup_logger.info("Application started in %dms", int((time.perf_counter() - t0) * 1000))
    return app
