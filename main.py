"""QUOTE API FILE PURPOSE
Purpose: FastAPI entrypoint for the Quote API (`uvicorn main:app`, or `python main.py`).
Hot path: no (process-level startup only).
Feature flags: QUOTE_API_HOST, QUOTE_API_PORT.
Failure mode: fail fast on import errors.
"""

from core.app import create_app
from core.config import env_int, env_str

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=env_str("QUOTE_API_HOST", "0.0.0.0"),
        port=env_int("QUOTE_API_PORT", 8080),
        log_level="info",
    )
