# riftproxy/web/app.py
# API HTTP du proxy (FastAPI)
# Lancement :
#   python -m riftproxy.server

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from riftproxy.riot.errors import AccountNotFoundError, InvalidRegionError, RiotAPIError
from riftproxy.services.riot_cache import (
    AccountLookupError,
    CachedRiotClient,
    RankLookupError,
)

log = logging.getLogger(__name__)

SERVICE_NAME = "riftproxy"


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Map the Riot error taxonomy onto HTTP responses."""

    @app.exception_handler(InvalidRegionError)
    async def handle_invalid_region(_request: Request, exc: InvalidRegionError):
        return _error(str(exc), 400)

    @app.exception_handler(AccountLookupError)
    async def handle_account_lookup(_request: Request, exc: AccountLookupError):
        if isinstance(exc.cause, AccountNotFoundError):
            return _error("Account not found", 404)
        return _error(str(exc.cause), 400)

    @app.exception_handler(RankLookupError)
    async def handle_rank_lookup(_request: Request, exc: RankLookupError):
        return _error(str(exc.cause), 500)

    @app.exception_handler(RiotAPIError)
    async def handle_riot_error(_request: Request, exc: RiotAPIError):
        return _error(str(exc), 502)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        log.exception("Unhandled error: %s", exc)
        return _error("Internal server error", 500)


def create_app(riot: CachedRiotClient) -> FastAPI:
    """Build the app around an already constructed cached client."""

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        await riot.close()

    app = FastAPI(title="Riftproxy", lifespan=lifespan)
    app.state.riot = riot
    app.state.start_time = time.time()

    register_error_handlers(app)

    @app.get("/rank/{region}/{game_name}/{tag_line}")
    async def get_rank(region: str, game_name: str, tag_line: str) -> JSONResponse:
        """Ranked league entries of ``game_name#tag_line`` on platform *region*."""
        entries = await riot.get_rank(region, game_name, tag_line)
        return JSONResponse([e.to_json() for e in entries])

    @app.get("/health")
    async def health_check() -> JSONResponse:
        uptime = int(time.time() - app.state.start_time)
        return JSONResponse({
            "status": "healthy",
            "uptime_seconds": uptime,
            "service": SERVICE_NAME,
        })

    @app.get("/readiness")
    async def readiness_check() -> Response:
        return Response(status_code=200, content="Ready")

    @app.get("/liveness")
    async def liveness_check() -> Response:
        return Response(status_code=200, content="Alive")

    @app.get("/metrics")
    async def metrics() -> Dict[str, Any]:
        """Uptime and cache counters."""
        return {
            "uptime_seconds": int(time.time() - app.state.start_time),
            "start_time": app.state.start_time,
            "cache": riot.stats(),
        }

    return app
