# server.py – Point d'entrée principal du proxy
# -----------------------------------------------------------------------------
#  • Charge la configuration (RIOT_API_KEY obligatoire, PROXY_REGION validée) :
#    toute erreur arrête le process avant l'ouverture du port.
#  • Construit RiotClient + TTLCache une seule fois et les injecte dans l'app.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from riftproxy.config import Settings, get_settings
from riftproxy.logging_config import setup_logging
from riftproxy.riot.client import RiotClient
from riftproxy.services.riot_cache import CacheTTLs, CachedRiotClient
from riftproxy.services.ttl_cache import TTLCache
from riftproxy.web.app import create_app

log = logging.getLogger(__name__)


def build_app(settings: Settings) -> FastAPI:
    client = RiotClient(settings.RIOT_API_KEY, timeout=settings.REQUEST_TIMEOUT)
    ttls = CacheTTLs(
        account=settings.ACCOUNT_TTL,
        league=settings.LEAGUE_TTL,
        match=settings.MATCH_TTL,
    )
    riot = CachedRiotClient(client, TTLCache(), settings.PROXY_REGION, ttls)
    return create_app(riot)


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        log.critical("Invalid configuration:\n%s", e)
        sys.exit(1)

    setup_logging(level=settings.LOG_LEVEL, cache_level=settings.CACHE_LOG_LEVEL)
    log.info(
        "Starting riftproxy on %s:%s (proxy region %s)",
        settings.SERVER_ADDR, settings.SERVER_PORT, settings.PROXY_REGION,
    )
    uvicorn.run(build_app(settings), host=settings.SERVER_ADDR, port=settings.SERVER_PORT, log_config=None)


if __name__ == "__main__":
    main()
