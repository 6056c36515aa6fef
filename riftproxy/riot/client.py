# riot/client.py

import asyncio
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import aiohttp
from pydantic import TypeAdapter, ValidationError

from riftproxy.riot.errors import (
    AccountNotFoundError,
    NetworkError,
    SerdeError,
    StatusError,
)
from riftproxy.riot.models import Account, LeagueEntry, Match
from riftproxy.riot.regions import (
    Platform,
    RegionalRoute,
    require_platform,
    require_regional_route,
)

log = logging.getLogger(__name__)

DEFAULT_HOST = "api.riotgames.com"

_ACCOUNT = TypeAdapter(Account)
_LEAGUE_ENTRIES = TypeAdapter(List[LeagueEntry])
_MATCH = TypeAdapter(Match)


def _segment(value: str) -> str:
    return quote(value, safe="")


class RiotClient:
    """Async Riot API client: one GET per call, typed result or classified error.

    The client never caches, retries or throttles; see
    ``riftproxy.services.riot_cache`` for the caching layer.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = 10,
        host: str = DEFAULT_HOST,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.host = host
        self._session: Optional[aiohttp.ClientSession] = session
        self._headers = {"X-Riot-Token": api_key}

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self._headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # -- URLs --------------------------------------------------------------

    def account_url(self, region: RegionalRoute, game_name: str, tag_line: str) -> str:
        return (
            f"https://{region.value}.{self.host}"
            f"/riot/account/v1/accounts/by-riot-id/{_segment(game_name)}/{_segment(tag_line)}"
        )

    def league_entries_url(self, region: Platform, puuid: str) -> str:
        return f"https://{region.value}.{self.host}/lol/league/v4/entries/by-puuid/{_segment(puuid)}"

    def match_url(self, region: Platform, match_id: str) -> str:
        return f"https://{region.value}.{self.host}/lol/match/v5/matches/{_segment(match_id)}"

    # -- Transport ---------------------------------------------------------

    async def _request(self, url: str, adapter: TypeAdapter) -> Any:
        """
        Issue a single GET and validate the JSON body with *adapter*.

        Raises:
            StatusError: non-2xx response (body discarded)
            NetworkError: connection failure or timeout
            SerdeError: body is not JSON or does not match the schema
        """
        session = await self._get_session()

        try:
            # token posé à chaque appel, session injectée comprise
            async with session.get(url, headers=self._headers) as resp:
                if not 200 <= resp.status < 300:
                    log.warning("Riot API returned %s for %s", resp.status, url)
                    raise StatusError(resp.status, url)
                payload = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.warning("Network error calling %s: %r", url, e)
            raise NetworkError(f"network error: {e!r}") from e
        except ValueError as e:
            log.warning("Invalid JSON from %s: %s", url, e)
            raise SerdeError(f"json parse error: {e}") from e

        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            log.warning("Unexpected payload shape from %s: %s", url, e)
            raise SerdeError(f"json parse error: {e}") from e

    # -- Endpoints ---------------------------------------------------------

    async def get_account(self, region: str, game_name: str, tag_line: str) -> Account:
        """
        Get account by Riot ID (game name + tag).
        Account-V1: GET /riot/account/v1/accounts/by-riot-id/{gameName}/{tagLine}
        Routed via regional route (americas/asia/europe/sea).
        """
        route = require_regional_route(region)
        url = self.account_url(route, game_name, tag_line)
        try:
            return await self._request(url, _ACCOUNT)
        except StatusError as e:
            if e.status == 404:
                raise AccountNotFoundError(game_name, tag_line, url) from e
            raise

    async def get_league_entries(self, region: str, puuid: str) -> List[LeagueEntry]:
        """Get ranked league entries by PUUID (League-V4, platform route)."""
        platform = require_platform(region)
        return await self._request(self.league_entries_url(platform, puuid), _LEAGUE_ENTRIES)

    async def get_match(self, region: str, match_id: str) -> Match:
        """Get detailed match information by match ID."""
        platform = require_platform(region)
        return await self._request(self.match_url(platform, match_id), _MATCH)

