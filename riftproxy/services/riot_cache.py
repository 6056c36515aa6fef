# services/riot_cache.py – appels Riot mis en cache (Account, League, Match)

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from riftproxy.riot.client import RiotClient
from riftproxy.riot.errors import RiotAPIError
from riftproxy.riot.models import Account, LeagueEntry, Match
from riftproxy.riot.regions import require_platform, require_regional_route
from riftproxy.services.ttl_cache import TTLCache

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheTTLs:
    """Durée de vie (secondes) par endpoint."""
    account: float = 1000   # quasi statique
    league: float = 60      # change après chaque partie
    match: float = 600


class RiotLookupError(RiotAPIError):
    """A step of the rank lookup failed; ``cause`` is the Riot error."""

    phase = "lookup"

    def __init__(self, cause: RiotAPIError):
        super().__init__(str(cause))
        self.cause = cause


class AccountLookupError(RiotLookupError):
    phase = "account"


class RankLookupError(RiotLookupError):
    phase = "rank"


class CachedRiotClient:
    """RiotClient behind a TTLCache, one key per endpoint + parameters."""

    def __init__(
        self,
        client: RiotClient,
        cache: TTLCache,
        proxy_region: str,
        ttls: Optional[CacheTTLs] = None,
    ):
        self.client = client
        self.cache = cache
        self.proxy_region = proxy_region
        self.ttls = ttls or CacheTTLs()

    async def get_account(self, game_name: str, tag_line: str, region: Optional[str] = None) -> Account:
        region = require_regional_route(region or self.proxy_region).value
        key = f"account:{region}:{game_name}:{tag_line}"
        return await self.cache.get_or_fetch(
            key, self.ttls.account,
            lambda: self.client.get_account(region, game_name, tag_line),
        )

    async def get_league_entries(self, region: str, puuid: str) -> List[LeagueEntry]:
        region = require_platform(region).value
        key = f"league:{region}:{puuid}"
        return await self.cache.get_or_fetch(
            key, self.ttls.league,
            lambda: self.client.get_league_entries(region, puuid),
        )

    async def get_match(self, region: str, match_id: str) -> Match:
        region = require_platform(region).value
        key = f"match:{region}:{match_id}"
        return await self.cache.get_or_fetch(
            key, self.ttls.match,
            lambda: self.client.get_match(region, match_id),
        )

    async def get_rank(self, region: str, game_name: str, tag_line: str) -> List[LeagueEntry]:
        """
        Resolve ``game_name#tag_line`` through the proxy region, then return
        the league entries of that account on platform *region*.

        Raises:
            InvalidRegionError: *region* is not a platform (no Riot call made)
            AccountLookupError: account resolution failed
            RankLookupError: league lookup failed
        """
        region = require_platform(region).value

        try:
            account = await self.get_account(game_name, tag_line)
        except RiotAPIError as e:
            log.info("Account lookup failed for %s#%s: %s", game_name, tag_line, e)
            raise AccountLookupError(e) from e

        try:
            return await self.get_league_entries(region, account.puuid)
        except RiotAPIError as e:
            log.info("Rank lookup failed for %s on %s: %s", account.puuid, region, e)
            raise RankLookupError(e) from e

    def stats(self) -> Dict[str, int]:
        return self.cache.stats()

    async def close(self) -> None:
        await self.client.close()
