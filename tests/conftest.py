"""Shared fakes: a manual clock and an in-memory Riot client."""

import asyncio
from typing import Dict, List

import pytest

from riftproxy.riot.errors import AccountNotFoundError
from riftproxy.riot.models import Account, LeagueEntry, Match
from riftproxy.riot.regions import require_platform, require_regional_route


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def league_entry(**overrides) -> LeagueEntry:
    data = {
        "queueType": "RANKED_SOLO_5x5",
        "tier": "CHALLENGER",
        "rank": "I",
        "leaguePoints": 1234,
        "wins": 200,
        "losses": 150,
    }
    data.update(overrides)
    return LeagueEntry.model_validate(data)


class FakeRiotClient:
    """Stands in for RiotClient; counts calls per endpoint."""

    def __init__(self):
        self.accounts: Dict[str, Account] = {
            "Faker#KR1": Account(puuid="puuid-faker", game_name="Faker", tag_line="KR1"),
        }
        self.leagues: Dict[str, List[LeagueEntry]] = {"puuid-faker": [league_entry()]}
        self.matches: Dict[str, Match] = {}
        self.calls: Dict[str, int] = {"account": 0, "league": 0, "match": 0}
        self.account_error = None
        self.league_error = None
        self.closed = False

    async def get_account(self, region, game_name, tag_line):
        require_regional_route(region)
        self.calls["account"] += 1
        await asyncio.sleep(0)
        if self.account_error is not None:
            raise self.account_error
        try:
            return self.accounts[f"{game_name}#{tag_line}"]
        except KeyError:
            raise AccountNotFoundError(game_name, tag_line) from None

    async def get_league_entries(self, region, puuid):
        require_platform(region)
        self.calls["league"] += 1
        await asyncio.sleep(0)
        if self.league_error is not None:
            raise self.league_error
        return list(self.leagues.get(puuid, []))

    async def get_match(self, region, match_id):
        require_platform(region)
        self.calls["match"] += 1
        return self.matches[match_id]

    async def close(self):
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_client():
    return FakeRiotClient()
