# riot/models.py – DTOs des endpoints Account-V1, League-V4, Match-V5

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RiotModel(BaseModel):
    """Immutable model read from camelCase JSON; unknown fields are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# Account-V1
class Account(RiotModel):
    puuid: str
    game_name: Optional[str] = None
    tag_line: Optional[str] = None


# League-V4
class MiniSeries(RiotModel):
    losses: int
    progress: str
    target: int
    wins: int


class LeagueEntry(RiotModel):
    """One ranked queue of a player. Extended fields are optional."""
    queue_type: str
    tier: str
    rank: str
    league_points: int
    wins: int
    losses: int

    league_id: Optional[str] = None
    puuid: Optional[str] = None
    veteran: Optional[bool] = None
    inactive: Optional[bool] = None
    fresh_blood: Optional[bool] = None
    hot_streak: Optional[bool] = None
    mini_series: Optional[MiniSeries] = None


# Match-V5
class MatchMetadata(RiotModel):
    data_version: str
    match_id: str
    participants: List[str]


class Participant(RiotModel):
    puuid: str
    participant_id: int
    champion_id: int
    champion_name: str
    kills: int
    deaths: int
    assists: int
    win: bool
    riot_id_game_name: Optional[str] = None
    # Riot renvoie "riotIdTagline" (t minuscule)
    riot_id_tagline: Optional[str] = None


class Team(RiotModel):
    team_id: int
    win: bool


class MatchInfo(RiotModel):
    end_of_game_result: Optional[str] = None
    game_creation: int
    game_duration: int
    game_start_timestamp: Optional[int] = None
    game_end_timestamp: Optional[int] = None
    game_id: int
    game_mode: str
    game_name: Optional[str] = None
    game_type: str
    game_version: str
    map_id: int
    platform_id: str
    queue_id: int
    participants: List[Participant]
    teams: List[Team]


class Match(RiotModel):
    metadata: MatchMetadata
    info: MatchInfo
