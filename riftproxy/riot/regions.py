# riot/regions.py – routing values accepted by the Riot API

from __future__ import annotations

from enum import Enum

from riftproxy.riot.errors import InvalidRegionError


class Platform(str, Enum):
    """Platform routing values (league-v4, match-v5 as exposed by this proxy)."""
    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    ME1 = "me1"
    NA1 = "na1"
    OC1 = "oc1"
    RU = "ru"
    SG2 = "sg2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"


class RegionalRoute(str, Enum):
    """Regional routing values (account-v1)."""
    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


# Mapping plateforme → région globale
REGION_GROUPS = {
    Platform.EUW1: RegionalRoute.EUROPE, Platform.EUN1: RegionalRoute.EUROPE,
    Platform.RU: RegionalRoute.EUROPE, Platform.TR1: RegionalRoute.EUROPE,
    Platform.ME1: RegionalRoute.EUROPE,
    Platform.KR: RegionalRoute.ASIA, Platform.JP1: RegionalRoute.ASIA,
    Platform.NA1: RegionalRoute.AMERICAS, Platform.BR1: RegionalRoute.AMERICAS,
    Platform.LA1: RegionalRoute.AMERICAS, Platform.LA2: RegionalRoute.AMERICAS,
    Platform.OC1: RegionalRoute.SEA, Platform.SG2: RegionalRoute.SEA,
    Platform.TW2: RegionalRoute.SEA, Platform.VN2: RegionalRoute.SEA,
}


def parse_platform(value: str) -> Platform:
    """Return the Platform for *value* (case-insensitive) or raise ValueError."""
    return Platform(value.strip().lower())


def parse_regional_route(value: str) -> RegionalRoute:
    """Return the RegionalRoute for *value* (case-insensitive) or raise ValueError."""
    return RegionalRoute(value.strip().lower())


def regional_route_for(platform: Platform) -> RegionalRoute:
    return REGION_GROUPS[platform]


def require_platform(value: str) -> Platform:
    """Like parse_platform, but raise InvalidRegionError."""
    try:
        return parse_platform(value)
    except ValueError:
        raise InvalidRegionError(value, "platform") from None


def require_regional_route(value: str) -> RegionalRoute:
    """Like parse_regional_route, but raise InvalidRegionError."""
    try:
        return parse_regional_route(value)
    except ValueError:
        raise InvalidRegionError(value, "regional") from None
