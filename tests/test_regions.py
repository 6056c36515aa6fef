"""Platform / regional route tables."""

import pytest

from riftproxy.riot.regions import (
    REGION_GROUPS,
    Platform,
    RegionalRoute,
    parse_platform,
    parse_regional_route,
    regional_route_for,
)


def test_every_platform_has_a_regional_route():
    assert set(REGION_GROUPS) == set(Platform)


@pytest.mark.parametrize("platform, route", [
    ("euw1", "europe"),
    ("kr", "asia"),
    ("na1", "americas"),
    ("vn2", "sea"),
])
def test_platform_groups(platform, route):
    assert regional_route_for(parse_platform(platform)).value == route


def test_parsing_is_case_insensitive():
    assert parse_platform(" EUW1 ") is Platform.EUW1
    assert parse_regional_route("Europe") is RegionalRoute.EUROPE


@pytest.mark.parametrize("value", ["zz9", "europe", ""])
def test_unknown_platform(value):
    with pytest.raises(ValueError):
        parse_platform(value)
