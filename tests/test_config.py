"""Settings validation: the process must refuse to start on bad config."""

import pytest
from pydantic import ValidationError

from riftproxy.config import Settings
from riftproxy.server import build_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("RIOT_API_KEY", "PROXY_REGION", "SERVER_ADDR", "SERVER_PORT", "LEAGUE_TTL", "CACHE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = Settings(_env_file=None, RIOT_API_KEY="RGAPI-test")

    assert settings.SERVER_ADDR == "localhost"
    assert settings.SERVER_PORT == 7331
    assert settings.PROXY_REGION == "europe"
    assert (settings.ACCOUNT_TTL, settings.LEAGUE_TTL, settings.MATCH_TTL) == (1000, 60, 600)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", "RGAPI-env")
    monkeypatch.setenv("PROXY_REGION", "ASIA")
    monkeypatch.setenv("SERVER_PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.RIOT_API_KEY == "RGAPI-env"
    assert settings.PROXY_REGION == "asia"
    assert settings.SERVER_PORT == 8080


def test_missing_api_key_fails():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_api_key_fails():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, RIOT_API_KEY="   ")


@pytest.mark.parametrize("region", ["euw1", "zz9", ""])
def test_unknown_proxy_region_fails(region):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, RIOT_API_KEY="RGAPI-test", PROXY_REGION=region)


def test_build_app_wires_settings(monkeypatch):
    monkeypatch.setenv("LEAGUE_TTL", "15")
    settings = Settings(_env_file=None, RIOT_API_KEY="RGAPI-test", PROXY_REGION="americas")

    app = build_app(settings)
    riot = app.state.riot

    assert riot.proxy_region == "americas"
    assert riot.ttls.league == 15
    assert riot.client.api_key == "RGAPI-test"
    assert riot.client.timeout == 10.0
