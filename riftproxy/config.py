# config.py – Chargement des paramètres via pydantic-settings

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from riftproxy.riot.regions import RegionalRoute, parse_regional_route


class Settings(BaseSettings):
    # Serveur
    SERVER_ADDR: str = "localhost"
    SERVER_PORT: int = 7331

    # Riot API
    RIOT_API_KEY: str
    PROXY_REGION: str = "europe"  # route régionale des appels Account-V1
    REQUEST_TIMEOUT: float = 10.0  # secondes (connexion + lecture)

    # Cache (secondes)
    ACCOUNT_TTL: float = 1000
    LEAGUE_TTL: float = 60
    MATCH_TTL: float = 600

    # Logs
    LOG_LEVEL: str = "INFO"
    CACHE_LOG_LEVEL: Optional[str] = None  # ex. DEBUG pour tracer hits/misses

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("RIOT_API_KEY")
    @classmethod
    def _api_key_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("RIOT_API_KEY must not be empty")
        return v.strip()

    @field_validator("PROXY_REGION")
    @classmethod
    def _known_regional_route(cls, v: str) -> str:
        try:
            return parse_regional_route(v).value
        except ValueError:
            allowed = ", ".join(r.value for r in RegionalRoute)
            raise ValueError(f"unknown proxy region {v!r} (expected one of: {allowed})") from None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
