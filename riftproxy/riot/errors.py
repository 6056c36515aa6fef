"""Error taxonomy for calls to the Riot API."""

from __future__ import annotations

from typing import Optional


class RiotAPIError(Exception):
    """Base exception for Riot API errors."""
    pass


class NetworkError(RiotAPIError):
    """Connection, DNS or timeout failure before a response was read."""
    pass


class SerdeError(RiotAPIError):
    """The response body did not match the expected schema."""
    pass


class StatusError(RiotAPIError):
    """Riot answered with a non-success HTTP status."""

    def __init__(self, status: int, url: Optional[str] = None):
        super().__init__(f"riot api returned non-success status: {status}")
        self.status = status
        self.url = url


class AccountNotFoundError(StatusError):
    """Account-V1 reported no account for the requested Riot ID."""

    def __init__(self, game_name: str, tag_line: str, url: Optional[str] = None):
        super().__init__(404, url)
        self.game_name = game_name
        self.tag_line = tag_line

    def __str__(self) -> str:
        return "Account not found"


class InvalidRegionError(RiotAPIError):
    """Region code outside the recognized routing values."""

    def __init__(self, region: str, kind: str = "platform"):
        super().__init__(f"invalid {kind} region: {region!r}")
        self.region = region
        self.kind = kind
