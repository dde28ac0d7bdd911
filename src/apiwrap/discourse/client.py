from __future__ import annotations

from typing import Optional

import httpx

from apiwrap.client.vendor import VendorClient
from apiwrap.config import profile_with_token
from apiwrap.discourse.categories import Categories
from apiwrap.discourse.topics import Topics
from apiwrap.discourse.users import Users
from apiwrap.exceptions import ConfigError
from apiwrap.models import AuthConfig, VendorProfile

# Discourse is self-hosted: the base URL comes from DISCOURSE_BASE_URL or config.json.
DEFAULT_PROFILE = VendorProfile(
    name="discourse",
    auth=AuthConfig(
        type="api_key",
        header="Api-Key",
        source="env:DISCOURSE_API_KEY",
        secret_header="Api-Username",
        secret_source="env:DISCOURSE_API_USERNAME",
    ),
)


class Client(VendorClient):
    """Discourse forum API client.

    Every request carries the ``Api-Key`` and ``Api-Username`` headers.
    """

    default_profile = DEFAULT_PROFILE

    @classmethod
    def new(
        cls,
        token: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        username: str = "system",
    ):
        """Build a client for the forum at *base_url*, acting as *username*."""
        if not base_url:
            raise ConfigError("Discourse is self-hosted: base_url is required")
        profile = profile_with_token(cls.default_profile, token, base_url, secret=username)
        return cls(profile, transport=transport)

    def categories(self) -> Categories:
        return Categories(self.http)

    def topics(self) -> Topics:
        return Topics(self.http)

    def users(self) -> Users:
        return Users(self.http)
