"""Base classes for the per-vendor ``Client`` and its resource accessors."""

from __future__ import annotations

from typing import ClassVar, Optional

import httpx

from apiwrap.auth.manager import AuthManager
from apiwrap.client.async_client import AsyncClient
from apiwrap.config import profile_with_token, resolve_vendor_profile
from apiwrap.models import GlobalConfig, VendorProfile


class VendorClient:
    """Entry point of one vendor SDK.

    Subclasses set :attr:`default_profile` and add one accessor per API
    resource. The client is an async context manager; the HTTP connection
    pool lives for the duration of the ``async with`` block::

        async with Client.new("token") as client:
            worker = await client.workers().get("abc")
    """

    default_profile: ClassVar[VendorProfile]

    def __init__(
        self,
        profile: VendorProfile,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        auth_manager: Optional[AuthManager] = None,
    ) -> None:
        self.http = AsyncClient(profile, auth_manager=auth_manager, transport=transport)

    @classmethod
    def new(
        cls,
        token: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Build a client from an explicit credential."""
        return cls(profile_with_token(cls.default_profile, token, base_url), transport=transport)

    @classmethod
    def new_from_env(
        cls,
        config: Optional[GlobalConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Build a client from ``config.json`` and environment variables.

        Credentials are read lazily from the profile's credential source
        when the client is opened.
        """
        return cls(resolve_vendor_profile(cls.default_profile, config), transport=transport)

    @property
    def profile(self) -> VendorProfile:
        return self.http.profile

    async def __aenter__(self):
        await self.http.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.http.__aexit__(*args)


class Resource:
    """A group of endpoints sharing a path prefix."""

    def __init__(self, http: AsyncClient) -> None:
        self.http = http
