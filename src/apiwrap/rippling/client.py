from __future__ import annotations

from apiwrap.client.vendor import VendorClient
from apiwrap.models import AuthConfig, VendorProfile
from apiwrap.rippling.departments import Departments
from apiwrap.rippling.users import Users
from apiwrap.rippling.workers import Workers

DEFAULT_PROFILE = VendorProfile(
    name="rippling",
    base_url="https://rest.ripplingapis.com",
    auth=AuthConfig(type="bearer", source="env:RIPPLING_API_TOKEN"),
)


class Client(VendorClient):
    """Rippling REST API client (bearer token from ``RIPPLING_API_TOKEN``)."""

    default_profile = DEFAULT_PROFILE

    def workers(self) -> Workers:
        return Workers(self.http)

    def departments(self) -> Departments:
        return Departments(self.http)

    def users(self) -> Users:
        return Users(self.http)
