from __future__ import annotations

from apiwrap.client.vendor import VendorClient
from apiwrap.models import AuthConfig, VendorProfile
from apiwrap.vercel.deployments import Deployments
from apiwrap.vercel.projects import Projects

DEFAULT_PROFILE = VendorProfile(
    name="vercel",
    base_url="https://api.vercel.com",
    auth=AuthConfig(type="bearer", source="env:VERCEL_API_TOKEN"),
)


class Client(VendorClient):
    """Vercel REST API client (bearer token from ``VERCEL_API_TOKEN``)."""

    default_profile = DEFAULT_PROFILE

    def projects(self) -> Projects:
        return Projects(self.http)

    def deployments(self) -> Deployments:
        return Deployments(self.http)
