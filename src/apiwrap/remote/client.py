from __future__ import annotations

from apiwrap.client.vendor import VendorClient
from apiwrap.models import AuthConfig, VendorProfile
from apiwrap.remote.countries import Countries
from apiwrap.remote.employments import Employments
from apiwrap.remote.timeoff import Timeoff

DEFAULT_PROFILE = VendorProfile(
    name="remote",
    base_url="https://gateway.remote.com",
    auth=AuthConfig(type="bearer", source="env:REMOTE_API_TOKEN"),
)


class Client(VendorClient):
    """Remote API client (bearer token from ``REMOTE_API_TOKEN``).

    Point ``REMOTE_BASE_URL`` at ``https://gateway.remote-sandbox.com`` to
    use the sandbox.
    """

    default_profile = DEFAULT_PROFILE

    def employments(self) -> Employments:
        return Employments(self.http)

    def countries(self) -> Countries:
        return Countries(self.http)

    def timeoff(self) -> Timeoff:
        return Timeoff(self.http)
