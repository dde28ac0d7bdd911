from __future__ import annotations

from apiwrap.client.vendor import VendorClient
from apiwrap.commonroom.members import Members
from apiwrap.commonroom.segments import SegmentsResource
from apiwrap.models import AuthConfig, VendorProfile

DEFAULT_PROFILE = VendorProfile(
    name="commonroom",
    base_url="https://api.commonroom.io/community/v1",
    auth=AuthConfig(type="bearer", source="env:COMMONROOM_API_TOKEN"),
)


class Client(VendorClient):
    """Common Room community API client (bearer token from ``COMMONROOM_API_TOKEN``)."""

    default_profile = DEFAULT_PROFILE

    def members(self) -> Members:
        return Members(self.http)

    def segments(self) -> SegmentsResource:
        return SegmentsResource(self.http)
