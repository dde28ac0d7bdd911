"""Common Room community SDK."""

from apiwrap.commonroom.client import Client
from apiwrap.commonroom.models import CommunityMember, Segment

__all__ = ["Client", "CommunityMember", "Segment"]
