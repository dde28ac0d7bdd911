from __future__ import annotations

from typing import Optional

from pydantic import RootModel

from apiwrap.types import ApiModel


class CommunityMember(ApiModel):
    id: Optional[int] = None
    full_name: Optional[str] = None
    title: Optional[str] = None
    organization: Optional[str] = None


class Segment(ApiModel):
    id: Optional[float] = None
    name: Optional[str] = None


class CommunityMembers(RootModel[list[CommunityMember]]):
    """Bare JSON array of members."""


class Segments(RootModel[list[Segment]]):
    """Bare JSON array of segments."""
