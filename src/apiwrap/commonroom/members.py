from __future__ import annotations

from apiwrap.client.vendor import Resource
from apiwrap.commonroom.models import CommunityMember, CommunityMembers


class Members(Resource):
    async def get_member_by_email(self, email: str) -> list[CommunityMember]:
        """Look up community members by e-mail address.

        The endpoint documents no error body; a failure status raises
        :class:`~apiwrap.exceptions.UnexpectedResponseError`.
        """
        members = await self.http.get_model(
            f"/user/{email}", CommunityMembers, documented_errors=False
        )
        return members.root
