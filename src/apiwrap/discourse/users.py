from __future__ import annotations

from apiwrap.client.vendor import Resource
from apiwrap.discourse.models import GetUserResponse


class Users(Resource):
    async def get_user(self, username: str) -> GetUserResponse:
        """Get a single user by username."""
        return await self.http.get_model(f"/u/{username}.json", GetUserResponse)
