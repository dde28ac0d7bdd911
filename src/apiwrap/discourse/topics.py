from __future__ import annotations

from apiwrap.client.vendor import Resource
from apiwrap.discourse.models import GetTopicResponse


class Topics(Resource):
    async def get_topic(self, id: str) -> GetTopicResponse:
        return await self.http.get_model(f"/t/{id}.json", GetTopicResponse)
