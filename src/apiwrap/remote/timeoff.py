from __future__ import annotations

from apiwrap.client.vendor import Resource
from apiwrap.remote.models import CreateTimeoffParams, TimeoffResponse


class Timeoff(Resource):
    async def post_create(self, body: CreateTimeoffParams) -> TimeoffResponse:
        """Record approved time off; an attached document is uploaded inline as base64."""
        return await self.http.send_json(
            "POST", "/v1/timeoff", TimeoffResponse, body, documented_errors=False
        )

    async def get_show(self, timeoff_id: str) -> TimeoffResponse:
        return await self.http.get_model(
            f"/v1/timeoff/{timeoff_id}", TimeoffResponse, documented_errors=False
        )
