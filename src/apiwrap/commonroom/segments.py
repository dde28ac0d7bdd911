from __future__ import annotations

from apiwrap.client.vendor import Resource
from apiwrap.commonroom.models import Segment, Segments


class SegmentsResource(Resource):
    async def list(self) -> list[Segment]:
        """Return every segment of the community."""
        segments = await self.http.get_model("/segments", Segments)
        return segments.root
