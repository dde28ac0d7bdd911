from __future__ import annotations

from typing import Optional

from apiwrap.client.vendor import Resource
from apiwrap.pagination import AsyncPaginator
from apiwrap.vercel.models import ListProjectsResponse, Project


class Projects(Resource):
    async def list(
        self,
        team_id: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        until: Optional[str] = None,
    ) -> ListProjectsResponse:
        """Fetch one page of projects, newest first."""
        params = {"teamId": team_id, "search": search, "limit": limit, "until": until}
        return await self.http.get_model("/v9/projects", ListProjectsResponse, params)

    def list_stream(
        self,
        team_id: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> AsyncPaginator[Project]:
        return AsyncPaginator(
            self.http,
            "GET",
            "/v9/projects",
            ListProjectsResponse,
            lambda: self.list(team_id, search, limit),
            {"teamId": team_id, "search": search, "limit": limit},
        )
