from __future__ import annotations

from typing import Any, Optional

from apiwrap.client.vendor import Resource
from apiwrap.pagination import AsyncPaginator
from apiwrap.vercel.models import Deployment, DeploymentState, ListDeploymentsResponse


class Deployments(Resource):
    async def list(
        self,
        project_id: Optional[str] = None,
        team_id: Optional[str] = None,
        state: Optional[DeploymentState] = None,
        target: Optional[str] = None,
        limit: Optional[int] = None,
        until: Optional[str] = None,
    ) -> ListDeploymentsResponse:
        """Fetch one page of deployments, newest first.

        Args:
            project_id: Only deployments of this project.
            team_id: Team owning the project.
            state: Only deployments in this state.
            target: ``production`` or ``preview``.
            limit: Page size.
            until: Only deployments created before this timestamp (ms).
        """
        return await self.http.get_model(
            "/v6/deployments",
            ListDeploymentsResponse,
            self._params(project_id, team_id, state, target, limit) | {"until": until},
        )

    def list_stream(
        self,
        project_id: Optional[str] = None,
        team_id: Optional[str] = None,
        state: Optional[DeploymentState] = None,
        target: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> AsyncPaginator[Deployment]:
        return AsyncPaginator(
            self.http,
            "GET",
            "/v6/deployments",
            ListDeploymentsResponse,
            lambda: self.list(project_id, team_id, state, target, limit),
            self._params(project_id, team_id, state, target, limit),
        )

    @staticmethod
    def _params(
        project_id: Optional[str],
        team_id: Optional[str],
        state: Optional[DeploymentState],
        target: Optional[str],
        limit: Optional[int],
    ) -> dict[str, Any]:
        return {
            "projectId": project_id,
            "teamId": team_id,
            "state": state.value if state is not None else None,
            "target": target,
            "limit": limit,
        }
