from __future__ import annotations

from typing import Optional

from apiwrap.client.vendor import Resource
from apiwrap.pagination import AsyncPaginator
from apiwrap.rippling.models import ListWorkersResponse, Worker


class Workers(Resource):
    """``/workers`` -- filterable on ``status`` and ``work_email``."""

    async def list(
        self,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        order_by: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> ListWorkersResponse:
        """Fetch one page of workers, starting at *cursor* when given."""
        params = {"expand": expand, "filter": filter, "order_by": order_by, "cursor": cursor}
        return await self.http.get_model("/workers", ListWorkersResponse, params)

    def list_stream(
        self,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        order_by: Optional[str] = None,
    ) -> AsyncPaginator[Worker]:
        """Iterate over every worker, across all pages."""
        params = {"expand": expand, "filter": filter, "order_by": order_by}
        return AsyncPaginator(
            self.http,
            "GET",
            "/workers",
            ListWorkersResponse,
            lambda: self.list(expand, filter, order_by),
            params,
        )

    async def get(self, id: str, expand: Optional[str] = None) -> Worker:
        return await self.http.get_model(f"/workers/{id}", Worker, {"expand": expand})
