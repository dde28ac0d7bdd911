from __future__ import annotations

from typing import Optional

from apiwrap.client.vendor import Resource
from apiwrap.pagination import AsyncPaginator
from apiwrap.rippling.models import Department, ListDepartmentsResponse


class Departments(Resource):
    async def list(
        self,
        order_by: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> ListDepartmentsResponse:
        params = {"order_by": order_by, "cursor": cursor}
        return await self.http.get_model("/departments", ListDepartmentsResponse, params)

    def list_stream(self, order_by: Optional[str] = None) -> AsyncPaginator[Department]:
        return AsyncPaginator(
            self.http,
            "GET",
            "/departments",
            ListDepartmentsResponse,
            lambda: self.list(order_by),
            {"order_by": order_by},
        )

    async def get(self, id: str) -> Department:
        return await self.http.get_model(f"/departments/{id}", Department)
