from __future__ import annotations

from typing import Optional

from apiwrap.client.vendor import Resource
from apiwrap.pagination import AsyncPaginator
from apiwrap.rippling.models import ListUsersResponse, User


class Users(Resource):
    """``/users`` -- the people behind workers, with their contact details."""

    async def list(
        self,
        order_by: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> ListUsersResponse:
        params = {"order_by": order_by, "cursor": cursor}
        return await self.http.get_model("/users", ListUsersResponse, params)

    def list_stream(self, order_by: Optional[str] = None) -> AsyncPaginator[User]:
        return AsyncPaginator(
            self.http,
            "GET",
            "/users",
            ListUsersResponse,
            lambda: self.list(order_by),
            {"order_by": order_by},
        )

    async def get(self, id: str) -> User:
        return await self.http.get_model(f"/users/{id}", User)
