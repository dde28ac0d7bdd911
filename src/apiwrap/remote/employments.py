from __future__ import annotations

from typing import Optional

from apiwrap.client.vendor import Resource
from apiwrap.pagination import AsyncPaginator
from apiwrap.remote.models import (
    EmploymentBasicParams,
    EmploymentResponse,
    ListEmploymentsResponse,
    MinimalEmployment,
)


class Employments(Resource):
    """``/v1/employments``.

    Remote does not document its error bodies, so every failure status is
    reported as :class:`~apiwrap.exceptions.UnexpectedResponseError`.
    """

    async def get_index(
        self,
        company_id: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ListEmploymentsResponse:
        """List employments, except for the deleted ones.

        Args:
            company_id: Restrict to one company.
            page: Page to fetch, starting at 1.
            page_size: Records per page; Remote defaults to 20, limited to 100.
        """
        params = {"company_id": company_id, "page": page, "page_size": page_size}
        return await self.http.get_model(
            "/v1/employments", ListEmploymentsResponse, params, documented_errors=False
        )

    def get_index_stream(
        self,
        company_id: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> AsyncPaginator[MinimalEmployment]:
        """Iterate over every employment, page by page."""
        return AsyncPaginator(
            self.http,
            "GET",
            "/v1/employments",
            ListEmploymentsResponse,
            lambda: self.get_index(company_id, None, page_size),
            {"company_id": company_id, "page_size": page_size},
            documented_errors=False,
        )

    async def get_show(self, employment_id: str) -> EmploymentResponse:
        return await self.http.get_model(
            f"/v1/employments/{employment_id}", EmploymentResponse, documented_errors=False
        )

    async def post_create(self, body: EmploymentBasicParams) -> EmploymentResponse:
        """Create an employee or contractor employment."""
        return await self.http.send_json(
            "POST", "/v1/employments", EmploymentResponse, body, documented_errors=False
        )
