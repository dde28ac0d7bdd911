"""Vercel data-transfer models.

Vercel list endpoints page backwards in time: ``pagination.next`` is a
millisecond timestamp that is passed as ``until`` to fetch the next
(older) page.
"""

from __future__ import annotations

import enum
from typing import Optional

import httpx
from pydantic import Field

from apiwrap.exceptions import InvalidRequestError
from apiwrap.pagination import with_params
from apiwrap.types import ApiModel


class Pagination(ApiModel):
    count: float = Field(description="Amount of items in the current page")
    next: Optional[float] = Field(default=None, description="Timestamp of the next page")
    prev: Optional[float] = Field(default=None, description="Timestamp of the previous page")


def _timestamp(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class TimestampPage(ApiModel):
    pagination: Optional[Pagination] = None

    def has_more_pages(self) -> bool:
        return self.pagination is not None and self.pagination.next is not None

    def next_page_token(self) -> Optional[str]:
        if self.pagination is None or self.pagination.next is None:
            return None
        return _timestamp(self.pagination.next)

    def next_page(self, request: httpx.Request) -> httpx.Request:
        token = self.next_page_token()
        if token is None:
            raise InvalidRequestError("response has no next page timestamp")
        return with_params(request, until=token)


class Project(ApiModel):
    id: str
    name: str
    account_id: Optional[str] = Field(default=None, alias="accountId")
    framework: Optional[str] = None
    node_version: Optional[str] = Field(default=None, alias="nodeVersion")
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    updated_at: Optional[int] = Field(default=None, alias="updatedAt")


class ListProjectsResponse(TimestampPage):
    projects: list[Project] = Field(default_factory=list)

    def items(self) -> list[Project]:
        return list(self.projects)


class DeploymentState(str, enum.Enum):
    BUILDING = "BUILDING"
    ERROR = "ERROR"
    INITIALIZING = "INITIALIZING"
    QUEUED = "QUEUED"
    READY = "READY"
    CANCELED = "CANCELED"
    DELETED = "DELETED"


class Creator(ApiModel):
    uid: str
    username: Optional[str] = None
    email: Optional[str] = None


class Deployment(ApiModel):
    uid: str
    name: str
    url: Optional[str] = None
    state: Optional[DeploymentState] = None
    target: Optional[str] = None
    created: Optional[int] = None
    creator: Optional[Creator] = None


class ListDeploymentsResponse(TimestampPage):
    deployments: list[Deployment] = Field(default_factory=list)

    def items(self) -> list[Deployment]:
        return list(self.deployments)
