"""Rippling data-transfer models and list envelopes.

Rippling list endpoints page with an opaque cursor: each response carries
``next_link``, the full URL of the following page, whose ``cursor`` query
parameter is the continuation token.
"""

from __future__ import annotations

import enum
from typing import Generic, Optional, TypeVar

import httpx
from pydantic import Field

from apiwrap.exceptions import InvalidRequestError
from apiwrap.pagination import with_params
from apiwrap.types import ApiModel, PhoneNumber

T = TypeVar("T")


class WorkerStatus(str, enum.Enum):
    INIT = "INIT"
    HIRED = "HIRED"
    ACCEPTED = "ACCEPTED"
    ACTIVE = "ACTIVE"
    TERMINATED = "TERMINATED"


class Worker(ApiModel):
    """A worker: one employment of a person at the company."""

    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_id: Optional[str] = None
    status: Optional[WorkerStatus] = None
    title: Optional[str] = None
    work_email: Optional[str] = None
    country: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    manager_id: Optional[str] = None
    department_id: Optional[str] = None


class Department(ApiModel):
    """A company department object."""

    id: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[str] = Field(default=None, description="id of the parent department")


class UserPhoneNumber(ApiModel):
    type_: Optional[str] = Field(default=None, alias="type")
    value: PhoneNumber = Field(default_factory=PhoneNumber)
    display: Optional[str] = None


class User(ApiModel):
    id: str
    active: Optional[bool] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None
    phone_numbers: list[UserPhoneNumber] = Field(default_factory=list)


class CursorPage(ApiModel, Generic[T]):
    """Envelope shared by every Rippling list endpoint."""

    results: list[T] = Field(default_factory=list)
    next_link: Optional[str] = None

    def has_more_pages(self) -> bool:
        return bool(self.next_link)

    def next_page_token(self) -> Optional[str]:
        if not self.next_link:
            return None
        return httpx.URL(self.next_link).params.get("cursor")

    def next_page(self, request: httpx.Request) -> httpx.Request:
        token = self.next_page_token()
        if token is None:
            raise InvalidRequestError(f"next_link has no cursor: {self.next_link!r}")
        return with_params(request, cursor=token)

    def items(self) -> list[T]:
        return list(self.results)


class ListWorkersResponse(CursorPage[Worker]):
    pass


class ListDepartmentsResponse(CursorPage[Department]):
    pass


class ListUsersResponse(CursorPage[User]):
    pass
