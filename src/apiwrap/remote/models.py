"""Remote data-transfer models.

Remote pages its list endpoints by page number: the envelope's ``data``
object reports ``current_page`` and ``total_pages`` and the next page is
requested with ``page=current_page + 1``. The current page number doubles
as the continuation token, so a server stuck on one page stops pagination.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

import httpx
from pydantic import Field

from apiwrap.exceptions import InvalidRequestError
from apiwrap.pagination import with_params
from apiwrap.types import ApiModel, Base64Data


class EmploymentStatus(str, enum.Enum):
    ACTIVE = "active"
    CREATED = "created"
    INITIATED = "initiated"
    INVITED = "invited"
    PENDING = "pending"
    REVIEW = "review"
    ARCHIVED = "archived"
    DELETED = "deleted"


class EmploymentType(str, enum.Enum):
    EMPLOYEE = "employee"
    CONTRACTOR = "contractor"


class TimeoffType(str, enum.Enum):
    PAID_TIME_OFF = "paid_time_off"
    SICK_LEAVE = "sick_leave"
    PUBLIC_HOLIDAY = "public_holiday"
    UNPAID_LEAVE = "unpaid_leave"
    EXTENDED_LEAVE = "extended_leave"
    IN_LIEU_TIME = "in_lieu_time"
    MATERNITY_LEAVE = "maternity_leave"
    PATERNITY_LEAVE = "paternity_leave"
    PARENTAL_LEAVE = "parental_leave"
    BEREAVEMENT = "bereavement"
    MILITARY_LEAVE = "military_leave"
    OTHER = "other"


class TimeoffStatus(str, enum.Enum):
    APPROVED = "approved"
    CANCELLED = "cancelled"
    DECLINED = "declined"
    REQUESTED = "requested"
    TAKEN = "taken"
    CANCEL_REQUESTED = "cancel_requested"


class CountrySubdivision(ApiModel):
    code: Optional[str] = None
    name: str
    subdivision_type: Optional[str] = None


class Country(ApiModel):
    code: str
    name: str
    country_subdivisions: Optional[list[CountrySubdivision]] = None


class File(ApiModel):
    """A file attached to an employment."""

    id: str
    name: str
    inserted_at: Optional[str] = None
    sub_type: Optional[str] = None
    type_: str = Field(alias="type")


class MinimalEmployment(ApiModel):
    """Employment summary returned by the list endpoint."""

    id: str
    full_name: str
    job_title: Optional[str] = None
    status: Optional[EmploymentStatus] = None
    country: Optional[Country] = None


class Employment(ApiModel):
    id: str
    company_id: str
    full_name: str
    job_title: Optional[str] = None
    personal_email: Optional[str] = None
    country_code: Optional[str] = None
    status: Optional[EmploymentStatus] = None
    type_: EmploymentType = Field(alias="type")
    provisional_start_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    files: Optional[list[File]] = None
    personal_details: Optional[dict[str, Any]] = None


class EmploymentsPage(ApiModel):
    employments: list[MinimalEmployment] = Field(default_factory=list)
    current_page: Optional[int] = None
    total_count: Optional[int] = None
    total_pages: Optional[int] = None


class ListEmploymentsResponse(ApiModel):
    """Page envelope of ``GET /v1/employments``."""

    data: Optional[EmploymentsPage] = None

    def has_more_pages(self) -> bool:
        if self.data is None or self.data.current_page is None or self.data.total_pages is None:
            return False
        return self.data.current_page < self.data.total_pages

    def next_page_token(self) -> Optional[str]:
        if self.data is None or self.data.current_page is None:
            return None
        return str(self.data.current_page)

    def next_page(self, request: httpx.Request) -> httpx.Request:
        if self.data is None or self.data.current_page is None:
            raise InvalidRequestError("response does not report its current page")
        return with_params(request, page=self.data.current_page + 1)

    def items(self) -> list[MinimalEmployment]:
        return list(self.data.employments) if self.data is not None else []


class EmploymentData(ApiModel):
    employment: Employment


class EmploymentResponse(ApiModel):
    data: Optional[EmploymentData] = None


class EmploymentBasicParams(ApiModel):
    """Minimum information required to create an employment."""

    company_id: str
    country_code: str
    full_name: str
    job_title: str
    personal_email: str
    provisional_start_date: Optional[str] = None
    type_: EmploymentType = Field(alias="type")


class CountriesResponse(ApiModel):
    data: Optional[list[Country]] = None


class TimeoffDocumentParams(ApiModel):
    """A document attached to a time off request; ``content`` travels as base64."""

    content: Base64Data
    name: str


class CreateTimeoffParams(ApiModel):
    employment_id: str
    start_date: str
    end_date: str
    timeoff_type: TimeoffType
    timezone: str
    notes: Optional[str] = None
    document: Optional[TimeoffDocumentParams] = None


class Timeoff(ApiModel):
    id: str
    employment_id: str
    start_date: str
    end_date: str
    status: TimeoffStatus
    timeoff_type: TimeoffType
    timezone: str
    notes: Optional[str] = None
    approver_id: Optional[str] = None
    approved_at: Optional[str] = None
    document: Optional[File] = None


class TimeoffData(ApiModel):
    timeoff: Timeoff


class TimeoffResponse(ApiModel):
    data: TimeoffData
