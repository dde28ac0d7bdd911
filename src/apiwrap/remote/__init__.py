"""Remote (global HR and payroll) SDK."""

from apiwrap.remote.client import Client
from apiwrap.remote.models import (
    CountriesResponse,
    Country,
    CreateTimeoffParams,
    Employment,
    EmploymentBasicParams,
    EmploymentResponse,
    EmploymentStatus,
    EmploymentType,
    ListEmploymentsResponse,
    MinimalEmployment,
    TimeoffDocumentParams,
    TimeoffResponse,
    TimeoffType,
)

__all__ = [
    "Client",
    "CountriesResponse",
    "Country",
    "CreateTimeoffParams",
    "Employment",
    "EmploymentBasicParams",
    "EmploymentResponse",
    "EmploymentStatus",
    "EmploymentType",
    "ListEmploymentsResponse",
    "MinimalEmployment",
    "TimeoffDocumentParams",
    "TimeoffResponse",
    "TimeoffType",
]
