"""Rippling HR platform SDK.

Example::

    from apiwrap.rippling import Client

    async with Client.new_from_env() as client:
        async for worker in client.workers().list_stream(filter="status eq 'ACTIVE'"):
            print(worker.work_email)
"""

from apiwrap.rippling.client import Client
from apiwrap.rippling.models import (
    Department,
    ListDepartmentsResponse,
    ListUsersResponse,
    ListWorkersResponse,
    User,
    Worker,
    WorkerStatus,
)

__all__ = [
    "Client",
    "Department",
    "ListDepartmentsResponse",
    "ListUsersResponse",
    "ListWorkersResponse",
    "User",
    "Worker",
    "WorkerStatus",
]
