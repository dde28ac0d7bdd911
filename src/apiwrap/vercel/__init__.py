"""Vercel platform SDK."""

from apiwrap.vercel.client import Client
from apiwrap.vercel.models import (
    Deployment,
    DeploymentState,
    ListDeploymentsResponse,
    ListProjectsResponse,
    Pagination,
    Project,
)

__all__ = [
    "Client",
    "Deployment",
    "DeploymentState",
    "ListDeploymentsResponse",
    "ListProjectsResponse",
    "Pagination",
    "Project",
]
