"""Discourse forum SDK."""

from apiwrap.discourse.client import Client
from apiwrap.discourse.models import (
    Category,
    GetTopicResponse,
    GetUserResponse,
    ListCategoriesResponse,
    UserDetail,
)

__all__ = [
    "Category",
    "Client",
    "GetTopicResponse",
    "GetUserResponse",
    "ListCategoriesResponse",
    "UserDetail",
]
