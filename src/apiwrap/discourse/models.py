from __future__ import annotations

from typing import Optional

from pydantic import Field

from apiwrap.types import ApiModel


class Category(ApiModel):
    id: int
    name: str
    slug: str
    color: Optional[str] = None
    text_color: Optional[str] = None
    description: Optional[str] = None
    topic_count: Optional[int] = None
    post_count: Optional[int] = None
    position: Optional[int] = None
    read_restricted: Optional[bool] = None
    parent_category_id: Optional[int] = None


class CategoryList(ApiModel):
    can_create_category: Optional[bool] = None
    can_create_topic: Optional[bool] = None
    categories: list[Category] = Field(default_factory=list)


class ListCategoriesResponse(ApiModel):
    category_list: CategoryList


class GetTopicResponse(ApiModel):
    id: int
    title: str
    fancy_title: Optional[str] = None
    slug: Optional[str] = None
    posts_count: Optional[int] = None
    views: Optional[int] = None
    like_count: Optional[int] = None
    created_at: Optional[str] = None
    category_id: Optional[int] = None
    closed: Optional[bool] = None
    archived: Optional[bool] = None
    tags: list[str] = Field(default_factory=list)


class UserDetail(ApiModel):
    id: int
    username: str
    name: Optional[str] = None
    trust_level: Optional[int] = None
    admin: Optional[bool] = None
    moderator: Optional[bool] = None
    created_at: Optional[str] = None
    last_seen_at: Optional[str] = None


class GetUserResponse(ApiModel):
    user: UserDetail
