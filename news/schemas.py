from datetime import datetime
from typing import Dict, List, Optional

from ninja import Schema
from pydantic import Field


class PostListParams(Schema):
    page: int = Field(1, ge=1, description="Page for posts list pagination")
    count: int = Field(10, ge=1, description="Number of posts by page")


class PostOut(Schema):
    id: int
    title: str
    slug: str
    abstract: str
    content: str
    enabled: bool
    publication_date: datetime
    is_commentable: bool
    comments_enabled: bool
    comments_close_at: Optional[datetime] = None
    comments_default_status: str
    comments_count: int
    created_at: datetime
    updated_at: datetime


class CommentOut(Schema):
    id: int
    post_id: int
    name: str
    email: str
    url: str
    content: str
    status: str
    created_at: datetime
    updated_at: datetime


class CommentIn(Schema):
    """Поля формы комментария (для документации OpenAPI)"""
    name: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    content: str


class ErrorOut(Schema):
    detail: str
    code: str


class FieldError(Schema):
    message: str
    code: str


class ValidationErrorOut(ErrorOut):
    errors: Dict[str, List[FieldError]]
