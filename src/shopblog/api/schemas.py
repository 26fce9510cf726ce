"""
shopblog.api.schemas

Request/response models for the resource routers.

Create models mirror the table columns; Update models make every field
optional and are applied with `exclude_unset`. No value checks beyond types:
the service defines no validation rules (e.g. order status is free text).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _Read(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


# Users


class UserCreate(BaseModel):
    name: str | None = None
    email: str | None = None


class UserUpdate(UserCreate):
    pass


class UserRead(_Read):
    name: str | None
    email: str | None


# Items


class ItemCreate(BaseModel):
    name: str | None = None
    price: Decimal | None = None
    quantity: int | None = None


class ItemUpdate(ItemCreate):
    pass


class ItemRead(_Read):
    name: str | None
    price: Decimal | None
    quantity: int | None


# Orders


class OrderCreate(BaseModel):
    user_id: int
    item_id: int
    total_price: Decimal | None = None
    status: str | None = None


class OrderUpdate(BaseModel):
    user_id: int | None = None
    item_id: int | None = None
    total_price: Decimal | None = None
    status: str | None = None


class OrderRead(_Read):
    user_id: int
    item_id: int
    total_price: Decimal | None
    status: str | None


# Posts


class PostCreate(BaseModel):
    user_id: int
    title: str | None = None
    content: str | None = None
    # Appended as Categorization rows.
    category_ids: list[int] = Field(default_factory=list)


class PostUpdate(BaseModel):
    user_id: int | None = None
    title: str | None = None
    content: str | None = None
    category_ids: list[int] | None = None


class PostRead(_Read):
    user_id: int
    title: str | None
    content: str | None
    category_ids: list[int] = Field(default_factory=list)


# Comments


class CommentCreate(BaseModel):
    commentable_type: str = "Post"
    commentable_id: int
    user_id: int
    content: str | None = None


class CommentUpdate(BaseModel):
    content: str | None = None


class CommentRead(_Read):
    commentable_type: str
    commentable_id: int
    user_id: int
    content: str | None


# Categories


class CategoryCreate(BaseModel):
    name: str | None = None


class CategoryUpdate(CategoryCreate):
    pass


class CategoryRead(_Read):
    name: str | None
